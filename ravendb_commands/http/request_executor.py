from __future__ import annotations

import datetime
import http
import logging
import os
from copy import copy
from typing import Dict, List, Optional, Tuple, Union

import requests
from OpenSSL import crypto
from requests_pkcs12 import Pkcs12Adapter

from ravendb_commands import constants
from ravendb_commands.documents.conventions import DocumentConventions
from ravendb_commands.exceptions.exceptions import (
    AllTopologyNodesDownException,
    AuthorizationException,
    DatabaseDoesNotExistException,
    UnsuccessfulRequestException,
)
from ravendb_commands.http.raven_command import RavenCommand
from ravendb_commands.http.server_node import ServerNode

_FAILOVER_STATUSES = (
    http.HTTPStatus.REQUEST_TIMEOUT,
    http.HTTPStatus.BAD_GATEWAY,
    http.HTTPStatus.SERVICE_UNAVAILABLE,
    http.HTTPStatus.GATEWAY_TIMEOUT,
)


class RequestExecutor:
    """
    Sends commands to an ordered list of nodes.
    A node that times out, is unreachable or answers 408/502/503/504 is recorded on the command
    and the next node is tried. The first other answer is handed to the command.
    """

    logger = logging.getLogger("request_executor")
    CLIENT_VERSION = "4.0.0"

    def __init__(
        self,
        nodes: List[ServerNode],
        conventions: Optional[DocumentConventions] = None,
        certificate: Union[None, str, Tuple[str, str], Dict[str, str]] = None,
    ):
        if not nodes:
            raise ValueError("At least one node is required")
        for node in nodes:
            if not isinstance(node, ServerNode):
                raise TypeError('Argument "nodes" should contain only ServerNode instances')

        self._nodes = list(nodes)
        self.conventions = copy(conventions) if conventions is not None else DocumentConventions()
        self.conventions.freeze()
        self._certificate, self._adapter = self.initialize_certificate(certificate)
        self._http_session: Optional[requests.Session] = None
        self._disposed = False

    @classmethod
    def create_for_single_node(
        cls,
        url: str,
        database_name: str,
        certificate: Union[None, str, Tuple[str, str], Dict[str, str]] = None,
        conventions: Optional[DocumentConventions] = None,
    ) -> RequestExecutor:
        return cls([ServerNode(url, database_name)], conventions, certificate)

    @staticmethod
    def initialize_certificate(certificate) -> Tuple[Union[None, str, Tuple[str, str]], Optional[Pkcs12Adapter]]:
        if not isinstance(certificate, dict):
            return certificate, None
        pfx = certificate["pfx"]
        password = certificate.get("password", None)
        adapter = (
            Pkcs12Adapter(pkcs12_filename=pfx, pkcs12_password=password)
            if os.path.isfile(pfx)
            else Pkcs12Adapter(pkcs12_data=pfx, pkcs12_password=password)
        )
        return None, adapter

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._http_session is not None:
            self._http_session.close()
            self._http_session = None

    @property
    def nodes(self) -> List[ServerNode]:
        return list(self._nodes)

    @property
    def certificate(self):
        return self._certificate

    @property
    def http_session(self) -> requests.Session:
        if self._disposed:
            raise RuntimeError("Request executor was closed")
        if self._http_session is None:
            self._http_session = self.__create_http_session()
        return self._http_session

    def __create_http_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({"Accept": "application/json", constants.Headers.CLIENT_VERSION: self.CLIENT_VERSION})
        if self._adapter is not None:
            session.mount("https://", self._adapter)
        else:
            session.cert = self._certificate
        return session

    def execute(self, command: RavenCommand):
        request: Optional[requests.Request] = None
        for node in self._nodes:
            if command.is_failed_with_node(node):
                continue

            if request is None:
                request = command.create_request(node)
            else:
                request.url = f"{node.url}{command.path}"

            try:
                response = self.http_session.send(
                    self.http_session.prepare_request(request), timeout=self.__timeout_for(command)
                )
            except requests.RequestException as e:
                self.logger.info(f"Failed to execute {type(command).__name__} on {node.url}: {e}")
                command.add_failed_node(node, e)
                continue

            if response.status_code in _FAILOVER_STATUSES:
                database_missing = response.headers.get("Database-Missing", None)
                if database_missing:
                    raise DatabaseDoesNotExistException(f"Database {database_missing} does not exists")

                self.logger.info(
                    f"{type(command).__name__} got status {response.status_code} from {node.url}, trying next node"
                )
                command.add_failed_node(node, None)
                continue

            if response.status_code == http.HTTPStatus.FORBIDDEN:
                self._raise_authorization_error(node, request)

            return command.set_response(response)

        if len(self._nodes) == 1:
            node = self._nodes[0]
            error = command.failed_nodes.get(node)
            raise UnsuccessfulRequestException(f"Request to {node.url} failed{f': {error}' if error else ''}", error)

        raise AllTopologyNodesDownException(
            "Tried to send request to all configured nodes in the topology, "
            "all of them seem to be down or not responding."
        )

    def __timeout_for(self, command: RavenCommand) -> Optional[float]:
        timeout: Optional[datetime.timedelta] = command.timeout or self.conventions.request_timeout
        return timeout.total_seconds() if timeout is not None else None

    def _raise_authorization_error(self, node: ServerNode, request: requests.Request) -> None:
        if self._certificate is None and self._adapter is None:
            reason = "a certificate is required. "
        else:
            reason = f"{self._certificate_subject()} does not have permission to access it or is unknown. "

        raise AuthorizationException(
            f"Forbidden access to {node.database}@{node.url}, {reason}Method: {request.method}, Request: {request.url}"
        )

    def _certificate_subject(self) -> str:
        cert = self._certificate
        if isinstance(cert, tuple):
            cert, _ = cert
        if not isinstance(cert, str) or not os.path.isfile(cert):
            return "certificate"

        try:
            with open(cert, "rb") as pem:
                loaded = crypto.load_certificate(crypto.FILETYPE_PEM, pem.read())
        except crypto.Error as e:
            self.logger.debug(f"Could not read certificate {cert}: {e}")
            return "certificate"

        components = loaded.get_subject().get_components()
        return components[0][1].decode("utf-8") if components else "certificate"

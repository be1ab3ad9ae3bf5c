from __future__ import annotations

import datetime
import http
import json
import logging
from abc import abstractmethod
from enum import Enum
from typing import Dict, Generic, Iterable, Optional, Type, TypeVar, Union, TYPE_CHECKING

import requests

from ravendb_commands import constants
from ravendb_commands.documents.conventions import DocumentConventions
from ravendb_commands.exceptions.exception_dispatcher import ExceptionDispatcher
from ravendb_commands.exceptions.exceptions import ErrorResponseException
from ravendb_commands.http.server_node import ServerNode
from ravendb_commands.tools.utils import Utils

if TYPE_CHECKING:
    from ravendb_commands.exceptions.raven_exceptions import RavenException


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    def __str__(self):
        return self.value


class CommandState(Enum):
    CONSTRUCTED = "Constructed"
    REQUESTED = "Requested"
    COMPLETED = "Completed"

    def __str__(self):
        return self.value


_T_Result = TypeVar("_T_Result")


class RavenCommand(Generic[_T_Result]):
    """
    A single server operation.
    The transport calls create_request(node) once, sends the returned request and hands the
    response back through set_response(response), which returns the decoded result or raises.
    """

    logger = logging.getLogger("raven_command")

    def __init__(self, method: HttpMethod = HttpMethod.GET, conventions: Optional[DocumentConventions] = None):
        self._method = method
        self._conventions = conventions
        self._end_point = ""
        self._params: Dict[str, object] = {}
        self._payload: Optional[object] = None
        self._headers: Dict[str, str] = {}
        self._last_response: Optional[requests.Response] = None
        self._state = CommandState.CONSTRUCTED

        self.result: Optional[_T_Result] = None
        self.timeout: Optional[datetime.timedelta] = None
        self.failed_nodes: Dict[ServerNode, Optional[Exception]] = {}

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def end_point(self) -> str:
        return self._end_point

    @property
    def params(self) -> Dict[str, object]:
        return dict(self._params)

    @property
    def payload(self) -> Optional[object]:
        return self._payload

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    def server_response(self) -> Optional[requests.Response]:
        return self._last_response

    @property
    def path(self) -> str:
        if not self._params:
            return self._end_point
        return f"{self._end_point}?{Utils.encode_params(self._params)}"

    def create_request(self, node: ServerNode) -> requests.Request:
        self._assert_node(node)
        if self._state != CommandState.CONSTRUCTED:
            raise RuntimeError(f"{type(self).__name__}: request was already created (state: {self._state})")

        self._build_request(node)
        self._state = CommandState.REQUESTED
        return self._to_request(node)

    @abstractmethod
    def _build_request(self, node: ServerNode) -> None:
        pass

    def set_response(self, response: requests.Response) -> Optional[_T_Result]:
        if self._state != CommandState.REQUESTED:
            raise RuntimeError(
                f"{type(self).__name__}: set_response is only valid once after create_request (state: {self._state})"
            )
        self._state = CommandState.COMPLETED

        if response is None:
            self._throw_invalid_response()

        self._last_response = response
        failure: Optional[RavenException] = ExceptionDispatcher.from_response(response.status_code, response.content)
        if failure is not None:
            raise failure

        # 404 bodies are not guaranteed to be json
        decoded = None if response.status_code == http.HTTPStatus.NOT_FOUND else self._decode(response)
        self.result = self._interpret_response(response, decoded)
        return self.result

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[_T_Result]:
        return result

    def add_failed_node(self, node: ServerNode, error: Optional[Exception] = None) -> None:
        self._assert_node(node)
        self.failed_nodes[node] = error

    def is_failed_with_node(self, node: ServerNode) -> bool:
        self._assert_node(node)
        return node in self.failed_nodes

    def was_failed(self) -> bool:
        return len(self.failed_nodes) > 0

    def _to_request(self, node: ServerNode) -> requests.Request:
        request = requests.Request(self._method.value, f"{node.url}{self.path}")

        if self._payload:
            json_default = (
                self._conventions.json_default_method if self._conventions else DocumentConventions.json_default
            )
            request.data = json.dumps(self._payload, default=json_default)
            request.headers[constants.Headers.CONTENT_TYPE] = "application/json"

        request.headers.update(self._headers)
        return request

    def _add_params(self, param_or_params: Union[str, Dict[str, object]], value: object = None) -> None:
        new_params = param_or_params if isinstance(param_or_params, dict) else {param_or_params: value}
        self._params.update(new_params)

    def _remove_params(self, *params: str) -> None:
        for param in params:
            self._params.pop(param, None)

    def _add_change_vector_if_not_none(self, change_vector: Optional[str]) -> None:
        if change_vector is not None:
            self._headers[constants.Headers.IF_MATCH] = f'"{change_vector}"'

    @staticmethod
    def _decode(response: requests.Response) -> Optional[object]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ErrorResponseException(f"Response is invalid: {e}", e)

    @staticmethod
    def _has_body(response: requests.Response) -> bool:
        return bool(response.content)

    @staticmethod
    def _check_status(
        response: requests.Response,
        accepted: Iterable[int],
        exception_type: Type[Exception],
        message: str,
    ) -> None:
        if response.status_code not in accepted:
            raise exception_type(message)

    @staticmethod
    def _assert_node(node: ServerNode) -> None:
        if not isinstance(node, ServerNode):
            raise TypeError('Argument "node" should be an instance of ServerNode')

    @staticmethod
    def _throw_invalid_response(cause: Optional[BaseException] = None) -> None:
        raise ErrorResponseException(f"Response is invalid{f': {cause.args[0]}' if cause else ''}", cause)


class VoidRavenCommand(RavenCommand[None]):
    def __init__(self, method: HttpMethod):
        super().__init__(method)

    @abstractmethod
    def _build_request(self, node: ServerNode) -> None:
        pass

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> None:
        return None

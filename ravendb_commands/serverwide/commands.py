from __future__ import annotations

import http
from typing import Optional

import requests

from ravendb_commands import constants
from ravendb_commands.exceptions.exceptions import ErrorResponseException, InvalidOperationException
from ravendb_commands.http.raven_command import HttpMethod, RavenCommand, VoidRavenCommand
from ravendb_commands.http.server_node import ServerNode
from ravendb_commands.serverwide.database_record import ApiKeyDefinition, DatabaseDocument
from ravendb_commands.tools.utils import Utils


class GetTopologyCommand(RavenCommand[dict]):
    def __init__(self, force_url: Optional[str] = None):
        super(GetTopologyCommand, self).__init__(HttpMethod.GET)
        self._force_url = force_url

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = "/topology"
        self._add_params("name", node.database)
        if self._force_url:
            self._add_params("url", self._force_url)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        if response.status_code == http.HTTPStatus.OK and self._has_body(response):
            return result
        return None


class GetClusterTopologyCommand(GetTopologyCommand):
    def __init__(self):
        super(GetClusterTopologyCommand, self).__init__()

    def _build_request(self, node: ServerNode) -> None:
        super()._build_request(node)
        self._end_point = "/cluster/topology"
        self._remove_params("name")


class CreateDatabaseCommand(RavenCommand[dict]):
    def __init__(self, database_document: DatabaseDocument, replication_factor: int = 1):
        """
        @param database_document: the database to create, database_id may carry the "Raven/Databases/" prefix
        @param replication_factor: number of nodes the database will be placed on
        """
        super().__init__(HttpMethod.PUT)
        if database_document is None:
            raise InvalidOperationException("None database_document is not valid")
        self._database_document = database_document
        self._replication_factor = replication_factor
        self._database_name = Utils.strip_database_prefix(database_document.database_id)

    def _build_request(self, node: ServerNode) -> None:
        Utils.database_name_validation(self._database_name)
        if constants.Database.DATA_DIR_SETTING not in (self._database_document.settings or {}):
            raise InvalidOperationException(f"The {constants.Database.DATA_DIR_SETTING} setting is mandatory")

        self._end_point = "/admin/databases"
        self._add_params({"name": self._database_name, "replication-factor": self._replication_factor})
        self._payload = self._database_document.to_json()

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> dict:
        if not self._has_body(response):
            raise ErrorResponseException(
                f"Response is invalid, could not create database {self._database_name}"
            )
        return result


class DeleteDatabaseCommand(VoidRavenCommand):
    def __init__(self, database_id: str, hard_delete: bool = False, from_node: Optional[ServerNode] = None):
        """
        @param database_id: name of the database, the "Raven/Databases/" prefix is optional
        @param hard_delete: delete the database files from disk as well
        @param from_node: remove the database only from this node of the cluster
        """
        super().__init__(HttpMethod.DELETE)
        if from_node is not None:
            self._assert_node(from_node)
        self._database_name = Utils.strip_database_prefix(database_id)
        if not self._database_name:
            raise InvalidOperationException("Empty name is not valid")

        self._hard_delete = hard_delete
        self._from_node = from_node

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = "/admin/databases"
        self._add_params("name", self._database_name)

        if self._hard_delete:
            self._add_params("hard-delete", True)

        if self._from_node is not None:
            self._add_params("from-node", self._from_node.cluster_tag)


class GetApiKeyCommand(RavenCommand[list]):
    def __init__(self, name: str):
        super().__init__(HttpMethod.GET)
        if not name:
            raise InvalidOperationException("Api key name is required")
        self._name = name

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = "/admin/api-keys"
        self._add_params("name", self._name)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> list:
        if isinstance(result, dict) and "Results" in result:
            return result["Results"]
        raise ErrorResponseException(f"Could not get api key {self._name}")


class PutApiKeyCommand(VoidRavenCommand):
    def __init__(self, name: str, api_key: ApiKeyDefinition):
        super().__init__(HttpMethod.PUT)
        if not name:
            raise InvalidOperationException("Api key name is required")
        if not isinstance(api_key, ApiKeyDefinition):
            raise InvalidOperationException("api_key must be ApiKeyDefinition type")
        self._name = name
        self._api_key = api_key

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = "/admin/api-keys"
        self._add_params("name", self._name)
        self._payload = self._api_key.to_json()

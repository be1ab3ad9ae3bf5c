from __future__ import annotations

import http
from typing import List, Optional

import requests

from ravendb_commands.documents.indexes.definitions import IndexDefinition
from ravendb_commands.exceptions.exceptions import (
    ErrorResponseException,
    IndexDoesNotExistException,
    InvalidOperationException,
)
from ravendb_commands.http.raven_command import HttpMethod, RavenCommand, VoidRavenCommand
from ravendb_commands.http.server_node import ServerNode


class GetIndexesCommand(RavenCommand[List[dict]]):
    def __init__(self, start: int = 0, page_size: int = 10):
        super().__init__(HttpMethod.GET)
        self._start = start
        self._page_size = page_size

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/indexes"
        self._add_params({"start": self._start, "page_size": self._page_size})

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[List[dict]]:
        if response.status_code == http.HTTPStatus.NOT_FOUND:
            raise IndexDoesNotExistException("Could not find index")
        if not self._has_body(response):
            return None
        return result.get("Results") if isinstance(result, dict) else result


class GetIndexCommand(GetIndexesCommand):
    def __init__(self, index_name: str):
        super(GetIndexCommand, self).__init__()
        if not index_name:
            raise InvalidOperationException("None or empty index_name is invalid")
        self._index_name = index_name

    def _build_request(self, node: ServerNode) -> None:
        super()._build_request(node)
        self._remove_params("start", "page_size")
        self._add_params("name", self._index_name)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        results = super()._interpret_response(response, result)
        return results[0] if results else None


class PutIndexesCommand(RavenCommand[List[dict]]):
    def __init__(self, *indexes_to_add: IndexDefinition):
        super().__init__(HttpMethod.PUT)
        if len(indexes_to_add) == 0:
            raise InvalidOperationException("Invalid indexes_to_add")

        for index_definition in indexes_to_add:
            if not isinstance(index_definition, IndexDefinition):
                raise InvalidOperationException("index_definition in indexes_to_add must be IndexDefinition type")
            if not index_definition.name:
                raise InvalidOperationException("None Index name is not valid")

        self._indexes_to_add = list(indexes_to_add)

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/indexes"
        self._payload = {"Indexes": [index_definition.to_json() for index_definition in self._indexes_to_add]}

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> List[dict]:
        if not self._has_body(response):
            raise ErrorResponseException("Failed to put indexes, got an empty response from the server")
        return result.get("Results") if isinstance(result, dict) else result


class DeleteIndexCommand(VoidRavenCommand):
    def __init__(self, index_name: str):
        super().__init__(HttpMethod.DELETE)
        if not index_name:
            raise InvalidOperationException("None or empty index_name is invalid")
        self._index_name = index_name

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/indexes"
        self._add_params("name", self._index_name)

from __future__ import annotations

from typing import Optional

import requests

from ravendb_commands.exceptions.exceptions import ErrorResponseException, InvalidOperationException
from ravendb_commands.http.raven_command import HttpMethod, RavenCommand
from ravendb_commands.http.server_node import ServerNode


class GetOperationStateCommand(RavenCommand[dict]):
    """Polls the state of a long running server operation (e.g. a set based patch or delete)."""

    def __init__(self, operation_id: int):
        super().__init__(HttpMethod.GET)
        if operation_id is None:
            raise InvalidOperationException("None operation_id is not valid")
        self._operation_id = operation_id

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/operations/state"
        self._add_params("id", self._operation_id)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> dict:
        if not self._has_body(response):
            raise ErrorResponseException(f"Could not get the state of operation {self._operation_id}")
        return result

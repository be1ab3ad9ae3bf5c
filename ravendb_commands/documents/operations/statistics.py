from __future__ import annotations

import http
from typing import Optional

import requests

from ravendb_commands.http.raven_command import HttpMethod, RavenCommand
from ravendb_commands.http.server_node import ServerNode


class GetStatisticsCommand(RavenCommand[dict]):
    def __init__(self, check_for_failures: bool = False):
        super().__init__(HttpMethod.GET)
        self._check_for_failures = check_for_failures

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/stats"
        if self._check_for_failures:
            self._add_params("failure", "check")

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        if response.status_code == http.HTTPStatus.OK and self._has_body(response):
            return result
        return None

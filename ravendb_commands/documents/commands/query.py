from __future__ import annotations

import http
from typing import Optional

import requests

from ravendb_commands.documents.conventions import DocumentConventions
from ravendb_commands.documents.operations.misc import QueryOperationOptions
from ravendb_commands.documents.operations.patch import PatchRequest
from ravendb_commands.documents.queries.index_query import IndexQuery
from ravendb_commands.exceptions.exceptions import (
    ErrorResponseException,
    IndexDoesNotExistException,
    InvalidOperationException,
)
from ravendb_commands.http.raven_command import HttpMethod, RavenCommand
from ravendb_commands.http.server_node import ServerNode

_OPTION_ATTRIBUTES = ("allow_stale", "stale_timeout", "max_ops_per_sec", "retrieve_details")


def _ensure_is_query(query: IndexQuery) -> None:
    if query is None or not callable(getattr(query, "to_json", None)) or not hasattr(query, "query_hash"):
        raise InvalidOperationException("Query must be an IndexQuery (needs to_json and query_hash)")


def _ensure_is_options(options: QueryOperationOptions) -> None:
    if not all(hasattr(options, attribute) for attribute in _OPTION_ATTRIBUTES):
        raise InvalidOperationException(
            f"Options must be QueryOperationOptions (needs {', '.join(_OPTION_ATTRIBUTES)})"
        )


class QueryBasedCommand(RavenCommand[dict]):
    """Base for the set-based operations executed against /queries (delete and patch by query)."""

    def __init__(self, method: HttpMethod, query: IndexQuery, options: Optional[QueryOperationOptions] = None):
        super().__init__(method)
        options = options if options is not None else QueryOperationOptions()
        _ensure_is_query(query)
        _ensure_is_options(options)
        self._query = query
        self._options = options

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/queries"
        self._add_params(
            {
                "allowStale": self._options.allow_stale,
                "details": self._options.retrieve_details,
                "maxOpsPerSec": self._options.max_ops_per_sec,
            }
        )

        if self._options.stale_timeout is not None:
            self._add_params("staleTimeout", self._options.stale_timeout)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        if not self._has_body(response):
            raise IndexDoesNotExistException("Could not find index")
        return result


class DeleteByQueryCommand(QueryBasedCommand):
    def __init__(self, query: IndexQuery, options: Optional[QueryOperationOptions] = None):
        super().__init__(HttpMethod.DELETE, query, options)

    def _build_request(self, node: ServerNode) -> None:
        super()._build_request(node)
        self._payload = self._query.to_json()


class PatchByQueryCommand(QueryBasedCommand):
    def __init__(
        self, query_to_update: IndexQuery, patch: PatchRequest, options: Optional[QueryOperationOptions] = None
    ):
        super().__init__(HttpMethod.PATCH, query_to_update, options)
        if patch is None or not callable(getattr(patch, "to_json", None)) or not getattr(patch, "script", None):
            raise InvalidOperationException("Patch must be a PatchRequest with a non-empty script")
        self._patch = patch

    def _build_request(self, node: ServerNode) -> None:
        super()._build_request(node)
        self._payload = {"Patch": self._patch.to_json(), "Query": self._query.to_json()}

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        result = super()._interpret_response(response, result)
        self._check_status(
            response,
            (http.HTTPStatus.OK, http.HTTPStatus.ACCEPTED),
            ErrorResponseException,
            "Invalid response from server",
        )
        return result


class QueryCommand(RavenCommand[dict]):
    def __init__(
        self,
        index_query: IndexQuery,
        conventions: DocumentConventions,
        metadata_only: bool = False,
        index_entries_only: bool = False,
    ):
        """
        @param index_query: the query to run
        @param conventions: conventions used to serialize the query
        @param metadata_only: return only the metadata of matching documents
        @param index_entries_only: return the raw index entries instead of documents
        """
        super(QueryCommand, self).__init__(HttpMethod.POST, conventions)
        _ensure_is_query(index_query)
        if conventions is None:
            raise InvalidOperationException("Document conventions cannot be None")

        self._index_query = index_query
        self._metadata_only = metadata_only
        self._index_entries_only = index_entries_only

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/queries"
        self._add_params("query-hash", self._index_query.query_hash)

        if self._metadata_only:
            self._add_params("metadata-only", True)

        if self._index_entries_only:
            self._add_params("debug", "entries")

        self._payload = self._index_query.to_json()

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        if not self._has_body(response):
            raise IndexDoesNotExistException("Could not find index")
        return result

from __future__ import annotations

import http
from typing import List, Optional, Union

import requests

from ravendb_commands.documents.operations.patch import PatchRequest
from ravendb_commands.exceptions.exceptions import ErrorResponseException, InvalidOperationException
from ravendb_commands.http.raven_command import HttpMethod, RavenCommand, VoidRavenCommand
from ravendb_commands.http.server_node import ServerNode
from ravendb_commands import constants


class PutResult:
    def __init__(self, key: Optional[str] = None, change_vector: Optional[str] = None):
        self.key = key
        self.change_vector = change_vector

    @classmethod
    def from_json(cls, json_dict: dict) -> PutResult:
        return cls(json_dict.get("Id"), json_dict.get("ChangeVector"))


def _validate_document_id(key: str) -> None:
    if key is None:
        raise InvalidOperationException("None id is not valid")
    if not isinstance(key, str):
        raise InvalidOperationException(f"Id must be a string, got {type(key).__name__}")
    if not key:
        raise InvalidOperationException("Empty id is not valid")


class GetDocumentCommand(RavenCommand[dict]):
    def __init__(
        self, key_or_keys: Union[str, List[str]], includes: Union[None, str, List[str]] = None, metadata_only: bool = False
    ):
        """
        @param key_or_keys: the id of the document to load, or a list of ids
        @param includes: paths inside the loaded documents pointing at documents the server should include
        @param metadata_only: load only the metadata (applies when more than one id is requested)
        """
        super(GetDocumentCommand, self).__init__(HttpMethod.GET)
        if key_or_keys is None:
            raise InvalidOperationException("None id is not valid")
        keys = list(key_or_keys) if isinstance(key_or_keys, (list, tuple)) else [key_or_keys]
        if not keys:
            raise InvalidOperationException("Please supply at least one id")
        for key in keys:
            _validate_document_id(key)

        self._keys = keys
        self._includes = includes
        self._metadata_only = metadata_only

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/docs"

        if self._includes:
            self._add_params(
                "include", [self._includes] if isinstance(self._includes, str) else list(self._includes)
            )

        multi_load = len(self._keys) > 1
        if not multi_load:
            self._add_params("id", self._keys[0])
            return

        if self._metadata_only:
            self._add_params("metadata-only", True)

        # too long for a url, fall back to POST (the response can't be cached by url anymore)
        if sum(len(key) for key in self._keys) > constants.MAX_IDS_LENGTH_FOR_GET_URL:
            self._method = HttpMethod.POST
            self._payload = {"Ids": list(self._keys)}
        else:
            self._add_params("id", list(self._keys))

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        if response.status_code == http.HTTPStatus.NOT_FOUND:
            self.logger.info(f"Couldn't find document(s) {', '.join(self._keys)}")
            return None

        if not self._has_body(response):
            raise ErrorResponseException(
                "Failed to load document from the database please check the connection to the server"
            )

        return result


class DeleteDocumentCommand(VoidRavenCommand):
    def __init__(self, key: str, change_vector: Optional[str] = None):
        super().__init__(HttpMethod.DELETE)
        _validate_document_id(key)
        self._key = key
        self._change_vector = change_vector

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/docs"
        self._add_params("id", self._key)
        self._add_change_vector_if_not_none(self._change_vector)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> None:
        self._check_status(
            response, (http.HTTPStatus.NO_CONTENT,), InvalidOperationException, f"Could not delete document {self._key}"
        )
        return None


class PutDocumentCommand(RavenCommand[PutResult]):
    def __init__(self, key: str, document: dict, change_vector: Optional[str] = None):
        """
        @param key: id under which the document will be stored
        @param document: document data
        @param change_vector: current change vector of the document, used for concurrency checks (None to skip)
        """
        super().__init__(HttpMethod.PUT)
        _validate_document_id(key)
        if document is None:
            raise InvalidOperationException("Document cannot be None")
        if not isinstance(document, dict):
            raise InvalidOperationException("Document must be a dict")

        self._key = key
        self._document = document
        self._change_vector = change_vector

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/docs"
        self._add_params("id", self._key)
        self._payload = self._document
        self._add_change_vector_if_not_none(self._change_vector)

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> PutResult:
        if not self._has_body(response):
            raise ErrorResponseException(
                f"Failed to store document {self._key} in the database please check the connection to the server"
            )
        return PutResult.from_json(result)


class PatchCommand(RavenCommand[dict]):
    def __init__(
        self,
        document_id: str,
        patch: PatchRequest,
        change_vector: Optional[str] = None,
        patch_if_missing: Optional[PatchRequest] = None,
        skip_patch_if_change_vector_mismatch: bool = False,
        return_debug_information: bool = False,
    ):
        """
        @param document_id: the id of the document
        @param patch: the patch applied to the document
        @param change_vector: expected change vector of the document
        @param patch_if_missing: the patch applied when the document does not exist
        @param skip_patch_if_change_vector_mismatch: skip instead of failing when the change vector mismatches
        @param return_debug_information: ask the server for the script's debug output
        """
        super(PatchCommand, self).__init__(HttpMethod.PATCH)
        _validate_document_id(document_id)
        if patch is None:
            raise InvalidOperationException("None patch is not valid")
        if patch_if_missing is not None and not patch_if_missing.script:
            raise InvalidOperationException("None or empty script is not valid")

        self._document_id = document_id
        self._change_vector = change_vector
        self._patch = patch
        self._patch_if_missing = patch_if_missing
        self._skip_patch_if_change_vector_mismatch = skip_patch_if_change_vector_mismatch
        self._return_debug_information = return_debug_information

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/docs"
        self._add_params("id", self._document_id)

        if self._skip_patch_if_change_vector_mismatch:
            self._add_params("skipPatchIfChangeVectorMismatch", True)

        if self._return_debug_information:
            self._add_params("debug", True)

        self._add_change_vector_if_not_none(self._change_vector)
        self._payload = {
            "Patch": self._patch.to_json(),
            "PatchIfMissing": self._patch_if_missing.to_json() if self._patch_if_missing else None,
        }

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> Optional[dict]:
        self._check_status(
            response,
            (http.HTTPStatus.OK, http.HTTPStatus.NOT_MODIFIED),
            InvalidOperationException,
            f"Could not patch document {self._document_id}",
        )
        return result if self._has_body(response) else None

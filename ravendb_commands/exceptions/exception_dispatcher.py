from __future__ import annotations

import http
import json
import os
from typing import Optional, Union, Dict, Type

import requests

from ravendb_commands.exceptions.exceptions import (
    AuthorizationException,
    DatabaseDoesNotExistException,
    DocumentDoesNotExistsException,
    ErrorResponseException,
    IndexDoesNotExistException,
    InvalidOperationException,
)
from ravendb_commands.exceptions.raven_exceptions import (
    BadResponseException,
    ConcurrencyException,
    DocumentConflictException,
    RavenException,
)


class ExceptionDispatcher:
    """Maps a server response (status code + error body) to the exception the client should raise."""

    _KNOWN_TYPES: Dict[str, Type[RavenException]] = {
        "AuthorizationException": AuthorizationException,
        "BadResponseException": BadResponseException,
        "ConcurrencyException": ConcurrencyException,
        "DatabaseDoesNotExistException": DatabaseDoesNotExistException,
        "DocumentDoesNotExistException": DocumentDoesNotExistsException,
        "DocumentDoesNotExistsException": DocumentDoesNotExistsException,
        "IndexDoesNotExistException": IndexDoesNotExistException,
        "InvalidOperationException": InvalidOperationException,
    }

    class ExceptionSchema:
        def __init__(self, url: str = None, object_type: str = None, message: str = None, error: str = None):
            self.url = url
            self.type = object_type
            self.message = message
            self.error = error

        @classmethod
        def from_json(cls, json_dict: dict) -> ExceptionDispatcher.ExceptionSchema:
            return cls(json_dict.get("Url"), json_dict.get("Type"), json_dict.get("Message"), json_dict.get("Error"))

    @staticmethod
    def get(schema: ExceptionDispatcher.ExceptionSchema, code: int, inner: Exception = None) -> RavenException:
        message = schema.message
        type_as_string = schema.type or ""

        if code == http.HTTPStatus.CONFLICT:
            if "DocumentConflictException" in type_as_string:
                return DocumentConflictException.from_message(message)
            return ConcurrencyException(message, inner)

        error = f"{schema.error}{os.linesep}The server at {schema.url} responded with status code: {code}"

        error_type = ExceptionDispatcher.__get_type(type_as_string)
        if error_type is None:
            if code in (http.HTTPStatus.UNAUTHORIZED, http.HTTPStatus.FORBIDDEN):
                return AuthorizationException(error, inner)
            return ErrorResponseException(error, inner)

        return error_type(error, inner)

    @staticmethod
    def from_response(status_code: int, body: Optional[Union[bytes, str]]) -> Optional[RavenException]:
        # 404 is a regular outcome for several commands, they decide themselves
        if status_code < 400 or status_code == http.HTTPStatus.NOT_FOUND:
            return None

        text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else body
        if not text:
            schema = ExceptionDispatcher.ExceptionSchema(
                error=f"Server responded with status code {status_code} and an empty body"
            )
            return ExceptionDispatcher.get(schema, status_code)

        try:
            json_dict = json.loads(text)
            if not isinstance(json_dict, dict):
                raise ValueError(f"Expected a JSON object, got {type(json_dict).__name__}")
            schema = ExceptionDispatcher.ExceptionSchema.from_json(json_dict)
        except ValueError:
            schema = ExceptionDispatcher.ExceptionSchema(
                None, "Unparsable Server Response", "Get unrecognized response from the server", text
            )

        return ExceptionDispatcher.get(schema, status_code)

    @staticmethod
    def throw_exception(response: requests.Response) -> None:
        exception = ExceptionDispatcher.from_response(response.status_code, response.content)
        if exception is not None:
            raise exception

    @staticmethod
    def __get_type(type_as_string: str) -> Optional[Type[RavenException]]:
        if not type_as_string:
            return None
        exception_name = type_as_string.split(".")[-1]
        return ExceptionDispatcher._KNOWN_TYPES.get(exception_name)

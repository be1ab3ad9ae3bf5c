from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import List, Optional

import requests

from ravendb_commands import constants
from ravendb_commands.documents.conventions import DocumentConventions
from ravendb_commands.documents.operations.patch import PatchRequest
from ravendb_commands.exceptions.exceptions import InvalidOperationException
from ravendb_commands.http.raven_command import HttpMethod, RavenCommand
from ravendb_commands.http.server_node import ServerNode


class CommandType(Enum):
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    def __str__(self):
        return self.value


class CommandData:
    def __init__(self, key: str, change_vector: Optional[str], command_type: CommandType):
        if not key or not isinstance(key, str):
            raise InvalidOperationException("Id must be a non-empty string")
        self._key = key
        self._change_vector = change_vector
        self._command_type = command_type

    @property
    def key(self) -> str:
        return self._key

    @property
    def change_vector(self) -> Optional[str]:
        return self._change_vector

    @property
    def command_type(self) -> CommandType:
        return self._command_type

    def to_json(self) -> dict:
        json_dict = {"Type": str(self._command_type), "Id": self._key, "ChangeVector": self._change_vector}
        json_dict.update(self._to_json_extra())
        return json_dict

    @abstractmethod
    def _to_json_extra(self) -> dict:
        pass


class DeleteCommandData(CommandData):
    def __init__(self, key: str, change_vector: Optional[str] = None):
        super(DeleteCommandData, self).__init__(key, change_vector, CommandType.DELETE)

    def _to_json_extra(self) -> dict:
        return {}


class PutCommandData(CommandData):
    def __init__(
        self, key: str, change_vector: Optional[str], document: Optional[dict], metadata: Optional[dict] = None
    ):
        super(PutCommandData, self).__init__(key, change_vector, CommandType.PUT)
        self.__document = dict(document) if document is not None else {}
        self.__metadata = dict(metadata) if metadata is not None else None

    @property
    def document(self) -> dict:
        return dict(self.__document)

    @property
    def metadata(self) -> Optional[dict]:
        return dict(self.__metadata) if self.__metadata is not None else None

    def _to_json_extra(self) -> dict:
        document = dict(self.__document)
        if self.__metadata:
            document[constants.Documents.Metadata.METADATA] = dict(self.__metadata)
        return {"Document": document}


class PatchCommandData(CommandData):
    def __init__(
        self,
        key: str,
        change_vector: Optional[str],
        patch: PatchRequest,
        patch_if_missing: Optional[PatchRequest] = None,
        debug_mode: bool = False,
    ):
        """
        @param key: id of the document to patch
        @param change_vector: current change vector of the document, used for concurrency checks (None to skip)
        @param patch: script applied to the document
        @param patch_if_missing: script applied to create a default document when the document is missing
        @param debug_mode: ask the server for additional debug information in the result
        """
        super(PatchCommandData, self).__init__(key, change_vector, CommandType.PATCH)
        if patch is None:
            raise InvalidOperationException("Patch cannot be None")
        self.__patch = patch
        self.__patch_if_missing = patch_if_missing
        self.__debug_mode = debug_mode

    @property
    def patch(self) -> PatchRequest:
        return self.__patch

    @property
    def patch_if_missing(self) -> Optional[PatchRequest]:
        return self.__patch_if_missing

    @property
    def debug_mode(self) -> bool:
        return self.__debug_mode

    def _to_json_extra(self) -> dict:
        data = {"Patch": self.__patch.to_json(), "DebugMode": self.__debug_mode}
        if self.__patch_if_missing is not None:
            data["PatchIfMissing"] = self.__patch_if_missing.to_json()
        return data


# --------------COMMAND--------------
class BatchCommand(RavenCommand[list]):
    def __init__(self, commands: List[CommandData], conventions: Optional[DocumentConventions] = None):
        super().__init__(HttpMethod.POST, conventions)
        self._commands = list(commands) if commands is not None else []

    def _build_request(self, node: ServerNode) -> None:
        for command in self._commands:
            if not isinstance(command, CommandData):
                raise InvalidOperationException(f"Not a valid command: {command!r}")

        self._end_point = f"/databases/{node.database}/bulk_docs"
        self._payload = {"Commands": [command.to_json() for command in self._commands]}

    def _interpret_response(self, response: requests.Response, result: Optional[object]) -> list:
        if not self._has_body(response) or not isinstance(result, dict):
            raise InvalidOperationException(
                "Got empty response from the server after doing a batch, something is very wrong."
                " Probably a garbled response."
            )
        return result.get("Results")


class SaveChangesData:
    """Collects the writes of one save-changes cycle and turns them into a single BatchCommand."""

    def __init__(
        self,
        commands: Optional[List[CommandData]] = None,
        deferred_commands_count: int = 0,
        documents: Optional[list] = None,
    ):
        self.__commands: List[CommandData] = list(commands) if commands else []
        self.__documents: list = list(documents) if documents else []
        self.__deferred_commands_count = deferred_commands_count

    @property
    def commands(self) -> List[CommandData]:
        return list(self.__commands)

    @property
    def commands_count(self) -> int:
        return len(self.__commands)

    @property
    def deferred_commands_count(self) -> int:
        return self.__deferred_commands_count

    def add_command(self, command: CommandData) -> None:
        self.__commands.append(command)

    def add_deferred_command(self, command: CommandData) -> None:
        self.__commands.append(command)
        self.__deferred_commands_count += 1

    def add_document(self, document: object) -> None:
        self.__documents.append(document)

    def get_document(self, index: int) -> object:
        return self.__documents[index]

    def create_batch_command(self, conventions: Optional[DocumentConventions] = None) -> BatchCommand:
        return BatchCommand(list(self.__commands), conventions)

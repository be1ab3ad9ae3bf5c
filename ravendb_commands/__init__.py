from ravendb_commands.documents.commands.batches import (
    BatchCommand,
    CommandData,
    CommandType,
    DeleteCommandData,
    PatchCommandData,
    PutCommandData,
    SaveChangesData,
)
from ravendb_commands.documents.commands.crud import (
    DeleteDocumentCommand,
    GetDocumentCommand,
    PatchCommand,
    PutDocumentCommand,
    PutResult,
)
from ravendb_commands.documents.commands.query import (
    DeleteByQueryCommand,
    PatchByQueryCommand,
    QueryBasedCommand,
    QueryCommand,
)
from ravendb_commands.documents.conventions import DocumentConventions
from ravendb_commands.documents.indexes.definitions import IndexDefinition, IndexLockMode, IndexPriority
from ravendb_commands.documents.operations.indexes import (
    DeleteIndexCommand,
    GetIndexCommand,
    GetIndexesCommand,
    PutIndexesCommand,
)
from ravendb_commands.documents.operations.misc import QueryOperationOptions
from ravendb_commands.documents.operations.operation import GetOperationStateCommand
from ravendb_commands.documents.operations.patch import PatchRequest
from ravendb_commands.documents.operations.statistics import GetStatisticsCommand
from ravendb_commands.documents.queries.index_query import IndexQuery, Parameters
from ravendb_commands.exceptions.exception_dispatcher import ExceptionDispatcher
from ravendb_commands.exceptions.exceptions import (
    AllTopologyNodesDownException,
    AuthorizationException,
    DatabaseDoesNotExistException,
    DocumentDoesNotExistsException,
    ErrorResponseException,
    IndexDoesNotExistException,
    InvalidOperationException,
    UnsuccessfulRequestException,
)
from ravendb_commands.exceptions.raven_exceptions import (
    BadResponseException,
    ConcurrencyException,
    ConflictException,
    DocumentConflictException,
    RavenException,
)
from ravendb_commands.http.raven_command import CommandState, HttpMethod, RavenCommand, VoidRavenCommand
from ravendb_commands.http.request_executor import RequestExecutor
from ravendb_commands.http.server_node import ServerNode
from ravendb_commands.serverwide.commands import (
    CreateDatabaseCommand,
    DeleteDatabaseCommand,
    GetApiKeyCommand,
    GetClusterTopologyCommand,
    GetTopologyCommand,
    PutApiKeyCommand,
)
from ravendb_commands.serverwide.database_record import AccessMode, ApiKeyDefinition, DatabaseDocument

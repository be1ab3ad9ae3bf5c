from ravendb_commands.exceptions.raven_exceptions import RavenException


class InvalidOperationException(RavenException):
    pass


class ErrorResponseException(RavenException):
    pass


class DocumentDoesNotExistsException(RavenException):
    pass


class DatabaseDoesNotExistException(RavenException):
    pass


class AuthorizationException(RavenException):
    pass


class IndexDoesNotExistException(RavenException):
    pass


class AllTopologyNodesDownException(RavenException):
    pass


class UnsuccessfulRequestException(RavenException):
    pass

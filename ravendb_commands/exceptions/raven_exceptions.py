from abc import abstractmethod
from typing import Optional


class RavenException(RuntimeError):
    def __init__(self, message: str = None, cause: BaseException = None):
        super(RavenException, self).__init__(message)
        self.cause = cause


class BadResponseException(RavenException):
    def __init__(self, message: str = None, cause: BaseException = None):
        super(BadResponseException, self).__init__(message, cause)


class ConflictException(RavenException):
    @abstractmethod
    def __init__(self, message: str = None, cause: BaseException = None):
        super().__init__(message, cause)


class ConcurrencyException(ConflictException):
    def __init__(self, message: str = None, cause: BaseException = None):
        super().__init__(message, cause)


class DocumentConflictException(ConflictException):
    def __init__(self, message: str = None, cause: BaseException = None, doc_id: Optional[str] = None):
        super().__init__(message, cause)
        self.doc_id = doc_id

    @classmethod
    def from_message(cls, message: str) -> "DocumentConflictException":
        return cls(message)

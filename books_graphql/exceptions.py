"""
Error Types

Errors raised while serving a GraphQL request.

RequestDecodeError is a transport failure: the request body could not be
turned into an operation, so the schema is never executed and the client
receives HTTP 400.

BookError and its subclasses are field-level failures raised by resolvers.
graphql-core copies the `extensions` attribute of the original exception
into the formatted error, so clients see e.g.
`{"message": "...", "extensions": {"code": "NOT_FOUND"}}` while the
response status stays 200.
"""


class RequestDecodeError(Exception):
    """Raised when the HTTP body does not carry a usable GraphQL request."""

    pass


class BookError(Exception):
    """Base class for resolver errors reported inside the GraphQL envelope."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code}


class InvalidArgumentError(BookError):
    """Raised when a resolver argument has the wrong shape or format."""

    code = "INVALID_ARGUMENT"


class NotFoundError(BookError):
    """Raised when a requested book does not exist."""

    code = "NOT_FOUND"


class DecodeError(BookError):
    """Raised when a stored document cannot be read as a book."""

    code = "DECODE_ERROR"


class StorageError(BookError):
    """Raised when the database driver reports a failure."""

    code = "STORAGE_ERROR"

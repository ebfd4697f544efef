"""Exceptions raised while rewriting a schema."""


class PaginateError(Exception):
    """Base class for all pagination rewrite errors."""


class MalformedFragmentError(PaginateError):
    """Raised when a generated SDL fragment cannot be parsed.

    This usually means a derived type name is not a valid GraphQL name.
    """

    def __init__(self, message: str, fragment: str):
        self.message = message
        self.fragment = fragment
        super().__init__(message)


class EmptyStackError(PaginateError):
    """Raised when the field stack is used outside of an open field."""


class SchemaLoadError(PaginateError):
    """Raised when a schema file cannot be parsed."""

    def __init__(self, message: str, file_path: str):
        self.message = message
        self.file_path = file_path
        super().__init__(message)

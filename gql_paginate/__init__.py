"""Rewrite @paginate fields of a GraphQL schema into Relay connections."""

from .core import (
    EmptyStackError,
    MalformedFragmentError,
    PaginateConfig,
    PaginateError,
    PaginateVisitor,
    SchemaLoader,
    SchemaLoadError,
    transform_document,
    transform_sdl,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyStackError",
    "MalformedFragmentError",
    "PaginateConfig",
    "PaginateError",
    "PaginateVisitor",
    "SchemaLoader",
    "SchemaLoadError",
    "transform_document",
    "transform_sdl",
]

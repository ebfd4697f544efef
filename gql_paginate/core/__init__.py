"""Core modules for the pagination schema rewrite."""

from .config import PaginateConfig
from .context import FieldStack, StackFrame
from .errors import (
    EmptyStackError,
    MalformedFragmentError,
    PaginateError,
    SchemaLoadError,
)
from .loader import SchemaLoader
from .synthesizer import (
    ConnectionSynthesizer,
    base_name,
    unpack_node_to_string,
    upper_first,
)
from .visitor import (
    PaginateVisitor,
    merge_definitions,
    transform_document,
    transform_sdl,
)

__all__ = [
    # Config
    "PaginateConfig",
    # Errors
    "PaginateError",
    "MalformedFragmentError",
    "EmptyStackError",
    "SchemaLoadError",
    # Traversal context
    "FieldStack",
    "StackFrame",
    # Synthesis
    "ConnectionSynthesizer",
    "base_name",
    "unpack_node_to_string",
    "upper_first",
    # Visitor
    "PaginateVisitor",
    "merge_definitions",
    "transform_document",
    "transform_sdl",
    # Loader
    "SchemaLoader",
]

"""AST visitor that turns ``@paginate`` fields into Relay connections.

Example usage:
    from graphql import parse, print_ast, visit
    from gql_paginate.core.visitor import PaginateVisitor

    document = parse(sdl, no_location=True)
    print(print_ast(visit(document, PaginateVisitor())))

The visitor can share a single walk with other visitors:

    visit(document, ParallelVisitor([PaginateVisitor(), OtherVisitor()]))

Types generated during the walk are appended to the document when it is
left, so neither this visitor nor its siblings ever visit them.
"""

from typing import Any, Iterable

from graphql import (
    DirectiveNode,
    DocumentNode,
    FieldDefinitionNode,
    ObjectTypeDefinitionNode,
    ParallelVisitor,
    Visitor,
    parse,
    print_ast,
    visit,
)

from .config import PaginateConfig
from .context import FieldStack
from .errors import PaginateError
from .synthesizer import ConnectionSynthesizer


def merge_definitions(document: DocumentNode, definitions: list) -> DocumentNode:
    """Return a new document with ``definitions`` appended to its own."""
    return DocumentNode(
        definitions=tuple(document.definitions) + tuple(definitions),
        loc=document.loc,
    )


class PaginateVisitor(Visitor):
    """Rewrites fields marked with the pagination directive.

    State is reset whenever a document is entered, so an instance can be
    reused for several documents one after another.
    """

    def __init__(self, config: PaginateConfig | None = None):
        super().__init__()
        self.config = config or PaginateConfig()
        self.synthesizer = ConnectionSynthesizer(self.config)
        self.stack = FieldStack()
        self.generated_types: list[ObjectTypeDefinitionNode] = []
        # (type name, field name) of every field found with the marker
        self.paginated_fields: list[tuple[str, str]] = []

    def enter_document(
        self,
        node: DocumentNode,
        key: Any,
        parent: Any,
        path: list[Any],
        ancestors: list[Any],
    ) -> None:
        self.stack = FieldStack()
        self.generated_types = []
        self.paginated_fields = []

    def enter_field_definition(
        self,
        node: FieldDefinitionNode,
        key: Any,
        parent: Any,
        path: list[Any],
        ancestors: list[Any],
    ) -> None:
        # parent is the tuple of fields, the type definition is one level up
        enclosing_type = ancestors[-1] if ancestors else None
        if getattr(enclosing_type, "name", None) is None:
            raise PaginateError(
                f"Field {node.name.value!r} is not inside a named type definition"
            )
        self.stack.enter_field(node, enclosing_type)

    def enter_directive(
        self,
        node: DirectiveNode,
        key: Any,
        parent: Any,
        path: list[Any],
        ancestors: list[Any],
    ) -> None:
        """Record the marker and generate its types as soon as it is found."""
        if not self.is_marker_directive(node, key):
            return
        if not self.stack.record_marker(key):
            return

        frame = self.stack.current
        self.generated_types.append(
            self.synthesizer.build_connection_type(frame.parent, frame.field)
        )
        self.generated_types.append(
            self.synthesizer.build_edge_type(frame.parent, frame.field)
        )
        self.paginated_fields.append((frame.parent.name.value, frame.field.name.value))

    def leave_field_definition(
        self,
        node: FieldDefinitionNode,
        key: Any,
        parent: Any,
        path: list[Any],
        ancestors: list[Any],
    ) -> FieldDefinitionNode | None:
        """Replace the field if a marker was recorded, otherwise keep it."""
        frame = self.stack.leave_field()
        if frame.marker_index is None:
            return None
        return self.synthesizer.replace_field_node(frame)

    def leave_document(
        self,
        node: DocumentNode,
        key: Any,
        parent: Any,
        path: list[Any],
        ancestors: list[Any],
    ) -> DocumentNode | None:
        """Append the generated types to the document."""
        if not self.generated_types:
            return None
        return merge_definitions(node, self.generated_types)

    def is_marker_directive(self, directive: DirectiveNode, index: Any) -> bool:
        """Check that ``directive`` is the marker of the field being visited.

        Directives are visited wherever they appear (arguments, enum values,
        types...). Only the exact node found at ``index`` in the open field's
        own directive list counts.
        """
        if not self.stack or not isinstance(index, int):
            return False
        directives = self.stack.current_field().directives or ()
        if not 0 <= index < len(directives):
            return False
        return (
            directives[index] is directive
            and directive.name.value == self.config.marker
        )


def transform_document(
    document: DocumentNode,
    config: PaginateConfig | None = None,
    visitors: Iterable[Visitor] = (),
) -> DocumentNode:
    """Run the pagination rewrite, optionally alongside other visitors."""
    paginate = PaginateVisitor(config)
    others = list(visitors)
    if others:
        return visit(document, ParallelVisitor([paginate, *others]))
    return visit(document, paginate)


def transform_sdl(sdl: str, config: PaginateConfig | None = None) -> str:
    """Parse SDL text, rewrite it and print it back."""
    document = parse(sdl, no_location=True)
    return print_ast(transform_document(document, config))

"""Builds connection/edge types and rewrites paginated fields.

SDL fragments are rendered from Jinja2 templates and parsed with
graphql-core, so the generated nodes look exactly like parsed ones.

Template lookup order:
1. The config's template_dir (if provided)
2. Package default templates
"""

from pathlib import Path

from graphql import (
    FieldDefinitionNode,
    GraphQLSyntaxError,
    InputValueDefinitionNode,
    ListTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
    parse,
    parse_type,
)
from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from .config import PaginateConfig
from .context import StackFrame
from .errors import MalformedFragmentError


def upper_first(name: str) -> str:
    """Upper-case the first letter only (``users`` -> ``Users``)."""
    return name[:1].upper() + name[1:]


def base_name(parent, field: FieldDefinitionNode) -> str:
    """Name prefix shared by the generated types, e.g. ``QueryUsers``."""
    return upper_first(parent.name.value) + upper_first(field.name.value)


def unpack_node_to_string(node) -> str:
    """Peel list/non-null wrappers off a type and return the named type."""
    if isinstance(node, (ListTypeNode, NonNullTypeNode, FieldDefinitionNode)):
        return unpack_node_to_string(node.type)
    return node.name.value


class ConnectionSynthesizer:
    """Generates the connection pattern for a single paginated field.

    Example:
        synthesizer = ConnectionSynthesizer(PaginateConfig())
        connection = synthesizer.build_connection_type(query_type, users_field)
        edge = synthesizer.build_edge_type(query_type, users_field)
    """

    def __init__(self, config: PaginateConfig | None = None):
        self.config = config or PaginateConfig()

        # Custom templates take precedence
        loaders = []
        if self.config.template_dir:
            template_path = Path(self.config.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_paginate", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            undefined=StrictUndefined,
        )

    def connection_name(self, parent, field: FieldDefinitionNode) -> str:
        return base_name(parent, field) + self.config.connection_suffix

    def edge_name(self, parent, field: FieldDefinitionNode) -> str:
        return base_name(parent, field) + self.config.edge_suffix

    def build_connection_type(self, parent, field: FieldDefinitionNode) -> ObjectTypeDefinitionNode:
        """Build ``<Base>Connection { pageInfo, edges }``."""
        return self._render_type(
            "connection.graphql.j2",
            name=self.connection_name(parent, field),
            edge_name=self.edge_name(parent, field),
            page_info_type=self.config.page_info_type,
            resolver_class=self.config.resolver_class,
            page_info_resolver=self.config.page_info_resolver,
            edge_resolver=self.config.edge_resolver,
        )

    def build_edge_type(self, parent, field: FieldDefinitionNode) -> ObjectTypeDefinitionNode:
        """Build ``<Base>Edge { node, cursor }`` around the field's inner type."""
        return self._render_type(
            "edge.graphql.j2",
            name=self.edge_name(parent, field),
            node_type=unpack_node_to_string(field.type),
        )

    def replace_field_node(self, frame: StackFrame) -> FieldDefinitionNode:
        """Return a copy of the field with cursor arguments and connection type.

        The original field is returned as is if its marker can no longer be found.
        """
        field = frame.field
        if frame.marker is None:
            return field

        arguments = tuple(field.arguments or ()) + (
            self._argument_node(self.config.first_argument, "Int!"),
            self._argument_node(self.config.after_argument, "String"),
        )
        return FieldDefinitionNode(
            description=field.description,
            name=field.name,
            arguments=arguments,
            type=self._parse_type(self.connection_name(frame.parent, field)),
            directives=field.directives,
            loc=field.loc,
        )

    def _argument_node(self, name: str, type_: str) -> InputValueDefinitionNode:
        return InputValueDefinitionNode(
            name=NameNode(value=name),
            type=self._parse_type(type_),
            directives=(),
        )

    @staticmethod
    def _parse_type(source: str) -> TypeNode:
        try:
            return parse_type(source, no_location=True)
        except GraphQLSyntaxError as e:
            raise MalformedFragmentError(
                f"Invalid generated type reference {source!r}: {e.message}", source
            ) from e

    def _render_type(self, template_name: str, **context) -> ObjectTypeDefinitionNode:
        """Render an SDL template and parse its first definition."""
        try:
            sdl = self.env.get_template(template_name).render(**context)
        except TemplateError as e:
            raise MalformedFragmentError(
                f"Cannot render {template_name}: {e}", template_name
            ) from e
        try:
            document = parse(sdl, no_location=True)
        except GraphQLSyntaxError as e:
            raise MalformedFragmentError(
                f"Invalid generated SDL from {template_name}: {e.message}", sdl
            ) from e
        return document.definitions[0]

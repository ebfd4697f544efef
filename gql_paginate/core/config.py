"""Configuration for the pagination rewrite.

Defaults reproduce the connection shape used by the ConnectionField
resolvers, so most callers never need to build one explicitly:

    config = PaginateConfig(marker="connection", page_info_type="PageMeta")
"""

import re

from pydantic import BaseModel, field_validator

# GraphQL name grammar: /[_A-Za-z][_0-9A-Za-z]*/
NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class PaginateConfig(BaseModel):
    """Names used when recognizing the marker and generating types."""

    marker: str = "paginate"
    page_info_type: str = "PageInfo"
    resolver_class: str = "ConnectionField"
    page_info_resolver: str = "pageInfoResolver"
    edge_resolver: str = "edgeResolver"
    first_argument: str = "first"
    after_argument: str = "after"
    connection_suffix: str = "Connection"
    edge_suffix: str = "Edge"
    # Directory with connection.graphql.j2 / edge.graphql.j2 overrides
    template_dir: str | None = None

    @field_validator(
        "marker",
        "page_info_type",
        "first_argument",
        "after_argument",
        "connection_suffix",
        "edge_suffix",
    )
    @classmethod
    def _check_graphql_name(cls, value: str) -> str:
        if not NAME_PATTERN.match(value):
            raise ValueError(f"{value!r} is not a valid GraphQL name")
        return value

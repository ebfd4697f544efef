"""Tests for PaginateConfig."""

import pytest
from pydantic import ValidationError

from gql_paginate.core.config import PaginateConfig


class TestPaginateConfig:
    """Tests for configuration defaults and validation."""

    def test_defaults(self):
        config = PaginateConfig()
        assert config.marker == "paginate"
        assert config.page_info_type == "PageInfo"
        assert config.resolver_class == "ConnectionField"
        assert config.page_info_resolver == "pageInfoResolver"
        assert config.edge_resolver == "edgeResolver"
        assert config.first_argument == "first"
        assert config.after_argument == "after"
        assert config.template_dir is None

    def test_custom_values(self):
        config = PaginateConfig(marker="connection", first_argument="limit")
        assert config.marker == "connection"
        assert config.first_argument == "limit"

    @pytest.mark.parametrize(
        "field_name",
        ["marker", "page_info_type", "first_argument", "after_argument", "edge_suffix"],
    )
    def test_rejects_invalid_names(self, field_name):
        with pytest.raises(ValidationError):
            PaginateConfig(**{field_name: "not-a-name"})

    def test_rejects_leading_digit(self):
        with pytest.raises(ValidationError):
            PaginateConfig(marker="1paginate")

    def test_accepts_underscore(self):
        assert PaginateConfig(marker="_paginate").marker == "_paginate"

"""Tests for SchemaLoader."""

import pytest

from gql_paginate.core.errors import PaginateError, SchemaLoadError
from gql_paginate.core.loader import SchemaLoader


@pytest.fixture
def schema_dir(tmp_path):
    (tmp_path / "b_user.graphqls").write_text("type User { id: ID! }\n")
    (tmp_path / "a_query.graphqls").write_text("type Query { users: [User] @paginate }\n")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "post.graphql").write_text("type Post { id: ID! }\n")
    (tmp_path / "notes.txt").write_text("not a schema")
    return tmp_path


class TestSchemaLoader:
    """Tests for loading schema files."""

    def test_load_single_file(self, tmp_path):
        path = tmp_path / "schema.graphqls"
        path.write_text("type Query { me: String }\n")

        loader = SchemaLoader(str(path))
        document = loader.load()

        assert loader.files == [str(path)]
        assert [d.name.value for d in document.definitions] == ["Query"]

    def test_load_directory_sorted(self, schema_dir):
        loader = SchemaLoader(str(schema_dir))
        document = loader.load()

        assert len(loader.files) == 3
        assert [d.name.value for d in document.definitions] == ["Query", "User", "Post"]

    def test_ignores_other_files(self, schema_dir):
        loader = SchemaLoader(str(schema_dir))
        loader.load()
        assert not any(f.endswith(".txt") for f in loader.files)

    def test_empty_directory(self, tmp_path):
        loader = SchemaLoader(str(tmp_path))
        document = loader.load()

        assert loader.files == []
        assert len(document.definitions) == 0

    def test_syntax_error_names_file(self, tmp_path):
        path = tmp_path / "broken.graphqls"
        path.write_text("type Query {\n")

        with pytest.raises(SchemaLoadError) as exc_info:
            SchemaLoader(str(path)).load()

        assert "broken.graphqls" in str(exc_info.value)
        assert exc_info.value.file_path == str(path)
        assert isinstance(exc_info.value, PaginateError)

    def test_invalid_utf8_names_file(self, tmp_path):
        path = tmp_path / "latin.graphqls"
        path.write_bytes(b"\xff\xfe type Query { a: Int }")

        with pytest.raises(SchemaLoadError) as exc_info:
            SchemaLoader(str(path)).load()

        assert "Error reading latin.graphqls" in str(exc_info.value)
        assert exc_info.value.file_path == str(path)

    def test_reads_utf8_descriptions(self, tmp_path):
        path = tmp_path / "schema.graphqls"
        path.write_bytes('type Query {\n  "Überblick"\n  me: String\n}\n'.encode("utf-8"))

        document = SchemaLoader(str(path)).load()

        assert document.definitions[0].fields[0].description.value == "Überblick"

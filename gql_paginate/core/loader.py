"""Loads SDL schema files into a single graphql-core document."""

import os

from graphql import DocumentNode, GraphQLSyntaxError, concat_ast, parse

from .errors import SchemaLoadError

SCHEMA_EXTENSIONS = (".graphql", ".graphqls")


class SchemaLoader:
    """Parses a schema file, or every schema file under a directory."""

    def __init__(self, schema_path: str):
        """Initialize a loader with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.files: list[str] = []

    def load(self) -> DocumentNode:
        """Parse all schema files and return them as one document."""
        self.files = self._collect_schema_files()
        documents = []

        for file_path in self.files:
            try:
                with open(file_path, encoding="utf-8") as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise SchemaLoadError(
                    f"Error reading {os.path.basename(file_path)}: {e}", file_path
                ) from e
            try:
                documents.append(parse(content, no_location=True))
            except GraphQLSyntaxError as e:
                raise SchemaLoadError(
                    f"Error parsing {os.path.basename(file_path)}: {e.message}",
                    file_path,
                ) from e

        return concat_ast(documents)

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

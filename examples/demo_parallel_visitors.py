#!/usr/bin/env python3
"""Demonstration of the pagination rewrite.

This script shows how to:
1. Parse a GraphQL schema
2. Run the pagination visitor alongside another visitor in one walk
3. Print the rewritten schema

Run from the repository root:
    python examples/demo_parallel_visitors.py
"""

from pathlib import Path

from graphql import ParallelVisitor, Visitor, print_ast, visit

from gql_paginate.core import PaginateVisitor, SchemaLoader


class FieldCounter(Visitor):
    """Counts the field definitions seen during the walk."""

    def __init__(self):
        super().__init__()
        self.count = 0

    def enter_field_definition(self, node, *_args):
        self.count += 1


def main():
    schema_path = Path(__file__).parent / "schema.graphqls"

    print("=== Pagination Rewrite Demo ===\n")

    print("1. Parsing GraphQL schema...")
    document = SchemaLoader(str(schema_path)).load()
    print(f"   {len(document.definitions)} definitions")

    print("\n2. Visiting...")
    paginate = PaginateVisitor()
    counter = FieldCounter()
    result = visit(document, ParallelVisitor([paginate, counter]))
    print(f"   {counter.count} fields visited")
    for type_name, field_name in paginate.paginated_fields:
        print(f"   paginated: {type_name}.{field_name}")

    print("\n3. Rewritten schema:\n")
    print(print_ast(result))


if __name__ == "__main__":
    main()

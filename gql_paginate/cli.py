"""Command-line interface for gql-paginate."""

import click
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

from graphql import print_ast, visit
from pydantic import ValidationError

from .core.config import PaginateConfig
from .core.errors import PaginateError
from .core.loader import SchemaLoader
from .core.visitor import PaginateVisitor

ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    try:
        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path, "r") as zip_ref:
                zip_ref.extractall(temp_dir)
        elif archive_path.name.endswith((".tar.gz", ".tgz")):
            with tarfile.open(archive_path, "r:gz") as tar_ref:
                # Rejects absolute paths, ".." members and links leaving temp_dir
                tar_ref.extractall(temp_dir, filter="data")
        else:
            raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    except Exception:
        shutil.rmtree(temp_dir)
        raise
    return temp_dir


def load_schema(schema: str, verbose: bool):
    """Parse a schema file, directory or archive into one document."""
    schema_path = Path(schema).resolve()
    temp_dir = None

    try:
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(ARCHIVE_SUFFIXES):
            click.echo(f"Extracting archive {schema_path.name}...", err=True)
            try:
                temp_dir = extract_archive(schema_path)
            except (tarfile.TarError, zipfile.BadZipFile) as e:
                raise click.ClickException(f"Cannot extract {schema_path.name}: {e}") from e
            actual_schema_path = Path(temp_dir)
            if verbose:
                click.echo(f"  Extracted to: {temp_dir}", err=True)

        loader = SchemaLoader(str(actual_schema_path))
        try:
            document = loader.load()
        except PaginateError as e:
            raise click.ClickException(str(e)) from e

        if not loader.files:
            raise click.ClickException(f"No .graphql or .graphqls files found in {schema}")
        if verbose:
            click.echo(f"  Files: {len(loader.files)}", err=True)
            click.echo(f"  Definitions: {len(document.definitions)}", err=True)
        return document
    finally:
        if temp_dir:
            shutil.rmtree(temp_dir)


schema_option = click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
marker_option = click.option(
    "--marker",
    "-m",
    default="paginate",
    show_default=True,
    help="Name of the directive that marks paginated fields.",
)


@click.group()
@click.version_option()
def main():
    """Relay pagination rewriter for GraphQL schemas.

    Turns fields marked with @paginate into cursor connections.
    """
    pass


@main.command()
@schema_option
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output file for the rewritten schema (default: stdout).",
)
@marker_option
@click.option(
    "--page-info-type",
    default="PageInfo",
    show_default=True,
    help="Type used for the pageInfo field of generated connections.",
)
@click.option(
    "--resolver-class",
    default="ConnectionField",
    show_default=True,
    help="Resolver class referenced by the generated @field directives.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with custom connection.graphql.j2 / edge.graphql.j2 templates.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def transform(
    schema: str,
    output: str | None,
    marker: str,
    page_info_type: str,
    resolver_class: str,
    template_dir: str | None,
    verbose: bool,
):
    """Rewrite paginated fields and print the resulting schema.

    Examples:

        gql-paginate transform --schema ./schema.graphqls

        gql-paginate transform -s ./schema -o ./schema.out.graphqls

        gql-paginate transform -s ./schema.tgz --marker connection
    """
    try:
        config = PaginateConfig(
            marker=marker,
            page_info_type=page_info_type,
            resolver_class=resolver_class,
            template_dir=template_dir,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e

    if verbose:
        click.echo(f"Schema: {schema}", err=True)
        click.echo(f"Marker: @{config.marker}", err=True)

    document = load_schema(schema, verbose)

    visitor = PaginateVisitor(config)
    try:
        result = visit(document, visitor)
    except PaginateError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Paginated fields: {len(visitor.paginated_fields)}", err=True)
        click.echo(f"  Generated types: {len(visitor.generated_types)}", err=True)

    sdl = print_ast(result) + "\n"
    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(sdl)
        click.echo(f"Done! Wrote rewritten schema to {output_path}", err=True)
    else:
        click.echo(sdl, nl=False)


@main.command()
@schema_option
@marker_option
def fields(schema: str, marker: str):
    """List the fields that would be turned into connections.

    Examples:

        gql-paginate fields --schema ./schema.graphqls
    """
    try:
        config = PaginateConfig(marker=marker)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e

    document = load_schema(schema, verbose=False)
    visitor = PaginateVisitor(config)
    try:
        visit(document, visitor)
    except PaginateError as e:
        raise click.ClickException(str(e)) from e

    for type_name, field_name in visitor.paginated_fields:
        click.echo(f"{type_name}.{field_name}")


if __name__ == "__main__":
    main()

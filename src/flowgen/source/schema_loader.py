from pathlib import Path

from ariadne import load_schema_from_path
from graphql import GraphQLSchema, TypeDefinitionNode, build_ast_schema, parse, print_schema

from flowgen import log


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths, in the order they were given
    """
    resolved_files: list[Path] = []

    for path in paths:
        if path.is_file():
            candidates = [path]
        elif path.is_dir():
            candidates = sorted(path.rglob("*.graphql"))
        else:
            candidates = []
        for file in candidates:
            if file not in resolved_files:
                resolved_files.append(file)

    return resolved_files


def build_schema_str(graphql_schema_paths: list[Path]) -> str:
    """Concatenate the SDL of the given files or folders."""
    schema_str = ""
    for graphql_file in graphql_schema_paths:
        schema_str += load_schema_from_path(graphql_file) + "\n"
    return schema_str


class SchemaSource:
    """A built schema together with the order its types were declared in."""

    def __init__(self, schema: GraphQLSchema, type_names: list[str]) -> None:
        self.schema = schema
        self.type_names = type_names


def load_schema_from_str(schema_str: str) -> SchemaSource:
    document = parse(schema_str)
    schema = build_ast_schema(document)
    type_names = [
        definition.name.value for definition in document.definitions if isinstance(definition, TypeDefinitionNode)
    ]
    log.info("Successfully built the given GraphQL schema string.")
    log.debug(f"Read schema: \n{print_schema(schema)}")
    return SchemaSource(schema, type_names)


def load_schema(graphql_schema_paths: Path | list[Path]) -> SchemaSource:
    """Load and build a GraphQL schema from files or folders."""
    if isinstance(graphql_schema_paths, Path):
        graphql_schema_paths = [graphql_schema_paths]

    return load_schema_from_str(build_schema_str(graphql_schema_paths))

"""Loading GraphQL schema files into the flowgen schema description."""

from .extraction import extract_types, get_operation_type_names
from .schema_loader import SchemaSource, load_schema, load_schema_from_str, resolve_graphql_files

__all__ = [
    "SchemaSource",
    "extract_types",
    "get_operation_type_names",
    "load_schema",
    "load_schema_from_str",
    "resolve_graphql_files",
]

"""Helpers shared by the generators: type printing, naming and small renderers."""

from flowgen.errors import MissingInputTypeError, MissingModelError
from flowgen.models import (
    ContextDefinition,
    GenerateArgs,
    GraphQLType,
    GraphQLTypeArgument,
    GraphQLTypeField,
    GraphQLTypeObject,
    ModelMap,
    OperationTypeNames,
)

InputTypesMap = dict[str, GraphQLTypeObject]
TypeToInputTypeAssociation = dict[str, list[str]]

GRAPHQL_SCALAR_TO_FLOW = {
    "Int": "number",
    "Float": "number",
    "String": "string",
    "ID": "string",
    "Boolean": "boolean",
}

DEFAULT_CONTEXT_NAME = "Context"
EMPTY_TYPE = "{}"


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def get_context_name(context: ContextDefinition | None = None) -> str:
    if context is None:
        return DEFAULT_CONTEXT_NAME
    return context.interface_name


def get_model_name(
    type_: GraphQLType,
    model_map: ModelMap,
    operation_types: OperationTypeNames | None = None,
) -> str:
    """
    Get the Flow type name backing a GraphQL type.

    Root operation types have no model and are typed as the empty object.

    Raises:
        MissingModelError: If no model is mapped to the type.
    """
    operation_types = operation_types or OperationTypeNames()
    if operation_types.is_root(type_.name):
        return EMPTY_TYPE
    if type_.is_enum:
        return type_.name

    model = model_map.get(type_.name)
    if model is None:
        raise MissingModelError(type_.name)
    return model.definition.name


def get_scalar_type(type_: GraphQLType, model_map: ModelMap) -> str:
    if type_.name in GRAPHQL_SCALAR_TO_FLOW:
        return GRAPHQL_SCALAR_TO_FLOW[type_.name]
    # Custom scalars fall back to string unless a model is mapped to them
    model = model_map.get(type_.name)
    return model.definition.name if model else "string"


def print_field_like_type(
    field: GraphQLTypeField | GraphQLTypeArgument,
    model_map: ModelMap,
    operation_types: OperationTypeNames | None = None,
) -> str:
    """
    Print the Flow type expression of a field or an argument.

    Args:
        field: The field or argument whose declared type is printed
        model_map: Mapping from GraphQL type names to models
        operation_types: Names of the root operation types

    Returns:
        str: e.g. ``string``, ``User[]`` or ``number | null``
    """
    type_ = field.type
    if type_.is_scalar:
        printed = get_scalar_type(type_, model_map)
    elif type_.is_input or type_.is_enum:
        printed = type_.name
    else:
        printed = get_model_name(type_, model_map, operation_types)

    if type_.is_array:
        printed = f"{printed}[]"
    if not type_.is_required:
        printed = f"{printed} | null"
    return printed


def get_distinct_input_types(
    type_: GraphQLTypeObject,
    type_to_input_type_association: TypeToInputTypeAssociation,
    input_types_map: InputTypesMap,
) -> list[str]:
    """
    Get the input types that need a nested declaration for an object type.

    Starts from the input types associated with the object type and follows
    input-typed fields of those input types. Names are returned in first-seen
    order, each at most once.

    Raises:
        MissingInputTypeError: If a referenced input type is not in the table.
    """
    distinct: list[str] = []
    seen: set[str] = set()

    def visit(input_type_name: str) -> None:
        if input_type_name in seen:
            return
        seen.add(input_type_name)
        distinct.append(input_type_name)

        input_type = input_types_map.get(input_type_name)
        if input_type is None:
            raise MissingInputTypeError(input_type_name)
        for field in input_type.fields:
            if field.type.is_input:
                visit(field.type.name)

    for input_type_name in type_to_input_type_association.get(type_.name, []):
        visit(input_type_name)

    return distinct


def render_default_resolver(field_name: str, field_optional: bool, parent_type_name: str) -> str:
    value = f"parent.{field_name}"
    if field_optional:
        value = f"parent.{field_name} === undefined ? null : parent.{field_name}"
    return f"{field_name}: (parent: {parent_type_name}) => {value},"


def render_default_resolvers(type_: GraphQLTypeObject, args: GenerateArgs, variable_name: str) -> str:
    """Render the resolvers that read a field straight off the parent model."""
    model = args.model_map.get(type_.name)
    if model is None:
        return ""

    graphql_field_names = {field.name for field in type_.fields}
    resolvers = [
        render_default_resolver(field.name, field.optional, model.definition.name)
        for field in model.definition.fields
        if field.name in graphql_field_names
    ]
    body = "\n".join(f"  {resolver}" for resolver in resolvers)
    return f"export const {variable_name} = {{\n{body}\n}}"


def render_enums(args: GenerateArgs) -> str:
    return "\n".join(
        f"export type {enum.name} = {' | '.join(repr_string(value) for value in enum.values)}" for enum in args.enums
    )


def repr_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"

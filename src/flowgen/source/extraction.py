from typing import cast

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
    print_ast,
)
from graphql import GraphQLType as CoreGraphQLType

from flowgen import log
from flowgen.models import (
    GraphQLEnumObject,
    GraphQLType,
    GraphQLTypeArgument,
    GraphQLTypeField,
    GraphQLTypeObject,
    OperationTypeNames,
)


def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith("__")


def to_type_reference(type_: CoreGraphQLType) -> GraphQLType:
    """
    Describe a (possibly wrapped) GraphQL type as a flowgen type reference.

    Only the outer non-null and the presence of a list are kept; the
    nullability of list items is not represented.
    """
    is_required = is_non_null_type(type_)
    unwrapped = type_.of_type if is_required else type_  # type: ignore[attr-defined]
    is_array = is_list_type(unwrapped)

    named = get_named_type(type_)
    return GraphQLType(
        name=named.name,
        is_object=is_object_type(named),
        is_input=is_input_object_type(named),
        is_enum=is_enum_type(named),
        is_scalar=is_scalar_type(named),
        is_union=is_union_type(named),
        is_interface=is_interface_type(named),
        is_required=is_required,
        is_array=is_array,
    )


def to_argument(name: str, argument: GraphQLArgument) -> GraphQLTypeArgument:
    default_value = None
    if argument.ast_node is not None and argument.ast_node.default_value is not None:
        default_value = print_ast(argument.ast_node.default_value)
    return GraphQLTypeArgument(name=name, type=to_type_reference(argument.type), default_value=default_value)


def to_field(name: str, field: GraphQLField | GraphQLInputField) -> GraphQLTypeField:
    arguments = []
    if isinstance(field, GraphQLField):
        arguments = [to_argument(arg_name, argument) for arg_name, argument in field.args.items()]
    return GraphQLTypeField(
        name=name,
        type=to_type_reference(field.type),
        arguments=arguments,
        description=field.description,
    )


def to_type_object(named_type: GraphQLNamedType) -> GraphQLTypeObject:
    fields: list[GraphQLTypeField] = []
    if isinstance(named_type, GraphQLObjectType | GraphQLInterfaceType | GraphQLInputObjectType):
        fields = [to_field(field_name, field) for field_name, field in named_type.fields.items()]

    return GraphQLTypeObject(
        name=named_type.name,
        type=to_type_reference(named_type),
        fields=fields,
        description=named_type.description,
    )


def get_operation_type_names(schema: GraphQLSchema) -> OperationTypeNames:
    """
    Get the names of the schema's root operation types.

    The conventional names apply only when the schema has no ``schema`` definition;
    roots left out of an explicit definition are ``None``.
    """
    if schema.ast_node is None:
        defaults = OperationTypeNames()
        return OperationTypeNames(
            query=schema.query_type.name if schema.query_type else defaults.query,
            mutation=schema.mutation_type.name if schema.mutation_type else defaults.mutation,
            subscription=schema.subscription_type.name if schema.subscription_type else defaults.subscription,
        )
    return OperationTypeNames(
        query=schema.query_type.name if schema.query_type else None,
        mutation=schema.mutation_type.name if schema.mutation_type else None,
        subscription=schema.subscription_type.name if schema.subscription_type else None,
    )


def extract_types(
    schema: GraphQLSchema, type_names: list[str] | None = None
) -> tuple[list[GraphQLTypeObject], list[GraphQLEnumObject]]:
    """
    Extract the type objects and enums of a schema.

    Args:
        schema: The GraphQL schema to extract from
        type_names: Declaration order of the types; the schema's own type map
            order is used when not given

    Returns:
        tuple: Object, input, interface and union types, and the enums, both
            in declaration order
    """
    if type_names is None:
        type_names = list(schema.type_map)

    types: list[GraphQLTypeObject] = []
    enums: list[GraphQLEnumObject] = []
    for type_name in type_names:
        named_type = schema.type_map.get(type_name)
        if named_type is None or is_introspection_type(type_name) or is_scalar_type(named_type):
            continue
        if is_enum_type(named_type):
            enum_type = cast(GraphQLEnumType, named_type)
            enums.append(GraphQLEnumObject(name=enum_type.name, values=list(enum_type.values)))
        else:
            types.append(to_type_object(named_type))

    log.debug(f"Extracted {len(types)} types and {len(enums)} enums")
    return types, enums

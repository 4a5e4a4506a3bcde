from flowgen.generators.common import InputTypesMap, TypeToInputTypeAssociation
from flowgen.models import GraphQLTypeObject


def build_input_types_map(types: list[GraphQLTypeObject]) -> InputTypesMap:
    """Index every input type of the schema by name."""
    return {type_.name: type_ for type_ in types if type_.type.is_input}


def get_argument_input_types(type_: GraphQLTypeObject) -> list[str]:
    """
    Collect the input type names used by the arguments of a type's fields.

    Names are kept in declaration order and may repeat when several fields or
    arguments use the same input type.
    """
    return [
        argument.type.name for field in type_.fields for argument in field.arguments if argument.type.is_input
    ]


def build_type_to_input_type_association(types: list[GraphQLTypeObject]) -> TypeToInputTypeAssociation:
    """
    Map each object type to the input types referenced by its fields' arguments.

    Object types without any input-typed argument are left out of the mapping
    entirely rather than mapped to an empty list.

    Args:
        types: All types of the schema, in declaration order

    Returns:
        dict[str, list[str]]: Object type name to input type names (not deduplicated)
    """
    association: TypeToInputTypeAssociation = {}
    for type_ in types:
        if not type_.type.is_object:
            continue
        input_type_names = get_argument_input_types(type_)
        if input_type_names:
            association[type_.name] = input_type_names
    return association

from functools import partial

from jinja2 import Environment, PackageLoader, select_autoescape

from flowgen import log
from flowgen.generators.association import build_input_types_map, build_type_to_input_type_association
from flowgen.generators.common import (
    InputTypesMap,
    TypeToInputTypeAssociation,
    get_context_name,
    get_distinct_input_types,
    print_field_like_type,
    render_default_resolvers,
    render_enums,
    upper_first,
)
from flowgen.generators.formatter import Formatter, format_code
from flowgen.generators.signatures import (
    get_input_arg_name,
    render_resolver_function_interface,
    render_resolver_type_member,
)
from flowgen.models import ContextDefinition, GenerateArgs, GraphQLTypeObject


class FlowGenerator:
    """
    Generator rendering Flow resolver types for a schema description.

    A generator instance only holds the template environment; the input-type
    table and the association mapping are rebuilt on every call to
    :meth:`generate`.
    """

    def __init__(self) -> None:
        self.env = Environment(
            loader=PackageLoader("flowgen.generators", "templates"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["upper_first"] = upper_first

    def generate(self, args: GenerateArgs) -> str:
        """
        Render the unformatted Flow code for the given generation arguments.

        Returns:
            str: Header, enums, one namespace per object type and the
                top-level ``Resolvers`` interface.
        """
        input_types_map = build_input_types_map(args.types)
        association = build_type_to_input_type_association(args.types)
        log.debug(f"Found {len(input_types_map)} input types, {len(association)} types with input arguments")

        template = self.env.get_template("flow.js.j2")
        return template.render(
            model_imports=render_model_imports(args),
            context=render_context(args.context),
            enums=render_enums(args),
            namespaces=[
                self.render_namespace(type_, association, input_types_map, args)
                for type_ in args.types
                if type_.type.is_object
            ],
            resolvers=render_resolvers(args.types),
        )

    def render_namespace(
        self,
        type_: GraphQLTypeObject,
        type_to_input_type_association: TypeToInputTypeAssociation,
        input_types_map: InputTypesMap,
        args: GenerateArgs,
    ) -> str:
        type_name = upper_first(type_.name)

        input_types: list[GraphQLTypeObject] = []
        if type_.name in type_to_input_type_association:
            input_types = [
                input_types_map[name]
                for name in get_distinct_input_types(type_, type_to_input_type_association, input_types_map)
            ]

        template = self.env.get_template("namespace.js.j2")
        return template.render(
            type=type_,
            type_name=type_name,
            default_resolvers=render_default_resolvers(type_, args, f"{type_name}_defaultResolvers"),
            input_types=input_types,
            print_type=partial(
                print_field_like_type, model_map=args.model_map, operation_types=args.operation_types
            ),
            input_arg_name=partial(get_input_arg_name, type_),
            resolver_function=lambda field: render_resolver_function_interface(field, type_, args),
            resolver_member=lambda field: render_resolver_type_member(field, type_, args),
        )


def render_model_imports(args: GenerateArgs) -> list[str]:
    imports: list[str] = []
    for model in args.model_map.values():
        statement = f"import type {{ {model.definition.name} }} from '{model.import_path_relative_to_output}'"
        if statement not in imports:
            imports.append(statement)
    return imports


def render_context(context: ContextDefinition | None) -> str:
    if context is not None:
        return f"import type {{ {get_context_name(context)} }} from '{context.context_path}'"
    return f"type {get_context_name(context)} = any"


def render_resolvers(types: list[GraphQLTypeObject]) -> str:
    """Render the interface mapping every object type to its resolvers interface."""
    members = [f"  {type_.name}: {upper_first(type_.name)}_Resolvers" for type_ in types if type_.type.is_object]
    body = ",\n".join(members)
    return f"export interface Resolvers {{\n{body}\n}}"


def generate(args: GenerateArgs) -> str:
    log.info(f"Generating Flow resolver types for {len(args.types)} types")
    code = FlowGenerator().generate(args)
    log.info("Successfully generated Flow resolver types")
    return code


def generate_code(args: GenerateArgs, formatter: Formatter | None = None) -> str:
    """
    Generate Flow resolver types and run them through the formatter.

    Args:
        args: Generation arguments
        formatter: Formatter to use, Prettier when not given

    Returns:
        str: The formatted code, or the unformatted code if formatting failed
    """
    return format_code(generate(args), args.formatter_options, formatter)

"""Resolver signatures, modelled once per field and rendered to Flow."""

from dataclasses import dataclass

from flowgen.generators.common import (
    EMPTY_TYPE,
    get_context_name,
    get_model_name,
    print_field_like_type,
    upper_first,
)
from flowgen.models import GenerateArgs, GraphQLTypeField, GraphQLTypeObject

RESOLVE_INFO_TYPE = "GraphQLResolveInfo"


@dataclass(frozen=True)
class ResolverParameters:
    """The four parameters every resolver receives, in call order."""

    parent: str
    args: str
    ctx: str
    info: str = RESOLVE_INFO_TYPE

    def render(self) -> str:
        return f"(parent: {self.parent}, args: {self.args}, ctx: {self.ctx}, info: {self.info})"


@dataclass(frozen=True)
class ResolverFunction:
    """A resolver returning its value directly or through a promise."""

    parameters: ResolverParameters
    return_type: str

    def render(self) -> str:
        return f"{self.parameters.render()} => {self.return_type} | Promise<{self.return_type}>"


@dataclass(frozen=True)
class StandardSignature:
    resolver: ResolverFunction

    def render(self) -> str:
        return self.resolver.render()


@dataclass(frozen=True)
class SubscriptionSignature:
    """A subscription field: ``subscribe`` sets up the stream, ``resolve`` maps each event."""

    subscribe: ResolverFunction
    resolve: ResolverFunction | None = None

    def render(self) -> str:
        members = [f"subscribe: {self.subscribe.render()}"]
        if self.resolve is not None:
            members.append(f"resolve?: {self.resolve.render()}")
        return "{|\n  " + ",\n  ".join(members) + "\n|}"


ResolverSignature = StandardSignature | SubscriptionSignature


def get_input_arg_name(type_: GraphQLTypeObject, field: GraphQLTypeField) -> str:
    return f"{upper_first(type_.name)}_Args_{field.name}"


def get_resolver_name(type_: GraphQLTypeObject, field: GraphQLTypeField) -> str:
    return f"{upper_first(type_.name)}_{upper_first(field.name)}_Resolver"


def get_resolver_parameters(field: GraphQLTypeField, type_: GraphQLTypeObject, args: GenerateArgs) -> ResolverParameters:
    return ResolverParameters(
        parent=get_model_name(type_.type, args.model_map, args.operation_types),
        args=get_input_arg_name(type_, field) if field.arguments else EMPTY_TYPE,
        ctx=get_context_name(args.context),
    )


def resolver_signature(field: GraphQLTypeField, type_: GraphQLTypeObject, args: GenerateArgs) -> ResolverSignature:
    """
    Build the signature of a field's resolver.

    Fields of the subscription root get the two-stage subscription form, every
    other field a single call-and-return function.

    Args:
        field: The field being resolved
        type_: The type owning the field
        args: Generation arguments (model map, context, root type names)

    Returns:
        ResolverSignature: A StandardSignature or a SubscriptionSignature
    """
    parameters = get_resolver_parameters(field, type_, args)
    return_type = print_field_like_type(field, args.model_map, args.operation_types)

    subscription = args.operation_types.subscription
    if subscription is not None and type_.name == subscription:
        return SubscriptionSignature(
            subscribe=ResolverFunction(parameters, f"AsyncIterator<{return_type}>"),
            resolve=ResolverFunction(parameters, return_type),
        )
    return StandardSignature(ResolverFunction(parameters, return_type))


def render_resolver_function_interface(field: GraphQLTypeField, type_: GraphQLTypeObject, args: GenerateArgs) -> str:
    signature = resolver_signature(field, type_, args)
    return f"export type {get_resolver_name(type_, field)} = {signature.render()}"


def render_resolver_type_member(field: GraphQLTypeField, type_: GraphQLTypeObject, args: GenerateArgs) -> str:
    signature = resolver_signature(field, type_, args)
    return f"{field.name}: {signature.render()},"

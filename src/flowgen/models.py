"""Pydantic models for the schema description consumed by the generators."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GraphQLType(BaseModel):
    """A reference to a named GraphQL type together with its wrapping."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_object: bool = False
    is_input: bool = False
    is_enum: bool = False
    is_scalar: bool = False
    is_union: bool = False
    is_interface: bool = False
    is_required: bool = False
    is_array: bool = False


class GraphQLTypeArgument(BaseModel):
    name: str
    type: GraphQLType
    default_value: str | None = None


class GraphQLTypeField(BaseModel):
    name: str
    type: GraphQLType
    arguments: list[GraphQLTypeArgument] = Field(default_factory=list)
    description: str | None = None


class GraphQLTypeObject(BaseModel):
    """A named schema type: object, input, interface or union."""

    name: str
    type: GraphQLType
    fields: list[GraphQLTypeField] = Field(default_factory=list)
    description: str | None = None


class GraphQLEnumObject(BaseModel):
    name: str
    values: list[str]


class ModelField(BaseModel):
    """A field declared on a model; optional fields may be undefined at runtime."""

    model_config = ConfigDict(extra="forbid")

    name: str
    optional: bool = False


class ModelDefinition(BaseModel):
    name: str
    fields: list[ModelField] = Field(default_factory=list)


class Model(BaseModel):
    """A Flow type backing a GraphQL type and where to import it from."""

    definition: ModelDefinition
    import_path_relative_to_output: str


ModelMap = dict[str, Model]


class ContextDefinition(BaseModel):
    interface_name: str
    context_path: str


class OperationTypeNames(BaseModel):
    """Names of the schema's root operation types."""

    query: str | None = "Query"
    mutation: str | None = "Mutation"
    subscription: str | None = "Subscription"

    def is_root(self, type_name: str) -> bool:
        return type_name in {name for name in (self.query, self.mutation, self.subscription) if name is not None}


class TrailingComma(str, Enum):
    ALL = "all"
    ES5 = "es5"
    NONE = "none"


class FormatterOptions(BaseModel):
    """Options passed to the code formatter (Prettier option names in snake_case)."""

    model_config = ConfigDict(extra="forbid")

    command: list[str] = Field(default_factory=lambda: ["prettier"])
    print_width: int = Field(80, ge=1)
    tab_width: int = Field(2, ge=1)
    use_tabs: bool = False
    semi: bool = True
    single_quote: bool = True
    trailing_comma: TrailingComma = TrailingComma.ALL
    bracket_spacing: bool = True


class GenerateArgs(BaseModel):
    """Everything a generator needs for one run."""

    types: list[GraphQLTypeObject] = Field(default_factory=list)
    enums: list[GraphQLEnumObject] = Field(default_factory=list)
    model_map: ModelMap = Field(default_factory=dict)
    context: ContextDefinition | None = None
    operation_types: OperationTypeNames = Field(default_factory=OperationTypeNames)
    formatter_options: FormatterOptions = Field(default_factory=FormatterOptions)

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from ariadne import gql

from flowgen.errors import FormatError
from flowgen.models import (
    ContextDefinition,
    FormatterOptions,
    GenerateArgs,
    Model,
    ModelDefinition,
    ModelField,
    ModelMap,
)
from flowgen.source import extract_types, get_operation_type_names, load_schema_from_str


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    SCHEMA: Path = TESTS_DATA_DIR / "schema.graphql"
    CONFIG: Path = TESTS_DATA_DIR / "flowgen.yml"


def make_model(name: str, fields: Iterable[str] = (), path: str = "./models") -> Model:
    """Build a model; field names ending with '?' are optional."""
    return Model(
        definition=ModelDefinition(
            name=name,
            fields=[ModelField(name=field.rstrip("?"), optional=field.endswith("?")) for field in fields],
        ),
        import_path_relative_to_output=path,
    )


class PassthroughFormatter:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def format(self, code: str, options: FormatterOptions) -> str:
        self.calls.append(code)
        return code


class FailingFormatter:
    def format(self, code: str, options: FormatterOptions) -> str:
        raise FormatError("SyntaxError: Unexpected token (3:7)")


BuildArgs = Callable[..., GenerateArgs]


@pytest.fixture
def build_args() -> BuildArgs:
    """Factory building generation arguments from an SDL string."""

    def _build(
        schema_str: str,
        model_map: ModelMap | None = None,
        context: ContextDefinition | None = None,
    ) -> GenerateArgs:
        source = load_schema_from_str(gql(schema_str))
        types, enums = extract_types(source.schema, source.type_names)
        return GenerateArgs(
            types=types,
            enums=enums,
            model_map=model_map or {},
            context=context,
            operation_types=get_operation_type_names(source.schema),
        )

    return _build


@pytest.fixture
def blog_args(build_args: BuildArgs) -> GenerateArgs:
    return build_args(
        TestSchemaData.SCHEMA.read_text(),
        model_map={
            "User": make_model("UserModel", ["id", "name", "email?"], "./models"),
            "Post": make_model("PostModel", ["id", "title", "body?", "status"], "./models"),
        },
        context=ContextDefinition(interface_name="Context", context_path="./context"),
    )

from pathlib import Path

import pytest
from pydantic import ValidationError

from flowgen.config import (
    ContextConfig,
    ModelConfig,
    ProjectConfig,
    build_context,
    build_model_map,
    get_import_path_relative_to_output,
    load_project_config,
    split_type_reference,
)
from flowgen.models import ModelField, TrailingComma
from tests.conftest import TestSchemaData


class TestTypeReference:
    def test_split(self) -> None:
        assert split_type_reference("./src/models.js:User") == ("./src/models.js", "User")

    def test_split_windows_path(self) -> None:
        assert split_type_reference("C:\\src\\models.js:User") == ("C:\\src\\models.js", "User")

    @pytest.mark.parametrize("reference", ["./src/models.js", "User:", ":User", "C:\\models.js"])
    def test_invalid_reference(self, reference: str) -> None:
        with pytest.raises(ValueError, match="path:TypeName"):
            split_type_reference(reference)

    def test_model_shorthand(self) -> None:
        model = ModelConfig.model_validate("./models.js:UserModel")

        assert model.path == Path("./models.js")
        assert model.name == "UserModel"
        assert model.fields == []

    def test_field_shorthand(self) -> None:
        model = ModelConfig.model_validate({"path": "./models.js", "name": "User", "fields": ["id", "email?"]})

        assert model.fields == [ModelField(name="id"), ModelField(name="email", optional=True)]

    def test_invalid_context_reference(self) -> None:
        with pytest.raises(ValidationError):
            ContextConfig.model_validate("context.js")


class TestImportPath:
    @pytest.mark.parametrize(
        "file_path,expected",
        [
            ("project/src/models.js", "../models"),
            ("project/src/generated/types.js", "./types"),
            ("project/src/generated/nested/types.mjs", "./nested/types"),
            ("project/lib/context.flow", "../../lib/context.flow"),
        ],
    )
    def test_relative_to_output_directory(self, tmp_path: Path, file_path: str, expected: str) -> None:
        output = tmp_path / "project" / "src" / "generated" / "resolvers.js"

        assert get_import_path_relative_to_output(tmp_path / file_path, output) == expected


class TestLoadProjectConfig:
    def test_no_config_gives_defaults(self) -> None:
        config = load_project_config(None)

        assert config == ProjectConfig()
        assert config.formatter.print_width == 80

    def test_example_config(self) -> None:
        config = load_project_config(TestSchemaData.CONFIG)
        data_dir = TestSchemaData.TESTS_DATA_DIR

        assert config.schemas == [data_dir / "schema.graphql"]
        assert config.output == data_dir / "generated" / "resolvers.js"
        assert config.context == ContextConfig(path=data_dir / "src" / "context.js", name="Context")
        assert config.models["User"].fields == [
            ModelField(name="id"),
            ModelField(name="name"),
            ModelField(name="email", optional=True),
        ]
        assert config.models["Post"].path == data_dir / "src" / "models.js"
        assert config.formatter.print_width == 100
        assert config.formatter.semi is False
        assert config.formatter.trailing_comma == TrailingComma.ALL

    def test_empty_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "flowgen.yml"
        config_path.write_text("")

        assert load_project_config(config_path) == ProjectConfig()

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        config_path = tmp_path / "flowgen.yml"
        config_path.write_text("- schema.graphql\n")

        with pytest.raises(TypeError, match="mapping"):
            load_project_config(config_path)

    def test_unknown_keys_are_rejected(self, tmp_path: Path) -> None:
        config_path = tmp_path / "flowgen.yml"
        config_path.write_text("schema: schema.graphql\nlanguage: typescript\n")

        with pytest.raises(ValidationError):
            load_project_config(config_path)

    def test_schema_list_and_absolute_paths(self, tmp_path: Path) -> None:
        absolute = tmp_path / "elsewhere" / "extra.graphql"
        config_path = tmp_path / "config" / "flowgen.yml"
        config_path.parent.mkdir()
        config_path.write_text(f"schema:\n  - ./schema.graphql\n  - {absolute}\n")

        config = load_project_config(config_path)

        assert config.schemas == [config_path.parent / "schema.graphql", absolute]


class TestBuildMaps:
    def test_model_map(self, tmp_path: Path) -> None:
        models = {
            "User": ModelConfig(path=tmp_path / "src" / "models.js", name="UserModel", fields=[ModelField(name="id")]),
        }

        model_map = build_model_map(models, tmp_path / "generated" / "resolvers.js")

        assert model_map["User"].definition.name == "UserModel"
        assert model_map["User"].definition.fields == [ModelField(name="id")]
        assert model_map["User"].import_path_relative_to_output == "../src/models"

    def test_context(self, tmp_path: Path) -> None:
        context = build_context(ContextConfig(path=tmp_path / "context.js", name="Ctx"), tmp_path / "resolvers.js")

        assert context is not None
        assert context.interface_name == "Ctx"
        assert context.context_path == "./context"

    def test_no_context(self, tmp_path: Path) -> None:
        assert build_context(None, tmp_path / "resolvers.js") is None

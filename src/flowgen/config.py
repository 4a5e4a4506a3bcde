"""Project configuration (``flowgen.yml``) and model path resolution."""

import os
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from flowgen import log
from flowgen.models import ContextDefinition, FormatterOptions, Model, ModelDefinition, ModelField, ModelMap

DEFAULT_CONFIG_FILENAME = "flowgen.yml"
STRIPPED_IMPORT_SUFFIXES = (".js", ".mjs", ".jsx")


def split_type_reference(reference: str) -> tuple[str, str]:
    """Split a ``path/to/file.js:TypeName`` reference into path and type name."""
    path, sep, name = reference.rpartition(":")
    # a lone drive letter means the reference is a Windows path without a type name
    is_drive = len(path) == 1 and path.isalpha()
    if not sep or not path or not name or is_drive:
        raise ValueError(f"Expected a reference of the form 'path:TypeName', got '{reference}'")
    return path, name


class ModelConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Path
    name: str
    fields: list[ModelField] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def parse_reference(cls, value: Any) -> Any:
        if isinstance(value, str):
            path, name = split_type_reference(value)
            return {"path": path, "name": name}
        return value

    @field_validator("fields", mode="before")
    @classmethod
    def parse_field_shorthand(cls, value: Any) -> Any:
        # "name?" marks an optional field
        if not isinstance(value, list):
            return value
        return [
            {"name": item.rstrip("?"), "optional": item.endswith("?")} if isinstance(item, str) else item
            for item in value
        ]


class ContextConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Path
    name: str

    @model_validator(mode="before")
    @classmethod
    def parse_reference(cls, value: Any) -> Any:
        if isinstance(value, str):
            path, name = split_type_reference(value)
            return {"path": path, "name": name}
        return value


class ProjectConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    schemas: list[Path] = Field(default_factory=list, alias="schema")
    output: Path | None = None
    context: ContextConfig | None = None
    models: dict[str, ModelConfig] = Field(default_factory=dict)
    formatter: FormatterOptions = Field(default_factory=FormatterOptions)

    @field_validator("schemas", mode="before")
    @classmethod
    def ensure_list(cls, value: Any) -> Any:
        if isinstance(value, str | Path):
            return [value]
        return value

    def relative_to(self, base_dir: Path) -> "ProjectConfig":
        """Return a copy with every relative path anchored at ``base_dir``."""

        def anchor(path: Path) -> Path:
            return path if path.is_absolute() else base_dir / path

        return self.model_copy(
            update={
                "schemas": [anchor(path) for path in self.schemas],
                "output": anchor(self.output) if self.output else None,
                "context": (
                    self.context.model_copy(update={"path": anchor(self.context.path)}) if self.context else None
                ),
                "models": {
                    type_name: model.model_copy(update={"path": anchor(model.path)})
                    for type_name, model in self.models.items()
                },
            }
        )


def load_project_config(config_path: Path | None) -> ProjectConfig:
    """
    Load and validate a project configuration from a YAML file.

    Relative paths in the file are resolved against the file's directory.

    Args:
        config_path: Path to the YAML configuration file, or None for defaults.

    Returns:
        A validated ProjectConfig.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against ProjectConfig fails.
    """
    if config_path is None:
        log.debug("No project config provided")
        return ProjectConfig()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug("Loaded project config from %s", config_path)

    if raw is None or raw == {}:
        return ProjectConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Project config root must be a mapping (YAML object), got {type(raw).__name__}")

    config = ProjectConfig.model_validate(cast(dict[str, Any], raw))
    return config.relative_to(config_path.parent)


def get_import_path_relative_to_output(file_path: Path, output_path: Path) -> str:
    """
    Build the import specifier of ``file_path`` as seen from the output file.

    The result always starts with ``./`` or ``../``, uses forward slashes and
    has JavaScript file suffixes removed.
    """
    relative = Path(os.path.relpath(os.path.abspath(file_path), os.path.abspath(output_path.parent))).as_posix()
    for suffix in STRIPPED_IMPORT_SUFFIXES:
        if relative.endswith(suffix):
            relative = relative[: -len(suffix)]
            break
    if not relative.startswith(("./", "../")):
        relative = f"./{relative}"
    return relative


def build_model_map(models: dict[str, ModelConfig], output_path: Path) -> ModelMap:
    return {
        type_name: Model(
            definition=ModelDefinition(name=model.name, fields=model.fields),
            import_path_relative_to_output=get_import_path_relative_to_output(model.path, output_path),
        )
        for type_name, model in models.items()
    }


def build_context(context: ContextConfig | None, output_path: Path) -> ContextDefinition | None:
    if context is None:
        return None
    return ContextDefinition(
        interface_name=context.name,
        context_path=get_import_path_relative_to_output(context.path, output_path),
    )

from pathlib import Path

from flowgen import log
from flowgen.config import ProjectConfig, build_context, build_model_map
from flowgen.models import GenerateArgs
from flowgen.source import SchemaSource, extract_types, get_operation_type_names


def build_generate_args(source: SchemaSource, config: ProjectConfig, output: Path) -> GenerateArgs:
    """
    Assemble the generation arguments for a loaded schema and a project config.

    Args:
        source: The loaded schema and its type declaration order
        config: The project configuration, with paths already resolved
        output: The file the generated code will be written to

    Returns:
        GenerateArgs: Input for the Flow generator
    """
    types, enums = extract_types(source.schema, source.type_names)
    model_map = build_model_map(config.models, output)
    log.debug(f"Mapped {len(model_map)} models")

    return GenerateArgs(
        types=types,
        enums=enums,
        model_map=model_map,
        context=build_context(config.context, output),
        operation_types=get_operation_type_names(source.schema),
        formatter_options=config.formatter,
    )

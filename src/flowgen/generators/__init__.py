"""Flow resolver type generator for flowgen."""

from .flow import FlowGenerator, generate, generate_code
from .formatter import PrettierFormatter, format_code

__all__ = ["FlowGenerator", "PrettierFormatter", "format_code", "generate", "generate_code"]

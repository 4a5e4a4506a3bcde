import json
import subprocess
from typing import Protocol

from flowgen import log
from flowgen.errors import FormatError
from flowgen.models import FormatterOptions


class Formatter(Protocol):
    def format(self, code: str, options: FormatterOptions) -> str:
        """Return the formatted code or raise FormatError."""
        ...


class PrettierFormatter:
    """Formats Flow code with the Prettier command line."""

    parser = "flow"

    def build_command(self, options: FormatterOptions) -> list[str]:
        cmd = [*options.command, "--parser", self.parser]
        cmd += ["--print-width", str(options.print_width), "--tab-width", str(options.tab_width)]
        cmd += ["--trailing-comma", options.trailing_comma.value]
        if options.use_tabs:
            cmd.append("--use-tabs")
        if not options.semi:
            cmd.append("--no-semi")
        if options.single_quote:
            cmd.append("--single-quote")
        if not options.bracket_spacing:
            cmd.append("--no-bracket-spacing")
        return cmd

    def format(self, code: str, options: FormatterOptions) -> str:
        cmd = self.build_command(options)
        log.debug(f"Running command: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise FormatError(f"Could not run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.strip() if result.stderr else ""
            raise FormatError(stderr or f"{cmd[0]} exited with return code {result.returncode}")
        return result.stdout


def serialize_error(error: Exception) -> str:
    return json.dumps({"type": type(error).__name__, "message": str(error)})


def format_code(code: str, options: FormatterOptions | None = None, formatter: Formatter | None = None) -> str:
    """
    Format generated code, falling back to the unformatted code on failure.

    A formatting failure usually means the generated code has a syntax error.
    It is reported as a warning and never raised, so a run always produces
    output.

    Args:
        code: The generated code
        options: Formatter options, defaults when not given
        formatter: The formatter to run, Prettier when not given

    Returns:
        str: The formatted code, or ``code`` unchanged if formatting failed
    """
    options = options or FormatterOptions()
    formatter = formatter or PrettierFormatter()
    try:
        return formatter.format(code, options)
    except Exception as e:
        log.warning(
            "There is a syntax error in generated code, unformatted code printed, "
            f"error: {serialize_error(e)}"
        )
        return code

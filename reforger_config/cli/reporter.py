"""
Reporter for validation results.

Formats parse results for operators (console) or for machines (JSON). All
output goes to stdout through click so that logs on stderr never mix in.
"""

import json
from typing import Any

import click

from ..models.scenario import ScenarioMetadata
from ..parser.issues import ParseResult, ParserError, ParserWarning


class Reporter:
    """
    Formats and displays validation results.
    """

    def __init__(self, use_colors: bool = True):
        """
        Initialize the reporter.

        Args:
            use_colors: Whether to use ANSI color codes
        """
        self.use_colors = use_colors

    def _style(self, text: str, **styles: Any) -> str:
        return click.style(text, **styles) if self.use_colors else text

    def _echo(self, text: str = "") -> None:
        click.echo(text)

    def print_header(self, source: str):
        """Print validator header."""
        self._echo(self._style(f"Validating {source}", bold=True))
        self._echo("=" * 40)

    def print_error(self, message: str):
        """Print error message."""
        self._echo(f"{self._style('ERROR', fg='red', bold=True)} {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self._echo(f"{self._style('WARN ', fg='yellow', bold=True)} {message}")

    def print_success(self, message: str):
        """Print success message."""
        self._echo(f"{self._style('OK   ', fg='green', bold=True)} {message}")

    def format_error(self, error: ParserError) -> str:
        """Format one validation error as a single line."""
        line = f"[{error.type.value}] {error.message}"
        if error.field:
            line = f"{error.field}: {line}"
        if error.valid_range:
            line += f" (valid: {error.valid_range})"
        return line

    def format_warning(self, warning: ParserWarning) -> str:
        """Format one warning as a single line."""
        line = f"[{warning.type.value}] {warning.message}"
        if warning.field:
            line = f"{warning.field}: {line}"
        if warning.recommended_value is not None:
            line += f" (recommended: {warning.recommended_value})"
        return line

    def print_structural_errors(self, errors: list[str]):
        """Print plain-text structural errors."""
        if errors:
            self._echo("\nStructural errors:")
            for message in errors:
                self.print_error(message)

    def print_validation_errors(self, errors: list[ParserError]):
        """Print typed validation errors."""
        if errors:
            self._echo("\nValidation errors:")
            for error in errors:
                self.print_error(self.format_error(error))

    def print_validation_warnings(self, warnings: list[ParserWarning]):
        """Print validation warnings."""
        if warnings:
            self._echo("\nWarnings:")
            for warning in warnings:
                self.print_warning(self.format_warning(warning))

    def print_summary(self, result: ParseResult):
        """Print validation summary with counts."""
        self._echo("\n=== Validation Summary ===")
        self._echo(f"Structural errors: {len(result.errors)}")
        self._echo(f"Validation errors: {len(result.validation_errors)}")
        self._echo(f"Warnings: {len(result.warnings)}")

        if result.success:
            self.print_success("Configuration is valid.")
        else:
            self.print_error("Configuration is not deployable.")

    def print_result(self, result: ParseResult, source: str):
        """Print a full console report for one configuration."""
        self.print_header(source)
        self.print_structural_errors(result.errors)
        self.print_validation_errors(result.validation_errors)
        self.print_validation_warnings(result.warnings)
        self.print_summary(result)

    def generate_json_output(self, result: ParseResult, source: str | None = None) -> str:
        """Generate JSON output for machine consumption."""
        payload = result.to_dict()
        payload.pop("data", None)
        output: dict[str, Any] = {"file": source} if source else {}
        output.update(payload)
        output["summary"] = {
            "errors": len(result.errors),
            "validationErrors": len(result.validation_errors),
            "warnings": len(result.warnings),
        }
        return json.dumps(output, indent=2)

    def print_scenarios(self, scenarios: list[ScenarioMetadata]):
        """Print the official scenario catalogue."""
        width = max((len(item.code) for item in scenarios), default=0)
        for item in scenarios:
            code = self._style(item.code.ljust(width), fg="cyan")
            self._echo(f"{code}  {item.display_name:<26} {item.scenario}")

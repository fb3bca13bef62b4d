"""
reforger-config command-line interface.

    reforger-config validate server.json
    reforger-config validate server.json --format json --ignore-warning EMPTY_ADMIN_PASSWORD
    reforger-config create --yes --name "My Server" --output server.json
    reforger-config extract mods server.json mods.csv
    reforger-config scenarios
"""

import json
from pathlib import Path

import click
from pydantic import ValidationError

from ..config import AppConfig, get_config
from ..exceptions import ConfigFileError, ErrorContext, ReforgerConfigError, format_error
from ..io.files import (
    ContentFormat,
    format_from_extension,
    load_config_file,
    parse_format,
    read_config_text,
    save_config_file,
    serialize_config,
)
from ..io.mod_lists import extract_mods, format_mod_list
from ..logging_config import (
    VALID_LEVELS,
    bind_validation_context,
    clear_validation_context,
    configure_logging,
    get_logger,
)
from ..models.scenario import list_scenarios
from ..parser import parse
from ..parser.issues import ParserErrorType, ParserWarningType
from .reporter import Reporter
from .wizard import WizardAnswers, build_config, prompt_for_answers, split_mod_entries

logger = get_logger(__name__)

WARNING_CODES = [member.value for member in ParserWarningType]
ERROR_CODES = [member.value for member in ParserErrorType]


def _fail(ctx: click.Context, error: Exception) -> None:
    """Report a collaborator failure and exit 1, or re-raise in debug mode."""
    if ctx.obj.get("debug"):
        raise error
    click.echo(f"Error: {format_error(error)}", err=True)
    ctx.exit(1)


@click.group()
@click.option("--debug", is_flag=True, help="Debug logging and full tracebacks")
@click.option(
    "--log-level",
    type=click.Choice(VALID_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (defaults to LOGGING_LEVEL)",
)
@click.version_option(package_name="reforger-config")
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_level: str | None):
    """Validate and create Arma Reforger dedicated server configurations."""
    try:
        settings = get_config()
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings: {e}") from e

    level = "DEBUG" if debug else (log_level or settings.logging.level)
    configure_logging(level, settings.logging.format, force=True)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("config_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--format", "output_format", type=click.Choice(["console", "json"]), default="console")
@click.option(
    "--ignore-warning",
    "ignore_warnings",
    multiple=True,
    type=click.Choice(WARNING_CODES, case_sensitive=False),
    help="Warning kind to suppress (repeatable)",
)
@click.option(
    "--ignore-error",
    "ignore_errors",
    multiple=True,
    type=click.Choice(ERROR_CODES, case_sensitive=False),
    help="Validation error kind to suppress (repeatable)",
)
@click.option("--no-colors", is_flag=True, help="Disable colored output")
@click.pass_context
def validate(
    ctx: click.Context,
    config_file: Path,
    output_format: str,
    ignore_warnings: tuple[str, ...],
    ignore_errors: tuple[str, ...],
    no_colors: bool,
):
    """
    Validate an existing server configuration file.

    Exits 0 when the configuration is deployable (warnings allowed) and 1
    when it has structural or validation errors.
    """
    settings: AppConfig = ctx.obj["settings"]
    reporter = Reporter(use_colors=not no_colors)

    bind_validation_context(config_file=str(config_file))
    try:
        if format_from_extension(config_file) == ContentFormat.YAML:
            raw = load_config_file(config_file)
        else:
            # The engine reports undecodable JSON itself
            raw = read_config_text(config_file)

        result = parse(
            raw,
            validate=settings.validation.enabled,
            ignore_warnings=[*settings.validation.ignore_warnings, *ignore_warnings],
            ignore_errors=[*settings.validation.ignore_errors, *ignore_errors],
        )
    except ReforgerConfigError as e:
        _fail(ctx, e)
        return
    finally:
        clear_validation_context()

    if output_format == "json":
        click.echo(reporter.generate_json_output(result, str(config_file)))
    else:
        reporter.print_result(result, str(config_file))

    logger.debug("Validation finished", success=result.success)
    ctx.exit(0 if result.success else 1)


@cli.command()
@click.option("--name", "-n", help="Server name")
@click.option("--bind-address", "-b", help="Bind address")
@click.option("--public-address", "-p", help="Public address")
@click.option("--port", type=click.IntRange(1, 65535), help="Bind port")
@click.option("--scenario", "-s", help="Scenario code (see 'scenarios') or {ID}path")
@click.option("--output", "-o", help="Output file path")
@click.option("--mission-name", help="Mission name")
@click.option("--mission-author", help="Mission author")
@click.option("--save-file", help="Save file name")
@click.option("--mods", help="Comma-separated mod ids or workshop URLs")
@click.option("--mod-list-file", type=click.Path(dir_okay=False), help="Mod list file (JSON, YAML, CSV or text)")
@click.option("--cross-platform/--no-cross-platform", default=True, help="Accept console players")
@click.option("--game-password", help="Password required to join")
@click.option("--admin-password", help="In-game admin password")
@click.option("--rcon-password", help="Remote console password (empty disables RCON)")
@click.option("--yes", "-y", is_flag=True, help="Do not prompt; use options and defaults")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing output file")
@click.option("--validate", "run_validation", is_flag=True, help="Validate the configuration after writing it")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the configuration instead of writing a file")
@click.pass_context
def create(ctx: click.Context, **options):
    """Create a new server configuration, interactively or from options."""
    answers = WizardAnswers(cross_platform=options["cross_platform"])
    for key in (
        "name",
        "bind_address",
        "public_address",
        "port",
        "scenario",
        "output",
        "mission_name",
        "mission_author",
        "save_file",
        "mod_list_file",
        "game_password",
        "admin_password",
        "rcon_password",
    ):
        if options[key] is not None:
            setattr(answers, key, options[key])
    answers.mods = split_mod_entries(options["mods"])

    try:
        if not options["yes"]:
            answers = prompt_for_answers(answers)
        config = build_config(answers)

        if options["to_stdout"]:
            click.echo(serialize_config(config), nl=False)
            return

        output = Path(answers.output)
        overwrite = options["force"]
        if output.exists() and not overwrite and not options["yes"]:
            overwrite = click.confirm(f"{output} exists. Overwrite?", default=False)
            if not overwrite:
                click.echo("Aborted.")
                ctx.exit(1)
        written = save_config_file(config, output, overwrite=overwrite)
    except ReforgerConfigError as e:
        _fail(ctx, e)
        return

    click.echo(f"Configuration written to {written}")

    if options["run_validation"]:
        result = parse(config)
        Reporter().print_result(result, str(written))
        ctx.exit(0 if result.success else 1)


@cli.group()
def extract():
    """Extract information from server configuration files."""


@extract.command("mods")
@click.argument("config_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output")
@click.option(
    "--output-format",
    type=click.Choice(["json", "yaml", "yml", "csv", "text", "txt"], case_sensitive=False),
    default=None,
    help="Output format (defaults to the output file extension, or JSON)",
)
@click.pass_context
def extract_mods_command(ctx: click.Context, config_file: Path, output: str, output_format: str | None):
    """
    Extract the mod list from CONFIG_FILE into OUTPUT.

    Use "-" as OUTPUT to print to stdout.
    """
    if output_format:
        fmt = parse_format(output_format)
    else:
        fmt = (format_from_extension(output) if output != "-" else None) or ContentFormat.JSON

    try:
        mods = extract_mods(load_config_file(config_file))
        text = format_mod_list(mods, fmt)
        if output == "-":
            click.echo(text, nl=False)
            return
        try:
            Path(output).write_text(text, encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(
                f"Could not write mod list {output}: {e}",
                context=ErrorContext(file_path=output, operation="write"),
                file_path=output,
            ) from e
    except ReforgerConfigError as e:
        _fail(ctx, e)
        return

    click.echo(f"Extracted {len(mods)} mod(s) to {output}")


@cli.command()
@click.option("--format", "output_format", type=click.Choice(["console", "json"]), default="console")
@click.option("--no-colors", is_flag=True, help="Disable colored output")
def scenarios(output_format: str, no_colors: bool):
    """List official scenario codes."""
    catalogue = list_scenarios()
    if output_format == "json":
        payload = [
            {"code": item.code, "name": item.display_name, "scenarioId": str(item.scenario)} for item in catalogue
        ]
        click.echo(json.dumps(payload, indent=2))
        return
    Reporter(use_colors=not no_colors).print_scenarios(catalogue)


def main():
    """Console script entry point."""
    cli(obj={})  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()

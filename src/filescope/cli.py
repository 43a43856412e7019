"""Command line interface for filescope."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
import yaml
from click.core import ParameterSource
from rich.console import Console
from rich.syntax import Syntax

from filescope.cli_logging import configure_logging
from filescope.config import ConfigError, ConfigManager, flatten_for_env
from filescope.inspection import FileInspectionResult, FileInspector, InspectionPipeline
from filescope.inspection.discovery import PathExpander
from filescope.inspection.models import InspectionOutcome

console = Console()
err_console = Console(stderr=True)

_FOOTER = "----------------"
_VERBATIM = {"markup": False, "highlight": False, "emoji": False, "soft_wrap": True}


def _plain(message: str, *, quiet: bool = False) -> None:
    """Print a line verbatim (no markup or highlighting) unless quiet."""

    if quiet:
        return
    console.print(message, **_VERBATIM)


def _emit_error(message: str) -> None:
    """Print an error line to stderr; errors are never silenced."""

    err_console.print(message, style="red", **_VERBATIM)


def _emit_result(result: FileInspectionResult, *, show_sha256: bool, show_md5: bool) -> None:
    """Render one successful inspection in the classic block layout.

    Args:
        result: Inspection result to render.
        show_sha256: Whether to include the SHA-256 line.
        show_md5: Whether to include the MD5 line.
    """

    _plain(f"--- File: {result.path} ---")
    _plain(f"  Size: {result.size_display}")
    _plain(f"  Type: {result.content_type}")
    _plain(f"  Encoding: {result.encoding}")
    if show_sha256:
        _plain(f"  SHA256: {result.sha256}")
    if show_md5:
        _plain(f"  MD5: {result.md5}")
    _plain(_FOOTER + "\n")


def _emit_outcome(
    outcome: InspectionOutcome, *, show_sha256: bool, show_md5: bool, quiet: bool
) -> None:
    if outcome.result is not None:
        if not quiet:
            _emit_result(outcome.result, show_sha256=show_sha256, show_md5=show_md5)
        return
    _plain(f"--- File: {outcome.path} ---", quiet=quiet)
    _emit_error(f"  Error processing file {outcome.path}: {outcome.error}")
    _plain(_FOOTER + "\n", quiet=quiet)


def _json_payload(outcomes: list[InspectionOutcome]) -> dict[str, Any]:
    """Build the JSON document describing every outcome.

    Args:
        outcomes: Outcomes in traversal order.

    Returns:
        dict[str, Any]: JSON-serializable payload with files, errors, and counts.
    """

    files = [outcome.result.model_dump(mode="json") for outcome in outcomes if outcome.result]
    errors = [
        {"path": str(outcome.path), "kind": outcome.error_kind, "message": outcome.error}
        for outcome in outcomes
        if outcome.result is None
    ]
    return {
        "files": files,
        "errors": errors,
        "summary": {"inspected": len(files), "errors": len(errors)},
    }


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="filescope")
def cli() -> None:
    """filescope reports size, type, encoding, and checksums for files."""


@cli.command()
@click.argument("patterns", nargs=-1, required=True)
@click.option("-r", "--recursive", is_flag=True, help="Process directories recursively.")
@click.option("--sha/--no-sha", "show_sha256", default=False, help="Show SHA256 checksum.")
@click.option("--md5/--no-md5", "show_md5", default=False, help="Show MD5 checksum.")
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    help="Bytes per read; the first chunk is also the classification sample.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit JSON describing every file.")
@click.option("--quiet", is_flag=True, help="Suppress non-error output.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def inspect(
    ctx: click.Context,
    patterns: tuple[str, ...],
    recursive: bool,
    show_sha256: bool,
    show_md5: bool,
    chunk_size: int | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Inspect every file matched by PATTERNS (paths or glob patterns).

    Args:
        ctx: Click context used for parameter source inspection.
        patterns: File paths, directories, or glob patterns to inspect.
        recursive: Whether to descend into subdirectories.
        show_sha256: Whether to print SHA-256 digests.
        show_md5: Whether to print MD5 digests.
        chunk_size: Optional override for the read size.
        json_output: If True, emit a single JSON document.
        quiet: If True, only errors are printed.
        verbose: If True, log at DEBUG level.

    Raises:
        click.ClickException: If configuration loading or validation fails.
    """

    overrides: dict[str, Any] = {}
    if chunk_size is not None:
        overrides["inspection.chunk_size"] = chunk_size
    if verbose:
        overrides["logging.level"] = "DEBUG"

    try:
        config = ConfigManager().load(cli_overrides=overrides, ensure_file=False)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    configure_logging(config.logging.level)

    if ctx.get_parameter_source("show_sha256") != ParameterSource.COMMANDLINE:
        show_sha256 = config.output.show_sha256
    if ctx.get_parameter_source("show_md5") != ParameterSource.COMMANDLINE:
        show_md5 = config.output.show_md5
    if ctx.get_parameter_source("quiet") != ParameterSource.COMMANDLINE:
        quiet = config.output.quiet_default

    if json_output and quiet and ctx.get_parameter_source("quiet") == ParameterSource.COMMANDLINE:
        raise click.ClickException("--json cannot be combined with --quiet.")

    text_quiet = quiet and not json_output

    def _announce_directory(directory: Path) -> None:
        if not json_output:
            _plain(f"Processing directory: {directory}\n", quiet=text_quiet)

    pipeline = InspectionPipeline(
        PathExpander(
            recursive=recursive or config.traversal.recursive,
            include_hidden=config.traversal.include_hidden,
            follow_symlinks=config.traversal.follow_symlinks,
        ),
        FileInspector(
            chunk_size=config.inspection.chunk_size,
            fallback_label=config.inspection.fallback_label,
        ),
        on_directory=_announce_directory,
    )

    outcomes: list[InspectionOutcome] = []
    for outcome in pipeline.iter_outcomes(patterns):
        outcomes.append(outcome)
        if not json_output:
            _emit_outcome(
                outcome, show_sha256=show_sha256, show_md5=show_md5, quiet=text_quiet
            )

    if json_output:
        console.print_json(data=_json_payload(outcomes))
        return

    failures = sum(1 for outcome in outcomes if outcome.result is None)
    _plain(
        f"Inspection summary: inspected={len(outcomes) - failures}, errors={failures}.",
        quiet=text_quiet,
    )


@cli.group()
def config() -> None:
    """Manage filescope configuration files and overrides."""


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
@click.option(
    "--env",
    "as_env",
    is_flag=True,
    help="Print the effective configuration as FILESCOPE__ environment variables.",
)
def config_view(no_env: bool, as_env: bool) -> None:
    """Display the effective configuration after applying precedence rules.

    Args:
        no_env: If True, ignore environment-derived overrides.
        as_env: If True, print ``NAME=value`` lines instead of YAML.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    manager = ConfigManager()
    try:
        config = manager.load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_env:
        for name, value in flatten_for_env(config).items():
            _plain(f"{name}={value}")
        return

    yaml_text = yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Args:
        key: Dotted path describing the configuration field to update.
        value: YAML-literal value to write into the configuration file.

    Raises:
        click.ClickException: If parsing or validation fails.
    """
    manager = ConfigManager()
    manager.ensure_exists()

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    try:
        changed = manager.set_value(key, parsed_value)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if not changed:
        console.print("[yellow]No changes applied; value already up to date.[/yellow]")
        return
    console.print(f"Updated {key} = {parsed_value!r}.", style="green", markup=False)


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()

"""
aifile — CLI entrypoint.

Usage:
    aifile --help
    aifile --dir web/src
    aifile --dir web/src --filename ai.ts --template templates/ai.ts
    python -m aifile.main --json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from aifile import __version__
from aifile.core.generators.ai_stub import DEFAULT_FILENAME
from aifile.core.observability.logging_config import setup_logging

logger = logging.getLogger(__name__)

_OUTCOME_STYLE = {
    "already_exists": ("ℹ️ ", "cyan"),
    "copied_from_template": ("📋", "green"),
    "created_default": ("📝", "green"),
}


def _missing_value(ctx: click.Context, flag: str) -> None:
    """Report a flag given without its value, show usage, exit 1."""
    click.secho(f"Error: Missing value for {flag}", fg="red", err=True)
    click.echo(ctx.get_help())
    ctx.exit(1)


class EnsureCommand(click.Command):
    """Command whose value flags must be followed by a real value.

    click happily takes "--template" as the value of "--dir", so the raw
    arguments are walked in order first.  Unknown arguments seen before a
    valueless flag are warned about, then the run exits 1 with usage.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        unknown, missing, args = self._scan_args(ctx, args)
        if missing is not None:
            setup_logging()
            for arg in unknown:
                logger.warning("Unknown argument: %s", arg)
            _missing_value(ctx, missing)
        return super().parse_args(ctx, args)

    def _scan_args(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[list[str], str | None, list[str]]:
        """Return unknown arguments, the first flag missing its value, and
        the arguments left for click to parse.

        Scanning stops at an eager option (help, version), which wins;
        anything after it is dropped.
        """
        known: set[str] = set()
        takes_value: set[str] = set()
        eager: set[str] = set()
        for param in self.get_params(ctx):
            if not isinstance(param, click.Option):
                continue
            names = param.opts + param.secondary_opts
            known.update(names)
            if param.is_eager:
                eager.update(names)
            elif not param.is_flag and not param.count:
                takes_value.update(names)

        unknown: list[str] = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in eager:
                return unknown, None, args[: i + 1]
            if arg in takes_value:
                value = args[i + 1] if i + 1 < len(args) else ""
                if not value or value.startswith("-"):
                    return unknown, arg, args
                i += 2
                continue
            if arg.split("=", 1)[0] not in known:
                unknown.append(arg)
            i += 1
        return unknown, None, args


@click.command(
    "aifile",
    cls=EnsureCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
@click.version_option(version=__version__, prog_name="aifile")
@click.option(
    "--dir",
    "directory",
    default=None,
    help="Target directory (default: current directory).",
)
@click.option(
    "--filename",
    default=None,
    help=f"Filename to create (default: {DEFAULT_FILENAME}).",
)
@click.option(
    "--template",
    default=None,
    help="Path to a template file to copy.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    help="YAML file with defaults for dir, filename and template.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option("--log-file", default=None, help="Also log to this file.")
@click.option(
    "--log-file-level",
    default=None,
    help="Level for --log-file (default: same as the console).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    directory: str | None,
    filename: str | None,
    template: str | None,
    config_path: str | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
    log_file: str | None,
    log_file_level: str | None,
) -> None:
    """Ensure a project directory contains its AI helper file.

    Creates the file from --template when given, otherwise writes a
    stub whose fetchAIResponse() throws "not implemented".  An existing
    file is never touched.
    """
    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = "WARNING"
    setup_logging(level=level, log_file=log_file, log_file_level=log_file_level)

    for arg in ctx.args:
        logger.warning("Unknown argument: %s", arg)

    from aifile.core.config.loader import ConfigError, load_settings
    from aifile.core.models.request import Request
    from aifile.core.use_cases.ensure_file import run_ensure

    if config_path:
        try:
            settings = load_settings(Path(config_path))
        except ConfigError as e:
            click.secho(f"Error: {e}", fg="red", err=True)
            sys.exit(1)
        directory = directory or settings.dir
        filename = filename or settings.filename
        template = template or settings.template

    request = Request(
        directory=Path(directory or "."),
        filename=filename or DEFAULT_FILENAME,
        template_path=Path(template) if template else None,
    )
    result = run_ensure(request)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"Error: {result.error}", fg="red", err=True)
        sys.exit(1)

    if quiet:
        return

    icon, color = _OUTCOME_STYLE[result.outcome.value]
    click.secho(f"{icon} {result.message}", fg=color)


if __name__ == "__main__":
    cli()

"""pathlang CLI entrypoint.

Command-line interface for resolving file paths to languages.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from pathlang.core.languages import LanguageSpec
    from pathlang.domain.config import PathlangConfig

from pathlang.core.errors import PathlangCliError, parse_line_range
from pathlang.core.languages import (
    LANGUAGE_REGISTRY,
    PLAINTEXT_HIGHLIGHTER,
    language_from_path,
    monaco_language_from_path,
    require_language_spec,
)
from pathlang.core.lsp import lsp_language_id
from pathlang.core.presentation import (
    format_snippet,
    render_plain,
    render_syntax_highlighted,
)
from pathlang.domain.exceptions import PathlangDomainError
from pathlang.shared.config_io import (
    CONFIG_FILENAME,
    create_default_config_file,
    get_local_config_dir,
)
from pathlang.version import __version__

logger = logging.getLogger(__name__)


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    PathlangCliError exceptions are re-raised to use their built-in
    formatting. Domain errors and I/O errors are converted to
    PathlangCliError; anything else is reported as unexpected, with a
    traceback in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PathlangCliError:
                raise
            except PathlangDomainError as e:
                raise PathlangCliError(e.message, hint=e.hint) from e
            except OSError as e:
                raise PathlangCliError(
                    f"I/O error: {e}",
                    hint="Check that the file exists and is readable",
                ) from e
            except ValueError as e:
                raise PathlangCliError(
                    str(e),
                    hint="Run with --verbose for more details",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise PathlangCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _load_config(config_dir: Path) -> PathlangConfig:
    """Load configuration for the given .pathlang directory.

    Args:
        config_dir: Path to the .pathlang directory (may not exist).

    Returns:
        PathlangConfig with merged global and local settings.
    """
    from pathlang.adapters.config.toml_config_provider import TomlConfigProvider

    return TomlConfigProvider().load(config_dir)


def _get_config(ctx: click.Context) -> PathlangConfig:
    """Load config once per invocation and cache it on the context."""
    if "config" not in ctx.obj:
        ctx.obj["config"] = _load_config(get_local_config_dir(Path.cwd()))
    return ctx.obj["config"]


def _use_json(ctx: click.Context, json_flag: bool | None) -> bool:
    """Resolve the output format from the --json flag or the config default."""
    if json_flag is not None:
        return json_flag
    return _get_config(ctx).output.format == "json"


def _use_color(config: PathlangConfig) -> bool:
    """Decide whether ANSI colors should be written to stdout."""
    if not config.display.syntax_highlighting:
        return False
    scheme = config.display.color_scheme
    if scheme == "always":
        return True
    if scheme == "never":
        return False
    return click.get_text_stream("stdout").isatty()


def _spec_to_dict(spec: LanguageSpec) -> dict:
    return {
        "id": spec.id,
        "extensions": list(spec.extensions),
        "filenames": list(spec.filenames) if spec.filenames else [],
        "monaco": spec.monaco,
    }


@click.group()
@click.version_option(version=__version__, prog_name="pathlang")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """pathlang - Resolve file paths to languages and highlighters.

    Maps file names and extensions to language ids and editor
    highlighter ids using a fixed language registry.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing .pathlang/config.toml.",
)
@click.pass_context
@handle_cli_errors("init")
def init(ctx: click.Context, force: bool) -> None:
    """Create .pathlang/config.toml in the current directory."""
    config_path = get_local_config_dir(Path.cwd()) / CONFIG_FILENAME
    if config_path.exists() and not force:
        raise PathlangCliError(
            f"Config already exists at {config_path}",
            hint="Use 'pathlang init --force' to overwrite it",
        )

    create_default_config_file(config_path)
    logger.debug("Wrote default config to %s", config_path)
    if not ctx.obj.get("quiet", False):
        click.echo(f"✓ Created {config_path}")


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--json/--no-json",
    "json_output",
    default=None,
    help="Output results as JSON (default from output.format).",
)
@click.pass_context
@handle_cli_errors("detect")
def detect(ctx: click.Context, paths: tuple[str, ...], json_output: bool | None) -> None:
    """Resolve the language and highlighter for each PATH.

    Paths are not read or required to exist; only the name is inspected.
    """
    results = [
        {
            "path": path,
            "language": language_from_path(path),
            "highlighter": monaco_language_from_path(path),
            "lsp": lsp_language_id(path),
        }
        for path in paths
    ]

    if _use_json(ctx, json_output):
        click.echo(json.dumps(results, indent=2))
        return

    for item in results:
        language = item["language"] or "-"
        click.echo(f"{item['path']}\t{language}\t{item['highlighter']}")


@cli.command()
@click.option(
    "--json/--no-json",
    "json_output",
    default=None,
    help="Output the registry as JSON (default from output.format).",
)
@click.pass_context
@handle_cli_errors("languages")
def languages(ctx: click.Context, json_output: bool | None) -> None:
    """List registered languages in registry order."""
    if _use_json(ctx, json_output):
        click.echo(json.dumps([_spec_to_dict(spec) for spec in LANGUAGE_REGISTRY], indent=2))
        return

    width = max(len(spec.id) for spec in LANGUAGE_REGISTRY)
    for spec in LANGUAGE_REGISTRY:
        matches = [f".{ext}" for ext in spec.extensions] + list(spec.filenames or ())
        highlighter = spec.monaco or PLAINTEXT_HIGHLIGHTER
        click.echo(f"{spec.id:<{width}}  {', '.join(matches)}  -> {highlighter}")


@cli.command()
@click.argument("language_id")
@click.option(
    "--json/--no-json",
    "json_output",
    default=None,
    help="Output as JSON (default from output.format).",
)
@click.pass_context
@handle_cli_errors("show")
def show(ctx: click.Context, language_id: str, json_output: bool | None) -> None:
    """Show the registry entry for LANGUAGE_ID."""
    spec = require_language_spec(language_id)

    if _use_json(ctx, json_output):
        click.echo(json.dumps(_spec_to_dict(spec), indent=2))
        return

    click.echo(f"Language:    {spec.id}")
    click.echo(f"Extensions:  {', '.join(spec.extensions) or '(none)'}")
    click.echo(f"Filenames:   {', '.join(spec.filenames or ()) or '(none)'}")
    if spec.monaco:
        click.echo(f"Highlighter: {spec.monaco}")
    else:
        click.echo(f"Highlighter: {PLAINTEXT_HIGHLIGHTER} (default)")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--language",
    "-l",
    type=str,
    default=None,
    help="Language id to highlight as (default: resolved from FILE).",
)
@click.pass_context
@handle_cli_errors("cat")
def cat(ctx: click.Context, file: Path, language: str | None) -> None:
    """Print FILE with line numbers and syntax highlighting."""
    if language is not None:
        require_language_spec(language)

    config = _get_config(ctx)
    content = file.read_text(encoding="utf-8", errors="replace")
    path = file.as_posix()

    if _use_color(config):
        click.echo(render_syntax_highlighted(content, language=language, path=path), color=True)
    else:
        click.echo(render_plain(content))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--lines",
    "-L",
    "line_range",
    required=True,
    help="1-based line or range to include, e.g. '5' or '5-12'.",
)
@handle_cli_errors("snippet")
def snippet(file: Path, line_range: str) -> None:
    """Print a fenced reference snippet of lines from FILE."""
    start, end = parse_line_range(line_range)
    content = file.read_text(encoding="utf-8", errors="replace")
    click.echo(format_snippet(file.as_posix(), content, start, end))


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

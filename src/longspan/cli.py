"""Typer-based command line interface for building and comparing spans.

Every command builds its spans through the factory, so the same validation
applies as for library callers.  Predicate commands print ``true`` or
``false``.

Exit codes
----------
0 success
2 usage error (conflicting or missing options)
4 configuration error
5 span error (invalid argument or out of range)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .config import ConfigModel, load_config
from .core.base import LongSpan
from .core.factory import from_end, from_length
from .utils.errors import ConfigError, SpanError
from .utils.logging import configure_logging, get_logger
from .utils.spanfmt import span_to_string

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="longspan",
    help="Inspect int64 spans. Use 'longspan show' to build a span from start and end or length.",
)

logger = get_logger(__name__)

_CONFIG_HELP = "YAML config to override defaults"
_VERBOSE_HELP = "Log debug messages to stderr"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _setup(config_path: Path | None, verbose: bool) -> ConfigModel:
    """Load configuration and configure logging from it."""

    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    logger.debug("Loaded config (schema_version=%s)", cfg.schema_version)
    return cfg


def _build(start: int, end: int | None, length: int | None) -> LongSpan:
    """Build a span from ``end`` or ``length``; exactly one must be given."""

    if (end is None) == (length is None):
        _safe_exit(2, "Pass exactly one of --end or --length")
    try:
        if end is not None:
            return from_end(start, end)
        return from_length(start, length)  # type: ignore[arg-type]
    except SpanError as exc:
        _safe_exit(5, f"{type(exc).__name__}: {exc}")


def _render(span: LongSpan, cfg: ConfigModel) -> str:
    return span_to_string(
        span,
        empty_marker=cfg.display.empty_marker,
        qualified=cfg.display.qualified_names,
    )


def _echo_bool(value: bool) -> None:
    typer.echo("true" if value else "false")


@app.callback()
def main() -> None:
    """Entry point for the longspan command group."""
    pass


@app.command()
def show(
    start: int = typer.Option(..., "--start", help="First position of the span"),  # noqa: B008
    end: Optional[int] = typer.Option(  # noqa: B008
        None, "--end", help="Last position of the span"
    ),
    length: Optional[int] = typer.Option(  # noqa: B008
        None, "--length", help="Number of positions in the span"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help=_CONFIG_HELP
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=_VERBOSE_HELP),  # noqa: B008
) -> None:
    """Build a span and print its debug string, start, length and end."""

    cfg = _setup(config_path, verbose)
    span = _build(start, end, length)
    typer.echo(_render(span, cfg))
    typer.echo(f"start={span.start}")
    typer.echo(f"length={span.length}")
    typer.echo(f"end={span.end}")


@app.command()
def overlaps(
    start: int = typer.Option(..., "--start", help="First position of the span"),  # noqa: B008
    end: int = typer.Option(..., "--end", help="Last position of the span"),  # noqa: B008
    other_start: int = typer.Option(  # noqa: B008
        ..., "--other-start", help="First position of the other span"
    ),
    other_end: int = typer.Option(  # noqa: B008
        ..., "--other-end", help="Last position of the other span"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help=_CONFIG_HELP
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=_VERBOSE_HELP),  # noqa: B008
) -> None:
    """Print whether the two spans share any position."""

    cfg = _setup(config_path, verbose)
    span = _build(start, end, None)
    other = _build(other_start, other_end, None)
    logger.debug("overlaps %s %s", _render(span, cfg), _render(other, cfg))
    _echo_bool(span.overlaps(other))


@app.command()
def contains(
    start: int = typer.Option(..., "--start", help="First position of the span"),  # noqa: B008
    end: int = typer.Option(..., "--end", help="Last position of the span"),  # noqa: B008
    pos: Optional[int] = typer.Option(  # noqa: B008
        None, "--pos", help="Position to look for"
    ),
    other_start: Optional[int] = typer.Option(  # noqa: B008
        None, "--other-start", help="First position of the span to look for"
    ),
    other_end: Optional[int] = typer.Option(  # noqa: B008
        None, "--other-end", help="Last position of the span to look for"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help=_CONFIG_HELP
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=_VERBOSE_HELP),  # noqa: B008
) -> None:
    """Print whether the span contains a position or another span."""

    cfg = _setup(config_path, verbose)
    has_other = other_start is not None or other_end is not None
    if (pos is None) == (not has_other):
        _safe_exit(2, "Pass either --pos or both --other-start and --other-end")
    if has_other and (other_start is None or other_end is None):
        _safe_exit(2, "--other-start and --other-end must be given together")

    span = _build(start, end, None)
    if pos is not None:
        logger.debug("contains %s pos=%s", _render(span, cfg), pos)
        _echo_bool(span.contains(pos))
        return
    other = _build(other_start, other_end, None)  # type: ignore[arg-type]
    logger.debug("contains %s %s", _render(span, cfg), _render(other, cfg))
    _echo_bool(span.contains(other))

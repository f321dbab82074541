"""Typer-based command line interface.

The ``run`` command annotates a plain text document: read the input (a file or
standard input), clean and join its lines, build the configured engines,
annotate and render the result as JSON or tokenized text.  spaCy is imported
only when the statistical engine is selected.

Exit codes
----------
0 success
3 I/O error (missing reader/renderer, filesystem issues)
4 configuration error (invalid config, unsupported language, missing resources)
5 pipeline error (malformed spans or model failures while annotating)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .engines import build_annotator
from .io import get_extension, read_file, render, write_document
from .io.readers.txt_reader import read_stream
from .io.writers.txt_writer import write_text
from .preprocess.cleaner import join_lines
from .resources.prefixes import available_languages
from .utils.errors import ConfigurationError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="multitok",
    help="Sentence splitting and tokenization. Use 'multitok run' to annotate a text.",
)

_STDIO = "-"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _unescape(value: str) -> str:
    """Turn ``\\n`` and ``\\t`` typed on a shell into real characters."""

    return value.replace("\\n", "\n").replace("\\t", "\t")


def _apply_overrides(
    cfg: ConfigModel,
    *,
    language: str | None,
    engine: str | None,
    paragraph_delimiter: str | None,
) -> ConfigModel:
    """Return a validated copy of ``cfg`` with CLI overrides applied."""

    data = cfg.model_dump()
    if language is not None:
        data["language"] = language
    if engine is not None:
        data["engine"] = engine
    if paragraph_delimiter is not None:
        data["paragraph_delimiter"] = _unescape(paragraph_delimiter)
    return ConfigModel.model_validate(data)


def _read_input(in_path: Path | None, encoding: str) -> str:
    if in_path is None or str(in_path) == _STDIO:
        return read_stream(sys.stdin)
    return read_file(in_path, encoding=encoding)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the multitok command group."""
    pass


@app.command()
def languages() -> None:
    """List the languages that ship rule-based resources."""

    for code in available_languages():
        typer.echo(code)


@app.command()
def run(  # noqa: PLR0913
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in", "--input", help="Input .txt file; '-' or omitted reads stdin"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file (.json or .txt); omitted writes stdout"
    ),
    fmt: Optional[str] = typer.Option(  # noqa: B008
        None, "--format", help="Output format [json|txt]; defaults to the --out extension"
    ),
    language: Optional[str] = typer.Option(  # noqa: B008
        None, "--lang", help="Language code overriding the configuration"
    ),
    engine: Optional[str] = typer.Option(  # noqa: B008
        None, "--engine", help="Engine variant [rule|statistical]"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    paragraph_delimiter: Optional[str] = typer.Option(  # noqa: B008
        None, "--paragraph-delimiter", help="Paragraph delimiter; '\\n' escapes allowed"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit minimal progress messages to stderr"
    ),
) -> None:
    """Annotate the input text and write the rendered document."""

    # Load configuration
    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg,
            language=language,
            engine=engine,
            paragraph_delimiter=paragraph_delimiter,
        )
    except (ValidationError, ConfigurationError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("INFO" if verbose else cfg.logging.level)
    if verbose:
        typer.echo(f"Loaded config (language={cfg.language}, engine={cfg.engine})", err=True)

    # Build engines
    try:
        with Timing() as t_build:
            annotator = build_annotator(cfg)
    except (ConfigurationError, ValueError) as exc:
        _safe_exit(4, str(exc))
    if verbose:
        typer.echo(f"Built engines in {t_build.ms:.1f} ms", err=True)

    # Read input
    try:
        raw = _read_input(in_path, encoding_in)
    except (UnsupportedFormatError, OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))
    text = join_lines(raw.splitlines())
    if verbose:
        typer.echo(f"Read {len(raw)} chars", err=True)

    # Annotate
    try:
        with Timing() as t_annotate:
            result = annotator.annotate(text)
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        typer.echo(
            f"Annotated {sum(1 for _ in result.sentences())} sentences, "
            f"{sum(1 for _ in result.tokens())} tokens in {t_annotate.ms:.1f} ms",
            err=True,
        )

    # Write output
    to_stdout = out_path is None or str(out_path) == _STDIO
    try:
        if fmt is None and not to_stdout:
            write_document(out_path, result)  # type: ignore[arg-type]
        else:
            fmt_name = fmt or "json"
            document = render(result, fmt_name)
            if to_stdout:
                typer.echo(document, nl=False)
            else:
                write_text(out_path, document)  # type: ignore[arg-type]
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose and not to_stdout:
        typer.echo(f"Wrote {get_extension(out_path).lstrip('.')} output", err=True)  # type: ignore[arg-type]

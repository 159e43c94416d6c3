"""riskcard CLI — Typer application with evaluate, decode, and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console

from riskcard import __version__

app = typer.Typer(
    name="riskcard",
    help="Score a repository's security posture from probe findings.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route structlog to stderr; quiet unless --verbose."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _fail(prefix: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{prefix}:[/bold red] {exc}")
    return typer.Exit(code=2)


# ── evaluate ──────────────────────────────────────────────────────────────────


@app.command()
def evaluate(
    findings: Path = typer.Argument(..., exists=True, dir_okay=False, help="Findings JSON file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .riskcard.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: v1 | v2 | terminal"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write result to file"),
    show_details: bool = typer.Option(False, "--show-details", help="Include check details"),
    annotations: bool = typer.Option(False, "--annotations", help="Include maintainer annotations (v2)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Detail level: debug | info | warn | error"),
    docs: Optional[str] = typer.Option(None, "--docs", help="Path to a checks documentation YAML"),
    repo_config: Optional[str] = typer.Option(None, "--repo-config", help="Path to the repository's riskcard.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Evaluate all checks over FINDINGS and encode the result."""
    from riskcard.config.annotations import load_annotations
    from riskcard.config.loader import ConfigError, load_config
    from riskcard.config.schema import LOG_LEVEL_ORDER
    from riskcard.docs.catalog import load_catalog
    from riskcard.engine import analyze
    from riskcard.errors import RiskcardError
    from riskcard.findings.loader import load_findings
    from riskcard.output import json_v1, json_v2, terminal

    _configure_logging(verbose)

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
        repo_annotations = load_annotations(Path(repo_config) if repo_config else None)
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc

    # --- CLI overrides ---
    if format:
        if format not in ("v1", "v2", "terminal"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if log_level:
        if log_level not in LOG_LEVEL_ORDER:
            console.print(f"[bold red]Invalid log level:[/bold red] {log_level}")
            raise typer.Exit(code=2)
        cfg.output.log_level = log_level  # type: ignore[assignment]
    if show_details:
        cfg.output.show_details = True
    if annotations:
        cfg.output.show_annotations = True
    if docs:
        cfg.docs.catalog = docs

    # --- Evaluate and encode ---
    try:
        document = load_findings(findings)
        catalog = load_catalog(Path(cfg.docs.catalog) if cfg.docs.catalog else None)
        result = analyze(document, cfg, repo_annotations)

        if cfg.output.format == "terminal":
            terminal.render(
                result,
                catalog,
                show_details=cfg.output.show_details,
                log_level=cfg.output.log_level,
            )
            report_text = None
        elif cfg.output.format == "v1":
            report_text = json_v1.render(
                result,
                show_details=cfg.output.show_details,
                log_level=cfg.output.log_level,
            )
        else:
            report_text = json_v2.render(
                result,
                catalog,
                json_v2.JSON2Options(
                    log_level=cfg.output.log_level,
                    details=cfg.output.show_details,
                    annotations=cfg.output.show_annotations,
                ),
            )

        # --- Emit ---
        if report_text is not None:
            if output:
                Path(output).write_text(report_text, encoding="utf-8")
                if verbose:
                    console.print(f"[dim]Result written to {output}[/dim]")
            else:
                sys.stdout.write(report_text)
    except (RiskcardError, OSError) as exc:
        raise _fail("Error", exc) from exc

    raise typer.Exit(code=0)


# ── decode ────────────────────────────────────────────────────────────────────


@app.command()
def decode(
    result_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="V2 result JSON"),
    format: str = typer.Option("terminal", "--format", "-f", help="Output format: terminal | v2"),
    docs: Optional[str] = typer.Option(None, "--docs", help="Path to a checks documentation YAML"),
    show_details: bool = typer.Option(False, "--show-details", help="Show decoded details"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Decode a stored V2 result (experimental) and display or re-encode it."""
    from riskcard.docs.catalog import load_catalog
    from riskcard.errors import RiskcardError
    from riskcard.output import json_v2, terminal

    _configure_logging(verbose)

    if format not in ("terminal", "v2"):
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    try:
        with open(result_file, encoding="utf-8") as f:
            result, score = json_v2.experimental_from_json2(f)
        if format == "terminal":
            catalog = load_catalog(Path(docs)) if docs else None
            terminal.render(
                result,
                catalog,
                aggregate=score,
                show_details=show_details,
                log_level="debug",
            )
        else:
            catalog = load_catalog(Path(docs) if docs else None)
            sys.stdout.write(
                json_v2.render(result, catalog, json_v2.JSON2Options(details=True, log_level="debug"))
            )
    except (RiskcardError, OSError) as exc:
        raise _fail("Error", exc) from exc


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .riskcard.toml in the current directory."""
    from riskcard.config.defaults import DEFAULT_TOML
    from riskcard.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"riskcard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """riskcard — Score a repository's security posture from probe findings."""

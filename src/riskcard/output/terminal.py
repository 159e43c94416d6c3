"""Rich terminal reporter — score table with documentation links."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from riskcard.config.schema import DEFAULT_LOG_LEVEL
from riskcard.docs.models import DocLookup
from riskcard.result.aggregator import format_score, resolve_doc
from riskcard.result.details import detail_to_string
from riskcard.result.models import Result


def _score_pill(score: float) -> Text:
    if score < 0:
        return Text(" ? ", style="bold black on bright_black")
    if score >= 8:
        style = "bold white on green"
    elif score >= 5:
        style = "bold black on yellow"
    else:
        style = "bold white on red"
    text = format_score(score) if isinstance(score, float) else str(score)
    return Text(f" {text} ", style=style)


def render(
    result: Result,
    docs: Optional[DocLookup] = None,
    *,
    aggregate: Optional[float] = None,
    show_details: bool = False,
    log_level: str = DEFAULT_LOG_LEVEL,
    console: Optional[Console] = None,
) -> None:
    """Print a result to the terminal using Rich.

    When *aggregate* is not given it is computed from *docs*.
    """
    console = console or Console(stderr=True)

    if aggregate is None and docs is not None:
        aggregate = result.aggregate_score(docs)

    console.print()
    console.print(f"[bold]Repo:[/bold]     {result.repo.name} [dim]{result.repo.commit_sha}[/dim]")
    console.print(f"[bold]Analyzed:[/bold] {result.date.isoformat()}")
    if aggregate is not None:
        console.print(Text("Aggregate score:", style="bold"), _score_pill(aggregate), Text("/ 10", style="dim"))

    table = Table(
        title="Check Results",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Score", justify="center", width=7)
    table.add_column("Name", style="cyan", min_width=18)
    table.add_column("Reason")
    if show_details:
        table.add_column("Details")
    if docs is not None:
        table.add_column("Documentation", style="magenta")

    for check in result.checks:
        row = [_score_pill(check.score), check.name, check.reason]
        if show_details:
            rendered = [detail_to_string(d, log_level) for d in check.details]
            row.append("\n".join(m for m in rendered if m))
        if docs is not None:
            doc = resolve_doc(docs, check.name)
            row.append(doc.get_documentation_url(result.tool.commit_sha))
        table.add_row(*row)

    console.print(table)
    if result.metadata:
        console.print(f"[dim]Metadata:[/dim] {', '.join(result.metadata)}")

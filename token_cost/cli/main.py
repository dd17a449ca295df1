"""
CLI interface for Token Cost.

Estimates token counts and input costs of a text across LLM tokenizers.
"""

import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from token_cost.core.exceptions import TokenCostError
from token_cost.core.registry import DEFAULT_TOKENIZERS
from token_cost.core.text_input import read_input
from token_cost.core.token_counter import TokenStatsRow, calc_all

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="File to tokenize. Reads standard input when omitted.",
        show_default=False
    )
):
    """
    Estimate token counts and costs of a text for several LLM tokenizers.

    Tokenizers are downloaded from the Hugging Face Hub on first use.
    """
    _configure_logging()
    try:
        text = read_input(path)
        rows = _tokenize_with_progress(text)
    except TokenCostError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    console.print(_build_table(rows))
    sys.exit(EXIT_CODE_PASS)


def _configure_logging() -> None:
    """Route warnings to stderr without disturbing the table on stdout."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)]
    )


def _tokenize_with_progress(text: str) -> List[TokenStatsRow]:
    """Run every default tokenizer while drawing a progress bar on stderr."""
    with Progress(
        TextColumn("[bold dim]{task.description}"),
        BarColumn(bar_width=70, complete_style="cyan", finished_style="blue"),
        console=err_console,
        transient=True,
    ) as progress:
        task = progress.add_task("Tokenizing...", total=len(DEFAULT_TOKENIZERS))
        return calc_all(
            text,
            DEFAULT_TOKENIZERS,
            on_progress=lambda _kind: progress.advance(task)
        )


def _format_cost(amount: float) -> str:
    """Format a dollar amount in full precision without exponent notation."""
    return f"${Decimal(repr(amount)):f}"


def _build_table(rows: List[TokenStatsRow]) -> Table:
    """Render stats rows as a single table in tokenizer order."""
    table = Table(box=box.SQUARE, show_header=True, header_style="bold")
    table.add_column("Tokenizer", style="cyan")
    table.add_column("Total Tokens", justify="right")
    table.add_column("Cost", justify="right", style="green")
    table.add_column("Cached Cost", justify="right", style="green")

    for row in rows:
        table.add_row(
            str(row.tokenizer),
            f"{row.stats.total_tokens:,}",
            _format_cost(row.stats.cost_dollars),
            _format_cost(row.stats.cost_cached_dollars),
        )

    return table


if __name__ == "__main__":
    app()

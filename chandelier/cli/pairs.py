"""Pairs command for Chandelier CLI.

Lists the pairs a scan would look at.
"""

import click
from rich.panel import Panel
from rich.table import Table

from chandelier.cli.main import console
from chandelier.cli.scan import format_price
from chandelier.config import ScannerConfig
from chandelier.exchange import ExchangeError
from chandelier.patterns import DEFAULT_EXCLUDED_BASES, DEFAULT_QUOTE_ASSET, filter_candidates


def _get_exchange(config: ScannerConfig):
    """Get the market data client."""
    from chandelier.exchange.binance import BinanceExchange

    return BinanceExchange(
        base_url=config.exchange.base_url,
        timeout=config.exchange.timeout,
    )


@click.command()
@click.option(
    "-n", "--limit",
    type=int,
    default=None,
    help="Show only the first N pairs.",
)
@click.pass_context
def pairs(ctx: click.Context, limit: int | None) -> None:
    """List the candidate pairs for a scan.

    Shows every USDT pair with a positive price, except BTC, ETH and BNB
    pairs.

    \b
    Examples:
      chandelier pairs
      chandelier pairs --limit 20
    """
    config: ScannerConfig = ctx.obj["config"]

    try:
        with _get_exchange(config) as exchange:
            with console.status("[bold green]Fetching pairs..."):
                tickers = exchange.get_all_prices()
    except ExchangeError as e:
        console.print(Panel(
            f"[red]Failed to list pairs:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    candidates = filter_candidates(tickers)
    shown = candidates[:limit] if limit else candidates

    table = Table(
        title="Candidate Pairs",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Pair", style="bold")
    table.add_column("Price", justify="right")

    for i, ticker in enumerate(shown, 1):
        table.add_row(str(i), ticker.symbol, format_price(ticker.price))

    console.print(table)
    console.print(f"{len(candidates)} candidate pairs ({len(tickers)} listed)")
    console.print(
        f"[dim]Quote asset {DEFAULT_QUOTE_ASSET}, "
        f"excluding {', '.join(DEFAULT_EXCLUDED_BASES)}[/dim]"
    )

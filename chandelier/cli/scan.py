"""Scan commands for Chandelier CLI.

Runs the base-and-hold pattern scan over every candidate pair and shows
matches as they are found.
"""

from typing import Optional

import click
from rich.console import Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table

from chandelier.cli.main import console
from chandelier.config import ScannerConfig
from chandelier.exchange import ExchangeError, normalize_interval
from chandelier.models import MalformedCandleError, ScanState
from chandelier.patterns import (
    REFERENCE_WINDOW,
    find_reference_candle,
    validate_following_candles,
)


def _get_exchange(config: ScannerConfig):
    """Get the market data client."""
    from chandelier.exchange.binance import BinanceExchange

    return BinanceExchange(
        base_url=config.exchange.base_url,
        timeout=config.exchange.timeout,
    )


def format_price(value: float) -> str:
    """Format a price without trailing zeros (0.00001234, 1.5, 27123.4)."""
    text = f"{value:.8f}".rstrip("0").rstrip(".")
    return text or "0"


def build_results_table(state: ScanState) -> Table:
    """Build the results table for a scan state.

    Args:
        state: Scan state snapshot.

    Returns:
        Table with one row per matching pair.
    """
    table = Table(
        title=f"{len(state.results)} pairs",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Pair", style="bold")
    table.add_column("Reference (Low / High)", justify="right")
    table.add_column("Reference (Open / Close)", justify="right")
    table.add_column("Current Price", justify="right")

    for result in state.results:
        ref = result.reference
        price_style = "green" if result.is_near_reference_close else "white"
        table.add_row(
            result.symbol,
            f"{format_price(ref.low)} / {format_price(ref.high)}",
            f"{format_price(ref.open)} / {format_price(ref.close)}",
            f"[{price_style}]{format_price(result.current_price)}[/{price_style}]",
        )

    return table


def render_scan(state: ScanState) -> RenderableType:
    """Render a scan state for the live display.

    A spinner is shown alone until the first match arrives, then below
    the growing results table while the scan continues.
    """
    if not state.is_scanning:
        return build_results_table(state)

    progress = f"{state.scanned}/{state.total}" if state.total else "listing pairs"
    symbol = f" {state.current_symbol}" if state.current_symbol else ""
    spinner = Spinner("dots", text=f"[bold green]Fetching data...[/bold green] [dim]{progress}{symbol}[/dim]")

    if not state.results:
        return spinner
    return Group(build_results_table(state), spinner)


@click.command()
@click.option(
    "-i", "--interval",
    default=None,
    help="Candle interval: 1h, 6h, 12h, 1d, 1w or 1M (default: from config, else 1d)",
)
@click.pass_context
def scan(ctx: click.Context, interval: Optional[str]) -> None:
    """Scan USDT pairs for the base-and-hold pattern.

    Finds the largest green candle among the last ten candles of each
    pair, then keeps the pair if every later candle opens and closes
    between the middle and the top of that candle's body.

    Current prices within 5% below the reference close are shown in green.

    \b
    Examples:
      chandelier scan              # Daily candles
      chandelier scan -i 1h        # Hourly candles
      chandelier scan -i 1w        # Weekly candles
    """
    from chandelier.scanner import PatternScanner

    config: ScannerConfig = ctx.obj["config"]
    interval = normalize_interval(interval or config.scan.interval)

    with _get_exchange(config) as exchange:
        scanner = PatternScanner(exchange, interval=interval)

        with Live(render_scan(scanner.state), console=console, refresh_per_second=8) as live:
            unsubscribe = scanner.subscribe(lambda state: live.update(render_scan(state)))
            try:
                state = scanner.start()
            finally:
                unsubscribe()
            live.update(render_scan(state))

    if state.error:
        console.print(
            f"[yellow]Scan stopped early after {state.scanned}/{state.total} pairs; "
            f"results are partial.[/yellow]\n[dim]{state.error}[/dim]"
        )


@click.command()
@click.argument("symbol")
@click.option(
    "-i", "--interval",
    default=None,
    help="Candle interval: 1h, 6h, 12h, 1d, 1w or 1M (default: from config, else 1d)",
)
@click.pass_context
def check(ctx: click.Context, symbol: str, interval: Optional[str]) -> None:
    """Check a single pair for the base-and-hold pattern.

    Shows the reference candle and whether the candles after it hold.

    \b
    Examples:
      chandelier check SOLUSDT
      chandelier check ADAUSDT -i 1w
    """
    config: ScannerConfig = ctx.obj["config"]
    interval = normalize_interval(interval or config.scan.interval)
    symbol = symbol.upper()

    try:
        with _get_exchange(config) as exchange:
            with console.status(f"[bold green]Fetching {symbol} candles..."):
                candles = exchange.get_candles(symbol, interval)
                reference = find_reference_candle(candles)
                holds = reference is not None and validate_following_candles(candles, reference)
                current_price = exchange.get_price(symbol)
    except (ExchangeError, MalformedCandleError) as e:
        console.print(Panel(
            f"[red]Failed to check {symbol}:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    if reference is None:
        console.print(Panel(
            f"[dim]No usable reference candle among the last {REFERENCE_WINDOW} "
            f"of {len(candles)} {interval} candles.[/dim]\n\n"
            f"Current price: {format_price(current_price)}",
            title=f"[bold]{symbol}[/bold]",
            border_style="dim",
        ))
        return

    verdict = "[green]Pattern holds[/green]" if holds else "[red]Pattern broken[/red]"
    following = len(candles) - reference.index - 1
    console.print(Panel(
        f"Reference candle: #{reference.index} of {len(candles)} ({following} after it)\n"
        f"  Open / Close: {format_price(reference.open)} / {format_price(reference.close)}\n"
        f"  Low / High:   {format_price(reference.low)} / {format_price(reference.high)}\n"
        f"  Midpoint:     {format_price(reference.midpoint)}\n\n"
        f"Current price: {format_price(current_price)}\n\n"
        f"{verdict}",
        title=f"[bold]{symbol}[/bold] [dim]{interval}[/dim]",
        border_style="green" if holds else "red",
    ))

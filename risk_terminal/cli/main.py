"""
Command-line interface for the risk terminal.

This module provides commands for validating trade setups, sizing
positions and analysing profit across take-profit targets.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import pandas as pd
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from risk_terminal.config import (
    DEFAULT_CONFIG_PATH,
    CalculatorConfig,
    ConfigError,
    load_config,
    save_config,
)
from risk_terminal.trading.forms import PositionForm, ProfitForm, form_errors
from risk_terminal.trading.metrics import calculate_profit_metrics
from risk_terminal.trading.position import calculate_position_size
from risk_terminal.trading.validation import validate_trading_parameters
from risk_terminal.utils.formatters import (
    format_currency,
    format_percentage,
    safe_parse_float,
)

logger = logging.getLogger("risk_terminal")

# Create Typer app
app = typer.Typer(help="Trading risk management calculator")
console = Console()

BATCH_REQUIRED_COLUMNS = ["entry_price", "stop_loss", "risk_amount"]
BATCH_RESULT_COLUMNS = ["position_size", "margin", "potential_loss", "risk_percentage"]


def setup_logging(level: str) -> None:
    """
    Set up logging with a rich handler.

    Args:
        level: Log level name
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def _print_errors(title: str, errors: List[str]) -> None:
    console.print(f"[red]{title}:[/red]")
    for error in errors:
        console.print(f"[red]  - {error}[/red]")


def _get_config(ctx: typer.Context) -> CalculatorConfig:
    if ctx.obj is None:
        return CalculatorConfig()
    return ctx.obj["config"]


@app.callback()
def callback(
    ctx: typer.Context,
    config_path: str = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c", help="Path to the configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Trading risk management calculator CLI.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise typer.Exit(code=1)

    setup_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = {"config": config, "config_path": config_path}


@app.command()
def init(
    ctx: typer.Context,
    currency: str = typer.Option("USD", "--currency", help="Display currency"),
    default_leverage: float = typer.Option(
        1.0, "--leverage", "-l", help="Default leverage"
    ),
):
    """
    Write a configuration file with default settings.
    """
    config_path = ctx.obj["config_path"]

    try:
        config = CalculatorConfig(currency=currency, default_leverage=default_leverage)
    except ValidationError as e:
        _print_errors("Invalid configuration", form_errors(e))
        raise typer.Exit(code=1)

    save_config(config, config_path)
    console.print(f"[green]Configuration saved to {config_path}[/green]")


@app.command()
def validate(
    direction: str = typer.Option("LONG", "--direction", "-d", help="LONG or SHORT"),
    entry: str = typer.Option(..., "--entry", "-e", help="Entry price"),
    stop: str = typer.Option(..., "--stop", "-s", help="Stop loss price"),
    take_profits: Optional[List[str]] = typer.Option(
        None, "--tp", "-t", help="Take profit price (repeatable)"
    ),
):
    """
    Check that a trade setup is consistent with its direction.
    """
    targets = [safe_parse_float(tp) for tp in take_profits or []]

    try:
        result = validate_trading_parameters(
            direction, safe_parse_float(entry), safe_parse_float(stop), targets
        )
    except ValueError as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise typer.Exit(code=1)

    if not result.is_valid:
        _print_errors("Invalid trade setup", result.errors)
        raise typer.Exit(code=1)

    console.print("[green]Trade setup is valid[/green]")


@app.command()
def position(
    ctx: typer.Context,
    direction: str = typer.Option("LONG", "--direction", "-d", help="LONG or SHORT"),
    entry: str = typer.Option(..., "--entry", "-e", help="Entry price"),
    stop: str = typer.Option(..., "--stop", "-s", help="Stop loss price"),
    risk: str = typer.Option(..., "--risk", "-r", help="Amount to risk on the trade"),
    leverage: Optional[str] = typer.Option(None, "--leverage", "-l", help="Leverage"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """
    Calculate the position size for a risk amount.
    """
    config = _get_config(ctx)

    try:
        form = PositionForm(
            direction=direction,
            entry_price=entry,
            stop_loss=stop,
            risk_amount=risk,
            leverage=leverage if leverage is not None else config.default_leverage,
        )
    except ValidationError as e:
        _print_errors("Invalid input", form_errors(e))
        raise typer.Exit(code=1)

    validation = validate_trading_parameters(
        form.direction, form.entry_price, form.stop_loss
    )
    if not validation.is_valid:
        _print_errors("Invalid trade setup", validation.errors)
        raise typer.Exit(code=1)

    result = calculate_position_size(form.to_input())

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    table = Table(title=f"Position Size ({form.direction.value})")
    table.add_column("Metric")
    table.add_column("Value")

    table.add_row("Position Size", f"{result.position_size:.6f}")
    table.add_row("Margin", format_currency(result.margin, config.currency))
    table.add_row(
        "Potential Loss", format_currency(result.potential_loss, config.currency)
    )
    table.add_row(
        "Risk",
        format_percentage(result.risk_percentage, config.percentage_decimals),
    )

    console.print(table)


@app.command()
def profit(
    ctx: typer.Context,
    direction: str = typer.Option("LONG", "--direction", "-d", help="LONG or SHORT"),
    entry: str = typer.Option(..., "--entry", "-e", help="Entry price"),
    stop: str = typer.Option(..., "--stop", "-s", help="Stop loss price"),
    size: str = typer.Option(..., "--size", "-p", help="Position size"),
    leverage: Optional[str] = typer.Option(None, "--leverage", "-l", help="Leverage"),
    take_profits: Optional[List[str]] = typer.Option(
        None, "--tp", "-t", help="Take profit price (repeatable)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """
    Calculate profit, ROI and risk/reward across take-profit targets.
    """
    config = _get_config(ctx)
    take_profits = take_profits or []

    if len(take_profits) > config.max_take_profit_levels:
        _print_errors(
            "Invalid input",
            [
                f"at most {config.max_take_profit_levels} take profit levels are allowed"
            ],
        )
        raise typer.Exit(code=1)

    try:
        form = ProfitForm(
            direction=direction,
            entry_price=entry,
            stop_loss=stop,
            position_size=size,
            leverage=leverage if leverage is not None else config.default_leverage,
            take_profit_levels=take_profits,
        )
    except ValidationError as e:
        _print_errors("Invalid input", form_errors(e))
        raise typer.Exit(code=1)

    validation = validate_trading_parameters(
        form.direction, form.entry_price, form.stop_loss, form.take_profit_levels
    )
    if not validation.is_valid:
        _print_errors("Invalid trade setup", validation.errors)
        raise typer.Exit(code=1)

    result = calculate_profit_metrics(form.to_input())

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    currency = config.currency
    decimals = config.percentage_decimals

    table = Table(title=f"Profit Metrics ({form.direction.value})")
    table.add_column("Metric")
    table.add_column("Value")

    table.add_row("Total Profit", format_currency(result.total_profit, currency))
    table.add_row("Average Profit", format_currency(result.average_profit, currency))
    table.add_row("Potential Loss", format_currency(result.potential_loss, currency))
    table.add_row("Margin", format_currency(result.margin, currency))
    table.add_row("ROI", format_percentage(result.roi, decimals))
    table.add_row("Risk/Reward", f"{result.primary_risk_reward:.2f}")
    table.add_row("Average Risk/Reward", f"{result.average_risk_reward:.2f}")
    table.add_row(
        "Sold Per Target", format_percentage(result.share_per_target * 100, decimals)
    )

    console.print(table)

    if result.take_profit_breakdown:
        breakdown = Table(title="Take Profit Breakdown")
        breakdown.add_column("#")
        breakdown.add_column("Price")
        breakdown.add_column("Profit")
        breakdown.add_column("R:R")

        for i, level in enumerate(result.take_profit_breakdown):
            breakdown.add_row(
                str(i + 1),
                f"{level.price:g}",
                format_currency(level.profit, currency),
                f"{level.risk_reward:.2f}",
            )

        console.print(breakdown)


def size_row(row: Dict[str, Any], default_leverage: float) -> Dict[str, Any]:
    """
    Validate and size a single trade setup.

    Args:
        row: Raw values of the setup
        default_leverage: Leverage used when the row has none

    Returns:
        Result columns, with NaN results and the errors for invalid rows
    """
    values = {
        "direction": row.get("direction") or "LONG",
        "entry_price": row.get("entry_price"),
        "stop_loss": row.get("stop_loss"),
        "risk_amount": row.get("risk_amount"),
        "leverage": row.get("leverage") or default_leverage,
    }
    empty = {column: float("nan") for column in BATCH_RESULT_COLUMNS}

    try:
        form = PositionForm.model_validate(values)
    except ValidationError as e:
        return {**empty, "errors": "; ".join(form_errors(e))}

    validation = validate_trading_parameters(
        form.direction, form.entry_price, form.stop_loss
    )
    if not validation.is_valid:
        return {**empty, "errors": "; ".join(validation.errors)}

    result = calculate_position_size(form.to_input())
    return {**result.to_dict(), "errors": ""}


@app.command()
def batch(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="CSV file of trade setups"),
    output_path: Optional[str] = typer.Option(
        None, "--output", "-o", help="Path of the results CSV"
    ),
):
    """
    Size every trade setup in a CSV file.
    """
    config = _get_config(ctx)

    if not os.path.exists(input_path):
        console.print(f"[red]Data file not found: {input_path}[/red]")
        raise typer.Exit(code=1)

    console.print(f"Loading trade setups from {input_path}...")
    try:
        data = pd.read_csv(input_path, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        console.print(f"[red]Could not read {input_path}: {str(e)}[/red]")
        raise typer.Exit(code=1)

    missing = [c for c in BATCH_REQUIRED_COLUMNS if c not in data.columns]
    if missing:
        console.print(f"[red]Missing columns: {', '.join(missing)}[/red]")
        raise typer.Exit(code=1)

    results = pd.DataFrame(
        [size_row(row, config.default_leverage) for row in data.to_dict("records")],
        columns=BATCH_RESULT_COLUMNS + ["errors"],
        index=data.index,
    )
    # Result columns replace any stale ones carried in the input
    stale = [c for c in results.columns if c in data.columns]
    output = pd.concat([data.drop(columns=stale), results], axis=1)

    if output_path is None:
        root, _ = os.path.splitext(input_path)
        output_path = f"{root}_sized.csv"

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    output.to_csv(output_path, index=False)

    invalid = int((results["errors"] != "").sum())
    logger.info(f"Sized {len(results) - invalid} of {len(results)} trade setups")

    table = Table(title="Batch Results")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Setups", str(len(results)))
    table.add_row("Sized", str(len(results) - invalid))
    table.add_row("Invalid", str(invalid))
    console.print(table)

    console.print(f"\nResults saved to {output_path}")


if __name__ == "__main__":
    app()

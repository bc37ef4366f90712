"""CLI entrypoint using typer."""

from __future__ import annotations

from typing import NoReturn
from uuid import uuid4

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from splits_core.config.settings import Settings
from splits_core.constants import (
    COMMISSION_RATES,
    PLATFORM_TAKE,
    ROLE_META,
    TIER_INFO,
    TIER_ORDER,
)
from splits_core.exceptions import SplitsCalculatorError
from splits_core.models.payout import CalculatorInput, PayoutBreakdown
from splits_core.models.roles import RecruiterRole
from splits_core.rates import parse_roles, validate_rate_tables
from splits_engine.formatting import format_currency, format_rate
from splits_engine.observability import configure_logging, session_context
from splits_engine.payouts import compute_payouts

app = typer.Typer(
    name="splits",
    help="Split-fee placement payout calculator",
)
console = Console()
logger = structlog.get_logger()


@app.command()
def estimate(
    salary: float | None = typer.Option(None, "--salary", "-s", help="Annual salary"),
    fee: float | None = typer.Option(None, "--fee", "-f", help="Placement fee percentage"),
    role: list[str] | None = typer.Option(
        None, "--role", "-r", help="Role held on the placement (repeatable)"
    ),
    no_roles: bool = typer.Option(False, "--no-roles", help="Estimate with no roles selected"),
    strict: bool = typer.Option(
        False, "--strict", help="Reject out-of-range numbers instead of clamping"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the breakdown as JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Estimate payouts on every tier for one placement."""
    if no_roles and role:
        _fail("--no-roles cannot be combined with --role")

    settings = _load_settings()
    if verbose:
        settings.log_level = "DEBUG"
    if strict:
        settings.strict_inputs = True

    configure_logging(settings)
    with session_context(f"cli_{uuid4().hex[:8]}"):
        try:
            if no_roles:
                roles: frozenset[RecruiterRole] = frozenset()
            elif role:
                roles = parse_roles(role)
            else:
                roles = frozenset(settings.default_roles)

            calc_input = CalculatorInput(
                salary=settings.default_salary if salary is None else salary,
                fee_percentage=settings.default_fee_percentage if fee is None else fee,
                selected_roles=roles,
            )
            breakdown = compute_payouts(calc_input, strict=settings.strict_inputs)
        except (SplitsCalculatorError, ValidationError) as exc:
            logger.warning("estimate_rejected", error=str(exc))
            _fail(str(exc), exc)

    if as_json:
        typer.echo(breakdown.model_dump_json(indent=2))
        return

    _print_breakdown(breakdown, settings.currency_symbol)


@app.command()
def rates() -> None:
    """Show the commission rate table for every tier."""
    symbol = _load_settings().currency_symbol
    try:
        validate_rate_tables()
    except SplitsCalculatorError as exc:
        _fail(str(exc), exc)

    table = Table(title="Commission rates (share of placement fee)")
    table.add_column("Role")
    for tier in TIER_ORDER:
        info = TIER_INFO[tier]
        price = format_currency(info.monthly_price, symbol)
        table.add_column(f"{info.name} ({escape(price)}/mo)", justify="right")

    for role in RecruiterRole:
        table.add_row(
            f"{ROLE_META[role].label} [dim]({role.value})[/dim]",
            *(format_rate(COMMISSION_RATES[tier][role] * 100) for tier in TIER_ORDER),
        )
    table.add_section()
    table.add_row(
        "Platform take",
        *(format_rate(PLATFORM_TAKE[tier] * 100) for tier in TIER_ORDER),
    )
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    console.print("splits-payout-calculator v0.1.0")


def _load_settings() -> Settings:
    """Build Settings from the environment, reporting bad values as CLI errors."""
    try:
        return Settings()
    except ValidationError as exc:
        _fail(str(exc), exc)


def _fail(message: str, cause: Exception | None = None) -> NoReturn:
    """Print an error and exit with code 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1) from cause


def _print_breakdown(breakdown: PayoutBreakdown, symbol: str) -> None:
    """Render a breakdown as rich tables."""
    roles = ", ".join(ROLE_META[r].label for r in breakdown.selected_roles) or "none"
    console.print(
        f"[bold]Placement fee:[/bold] {format_currency(breakdown.effective_fee, symbol)}"
        f"  [dim]({format_currency(breakdown.salary, symbol)} x "
        f"{breakdown.fee_percentage:g}%)[/dim]"
    )
    console.print(f"[bold]Roles:[/bold] {roles}")

    if not breakdown.selected_roles:
        console.print("[yellow]Select at least one role[/yellow]")

    table = Table()
    table.add_column("Tier")
    table.add_column("Price", justify="right")
    table.add_column("Your rate", justify="right")
    table.add_column("Your payout", justify="right")
    table.add_column("Platform take", justify="right")
    for payout in breakdown.payouts:
        rate = format_rate(payout.effective_rate) if breakdown.effective_fee > 0 else "-"
        table.add_row(
            payout.tier_name,
            f"{format_currency(payout.monthly_price, symbol)}/mo",
            rate,
            format_currency(payout.payout, symbol),
            format_currency(payout.platform_take, symbol),
        )
    console.print(table)

    upgrade = breakdown.upgrade_value
    if upgrade.paid_vs_free > 0:
        console.print(
            "Pro vs Starter: "
            f"[green]{format_currency(upgrade.paid_vs_free, symbol, show_sign=True)}[/green]"
        )
    if upgrade.premium_vs_free > 0:
        console.print(
            "Partner vs Starter: "
            f"[green]{format_currency(upgrade.premium_vs_free, symbol, show_sign=True)}[/green]"
        )
        console.print(
            f"One placement recovers {format_rate(breakdown.upgrade_cost_recovery)} "
            "of the Partner monthly price"
        )


if __name__ == "__main__":
    app()

"""Display formatting for payout amounts and breakdowns."""

from __future__ import annotations

from splits_core.models.payout import PayoutBreakdown


def format_currency(
    value: float,
    symbol: str = "$",
    decimals: int = 0,
    show_sign: bool = False,
) -> str:
    """Format an amount with thousands grouping and a leading symbol.

    Example:
        >>> format_currency(22500)
        '$22,500'
        >>> format_currency(-1234.5, decimals=2)
        '-$1,234.50'
        >>> format_currency(4000, show_sign=True)
        '+$4,000'
    """
    sign = ""
    if value < 0:
        sign = "-"
    elif show_sign and value > 0:
        sign = "+"
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_rate(percent: float, decimals: int = 0) -> str:
    """Format a percentage value (already scaled to 0-100).

    Example:
        >>> format_rate(30.0)
        '30%'
    """
    return f"{percent:.{decimals}f}%"


def format_breakdown(breakdown: PayoutBreakdown, symbol: str = "$") -> str:
    """Render a breakdown as a plain-text report."""
    lines = [
        f"Placement fee: {format_currency(breakdown.effective_fee, symbol)}",
        "",
    ]
    for payout in breakdown.payouts:
        rate = format_rate(payout.effective_rate) if breakdown.effective_fee > 0 else "-"
        lines.append(
            f"  {payout.tier_name:<8} {format_currency(payout.monthly_price, symbol)}/mo"
            f"  rate {rate:>4}  payout {format_currency(payout.payout, symbol)}"
        )

    upgrade = breakdown.upgrade_value
    deltas = [
        ("Pro vs Starter:    ", upgrade.paid_vs_free),
        ("Partner vs Starter:", upgrade.premium_vs_free),
        ("Partner vs Pro:    ", upgrade.premium_vs_paid),
    ]
    lines.append("")
    lines.extend(
        f"{label} {format_currency(delta, symbol, show_sign=True)}" for label, delta in deltas
    )
    if breakdown.upgrade_cost_recovery > 0:
        lines.append(
            f"One placement recovers {format_rate(breakdown.upgrade_cost_recovery)} "
            "of the Partner monthly price"
        )
    return "\n".join(lines)

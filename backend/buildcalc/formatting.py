"""Formatting helpers for calculator output.

Renders amounts the way the website shows them to visitors
(e.g. 'NPR 1,815,000' and 'NPR 1,815 / sq ft').
"""

from __future__ import annotations

from buildcalc.data.rates import CURRENCY


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= 10,000: no paisa, with comma separators (e.g., 'NPR 1,234,567')
    - Amounts < 10,000: with two decimals (e.g., 'NPR 9,876.54')
    """
    if amount >= 10_000:
        return f"{CURRENCY} {amount:,.0f}"
    return f"{CURRENCY} {amount:,.2f}"


def format_rate(rate: float) -> str:
    """Format a per-square-foot rate as 'NPR X,XXX / sq ft'."""
    return f"{CURRENCY} {rate:,.0f} / sq ft"


def format_area(area: float) -> str:
    """Format an area as 'X,XXX sq ft', keeping a decimal only when needed."""
    if float(area).is_integer():
        return f"{area:,.0f} sq ft"
    return f"{area:,.1f} sq ft"

"""Formatters turning raw on-chain values into human-readable units."""

from src.data.formatters.reserve import format_reserve, format_reserves

__all__ = [
    "format_reserve",
    "format_reserves",
]

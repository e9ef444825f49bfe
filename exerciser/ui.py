"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _report(symbol: str, fallback: str, message: str, color: str) -> None:
    prefix = fallback if _no_emoji() else symbol
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((prefix, color), " ", (message, color)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _report("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _report("✅", "✓", message, "green")
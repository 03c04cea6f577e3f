"""Listing of binaries that are available to install."""

from __future__ import annotations

from typing import Iterable

_HEADER = "Available Binaries to Install"


def format_components(components: Iterable[str]) -> str:
    """Render the given component names as a one-column table."""
    names = [str(component) for component in components]
    width = max(len(cell) for cell in [_HEADER, *names])
    total = width + 2

    def line(cell: str) -> str:
        return f" {cell.ljust(width)} "

    lines = ["─" * total, line(_HEADER), "═" * total]
    lines.extend(line(name) for name in names)
    lines.append("─" * total)
    return "\n".join(lines)


def list_components(components: Iterable[str]) -> None:
    """Print the table of available components."""
    print(format_components(components))
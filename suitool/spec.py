"""Binary names, version specifications and the installed-binaries table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

_NETWORKS = ("testnet", "devnet", "mainnet")
_DEFAULT_NETWORK = "testnet"

_REPO_HOST = "https://github.com"
_REPO_OWNER = "MystenLabs"


class SpecError(ValueError):
    """Raised when a binary or version specification cannot be understood."""


class BinaryName(Enum):
    """Binaries that can be installed."""

    MVR = "mvr"
    SUI = "sui"
    WALRUS = "walrus"
    WALRUS_SITES = "site-builder"
    MOVE_ANALYZER = "move-analyzer"

    def __str__(self) -> str:
        return self.value

    def repo_url(self) -> str:
        """Return the repository that publishes this binary."""
        repo = {
            BinaryName.MVR: "mvr",
            BinaryName.WALRUS: "walrus",
            BinaryName.WALRUS_SITES: "walrus-sites",
        }.get(self, "sui")
        return f"{_REPO_HOST}/{_REPO_OWNER}/{repo}"

    @classmethod
    def from_str(cls, value: str) -> "BinaryName":
        """Look up a binary by name, ignoring case."""
        wanted = value.lower()
        for member in cls:
            if member.value == wanted:
                return member
        raise SpecError(f"Unknown binary: {value}")


@dataclass(frozen=True)
class CommandMetadata:
    """A parsed binary specification."""

    name: BinaryName
    network: str
    version: Optional[str] = None


@dataclass
class BinaryVersion:
    """One installed binary."""

    binary_name: str
    network_release: str
    version: str
    debug: bool = False
    path: Optional[str] = None


def _invalid_name(name: str) -> SpecError:
    return SpecError(
        f"Invalid binary name: {name}. Use the `list` command to find available "
        "binaries to install or `show` to see which binaries are already "
        "installed.\nWhen specifying versions, use `@`, e.g.: sui@v1.60.0"
    )


def parse_component_with_version(spec: str) -> CommandMetadata:
    """Parse ``binary`` or ``binary@version`` into its name, network and version."""
    for separator in ("@", "==", "="):
        if separator in spec:
            break
    else:
        separator = " "

    parts = spec.split(separator)
    if len(parts) == 1:
        version_spec = None
    elif len(parts) == 2:
        version_spec = parts[1]
    else:
        raise SpecError("Invalid format. Use 'binary' or 'binary version'")

    try:
        name = BinaryName.from_str(parts[0])
    except SpecError:
        raise _invalid_name(parts[0]) from None

    if version_spec == "":
        raise SpecError(
            "Version cannot be empty. Use 'binary' or 'binary@version' (e.g., sui@v1.60.0)"
        )

    network, version = parse_version_spec(version_spec)
    return CommandMetadata(name=name, network=network, version=version)


def _looks_like_version(spec: str) -> bool:
    digits = "0123456789"
    if not spec:
        return False
    first = spec[0]
    starts_valid = first in digits or (first == "v" and spec[1:2] != "" and spec[1] in digits)
    return starts_valid and "." in spec


def parse_version_spec(spec: Optional[str]) -> tuple[str, Optional[str]]:
    """Split a version specification into ``(network, version)``."""
    if spec is None:
        return _DEFAULT_NETWORK, None
    if any(spec.startswith(f"{network}-") for network in _NETWORKS):
        network, version = spec.split("-", 1)
        return network, version
    if spec in _NETWORKS:
        return spec, None
    if not _looks_like_version(spec):
        raise SpecError(
            f"Invalid version format: '{spec}'. Expected a version like 'v1.60.0' or "
            "'1.60.0', or when applicable, 'testnet', 'devnet', 'mainnet'."
        )
    return _DEFAULT_NETWORK, spec


def _render_table(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    rows = [list(row) for row in rows]
    widths = [max(len(cell) for cell in column) for column in zip(header, *rows)]
    total = sum(width + 2 for width in widths)

    def line(cells: Sequence[str]) -> str:
        return "".join(f" {cell.ljust(width)} " for cell, width in zip(cells, widths))

    lines = ["─" * total, line(header), "═" * total]
    lines.extend(line(row) for row in rows)
    lines.append("─" * total)
    return "\n".join(lines)


def format_table(binaries: Iterable[BinaryVersion]) -> str:
    """Render binaries as a table sorted by binary name."""
    ordered = sorted(binaries, key=lambda binary: binary.binary_name)
    rows = (
        [b.binary_name, b.network_release, b.version, "Yes" if b.debug else "No"]
        for b in ordered
    )
    return _render_table(["Binary", "Release/Branch", "Version", "Debug"], rows)


def print_table(binaries: Iterable[BinaryVersion]) -> None:
    """Print the table of binaries to standard output."""
    print(format_table(binaries))
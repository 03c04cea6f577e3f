"""Sui tooling helpers: binary specs, tables, JSON state files and environment checks."""

__version__ = "0.0.8"
__all__ = ["doctor", "fs_utils", "listing", "spec"]
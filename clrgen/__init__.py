"""Canonical LR(1) parser table generation and shift-reduce parse simulation."""

__version__ = "0.1.0"

__all__ = ["__version__"]
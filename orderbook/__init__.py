"""Limit order book and matching engine driven by text commands."""

__version__ = "0.1.0"
__all__ = ["book", "cli", "engine", "orders"]
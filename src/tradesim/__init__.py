"""Simulated price feed, indicator engine and signal-driven trade ledger."""

__version__ = "0.1.0"

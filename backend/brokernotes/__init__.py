"""Reinsurance broker debit / credit note generator."""

__version__ = "1.0.0"

"""Household finance: account balances, currency conversion and categorization."""

__version__ = "0.1.0"

"""Logging infrastructure."""

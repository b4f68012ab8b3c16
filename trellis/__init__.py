"""Trellis: console helpers for exploring model schemas and records."""

__version__ = "0.1.0"

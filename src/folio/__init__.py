"""Folio - a data-driven personal portfolio site."""

__version__ = "0.1.0"

"""Catalog and product variant combination service."""

__version__ = "0.1.0"

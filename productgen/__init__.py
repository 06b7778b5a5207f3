"""Synthetic Shopify product catalog generator."""

__version__ = "0.1.0"

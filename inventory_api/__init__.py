"""
Top‑level package for the Product Inventory API.

This file makes ``inventory_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``inventory_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

"""Shared constants used by both the domain and infrastructure layers.

This package provides a dependency-free location for constants that need to be
shared across packages without creating circular imports.
"""

from __future__ import annotations

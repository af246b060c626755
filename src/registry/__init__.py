"""
Public API for the registry package.
Usage:
    from registry import FieldRegistry
"""
from .registry import FieldRegistry

__all__ = ["FieldRegistry"]

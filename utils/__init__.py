"""Shared utilities for request assembly."""
from utils.case import normalize_key, recase, recase_key

__all__ = [
    "recase_key",
    "recase",
    "normalize_key",
]

"""Shared sequence and loading helpers for the gridlogic package.

This module provides common utility functions for:
- Single/pair match search over iterables
- Predicate counting
- YAML file loading
- Container type checks for constructors
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, TypeVar

import yaml

T = TypeVar("T")


def only(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the only element satisfying ``predicate``.

    Args:
        items: Elements to search.
        predicate: Test applied to each element.

    Returns:
        The single matching element, or None if no element or more than one
        element matches.

    Example:
        >>> only([1, 2, 3], lambda x: x > 2)
        3
        >>> only([1, 2, 3], lambda x: x > 1) is None
        True
    """
    found: T | None = None
    matched = False
    for item in items:
        if not predicate(item):
            continue
        if matched:
            return None
        found = item
        matched = True
    return found


def only_two(items: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T, T] | None:
    """Return the only two elements satisfying ``predicate``, or None otherwise."""
    matches: list[T] = []
    for item in items:
        if not predicate(item):
            continue
        if len(matches) == 2:
            return None
        matches.append(item)
    if len(matches) != 2:
        return None
    return matches[0], matches[1]


def count_where(items: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Count the elements satisfying ``predicate``."""
    return sum(1 for item in items if predicate(item))


def load_yaml(path: Path | str) -> dict:
    """Load and parse a YAML file into a dictionary.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary containing parsed YAML content.
        Returns empty dict if file is empty or contains only None.

    Raises:
        FileNotFoundError: If path doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def ensure_list(value: object | None, *, name: str, item_desc: str) -> list:
    """Ensure a value is a list (or empty), raising a descriptive error otherwise."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a list of {item_desc}")
    return value

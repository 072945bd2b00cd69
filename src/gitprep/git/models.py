"""Data models for diff mode selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TagPair:
    """Two tag names, newest first."""

    newer: str
    older: str


@dataclass(frozen=True)
class TagRange:
    tag1: str
    tag2: str


@dataclass(frozen=True)
class Amend:
    pass


@dataclass(frozen=True)
class Staged:
    pass


DiffMode = Union[TagRange, Amend, Staged]

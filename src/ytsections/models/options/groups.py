"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

SOURCE_GROUP = Group.create_ordered("Source")
RANGE_GROUP = Group.create_ordered("Range")
OUTPUT_GROUP = Group.create_ordered("Output")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "OUTPUT_GROUP",
    "RANGE_GROUP",
    "RUNTIME_GROUP",
    "SOURCE_GROUP",
]

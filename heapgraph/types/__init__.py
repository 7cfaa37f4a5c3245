"""Shared type aliases and enums."""

from __future__ import annotations

from heapgraph.types.base import Cost, DuplicateEdgePolicy

__all__ = ["Cost", "DuplicateEdgePolicy"]

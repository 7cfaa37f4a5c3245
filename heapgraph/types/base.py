"""Base type aliases and enums used across heapgraph."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric edge weight or accumulated path cost.
Cost = Union[int, float]


class DuplicateEdgePolicy(IntEnum):
    """What ``Node.connect_to`` does when an edge to the same successor exists."""

    #: Append a parallel edge; searches pick the cheaper one.
    ALLOW = 1
    #: Replace the existing edge(s) to that successor with the new one.
    REPLACE = 2
    #: Raise ``ValueError``.
    REJECT = 3

    @classmethod
    def from_string(cls, value: str) -> "DuplicateEdgePolicy":
        """Parse a case-insensitive policy name.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid duplicate edge policy '{value}'. Valid values are: {valid}"
            ) from None

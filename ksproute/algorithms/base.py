"""Base types shared by the path-search algorithms."""

from __future__ import annotations

from typing import Union

#: Represents numeric cost along a path (distance, latency, ...).
Cost = Union[int, float]

"""Configuration classes for ksproute components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class KspConfig:
    """Defaults for K-shortest-path queries."""

    # Edge attribute holding the scalar cost
    cost_attr: str = "cost"

    # Append leftover candidates to the confirmed paths
    include_pending: bool = False

    # Upper bound applied to every requested K; None leaves K unbounded
    max_k: Optional[int] = None

    def clamp_k(self, k: int) -> int:
        """Validate a requested K and bound it by ``max_k``.

        Raises:
            ValueError: If ``k`` is negative.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        if self.max_k is not None:
            return min(k, self.max_k)
        return k


# Global configuration instance
KSP_CONFIG = KspConfig()

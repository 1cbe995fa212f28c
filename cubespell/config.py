"""Configuration classes for cubespell components."""

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for network construction, search and result reporting."""

    # Bottleneck value assigned to the source before any edge is crossed
    unbounded_capacity: int = sys.maxsize

    # Single value reported instead of an assignment when the word cannot be spelled
    infeasible_marker: int = -1

    # Compare cube letters and word characters case-insensitively
    ignore_case: bool = False

    def normalize(self, text: str) -> str:
        """Return ``text`` folded according to ``ignore_case``."""
        return text.lower() if self.ignore_case else text


# Global configuration instance
DEFAULT_CONFIG = SolverConfig()

"""Information theory: Shannon entropy over method-usage distributions."""

import math
from collections.abc import Mapping
from typing import Hashable, Union


class Entropy:
    """Information entropy calculations."""

    @staticmethod
    def shannon(distribution: Mapping[Hashable, Union[int, float]]) -> float:
        """
        Compute Shannon entropy H(X) = -Σ p(x) log₂ p(x).

        Zero-weight bins contribute nothing (lim p→0 of p log p is 0).

        Args:
            distribution: Mapping of event -> non-negative weight

        Returns:
            Entropy in bits
        """
        total = sum(distribution.values())
        if total <= 0:
            return 0.0

        entropy = 0.0
        for weight in distribution.values():
            p = weight / total
            if p > 0:
                entropy -= p * math.log2(p)

        return entropy

    @staticmethod
    def normalized(distribution: Mapping[Hashable, Union[int, float]]) -> float:
        """
        Normalize entropy by maximum possible entropy.

        H_norm = H / log₂(N) where N is the number of bins, empty bins included.

        Returns:
            Normalized entropy in [0, 1]
        """
        h = Entropy.shannon(distribution)
        n = len(distribution)
        if n <= 1:
            return 0.0
        max_h = math.log2(n)
        return min(1.0, h / max_h) if max_h > 0 else 0.0

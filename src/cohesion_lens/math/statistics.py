"""Descriptive statistics and the logistic squash used for calibration."""

import math
import statistics as stdlib_stats


class Statistics:
    """Statistical helper methods."""

    @staticmethod
    def mean(values: list[float]) -> float:
        """Compute arithmetic mean."""
        if not values:
            return 0.0
        return stdlib_stats.mean(values)

    @staticmethod
    def stdev(values: list[float]) -> float:
        """Compute sample standard deviation."""
        if len(values) < 2:
            return 0.0
        return stdlib_stats.stdev(values)

    @staticmethod
    def z_score(x: float, mean: float, std: float) -> float:
        """
        Compute single z-score: z = (x - mu) / sigma.

        The sign of sigma is honoured, so a negative sigma mirrors the score.
        """
        if std == 0:
            return 0.0
        return (x - mean) / std

    @staticmethod
    def logistic(z: float) -> float:
        """
        Logistic function 1 / (1 + e^-z), evaluated without overflow.

        Args:
            z: Any real number, infinities included

        Returns:
            Value in [0, 1]
        """
        if z >= 0:
            return 1.0 / (1.0 + math.exp(-z))
        e = math.exp(z)
        return e / (1.0 + e)

    @staticmethod
    def clamp(x: float, lower: float, upper: float) -> float:
        """Clamp x into [lower, upper]."""
        return max(lower, min(upper, x))

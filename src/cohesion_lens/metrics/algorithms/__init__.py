"""Metric algorithms: one pure function per Metric, dispatched by table.

Every function takes a ClassStructure already restricted to the methods the
caller's parameters select and returns the raw metric value as a float.
Functions keep no state, so they can run concurrently across classes and
metrics without locking.
"""

from types import MappingProxyType
from typing import Mapping

from ..registry import Metric
from .base import Algorithm
from .connectivity import ccm, lcc, occ, pcc, tcc
from .lcom import lcom, lcom2, lcom3, lcom4, lcom5
from .overlap import mmac, scom
from .signature import camc, nhd
from .topics import mwe

ALGORITHMS: Mapping[Metric, Algorithm] = MappingProxyType(
    {
        Metric.LCOM: lcom,
        Metric.CAMC: camc,
        Metric.MMAC: mmac,
        Metric.LCOM5: lcom5,
        Metric.LCOM4: lcom4,
        Metric.NHD: nhd,
        Metric.LCOM2: lcom2,
        Metric.LCOM3: lcom3,
        Metric.SCOM: scom,
        Metric.OCC: occ,
        Metric.PCC: pcc,
        Metric.TCC: tcc,
        Metric.LCC: lcc,
        Metric.CCM: ccm,
        Metric.MWE: mwe,
    }
)


def algorithm_for(metric: Metric) -> Algorithm:
    """The raw-value function for a metric."""
    return ALGORITHMS[metric]


def _validate_table() -> None:
    """Verify every Metric has an algorithm. Runs once at import."""
    missing = set(Metric) - set(ALGORITHMS)
    if missing:
        names = sorted(m.value for m in missing)
        raise RuntimeError(f"No algorithm registered for: {names}")


_validate_table()

__all__ = ["ALGORITHMS", "Algorithm", "algorithm_for"]

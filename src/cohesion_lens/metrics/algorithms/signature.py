"""Signature-based cohesion over the method x parameter-type matrix: CAMC, NHD.

Both metrics look at method signatures only, not at attribute usage. Row i of
the occurrence matrix marks the distinct parameter types method i declares.
"""

import numpy as np

from ...structure.models import ClassStructure
from .base import trivial_cohesion


def occurrence_matrix(structure: ClassStructure) -> np.ndarray:
    """k x l 0/1 matrix; columns are the distinct parameter types, sorted."""
    types = sorted({t for m in structure.methods for t in m.parameters})
    column = {t: i for i, t in enumerate(types)}
    matrix = np.zeros((len(structure.methods), len(types)), dtype=np.int64)
    for row, method in enumerate(structure.methods):
        for type_name in method.parameters:
            matrix[row, column[type_name]] = 1
    return matrix


def camc(structure: ClassStructure) -> float:
    """
    Cohesion Among Methods of Classes = Σ o_ij / (k * l).

    0.0 when no method declares a parameter.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    matrix = occurrence_matrix(structure)
    if matrix.shape[1] == 0:
        return 0.0
    return float(matrix.sum()) / matrix.size


def nhd(structure: ClassStructure) -> float:
    """
    Normalized Hamming Distance.

    NHD = 1 - 2 / (l * k * (k - 1)) * Σ_j c_j (k - c_j)

    c_j counts the methods declaring type j. Identical rows give 1.0, so a class
    where no method takes parameters scores 1.0.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    matrix = occurrence_matrix(structure)
    k, l = matrix.shape
    if l == 0:
        return 1.0
    counts = matrix.sum(axis=0)
    disagreements = float(np.sum(counts * (k - counts)))
    return 1.0 - 2.0 * disagreements / (l * k * (k - 1))

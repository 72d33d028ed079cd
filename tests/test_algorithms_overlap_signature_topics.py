"""Tests for MMAC, SCOM (attribute overlap), CAMC, NHD (signatures) and MWE (topics)."""

import math

import numpy as np
import pytest

from cohesion_lens.metrics.algorithms.overlap import mmac, scom
from cohesion_lens.metrics.algorithms.signature import camc, nhd, occurrence_matrix
from cohesion_lens.metrics.algorithms.topics import mwe
from cohesion_lens.metrics.parameters import DEFAULT_PARAMETERS
from cohesion_lens.structure.models import ClassStructure, Method


def signature_class(*signatures):
    """Class whose methods m0..mN declare the given parameter types."""
    return ClassStructure(
        name="Sig",
        methods=[Method(f"m{i}", parameters=params) for i, params in enumerate(signatures)],
    )


class TestMMAC:
    """Method-Method through Attributes Cohesion."""

    def test_shared_pair(self, shared_class):
        assert mmac(shared_class) == pytest.approx(1.0)

    def test_disjoint_pair(self, disjoint_class):
        assert mmac(disjoint_class) == 0.0

    def test_skewed(self, skewed_class):
        """mu = (2, 1): 2 / (2 * 3 * 2)."""
        assert mmac(skewed_class) == pytest.approx(1 / 6)

    def test_no_attributes(self):
        assert mmac(ClassStructure(name="C", methods=[Method("m1"), Method("m2")])) == 0.0

    def test_returns_python_float(self, skewed_class):
        assert type(mmac(skewed_class)) is float


class TestSCOM:
    """Sensitive Class Cohesion Metric."""

    def test_shared_pair(self, shared_class):
        assert scom(shared_class) == pytest.approx(1.0)

    def test_disjoint_pair(self, disjoint_class):
        assert scom(disjoint_class) == 0.0

    def test_skewed(self, skewed_class):
        """Only m1-m2 connect: c=1, w=1/2, over three pairs."""
        assert scom(skewed_class) == pytest.approx(1 / 6)

    def test_weight_by_attribute_share(self, class_factory):
        """The pair touches two of three attributes."""
        cls = class_factory(
            "C", [("m1", {"a"}), ("m2", {"a", "b"})], attributes=["a", "b", "c"]
        )
        assert scom(cls) == pytest.approx(2 / 3)

    def test_in_unit_interval(self, chain_class, skewed_class, account_class):
        for cls in (chain_class, skewed_class, account_class.select(DEFAULT_PARAMETERS)):
            assert 0.0 <= scom(cls) <= 1.0


class TestOccurrenceMatrix:
    """Method x parameter-type matrix."""

    def test_columns_sorted_and_deduplicated(self):
        matrix = occurrence_matrix(signature_class(("String", "int"), ("int", "int")))
        np.testing.assert_array_equal(matrix, np.array([[1, 1], [0, 1]]))

    def test_no_parameters(self):
        assert occurrence_matrix(signature_class((), ())).shape == (2, 0)


class TestCAMC:
    """Cohesion Among Methods of Classes."""

    def test_partial_overlap(self):
        """Rows (1, 1) and (1, 0): 3 of 4 cells."""
        assert camc(signature_class(("int", "String"), ("int",))) == pytest.approx(0.75)

    def test_repeated_type_counted_once(self):
        assert camc(signature_class(("int", "int"), ("int",))) == pytest.approx(1.0)

    def test_no_parameters(self, disjoint_class):
        assert camc(disjoint_class) == 0.0

    def test_account(self, account_class):
        """deposit(double), withdraw(double), owner()."""
        assert camc(account_class.select(DEFAULT_PARAMETERS)) == pytest.approx(2 / 3)


class TestNHD:
    """Normalized Hamming Distance."""

    def test_partial_overlap(self):
        """Columns agree on int and disagree on String."""
        assert nhd(signature_class(("int", "String"), ("int",))) == pytest.approx(0.5)

    def test_identical_signatures(self):
        assert nhd(signature_class(("int",), ("int",), ("int",))) == pytest.approx(1.0)

    def test_no_parameters_is_identical(self, disjoint_class):
        assert nhd(disjoint_class) == 1.0

    def test_account(self, account_class):
        assert nhd(account_class.select(DEFAULT_PARAMETERS)) == pytest.approx(1 / 3)


class TestMWE:
    """Maximal Weighted Entropy."""

    def test_shared_pair(self, shared_class):
        """Both methods split attention evenly over both attributes."""
        assert mwe(shared_class) == pytest.approx(1.0)

    def test_disjoint_pair(self, disjoint_class):
        """Each topic has a single method: zero entropy."""
        assert mwe(disjoint_class) == 0.0

    def test_skewed(self, skewed_class):
        """Topic x: occupancy 2/3, entropy 1 bit over log2(3)."""
        assert mwe(skewed_class) == pytest.approx((2 / 3) / math.log2(3))

    def test_no_attributes(self):
        assert mwe(ClassStructure(name="C", methods=[Method("m1"), Method("m2")])) == 0.0

    def test_in_unit_interval(self, chain_class, account_class):
        for cls in (chain_class, account_class.select(DEFAULT_PARAMETERS)):
            assert 0.0 <= mwe(cls) <= 1.0

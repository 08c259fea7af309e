"""Tests for the triangular-number implementations."""

import pytest

from sum_to_n import sum_to_n_a, sum_to_n_b, sum_to_n_c

IMPLEMENTATIONS = [sum_to_n_a, sum_to_n_b, sum_to_n_c]


@pytest.mark.parametrize("fn", IMPLEMENTATIONS)
@pytest.mark.parametrize(("n", "expected"), [(0, 0), (1, 1), (5, 15), (10, 55), (100, 5050)])
def test_known_values(fn, n, expected):
    assert fn(n) == expected


@pytest.mark.parametrize("fn", IMPLEMENTATIONS)
def test_non_positive_is_zero(fn):
    assert fn(-3) == 0


def test_implementations_agree():
    for n in range(0, 300):
        assert sum_to_n_a(n) == sum_to_n_b(n) == sum_to_n_c(n)


def test_formula_handles_large_n():
    n = 10**12
    assert sum_to_n_c(n) == 500000000000500000000000

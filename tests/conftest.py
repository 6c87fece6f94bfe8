"""Configuration for affinematrix tests."""

from math import nan

import pytest

from affinematrix import Matrix, NumberFormat


@pytest.fixture
def comma_format():
    """Number format using a comma as decimal separator."""
    return NumberFormat(decimal_separator=',')


@pytest.fixture
def base_matrix():
    """Matrix whose values are all different, for composition tests."""
    return Matrix(1, 2, 3, 4, 5, 6)


@pytest.fixture
def nan_matrix():
    return Matrix(nan, 0, 0, 1, 0, 0)

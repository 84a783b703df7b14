"""Tests for hyperspherical coordinates."""

import numpy as np
import pytest

from octo import Cayley
from octo import Klein
from octo.coordinates import cartesian_to_hyperspherical
from octo.coordinates import hyperspherical_to_cartesian

_TRIALS = 1_000


def test_round_trip() -> None:
    rng = np.random.default_rng(42)
    for _ in range(_TRIALS):
        x = rng.standard_normal(8)
        spherical = cartesian_to_hyperspherical(x)
        assert np.allclose(hyperspherical_to_cartesian(spherical[0], spherical[1:]), x, atol=1e-12)


def test_angle_ranges() -> None:
    rng = np.random.default_rng(0)
    for _ in range(_TRIALS):
        spherical = cartesian_to_hyperspherical(rng.standard_normal(8))
        assert spherical[0] >= 0
        assert np.all((spherical[1:7] >= 0) & (spherical[1:7] <= np.pi))
        assert -np.pi < spherical[7] <= np.pi


def test_radius_is_euclidean_length() -> None:
    x = Cayley(1, 2, 3, 4, 5, 6, 7, 8)
    radius = x.to_hyperspherical()[0]
    assert np.isclose(radius, np.sqrt(x.quadrance()))
    assert np.isclose(Klein(1, 2, 3, 4, 5, 6, 7, 8).to_hyperspherical()[0], np.sqrt(204.0))


def test_basis_units() -> None:
    assert Cayley.unit().to_hyperspherical() == (1.0, 0, 0, 0, 0, 0, 0, 0)
    last = Cayley.basis(7).to_hyperspherical()
    assert np.allclose(last, [1.0] + [np.pi / 2] * 7)
    negative = Cayley(0, 0, 0, 0, 0, 0, 0, -2).to_hyperspherical()
    assert np.allclose(negative, [2.0] + [np.pi / 2] * 6 + [-np.pi / 2])


@pytest.mark.parametrize("cls", [Cayley, Klein])
def test_octonion_round_trip(cls: type) -> None:
    x = cls(1, -2, 3, -4, 5, -6, 7, -8)
    y = cls.from_hyperspherical(*x.to_hyperspherical())
    assert isinstance(y, cls)
    assert y.isclose(x, tolerance=1e-12)


def test_from_hyperspherical_requires_seven_angles() -> None:
    with pytest.raises(ValueError, match="7 angles"):
        Cayley.from_hyperspherical(1.0, 0.0, 0.0)

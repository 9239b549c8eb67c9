import math
import random

import pytest

from annrigd.products import (
    Direction,
    ReactionProduct,
    products_with_random_directions,
    random_direction,
)


class SequenceRng:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


def test_particle_names():
    assert ReactionProduct(22, 1.0, 0.0, 0.0, 1.0).particle_name() == "gamma"
    assert ReactionProduct(11, 1.0, 0.0, 0.0, 1.0).particle_name() == "e-"
    assert ReactionProduct(13, 1.0, 0.0, 0.0, 1.0).particle_name() == "e-"


def test_momentum_tuple():
    assert ReactionProduct(22, 3.0, 1.0, 2.0, 3.0).momentum() == (1.0, 2.0, 3.0)


def test_direction_pole():
    d = random_direction(SequenceRng([1.0, 0.0]))
    assert d.z == pytest.approx(1.0)
    assert d.x == pytest.approx(0.0, abs=1e-12)
    assert d.y == pytest.approx(0.0, abs=1e-12)


def test_direction_equator():
    d = random_direction(SequenceRng([0.5, 0.0]))
    assert (d.x, d.y, d.z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)


def test_random_directions_are_unit_vectors():
    rng = random.Random(7)
    for _ in range(200):
        d = random_direction(rng)
        assert math.hypot(d.x, d.y, d.z) == pytest.approx(1.0)


def test_gamma_momentum_equals_energy():
    products = products_with_random_directions([(22, 2.5), (22, 0.089)], random.Random(1))
    assert [p.e_tot for p in products] == [2.5, 0.089]
    for p in products:
        assert math.hypot(*p.momentum()) == pytest.approx(p.e_tot)


def test_electron_is_on_mass_shell():
    (product,) = products_with_random_directions([(11, 1.2)], random.Random(3))
    p2 = sum(c * c for c in product.momentum())
    assert product.e_tot ** 2 - p2 == pytest.approx(0.511 ** 2)
    assert product.e_tot - 0.511 == pytest.approx(1.2)


def test_unknown_particle_dropped_but_consumes_randomness():
    products = products_with_random_directions([(13, 1.0), (22, 1.0)], random.Random(5))
    assert len(products) == 1
    reference = random.Random(5)
    random_direction(reference)
    expected = random_direction(reference)
    assert isinstance(expected, Direction)
    assert products[0].momentum() == pytest.approx((expected.x, expected.y, expected.z))


def test_empty_input():
    assert products_with_random_directions([], random.Random(0)) == []
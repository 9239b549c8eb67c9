"""Discrete gamma-ray cascades of 158Gd after thermal 157Gd(n,g)."""

from __future__ import annotations

import itertools
import logging
import random
from typing import Callable, Sequence

from .model import Model
from .model_type import ModelType
from .products import GAMMA

log = logging.getLogger(__name__)

_Cascade = Callable[[random.Random], list[float]]


def _fixed(*energies: float) -> _Cascade:
    """A cascade that always emits the same gamma rays."""

    def cascade(rng: random.Random) -> list[float]:
        return list(energies)

    return cascade


def _two_way(
    head: Sequence[float], threshold: float, below: Sequence[float], above: Sequence[float]
) -> _Cascade:
    """A cascade whose leading gamma rays are followed by one of two branches."""

    def cascade(rng: random.Random) -> list[float]:
        tail = below if rng.random() < threshold else above
        return [*head, *tail]

    return cascade


def _cascade_5903(rng: random.Random) -> list[float]:
    """5.903 MeV primary with four branches, the last two branching again."""
    br1, br2, br3 = 0.393, 0.254, 0.222
    rndm = rng.random()
    if rndm < br1:
        return [5.903, 1.010, 0.944, 0.080]
    if rndm < br1 + br2:
        return [5.903, 0.875, 0.898, 0.182, 0.080]
    if rndm < br1 + br2 + br3:
        if rng.random() < 0.847:
            return [5.903, 0.769, 1.186, 0.080]
        return [5.903, 0.769, 1.004, 0.182, 0.080]
    if rng.random() < 0.755:
        return [5.903, 0.676, 1.097, 0.182, 0.080]
    return [5.903, 0.676, 1.279, 0.080]


def _cascade_6420(rng: random.Random) -> list[float]:
    """6.420 MeV primary with three branches."""
    br1, br2 = 0.381, 0.416
    rndm = rng.random()
    if rndm < br1:
        return [6.420, 1.517]
    if rndm < br1 + br2:
        return [6.420, 1.438, 0.080]
    return [6.420, 1.256, 0.182, 0.080]


# Relative intensities of the cascades, by decreasing intensity;
# the last cascade takes the remainder.
INTENSITIES = (
    0.3476, 0.1694, 0.0961, 0.0913, 0.0869, 0.0470, 0.0343,
    0.0285, 0.0274, 0.0234, 0.0227, 0.0182, 0.0034, 0.0030,
)

_CASCADES: tuple[_Cascade, ...] = (
    _two_way((6.750,), 0.501, (1.187,), (1.107, 0.080)),
    _cascade_5903,
    _fixed(5.595, 2.262, 0.080),
    _fixed(5.669, 2.188, 0.080),
    _fixed(5.167, 2.690, 0.080),
    _cascade_6420,
    _fixed(5.543, 2.314, 0.080),
    _fixed(5.784, 2.073, 0.080),
    _two_way((6.672,), 0.847, (1.186, 0.080), (1.004, 0.182, 0.080)),
    _fixed(5.436, 2.421, 0.080),
    _two_way((6.001, 0.769), 0.501, (1.187,), (1.007, 0.080)),
    _fixed(6.914, 0.944, 0.080),
    _fixed(7.857, 0.080),
    _fixed(6.960, 0.977),
    _fixed(7.937),
)

_THRESHOLDS = tuple(itertools.accumulate(INTENSITIES))


class Gd158DiscreteModel(Model):
    """Generates one of fifteen measured discrete cascades of 158Gd*.

    The gamma-ray energies of the most recent cascade are kept in
    ``last_cascade``.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("158GdDiscreteModel", ModelType.GD158_DISCRETE, rng)
        self.last_cascade: list[float] = []
        log.info("Gd158DiscreteModel : Model initialized.")

    def cascade_energies(self) -> list[tuple[int, float]]:
        """Pick a cascade by its intensity and return its gamma-ray energies in MeV."""
        rndm = self.rng.random()
        cascade = next(
            (c for c, limit in zip(_CASCADES, _THRESHOLDS) if rndm < limit),
            _CASCADES[-1],
        )
        energies = cascade(self.rng)
        self.last_cascade = list(energies)
        return [(GAMMA, energy) for energy in energies]
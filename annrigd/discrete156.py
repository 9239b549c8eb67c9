"""Discrete gamma-ray cascades of 156Gd after thermal 155Gd(n,g)."""

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


def _two_way(first: float, threshold: float, below: Sequence[float], above: Sequence[float]) -> _Cascade:
    """A cascade whose first gamma ray is followed by one of two branches."""

    def cascade(rng: random.Random) -> list[float]:
        tail = below if rng.random() < threshold else above
        return [first, *tail]

    return cascade


def _cascade_6348(rng: random.Random) -> list[float]:
    """6.348 MeV primary with three branches, the last one branching again."""
    rndm = rng.random()
    rndm1 = rng.random()
    if rndm < 0.399:
        return [6.348, 2.188]
    if rndm < 0.724:
        return [6.348, 2.097, 0.089]
    if rndm1 < 0.545:
        return [6.348, 1.036, 1.154]
    return [6.348, 1.036, 1.065, 0.089]


# Relative intensities of the cascades; the last one takes the remainder.
INTENSITIES = (
    0.0064, 0.0838, 0.1628, 0.1266, 0.1163, 0.1088,
    0.0338, 0.0733, 0.0627, 0.0674, 0.1029,
)

_CASCADES: tuple[_Cascade, ...] = (
    _fixed(8.448, 0.089),
    _two_way(7.382, 0.545, (1.154,), (1.065, 0.089)),
    _two_way(7.288, 0.768, (1.158, 0.089), (0.959, 0.199, 0.089)),
    _fixed(6.474, 1.964, 0.098),
    _two_way(6.430, 0.639, (2.017, 0.089), (1.818, 0.199, 0.089)),
    _cascade_6348,
    _fixed(6.319, 2.127, 0.089),
    _two_way(6.034, 0.686, (2.412, 0.089), (2.213, 0.199, 0.089)),
    _two_way(5.885, 0.518, (2.563, 0.089), (2.364, 0.199, 0.089)),
    _fixed(5.779, 2.672, 0.085),
    _fixed(5.698, 2.749, 0.089),
    _fixed(5.661, 2.786, 0.089),
)

_THRESHOLDS = tuple(itertools.accumulate(INTENSITIES))


class Gd156DiscreteModel(Model):
    """Generates one of twelve measured discrete cascades of 156Gd*."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("156GdDiscreteModel", ModelType.GD156_DISCRETE, rng)
        log.info("Gd156DiscreteModel : Model initialized.")

    def cascade_energies(self) -> list[tuple[int, float]]:
        """Pick a cascade by its intensity and return its gamma-ray energies in MeV."""
        rndm = self.rng.random()
        cascade = next(
            (c for c, limit in zip(_CASCADES, _THRESHOLDS) if rndm < limit),
            _CASCADES[-1],
        )
        return [(GAMMA, energy) for energy in cascade(self.rng)]
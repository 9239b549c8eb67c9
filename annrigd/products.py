"""Reaction products and helpers that give them random directions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable

GAMMA = 22
ELECTRON = 11
ELECTRON_MASS = 0.511  # MeV
TWO_PI = 6.28318530717958623


@dataclass(frozen=True)
class ReactionProduct:
    """A particle from a capture reaction: PDG id, total energy and momentum in MeV."""

    pdg_id: int
    e_tot: float
    px: float
    py: float
    pz: float

    def particle_name(self) -> str:
        """Return the transport name: 'gamma' for photons, 'e-' for anything else."""
        return "gamma" if self.pdg_id == GAMMA else "e-"

    def momentum(self) -> tuple[float, float, float]:
        """Return the three-momentum as a tuple."""
        return (self.px, self.py, self.pz)


@dataclass(frozen=True)
class Direction:
    """A unit vector in three dimensions."""

    x: float
    y: float
    z: float


def random_direction(rng: random.Random) -> Direction:
    """Return an isotropically distributed unit vector."""
    cos_theta = 2.0 * rng.random() - 1.0
    sin_theta = math.sin(math.acos(cos_theta))
    phi = TWO_PI * rng.random()
    return Direction(sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta)


def products_with_random_directions(
    energies: Iterable[tuple[int, float]], rng: random.Random
) -> list[ReactionProduct]:
    """Turn (pdg_id, kinetic_energy) pairs into products with random directions.

    Photons and electrons are kept; other particles are dropped, although a
    direction is still drawn for them.
    """
    products = []
    for pdg_id, e_kin in energies:
        direction = random_direction(rng)
        if pdg_id == GAMMA:
            e_tot = e_kin
            p = e_kin
        elif pdg_id == ELECTRON:
            e_tot = e_kin + ELECTRON_MASS
            p = math.sqrt(e_tot * e_tot - ELECTRON_MASS * ELECTRON_MASS)
        else:
            continue
        products.append(
            ReactionProduct(pdg_id, e_tot, p * direction.x, p * direction.y, p * direction.z)
        )
    return products
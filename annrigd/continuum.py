"""Continuum gamma-ray cascades of 156Gd and 158Gd from look-up tables."""

from __future__ import annotations

import bisect
import copy
import logging
import os
import random
from typing import Sequence, Union

import numpy as np

from .model import Model
from .model_type import ModelType
from .products import GAMMA

log = logging.getLogger(__name__)

GD156_SEPARATION_ENERGY = 8.536  # MeV, neutron separation energy of 156Gd
GD158_SEPARATION_ENERGY = 7.937  # MeV, neutron separation energy of 158Gd
MIN_RESIDUAL_ENERGY = 0.2  # MeV, below this no further table look-up is done
GD158_LOW_LINE = 0.182  # MeV

PathLike = Union[str, "os.PathLike[str]"]


def _edges(values: Sequence[float], axis: str) -> np.ndarray:
    edges = np.asarray(values, dtype=float)
    if edges.ndim != 1 or edges.size < 2:
        raise ValueError(f"{axis} edges need at least two values")
    if not np.all(np.diff(edges) > 0):
        raise ValueError(f"{axis} edges must be strictly increasing")
    return edges


class LookupTable:
    """A two-dimensional histogram of gamma-ray energies.

    The x axis is the residual excitation energy, the y axis a random number
    from [0, 1).  Bins are numbered from 1; bin 0 is the underflow and bin
    ``n + 1`` the overflow of an axis, and both hold no content.
    """

    def __init__(self, x_edges, y_edges, contents) -> None:
        self.x_edges = _edges(x_edges, "x")
        self.y_edges = _edges(y_edges, "y")
        values = np.asarray(contents, dtype=float)
        expected = (self.nx, self.ny)
        if values.shape != expected:
            raise ValueError(f"contents have shape {values.shape}, expected {expected}")
        self._cells = np.zeros((self.nx + 2, self.ny + 2))
        self._cells[1:-1, 1:-1] = values

    @property
    def nx(self) -> int:
        return self.x_edges.size - 1

    @property
    def ny(self) -> int:
        return self.y_edges.size - 1

    @property
    def contents(self) -> np.ndarray:
        """The bin contents without underflow and overflow bins."""
        return self._cells[1:-1, 1:-1].copy()

    @classmethod
    def load(cls, path: PathLike) -> "LookupTable":
        """Read a table saved with :meth:`save`."""
        if not os.fspath(path):
            raise ValueError("given input data file name is empty")
        with open(path, "rb") as stream:
            with np.load(stream) as data:
                try:
                    return cls(data["x_edges"], data["y_edges"], data["contents"])
                except KeyError as exc:
                    raise ValueError(f"{path}: missing array {exc}") from None

    def save(self, path: PathLike) -> None:
        """Write the table as a numpy archive."""
        with open(path, "wb") as stream:
            np.savez(stream, x_edges=self.x_edges, y_edges=self.y_edges, contents=self.contents)

    def find_bin(self, x: float, y: float) -> tuple[int, int]:
        """Return the (x, y) bin numbers containing the point."""
        return (
            bisect.bisect_right(self.x_edges.tolist(), x),
            bisect.bisect_right(self.y_edges.tolist(), y),
        )

    def content(self, binx: int, biny: int) -> float:
        """Return the content of a bin; under- and overflow bins hold 0."""
        if not (0 <= binx <= self.nx + 1 and 0 <= biny <= self.ny + 1):
            raise IndexError(f"bin ({binx}, {biny}) out of range")
        return float(self._cells[binx, biny])

    def energy_step(self) -> float:
        """Return the width of one x bin on average."""
        if self.nx <= 0:
            return 0.0
        return float(self.x_edges[-1] - self.x_edges[0]) / self.nx


class ContinuumModel(Model):
    """Generates continuum cascades by repeated table look-ups."""

    def __init__(
        self,
        name: str,
        model_type: ModelType,
        table: LookupTable | PathLike,
        e_max: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, model_type, rng)
        log.info("%s : Initializing model...", type(self).__name__)
        self.table = table if isinstance(table, LookupTable) else LookupTable.load(table)
        self.e_max = e_max
        self.energy_step = self.table.energy_step()
        log.info("%s : Done!", type(self).__name__)

    def gamma_energy(self, e_res: float) -> float:
        """Return a random gamma-ray energy for the residual excitation energy.

        The value looked up is shifted by a random fraction towards the value
        in the next random-number bin.
        """
        binx, biny = self.table.find_bin(e_res, self.rng.random())
        e1 = self.table.content(binx, biny)
        e2 = self.table.content(binx, biny + 1) if biny <= self.table.ny else e1
        e_gamma = e1 - self.rng.random() * (e1 - e2)
        return max(e_gamma, 0.0)

    def cascade_energies(self) -> list[tuple[int, float]]:
        """Return gamma rays whose energies add up to the separation energy."""
        energies = []
        e_res = self.e_max
        while e_res > MIN_RESIDUAL_ENERGY:
            e_gamma = self.gamma_energy(e_res)
            e_res -= e_gamma
            if e_res < 0.0:
                e_gamma += e_res
                e_res = 0.0
            energies.append(e_gamma)
        energies.extend(self._final_gammas(e_res))
        return [(GAMMA, energy) for energy in energies]

    def _final_gammas(self, e_res: float) -> list[float]:
        return [e_res] if e_res > 0.0 else []

    def clone(self) -> "ContinuumModel":
        """Return a copy with its own copy of the look-up table."""
        other = copy.copy(self)
        other.table = copy.deepcopy(self.table)
        return other


class Gd156ContinuumModel(ContinuumModel):
    """Continuum part of the 156Gd* de-excitation after 155Gd(n,g)."""

    def __init__(self, table: LookupTable | PathLike, rng: random.Random | None = None) -> None:
        super().__init__(
            "156GdContinuumV2", ModelType.GD156_CONTINUUM, table, GD156_SEPARATION_ENERGY, rng
        )


class Gd158ContinuumModel(ContinuumModel):
    """Continuum part of the 158Gd* de-excitation after 157Gd(n,g).

    A residual energy above 0.182 MeV is emitted as a 0.182 MeV gamma ray plus
    the rest.  The energies of the most recent cascade are kept in
    ``last_cascade``.
    """

    def __init__(self, table: LookupTable | PathLike, rng: random.Random | None = None) -> None:
        super().__init__(
            "158GdContinuumV2", ModelType.GD158_CONTINUUM, table, GD158_SEPARATION_ENERGY, rng
        )
        self.last_cascade: list[float] = []

    def _final_gammas(self, e_res: float) -> list[float]:
        if e_res > GD158_LOW_LINE:
            return [GD158_LOW_LINE, e_res - GD158_LOW_LINE]
        return super()._final_gammas(e_res)

    def cascade_energies(self) -> list[tuple[int, float]]:
        energies = super().cascade_energies()
        self.last_cascade = [energy for _, energy in energies]
        return energies
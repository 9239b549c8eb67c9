"""Base class for gamma-ray spectrum models and the placeholder model."""

from __future__ import annotations

import abc
import copy
import logging
import random

from .model_type import ModelType, is_known
from .products import ReactionProduct, products_with_random_directions

log = logging.getLogger(__name__)

UNKNOWN_NAME = "-UNKNOWN-"


class Model(abc.ABC):
    """A generator of reaction products for one spectrum component."""

    def __init__(self, name: str, model_type, rng: random.Random | None = None) -> None:
        if not name:
            log.warning("Given model name string is empty. Setting '%s' as name.", UNKNOWN_NAME)
            name = UNKNOWN_NAME
        self.name = name
        self.model_type = model_type
        self.rng = rng if rng is not None else random.Random()

    @abc.abstractmethod
    def cascade_energies(self) -> list[tuple[int, float]]:
        """Return one cascade as (pdg_id, kinetic_energy) pairs in MeV."""

    def generate(self) -> list[ReactionProduct]:
        """Generate the products of one cascade with random directions."""
        return products_with_random_directions(self.cascade_energies(), self.rng)

    def is_dummy(self) -> bool:
        """Return True if this is a placeholder model."""
        return self.model_type == ModelType.DUMMY

    def is_known_model(self) -> bool:
        """Return True if the model type is one of the known types."""
        return is_known(self.model_type)

    def clone(self) -> "Model":
        """Return an independent copy that shares the random generator."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, model_type={self.model_type!r})"


class DummyModel(Model):
    """Placeholder model that produces nothing."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("DummyModel", ModelType.DUMMY, rng)

    def cascade_energies(self) -> list[tuple[int, float]]:
        log.warning(
            "You try to generate reaction products with the dummy model. "
            "This is impossible! No products returned!"
        )
        return []
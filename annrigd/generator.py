"""Gamma-ray generator for thermal neutron capture on gadolinium."""

from __future__ import annotations

import logging
import random

from .model import DummyModel, Model
from .model_type import ModelType, is_known, model_type_name
from .products import ReactionProduct

log = logging.getLogger(__name__)

# Fraction of captures on 157Gd in natural gadolinium, from abundance-weighted
# thermal cross-sections: 0.1565 * 254000 b / (0.1565 * 254000 b + 0.1480 * 60900 b).
GD157_CAPTURE_FRACTION = 0.81517
# Fraction of the 156Gd* de-excitation going through the continuum.
GD156_CONTINUUM_FRACTION = 0.9722
# Fraction of the 158Gd* de-excitation going through the continuum.
GD158_CONTINUUM_FRACTION = 0.93062

_SLOTS = (
    ModelType.GD156_CONTINUUM,
    ModelType.GD158_CONTINUUM,
    ModelType.GD156_DISCRETE,
    ModelType.GD158_DISCRETE,
)


class ModelRejected(ValueError):
    """Raised when a model cannot be used for the requested spectrum component."""


class GdCaptureGammaGenerator:
    """Draws gamma-ray cascades from 155Gd(n,g) and 157Gd(n,g).

    Every spectrum component starts with a placeholder model that produces
    nothing; models passed to the constructor replace them.
    """

    def __init__(
        self,
        gd156_continuum: Model | None = None,
        gd158_continuum: Model | None = None,
        gd156_discrete: Model | None = None,
        gd158_discrete: Model | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._models: dict[ModelType, Model] = {slot: DummyModel(self.rng) for slot in _SLOTS}
        given = {
            ModelType.GD156_CONTINUUM: gd156_continuum,
            ModelType.GD158_CONTINUUM: gd158_continuum,
            ModelType.GD156_DISCRETE: gd156_discrete,
            ModelType.GD158_DISCRETE: gd158_discrete,
        }
        for model_type, model in given.items():
            if model is not None:
                self.set_model(model, model_type)
        if any(model.is_dummy() for model in self._models.values()):
            log.warning("GdCaptureGammaGenerator : Only dummy models set for some components.")
        else:
            log.info("GdCaptureGammaGenerator : Created with all models successfully set.")

    @property
    def gd156_continuum(self) -> Model:
        return self._models[ModelType.GD156_CONTINUUM]

    @property
    def gd158_continuum(self) -> Model:
        return self._models[ModelType.GD158_CONTINUUM]

    @property
    def gd156_discrete(self) -> Model:
        return self._models[ModelType.GD156_DISCRETE]

    @property
    def gd158_discrete(self) -> Model:
        return self._models[ModelType.GD158_DISCRETE]

    def set_model(self, model: Model, model_type) -> None:
        """Use ``model`` for the component ``model_type``.

        Raises ModelRejected if there is no model, if either type is unknown
        or a placeholder, or if the model's own type differs from ``model_type``.
        """
        if model is None:
            raise ModelRejected("there is no model to set")
        if not is_known(model_type):
            raise ModelRejected(f"given model type {model_type!r} is unknown")
        model_type = ModelType(model_type)
        if model_type == ModelType.DUMMY:
            raise ModelRejected(f"cannot set <{model.name}> as dummy model")
        if not model.is_known_model():
            raise ModelRejected(f"given model <{model.name}> is of unknown model type")
        if model.is_dummy():
            raise ModelRejected(f"given model <{model.name}> is a dummy model")
        if model.model_type != model_type:
            raise ModelRejected(
                f"cannot set model <{model.name}>, which is classified as "
                f"<{model_type_name(model.model_type)}>, as a <{model_type.describe()}>"
            )
        self._models[model_type] = model
        log.info(
            "GdCaptureGammaGenerator : Successfully set <%s> as <%s>.",
            model.name,
            model_type.describe(),
        )

    def clone(self) -> "GdCaptureGammaGenerator":
        """Return a generator holding copies of all models."""
        other = GdCaptureGammaGenerator.__new__(GdCaptureGammaGenerator)
        other.rng = self.rng
        other._models = {slot: model.clone() for slot, model in self._models.items()}
        return other

    def generate_nat_gd(self) -> list[ReactionProduct]:
        """Generate products of a capture on natural gadolinium."""
        if self.rng.random() < GD157_CAPTURE_FRACTION:
            return self.generate_158gd()
        return self.generate_156gd()

    def generate_156gd(self) -> list[ReactionProduct]:
        """Generate products of the 156Gd* de-excitation after 155Gd(n,g)."""
        if self.rng.random() < GD156_CONTINUUM_FRACTION:
            return self.generate_156gd_continuum()
        return self.generate_156gd_discrete()

    def generate_156gd_continuum(self) -> list[ReactionProduct]:
        """Generate products from the 156Gd continuum component."""
        return self.gd156_continuum.generate()

    def generate_156gd_discrete(self) -> list[ReactionProduct]:
        """Generate products from the 156Gd discrete peaks."""
        return self.gd156_discrete.generate()

    def generate_158gd(self) -> list[ReactionProduct]:
        """Generate products of the 158Gd* de-excitation after 157Gd(n,g)."""
        if self.rng.random() < GD158_CONTINUUM_FRACTION:
            return self.generate_158gd_continuum()
        return self.generate_158gd_discrete()

    def generate_158gd_continuum(self) -> list[ReactionProduct]:
        """Generate products from the 158Gd continuum component."""
        return self.gd158_continuum.generate()

    def generate_158gd_discrete(self) -> list[ReactionProduct]:
        """Generate products from the 158Gd discrete peaks."""
        return self.gd158_discrete.generate()
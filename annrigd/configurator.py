"""Setting up a capture gamma-ray generator for a given experiment."""

from __future__ import annotations

import logging

from .continuum import Gd156ContinuumModel, Gd158ContinuumModel, LookupTable, PathLike
from .discrete156 import Gd156DiscreteModel
from .discrete158 import Gd158DiscreteModel
from .generator import GdCaptureGammaGenerator
from .model_type import ModelType

log = logging.getLogger(__name__)

NATURAL_GD = 1
ENRICHED_GD157 = 2
ENRICHED_GD155 = 3

BOTH_COMPONENTS = 1
DISCRETE_COMPONENT = 2
CONTINUUM_COMPONENT = 3


def configure(
    generator: GdCaptureGammaGenerator,
    capture_id: int,
    cascade_id: int,
    gd156_table: LookupTable | PathLike,
    gd158_table: LookupTable | PathLike,
) -> None:
    """Install the models needed for a capture process and cascade type.

    ``capture_id`` is 1 for natural Gd (all models), 2 for 157Gd(n,g) and 3
    for 155Gd(n,g).  ``cascade_id`` is 1 for discrete and continuum, 2 for
    discrete only and 3 for continuum only.  Unknown ids leave the generator
    unchanged.
    """
    rng = generator.rng

    def gd156_continuum():
        generator.set_model(Gd156ContinuumModel(gd156_table, rng), ModelType.GD156_CONTINUUM)

    def gd156_discrete():
        generator.set_model(Gd156DiscreteModel(rng), ModelType.GD156_DISCRETE)

    def gd158_continuum():
        generator.set_model(Gd158ContinuumModel(gd158_table, rng), ModelType.GD158_CONTINUUM)

    def gd158_discrete():
        generator.set_model(Gd158DiscreteModel(rng), ModelType.GD158_DISCRETE)

    if capture_id == NATURAL_GD:
        steps = [gd156_continuum, gd156_discrete, gd158_continuum, gd158_discrete]
    elif capture_id == ENRICHED_GD157:
        steps = {
            BOTH_COMPONENTS: [gd158_continuum, gd158_discrete],
            DISCRETE_COMPONENT: [gd158_discrete],
            CONTINUUM_COMPONENT: [gd158_continuum],
        }.get(cascade_id, [])
    elif capture_id == ENRICHED_GD155:
        steps = {
            BOTH_COMPONENTS: [gd156_continuum, gd156_discrete],
            DISCRETE_COMPONENT: [gd156_discrete],
            CONTINUUM_COMPONENT: [gd156_continuum],
        }.get(cascade_id, [])
    else:
        steps = []

    if not steps:
        log.warning(
            "No models configured for capture id %r and cascade id %r.", capture_id, cascade_id
        )
    for step in steps:
        step()
"""Type identifiers for the gamma-ray spectrum models."""

from __future__ import annotations

import enum

UNKNOWN_NAME = "-UNKNOWN-"


class ModelType(enum.IntEnum):
    """Kind of spectrum component a model generates."""

    DUMMY = 0
    GD156_CONTINUUM = 1
    GD156_DISCRETE = 2
    GD158_CONTINUUM = 3
    GD158_DISCRETE = 4

    def describe(self) -> str:
        """Return a human readable name of this model type."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ModelType.DUMMY: "dummy model",
    ModelType.GD156_CONTINUUM: "156Gd continuum model",
    ModelType.GD156_DISCRETE: "156Gd discrete peaks model",
    ModelType.GD158_CONTINUUM: "158Gd continuum model",
    ModelType.GD158_DISCRETE: "158Gd discrete peaks model",
}


def is_known(value) -> bool:
    """Return True if ``value`` names one of the known model types."""
    try:
        ModelType(value)
    except (ValueError, TypeError):
        return False
    return True


def model_type_name(value) -> str:
    """Return the description of ``value``, or '-UNKNOWN-' if it is not a model type."""
    if not is_known(value):
        return UNKNOWN_NAME
    return ModelType(value).describe()
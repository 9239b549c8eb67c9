"""Descriptions of simulation settings and the error for bad settings."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a setting holds a value that is not supported."""

    def __init__(self, file_name: str, parameter: str) -> None:
        self.file_name = file_name
        self.parameter = parameter
        super().__init__(f"{file_name}: check {parameter}")


_DUCTS = {1: "2013B0025 (Al)", 2: "2014B0124 (Al+LiF)"}

_PARTICLES = {
    11: "G4ParticleGun (1 gamma emission)",
    12: "G4ParticleGun (2 gamma emission)",
    2: "  G4GeneralParticleSource (GPS) ",
}

_TARGETS = {
    1: "Gd Target ",
    2: "Cl Target ",
    3: "Eu Source ",
    4: "Co,Na,Cs Source ",
    5: "None Target ",
}

_MODELS = {1: "(ggarnet model) ", 2: "(glg4sim model) ", 3: "(geant4 default) "}

_CAPTURES = {1: "Natural ", 2: "Enrich 157", 3: "Enrich 155"}

_CASCADES = {1: "comparison ", 2: "discrete ", 3: "continuum "}

_VETOES = {
    1: "BGO veto detectors are working!!",
    2: "BGO veto detectors are NOT working!!",
}


def describe_duct(duct: int) -> str:
    """Describe the beam duct of the given experiment, or '' if unknown."""
    return _DUCTS.get(duct, "")


def describe_particle(particle: int) -> str:
    """Describe the primary particle source, or '' if unknown."""
    return _PARTICLES.get(particle, "")


def describe_target(target: int, model: int, capture: int, cascade: int) -> str:
    """Describe the target and, for Gd, the gamma-ray model in use."""
    target_text = _TARGETS.get(target, "")
    model_text = _MODELS.get(model, "")
    if target != 1:
        return target_text
    if model == 3:
        return target_text + model_text
    return _CAPTURES.get(capture, "") + target_text + model_text + _CASCADES.get(cascade, "")


def describe_veto(veto: int) -> str:
    """Describe whether the BGO veto is active, or '' if unknown."""
    return _VETOES.get(veto, "")
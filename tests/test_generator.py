import random

import pytest

from annrigd.discrete158 import Gd158DiscreteModel
from annrigd.generator import GdCaptureGammaGenerator, ModelRejected
from annrigd.model import DummyModel, Model
from annrigd.model_type import ModelType
from annrigd.products import GAMMA


class _QueueRandom(random.Random):
    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        return self.values.pop(0) if self.values else 0.5


class _Tagged(Model):
    def __init__(self, model_type, energy, rng=None):
        super().__init__(f"tagged{energy}", model_type, rng)
        self.energy = energy

    def cascade_energies(self):
        return [(GAMMA, self.energy)]


def _tagged_generator(values):
    rng = _QueueRandom(values)
    return GdCaptureGammaGenerator(
        _Tagged(ModelType.GD156_CONTINUUM, 1.0, rng),
        _Tagged(ModelType.GD158_CONTINUUM, 2.0, rng),
        _Tagged(ModelType.GD156_DISCRETE, 3.0, rng),
        _Tagged(ModelType.GD158_DISCRETE, 4.0, rng),
        rng=rng,
    )


def test_default_generator_uses_dummy_models():
    generator = GdCaptureGammaGenerator(rng=random.Random(1))
    assert generator.gd156_continuum.is_dummy()
    assert generator.gd158_discrete.is_dummy()
    assert generator.generate_nat_gd() == []


@pytest.mark.parametrize(
    "values, energy",
    [
        ([0.5, 0.5], 2.0),
        ([0.5, 0.95], 4.0),
        ([0.9, 0.5], 1.0),
        ([0.9, 0.99], 3.0),
        ([0.81517, 0.5], 1.0),
    ],
)
def test_generate_nat_gd_selects_component(values, energy):
    generator = _tagged_generator(values)
    products = generator.generate_nat_gd()
    assert [p.e_tot for p in products] == [energy]


def test_generate_158gd_threshold():
    generator = _tagged_generator([0.93062])
    assert [p.e_tot for p in generator.generate_158gd()] == [4.0]


def test_generate_156gd_threshold():
    generator = _tagged_generator([0.9722])
    assert [p.e_tot for p in generator.generate_156gd()] == [3.0]


def test_direct_component_generation():
    generator = _tagged_generator([])
    assert generator.generate_156gd_continuum()[0].e_tot == 1.0
    assert generator.generate_158gd_continuum()[0].e_tot == 2.0
    assert generator.generate_156gd_discrete()[0].e_tot == 3.0
    assert generator.generate_158gd_discrete()[0].e_tot == 4.0


def test_set_model_none_rejected():
    generator = GdCaptureGammaGenerator()
    with pytest.raises(ModelRejected):
        generator.set_model(None, ModelType.GD158_DISCRETE)


def test_set_model_unknown_type_rejected():
    generator = GdCaptureGammaGenerator()
    with pytest.raises(ModelRejected):
        generator.set_model(Gd158DiscreteModel(), 99)


def test_set_model_as_dummy_rejected():
    generator = GdCaptureGammaGenerator()
    with pytest.raises(ModelRejected):
        generator.set_model(Gd158DiscreteModel(), ModelType.DUMMY)


def test_set_dummy_model_rejected():
    generator = GdCaptureGammaGenerator()
    with pytest.raises(ModelRejected):
        generator.set_model(DummyModel(), ModelType.GD156_CONTINUUM)


def test_model_of_unknown_type_rejected():
    generator = GdCaptureGammaGenerator()
    with pytest.raises(ModelRejected):
        generator.set_model(_Tagged(42, 1.0), ModelType.GD156_CONTINUUM)


def test_mismatched_type_rejected_and_slot_unchanged():
    generator = GdCaptureGammaGenerator()
    with pytest.raises(ModelRejected):
        generator.set_model(Gd158DiscreteModel(), ModelType.GD156_DISCRETE)
    assert generator.gd156_discrete.is_dummy()


def test_constructor_rejects_wrong_model():
    with pytest.raises(ModelRejected):
        GdCaptureGammaGenerator(gd156_continuum=Gd158DiscreteModel())


def test_set_model_replaces_component():
    rng = random.Random(3)
    generator = GdCaptureGammaGenerator(rng=rng)
    model = Gd158DiscreteModel(rng)
    generator.set_model(model, ModelType.GD158_DISCRETE)
    assert generator.gd158_discrete is model
    products = generator.generate_158gd_discrete()
    assert products
    assert all(p.pdg_id == GAMMA for p in products)
    assert sum(p.e_tot for p in products) == pytest.approx(sum(model.last_cascade))


def test_clone_is_independent():
    generator = _tagged_generator([])
    other = generator.clone()
    assert other.gd158_continuum is not generator.gd158_continuum
    assert other.gd158_continuum.name == generator.gd158_continuum.name
    replacement = _Tagged(ModelType.GD158_CONTINUUM, 9.0)
    other.set_model(replacement, ModelType.GD158_CONTINUUM)
    assert generator.generate_158gd_continuum()[0].e_tot == 2.0
    assert other.generate_158gd_continuum()[0].e_tot == 9.0
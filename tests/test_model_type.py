import pytest

from annrigd.model_type import ModelType, is_known, model_type_name


@pytest.mark.parametrize(
    "model_type, text",
    [
        (ModelType.DUMMY, "dummy model"),
        (ModelType.GD156_CONTINUUM, "156Gd continuum model"),
        (ModelType.GD156_DISCRETE, "156Gd discrete peaks model"),
        (ModelType.GD158_CONTINUUM, "158Gd continuum model"),
        (ModelType.GD158_DISCRETE, "158Gd discrete peaks model"),
    ],
)
def test_describe(model_type, text):
    assert model_type.describe() == text
    assert model_type_name(model_type) == text


def test_every_member_is_known():
    assert all(is_known(member) for member in ModelType)
    assert all(is_known(int(member)) for member in ModelType)


@pytest.mark.parametrize("value", [99, -1, "dummy", None])
def test_unknown_values(value):
    assert is_known(value) is False
    assert model_type_name(value) == "-UNKNOWN-"
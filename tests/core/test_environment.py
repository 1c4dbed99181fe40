import logging

import pytest
from monty.serialization import dumpfn

from astrorates.core.environment import EnvironmentalConditions


def test_defaults():
    conditions = EnvironmentalConditions()
    assert conditions.av == 20.0
    assert conditions.tgas == 10.0
    assert conditions.tdust == 10.0
    assert conditions.chi == 1.0
    assert conditions.cosmic == 1.3e-17
    assert conditions.grain_size == 1e-5


@pytest.mark.parametrize("name", ["tgas", "tdust"])
@pytest.mark.parametrize("value", [0.0, -10.0, float("nan")])
def test_temperatures_must_be_positive(name, value):
    with pytest.raises(ValueError, match=name):
        EnvironmentalConditions(**{name: value})


@pytest.mark.parametrize("name", ["av", "chi", "cosmic", "grain_size"])
def test_negative_quantities(name):
    with pytest.raises(ValueError, match=name):
        EnvironmentalConditions(**{name: -1.0})


def test_null_quantities_are_allowed():
    conditions = EnvironmentalConditions(av=0.0, chi=0.0, cosmic=0.0, grain_size=0.0)
    assert conditions.av == 0.0


def test_immutable():
    conditions = EnvironmentalConditions()
    with pytest.raises(AttributeError):
        conditions.tgas = 20.0


@pytest.mark.parametrize("filename", ["conditions.json", "conditions.yaml"])
def test_file_round_trip(tmp_path, filename):
    conditions = EnvironmentalConditions(av=3.5, tgas=50.0, tdust=20.0, chi=10.0)
    conditions.to_file(tmp_path / filename)
    assert EnvironmentalConditions.from_file(tmp_path / filename) == conditions


def test_partial_file(tmp_path, caplog):
    dumpfn({"tgas": 100.0, "av": 1.0}, tmp_path / "cell.json")
    with caplog.at_level(logging.INFO, logger="astrorates.core.environment"):
        conditions = EnvironmentalConditions.from_file(tmp_path / "cell.json")
    assert conditions == EnvironmentalConditions(tgas=100.0, av=1.0)
    assert "cell.json" in caplog.text


def test_invalid_file(tmp_path):
    dumpfn({"tgas": -5.0}, tmp_path / "cell.json")
    with pytest.raises(ValueError):
        EnvironmentalConditions.from_file(tmp_path / "cell.json")

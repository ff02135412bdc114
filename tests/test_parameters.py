"""Parameter store: ranges, name handling and change notification."""

from __future__ import annotations

import math

import pytest

from gaussian_plot.core.errors import ParameterRangeError, UnsupportedPropertyError
from gaussian_plot.core.parameters import (
    PARAMETER_SPECS,
    ParameterStore,
    PlotParameters,
    canonical_name,
)


@pytest.fixture
def store():
    return ParameterStore()


def _recorder(store):
    calls = []
    store.connect(lambda name, value: calls.append((name, value)))
    return calls


def test_declared_ranges():
    ranges = {name: (spec.minimum, spec.maximum) for name, spec in PARAMETER_SPECS.items()}
    assert ranges == {
        "pitch": (-math.pi, math.pi),
        "yaw": (0.0, math.pi),
        "mean-x": (-10.0, 10.0),
        "mean-y": (-10.0, 10.0),
        "std-x": (0.0, 10.0),
        "std-y": (0.0, 10.0),
    }


def test_defaults(store):
    assert store.snapshot() == PlotParameters(0.0, 0.0, 0.0, 0.0, 1.0, 1.0)
    assert list(store.names()) == ["pitch", "yaw", "mean-x", "mean-y", "std-x", "std-y"]


@pytest.mark.parametrize(
    "name, value",
    [
        ("pitch", -math.pi),
        ("pitch", 1.25),
        ("yaw", math.pi),
        ("mean-x", -10.0),
        ("mean-y", 7.3),
        ("std-x", 0.0),
        ("std-y", 10.0),
    ],
)
def test_in_range_round_trips_exactly(store, name, value):
    store.set(name, value)
    assert store.get(name) == value


@pytest.mark.parametrize(
    "name, value",
    [
        ("pitch", math.pi + 1e-9),
        ("yaw", -0.01),
        ("mean-x", 10.5),
        ("mean-y", -11.0),
        ("std-x", -1.0),
        ("std-y", 10.001),
        ("std-y", float("nan")),
        ("mean-x", "abc"),
        ("mean-x", None),
    ],
)
def test_out_of_range_is_rejected_and_keeps_old_value(store, name, value):
    before = store.get(name)
    calls = _recorder(store)
    with pytest.raises(ParameterRangeError) as excinfo:
        store.set(name, value)
    assert store.get(name) == before
    assert calls == []
    assert excinfo.value.name == name
    assert isinstance(excinfo.value, ValueError)


def test_unknown_name_is_unsupported(store):
    with pytest.raises(UnsupportedPropertyError):
        store.get("sigma")
    with pytest.raises(UnsupportedPropertyError):
        store.set("sigma", 1.0)
    with pytest.raises(KeyError):
        store.get("")


@pytest.mark.parametrize("spelling", ["mean_x", "MEAN-X", " mean-x "])
def test_name_spellings(store, spelling):
    assert canonical_name(spelling) == "mean-x"
    store.set(spelling, 2.0)
    assert store.get("mean-x") == 2.0


def test_listeners_notified_on_every_accepted_set(store):
    calls = _recorder(store)
    store.set("mean_y", 1.0)
    store.set("mean-y", 1.0)
    assert calls == [("mean-y", 1.0), ("mean-y", 1.0)]


def test_disconnect(store):
    calls = []

    def listener(name, value):
        calls.append(name)

    store.connect(listener)
    store.disconnect(listener)
    store.disconnect(listener)
    store.set("yaw", 0.5)
    assert calls == []


def test_update_is_all_or_nothing(store):
    calls = _recorder(store)
    with pytest.raises(ParameterRangeError):
        store.update(mean_x=1.0, std_x=-2.0)
    assert store.get("mean-x") == 0.0
    assert calls == []

    store.update(mean_x=1.0, std_x=2.0)
    assert store.snapshot().mean_x == 1.0
    assert store.snapshot().std_x == 2.0
    assert calls == [("mean-x", 1.0), ("std-x", 2.0)]


def test_reset_restores_defaults(store):
    store.update(pitch=0.4, mean_x=3.0, std_y=5.0)
    calls = _recorder(store)
    store.reset()
    assert store.snapshot() == PlotParameters()
    assert len(calls) == len(PARAMETER_SPECS)


def test_snapshot_is_independent(store):
    snap = store.snapshot()
    snap.mean_x = 9.0
    assert store.get("mean-x") == 0.0


def test_initial_values_are_validated():
    store = ParameterStore(PlotParameters(pitch=1.0, std_x=3.0))
    assert store.get("pitch") == 1.0
    assert store.as_dict()["std_x"] == 3.0
    with pytest.raises(ParameterRangeError):
        ParameterStore(PlotParameters(yaw=4.0))

# GaussianPlot
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Plot parameters, their declared ranges, and the validating parameter store.

Property names follow the toolkit convention (``mean-x``); attribute names on
:class:`PlotParameters` use the Python spelling (``mean_x``). Lookups accept
either form.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace

from gaussian_plot.core.errors import ParameterRangeError, UnsupportedPropertyError

log = logging.getLogger(__name__)

__all__ = [
    "ParameterSpec",
    "PlotParameters",
    "ParameterStore",
    "PARAMETER_SPECS",
    "canonical_name",
    "spec_for",
]

ChangeCallback = Callable[[str, float], None]


@dataclass(frozen=True)
class ParameterSpec:
    """Metadata for one plot parameter (name, label, legal range, default)."""

    name: str
    attr: str
    nick: str
    blurb: str
    minimum: float
    maximum: float
    default: float

    def contains(self, value: float) -> bool:
        # NaN compares false on both sides and is rejected here.
        return self.minimum <= value <= self.maximum


@dataclass
class PlotParameters:
    pitch: float = 0.0
    yaw: float = 0.0
    mean_x: float = 0.0
    mean_y: float = 0.0
    std_x: float = 1.0
    std_y: float = 1.0


PARAMETER_SPECS: dict[str, ParameterSpec] = {
    spec.name: spec
    for spec in (
        ParameterSpec("pitch", "pitch", "Pitch", "Camera pitch (rad)", -math.pi, math.pi, 0.0),
        ParameterSpec("yaw", "yaw", "Yaw", "Camera yaw (rad)", 0.0, math.pi, 0.0),
        ParameterSpec("mean-x", "mean_x", "Mean X", "Mean along x", -10.0, 10.0, 0.0),
        ParameterSpec("mean-y", "mean_y", "Mean Y", "Mean along y", -10.0, 10.0, 0.0),
        ParameterSpec("std-x", "std_x", "Std X", "Standard deviation along x", 0.0, 10.0, 1.0),
        ParameterSpec("std-y", "std_y", "Std Y", "Standard deviation along y", 0.0, 10.0, 1.0),
    )
}

_BY_ATTR = {spec.attr: spec for spec in PARAMETER_SPECS.values()}


def canonical_name(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def spec_for(name: str) -> ParameterSpec:
    """Return the :class:`ParameterSpec` for ``name`` or raise ``UnsupportedPropertyError``."""

    if not isinstance(name, str):
        raise UnsupportedPropertyError(repr(name))
    spec = PARAMETER_SPECS.get(canonical_name(name))
    if spec is None:
        raise UnsupportedPropertyError(name)
    return spec


def _coerce(spec: ParameterSpec, value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ParameterRangeError(spec.name, value, spec.minimum, spec.maximum) from exc
    if not spec.contains(number):
        raise ParameterRangeError(spec.name, value, spec.minimum, spec.maximum)
    return number


class ParameterStore:
    """Owns one :class:`PlotParameters` and validates every write to it.

    Out-of-range values are rejected, never clamped. Every accepted write
    notifies the connected listeners with ``(name, value)``, even when the
    value is unchanged, so a host can always queue a repaint.
    """

    def __init__(self, initial: PlotParameters | None = None) -> None:
        self._values = PlotParameters()
        self._listeners: list[ChangeCallback] = []
        if initial is not None:
            # Validate the initial values with the same rules as set().
            for spec in PARAMETER_SPECS.values():
                value = _coerce(spec, getattr(initial, spec.attr))
                setattr(self._values, spec.attr, value)

    # ------------------------------------------------------------------
    @staticmethod
    def names() -> Iterator[str]:
        return iter(PARAMETER_SPECS)

    @staticmethod
    def spec_for(name: str) -> ParameterSpec:
        return spec_for(name)

    def connect(self, callback: ChangeCallback) -> None:
        self._listeners.append(callback)

    def disconnect(self, callback: ChangeCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------
    def get(self, name: str) -> float:
        return getattr(self._values, spec_for(name).attr)

    def set(self, name: str, value: object) -> None:
        spec = spec_for(name)
        number = _coerce(spec, value)
        setattr(self._values, spec.attr, number)
        log.debug("Parameter %s set to %r", spec.name, number)
        self._notify(spec.name, number)

    def update(self, **values: object) -> None:
        """Apply several parameters at once; nothing is applied if any value is invalid."""

        accepted: list[tuple[ParameterSpec, float]] = []
        for key, value in values.items():
            spec = _BY_ATTR.get(key) or spec_for(key)
            accepted.append((spec, _coerce(spec, value)))
        for spec, number in accepted:
            setattr(self._values, spec.attr, number)
        for spec, number in accepted:
            self._notify(spec.name, number)

    def reset(self) -> None:
        for spec in PARAMETER_SPECS.values():
            setattr(self._values, spec.attr, spec.default)
        for spec in PARAMETER_SPECS.values():
            self._notify(spec.name, spec.default)

    def snapshot(self) -> PlotParameters:
        return replace(self._values)

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self._values, f.name) for f in fields(self._values)}

    # ------------------------------------------------------------------
    def _notify(self, name: str, value: float) -> None:
        for callback in list(self._listeners):
            callback(name, value)

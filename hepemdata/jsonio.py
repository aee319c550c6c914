"""Reading and writing parameters, data and state as JSON text."""

from __future__ import annotations

import json
from typing import Any, Callable, TextIO, TypeVar

from hepemdata.data import HepEmData, State
from hepemdata.parameters import Parameters

_T = TypeVar("_T")


class JsonFormatError(ValueError):
    """Raised when JSON input cannot be read into the expected structure."""


def _dump(stream: TextIO, obj: Any) -> None:
    stream.write(json.dumps(obj, sort_keys=True, separators=(",", ":")))


def _load(stream: TextIO, build: Callable[[Any], _T]) -> _T | None:
    try:
        obj = json.load(stream)
    except json.JSONDecodeError as exc:
        raise JsonFormatError(f"invalid JSON: {exc}") from exc
    if obj is None:
        return None
    try:
        return build(obj)
    except KeyError as exc:
        raise JsonFormatError(f"missing key {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise JsonFormatError(str(exc)) from exc


def parameters_to_json(stream: TextIO, params: Parameters | None) -> None:
    """Write ``params`` to ``stream`` as compact JSON (null for None)."""
    _dump(stream, None if params is None else params.to_dict())


def parameters_from_json(stream: TextIO) -> Parameters | None:
    """Read parameters from ``stream``; JSON null gives None."""
    return _load(stream, Parameters.from_dict)


def data_to_json(stream: TextIO, data: HepEmData | None) -> None:
    """Write ``data`` to ``stream`` as compact JSON (null for None)."""
    _dump(stream, None if data is None else data.to_dict())


def data_from_json(stream: TextIO) -> HepEmData | None:
    """Read the data collection from ``stream``; JSON null gives None."""
    return _load(stream, HepEmData.from_dict)


def state_to_json(stream: TextIO, state: State | None) -> None:
    """Write ``state`` to ``stream`` as compact JSON (null for None)."""
    _dump(stream, None if state is None else state.to_dict())


def state_from_json(stream: TextIO) -> State | None:
    """Read a state from ``stream``; JSON null gives None."""
    return _load(stream, State.from_dict)
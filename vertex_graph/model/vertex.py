import json
import math
from dataclasses import dataclass
from typing import Any, Hashable

from ..exceptions import InvalidArgumentError

_SCALAR_KEYS = (str, int, float, type(None))


@dataclass(frozen=True)
class StructuralKey:
    """Hashable stand-in for a dict or list vertex id."""

    text: str


@dataclass(frozen=True)
class BoolKey:
    """Keeps True and False apart from the ids 1 and 0."""

    value: bool


def _normalise_number(value: float) -> Any:
    # integral floats print like ints; non-finite values print as null
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def _normalise(value: Any, path: frozenset) -> Any:
    if value is None or isinstance(value, (str, int)):
        return value
    if isinstance(value, float):
        return _normalise_number(value)
    if not isinstance(value, (dict, list, tuple)):
        raise InvalidArgumentError(f"{type(value).__name__} values cannot appear in a vertex id.")

    if id(value) in path:
        raise InvalidArgumentError("Circular container cannot be used as a vertex id.")
    path = path | {id(value)}

    if isinstance(value, dict):
        normalised = {}
        for key, item in value.items():
            if not isinstance(key, _SCALAR_KEYS):
                raise InvalidArgumentError(f"Dict key {key!r} cannot appear in a vertex id.")
            if isinstance(key, float):
                key = _normalise_number(key)
            normalised[key] = _normalise(item, path)
        return normalised
    return [_normalise(item, path) for item in value]


def identity_key(vertex_id: Any) -> Hashable:
    """
    Return the key used to compare, hash and look up a vertex id.

    Containers are keyed by their JSON text. Key order is kept, so
    {"x": 0, "y": 0} and {"y": 0, "x": 0} are different ids. Integral floats
    inside containers print as ints, so {"x": 1} and {"x": 1.0} are the same id.
    Booleans never match numbers.
    """
    if isinstance(vertex_id, (dict, list)):
        return StructuralKey(json.dumps(_normalise(vertex_id, frozenset())))
    if isinstance(vertex_id, bool):
        return BoolKey(vertex_id)
    try:
        hash(vertex_id)
    except TypeError as exc:
        raise InvalidArgumentError(f"Vertex id {vertex_id!r} is not hashable.") from exc
    return vertex_id


class Vertex:
    def __init__(self, vertex_id: Any, data: Any = None):
        if vertex_id is None:
            raise InvalidArgumentError("Vertex id cannot be None.")
        self._vertex_id = vertex_id
        self._key = identity_key(vertex_id)
        self.data = data

    @property
    def vertex_id(self) -> Any:
        return self._vertex_id

    @property
    def key(self) -> Hashable:
        return self._key

    def __eq__(self, other: object) -> bool:
        # payload is ignored
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Vertex(vertex_id={self._vertex_id!r}, data={self.data!r})"

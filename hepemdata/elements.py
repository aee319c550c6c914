"""Element data for all elements used by the simulation, indexed by atomic number."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence

MAX_ZET = 120
"""Largest atomic number that can be stored."""

_KEYS = (
    ("zet", "fZet"),
    ("zet13", "fZet13"),
    ("zet23", "fZet23"),
    ("coulomb", "fCoulomb"),
    ("log_z", "fLogZ"),
    ("z_factor1", "fZFactor1"),
    ("delta_max_low", "fDeltaMaxLow"),
    ("delta_max_high", "fDeltaMaxHigh"),
    ("il_var_s1", "fILVarS1"),
    ("il_var_s1_cond", "fILVarS1Cond"),
)


def _number(value: Any, what: str) -> float | int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{what} must be a number, got {type(value).__name__}")
    return value


@dataclass
class ElemData:
    """A single element: atomic number and the derived quantities the models use.

    An entry with ``zet <= 0`` is an unused slot.
    """

    zet: float = -1.0
    zet13: float = 0.0
    zet23: float = 0.0
    coulomb: float = 0.0
    log_z: float = 0.0
    z_factor1: float = 0.0
    delta_max_low: float = 0.0
    delta_max_high: float = 0.0
    il_var_s1: float = 0.0
    il_var_s1_cond: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this element."""
        return {key: getattr(self, attr) for attr, key in _KEYS}

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> ElemData:
        """Build an element from a mapping; missing keys raise KeyError."""
        return cls(**{attr: float(_number(obj[key], key)) for attr, key in _KEYS})


def _all_slots() -> list[ElemData]:
    return [ElemData() for _ in range(MAX_ZET + 1)]


@dataclass
class ElementData:
    """Element data for every atomic number from 0 up to ``max_zet``."""

    element_data: list[ElemData] = field(default_factory=_all_slots)

    @property
    def max_zet(self) -> int:
        """Largest atomic number that can be stored."""
        return len(self.element_data) - 1

    def __getitem__(self, zet: int) -> ElemData:
        return self.element_data[zet]

    def __iter__(self) -> Iterator[ElemData]:
        return iter(self.element_data)

    def used_elements(self) -> list[ElemData]:
        """The elements actually in use, i.e. those with a positive atomic number."""
        return [elem for elem in self.element_data if elem.zet > 0.0]

    def to_list(self) -> list[dict[str, Any]]:
        """Return the JSON-ready list of the used elements."""
        return [elem.to_dict() for elem in self.used_elements()]

    @classmethod
    def from_list(cls, items: Sequence[Mapping[str, Any]]) -> ElementData:
        """Build element data from a list of elements, each placed by its atomic number."""
        if not isinstance(items, (list, tuple)):
            raise TypeError(f"element list must be an array, got {type(items).__name__}")
        result = make_element_data()
        if len(items) > result.max_zet + 1:
            raise ValueError("size of JSON array larger than element data array")
        for item in items:
            elem = ElemData.from_dict(item)
            index = int(elem.zet)
            if not 0 <= index <= result.max_zet:
                raise ValueError(
                    f"atomic number {elem.zet} outside 0..{result.max_zet}"
                )
            result.element_data[index] = elem
        return result


def make_element_data() -> ElementData:
    """Create element data with every slot from Z = 0 to ``MAX_ZET`` at its defaults."""
    return ElementData()
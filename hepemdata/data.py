"""The global data collection and the parameters-plus-data state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

from hepemdata.electron import ElectronData
from hepemdata.elements import ElementData
from hepemdata.gamma import GammaData
from hepemdata.matcut import MatCutData
from hepemdata.materials import MaterialData
from hepemdata.parameters import Parameters
from hepemdata.sbtable import SBTableData

_T = TypeVar("_T")


def _mapping(obj: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise TypeError(f"{what} must be an object, got {type(obj).__name__}")
    return obj


def _optional(obj: Mapping[str, Any], key: str, build: Callable[[Any], _T]) -> _T | None:
    """Read ``obj[key]`` with ``build``, mapping null to None; a missing key raises KeyError."""
    value = obj[key]
    return None if value is None else build(value)


@dataclass
class HepEmData:
    """Every global data structure used by the physics interactions.

    Each member is None until it has been built.
    """

    mat_cut_data: MatCutData | None = None
    material_data: MaterialData | None = None
    element_data: ElementData | None = None
    electron_data: ElectronData | None = None
    positron_data: ElectronData | None = None
    sb_table_data: SBTableData | None = None
    gamma_data: GammaData | None = None

    def clear(self) -> None:
        """Drop every member, leaving the collection ready to be rebuilt."""
        self.mat_cut_data = None
        self.material_data = None
        self.element_data = None
        self.electron_data = None
        self.positron_data = None
        self.sb_table_data = None
        self.gamma_data = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping; absent members, and element data with
        no used element, become null."""
        elements = None
        if self.element_data is not None:
            elements = self.element_data.to_list() or None
        return {
            "fTheMatCutData": None if self.mat_cut_data is None else self.mat_cut_data.to_dict(),
            "fTheMaterialData": (
                None if self.material_data is None else self.material_data.to_dict()
            ),
            "fTheElementData": elements,
            "fTheElectronData": (
                None if self.electron_data is None else self.electron_data.to_dict()
            ),
            "fThePositronData": (
                None if self.positron_data is None else self.positron_data.to_dict()
            ),
            "fTheSBTableData": (
                None if self.sb_table_data is None else self.sb_table_data.to_dict()
            ),
            "fTheGammaData": None if self.gamma_data is None else self.gamma_data.to_dict(),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> HepEmData:
        """Build the collection from a mapping; missing keys raise KeyError."""
        obj = _mapping(obj, "data")
        return cls(
            mat_cut_data=_optional(obj, "fTheMatCutData", MatCutData.from_dict),
            material_data=_optional(obj, "fTheMaterialData", MaterialData.from_dict),
            element_data=_optional(obj, "fTheElementData", ElementData.from_list),
            electron_data=_optional(obj, "fTheElectronData", ElectronData.from_dict),
            positron_data=_optional(obj, "fThePositronData", ElectronData.from_dict),
            sb_table_data=_optional(obj, "fTheSBTableData", SBTableData.from_dict),
            gamma_data=_optional(obj, "fTheGammaData", GammaData.from_dict),
        )


@dataclass
class State:
    """The parameters together with the data built from them."""

    parameters: Parameters | None = None
    data: HepEmData | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping; absent members become null."""
        return {
            "fParameters": None if self.parameters is None else self.parameters.to_dict(),
            "fData": None if self.data is None else self.data.to_dict(),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> State:
        """Build a state from a mapping; missing keys raise KeyError."""
        obj = _mapping(obj, "state")
        return cls(
            parameters=_optional(obj, "fParameters", Parameters.from_dict),
            data=_optional(obj, "fData", HepEmData.from_dict),
        )
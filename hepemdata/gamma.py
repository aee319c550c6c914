"""Gamma conversion and Compton scattering data for every material."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

CONV_ENERGY_GRID_SIZE = 147
"""Number of energies of the conversion grid (146 bins from 2mc^2 to 100 TeV)."""
COMP_ENERGY_GRID_SIZE = 85
"""Number of energies of the Compton grid (84 bins from 100 eV to 100 TeV)."""


def _number(value: Any, what: str) -> float | int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{what} must be a number, got {type(value).__name__}")
    return value


def _array(value: Any, what: str) -> list[Any]:
    """Read a JSON array that may be null (meaning empty)."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{what} must be an array or null, got {type(value).__name__}")
    return value


def _floats(obj: Mapping[str, Any], key: str) -> list[float]:
    return [float(_number(v, f"{key} item")) for v in _array(obj[key], key)]


def _ints(obj: Mapping[str, Any], key: str) -> list[int]:
    return [int(_number(v, f"{key} item")) for v in _array(obj[key], key)]


def _float(obj: Mapping[str, Any], key: str) -> float:
    return float(_number(obj[key], key))


def _span(values: Sequence[Any]) -> list[Any] | None:
    """Write an array, using null for an empty one."""
    return list(values) if values else None


@dataclass
class GammaData:
    """Macroscopic cross sections and the conversion target element selector.

    ``conv_comp_mac_xsec_data`` holds, for each material, the conversion and
    Compton macroscopic cross sections over their energy grids.
    """

    num_materials: int = 0
    conv_log_min_ekin: float = 0.0
    conv_eil_delta: float = 0.0
    conv_energy_grid: list[float] = field(default_factory=list)
    comp_log_min_ekin: float = 0.0
    comp_eil_delta: float = 0.0
    comp_energy_grid: list[float] = field(default_factory=list)
    conv_comp_mac_xsec_data: list[float] = field(default_factory=list)
    elem_selector_conv_log_min_ekin: float = 0.0
    elem_selector_conv_eil_delta: float = 0.0
    elem_selector_conv_start_index_per_mat: list[int] = field(default_factory=list)
    elem_selector_conv_egrid: list[float] = field(default_factory=list)
    elem_selector_conv_data: list[float] = field(default_factory=list)

    @property
    def conv_energy_grid_size(self) -> int:
        """Number of energies of the conversion grid."""
        return CONV_ENERGY_GRID_SIZE

    @property
    def comp_energy_grid_size(self) -> int:
        """Number of energies of the Compton grid."""
        return COMP_ENERGY_GRID_SIZE

    @property
    def elem_selector_conv_egrid_size(self) -> int:
        """Number of energies of the conversion element selector grid."""
        return len(self.elem_selector_conv_egrid)

    @property
    def elem_selector_conv_num_data(self) -> int:
        """Number of conversion element selector values."""
        return len(self.elem_selector_conv_data)

    def mac_xsec_size(self) -> int:
        """Expected number of macroscopic cross section values over all materials."""
        return self.num_materials * 2 * (CONV_ENERGY_GRID_SIZE + COMP_ENERGY_GRID_SIZE)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this data; empty arrays become null."""
        return {
            "fNumMaterials": self.num_materials,
            "fConvLogMinEkin": self.conv_log_min_ekin,
            "fConvEILDelta": self.conv_eil_delta,
            "fConvEnergyGrid": _span(self.conv_energy_grid),
            "fCompLogMinEkin": self.comp_log_min_ekin,
            "fCompEILDelta": self.comp_eil_delta,
            "fCompEnergyGrid": _span(self.comp_energy_grid),
            "fConvCompMacXsecData": _span(self.conv_comp_mac_xsec_data),
            "fElemSelectorConvLogMinEkin": self.elem_selector_conv_log_min_ekin,
            "fElemSelectorConvEILDelta": self.elem_selector_conv_eil_delta,
            "fElemSelectorConvStartIndexPerMat": _span(
                self.elem_selector_conv_start_index_per_mat
            ),
            "fElemSelectorConvEgrid": _span(self.elem_selector_conv_egrid),
            "fElemSelectorConvData": _span(self.elem_selector_conv_data),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> GammaData:
        """Build gamma data from a mapping.

        Missing keys raise KeyError and values of the wrong type raise TypeError.
        """
        result = make_gamma_data()
        result.num_materials = int(_number(obj["fNumMaterials"], "fNumMaterials"))
        result.conv_log_min_ekin = _float(obj, "fConvLogMinEkin")
        result.conv_eil_delta = _float(obj, "fConvEILDelta")
        result.conv_energy_grid = _floats(obj, "fConvEnergyGrid")
        result.comp_log_min_ekin = _float(obj, "fCompLogMinEkin")
        result.comp_eil_delta = _float(obj, "fCompEILDelta")
        result.comp_energy_grid = _floats(obj, "fCompEnergyGrid")
        result.conv_comp_mac_xsec_data = _floats(obj, "fConvCompMacXsecData")
        result.elem_selector_conv_log_min_ekin = _float(obj, "fElemSelectorConvLogMinEkin")
        result.elem_selector_conv_eil_delta = _float(obj, "fElemSelectorConvEILDelta")
        result.elem_selector_conv_start_index_per_mat = _ints(
            obj, "fElemSelectorConvStartIndexPerMat"
        )
        result.elem_selector_conv_egrid = _floats(obj, "fElemSelectorConvEgrid")
        result.elem_selector_conv_data = _floats(obj, "fElemSelectorConvData")
        return result


def make_gamma_data() -> GammaData:
    """Create empty gamma data: no materials and no tables."""
    return GammaData()
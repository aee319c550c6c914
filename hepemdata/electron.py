"""Energy loss, cross section and target element selector data for e-/e+."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

ELOSS_VALUES_PER_ENERGY = 5
"""Energy loss values per grid energy: range, its second derivative, dE/dx,
its second derivative and the inverse range second derivative."""


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


def _span(values: Sequence[Any]) -> list[Any] | None:
    """Write an array, using null for an empty one."""
    return list(values) if values else None


@dataclass
class ElectronData:
    """All energy loss process data for e- or e+ over every material-cuts couple.

    ``eloss_data`` holds, per couple, ``5 * N`` values for the ``N`` energies of
    ``eloss_energy_grid``: range values interleaved with their second
    derivatives, then dE/dx values interleaved with theirs, then the inverse
    range second derivatives. ``res_mac_xsec_data`` holds the restricted
    macroscopic cross section tables for ionisation and bremsstrahlung, and the
    three ``elem_selector_*`` tables hold the target element selectors of the
    ionisation, Seltzer-Berger and relativistic bremsstrahlung models. Start
    indices of -1 mark single-element materials.
    """

    num_mat_cuts: int = 0
    eloss_log_min_ekin: float = 0.0
    eloss_eil_delta: float = 0.0
    eloss_energy_grid: list[float] = field(default_factory=list)
    eloss_data: list[float] = field(default_factory=list)
    res_mac_xsec_start_index_per_mat_cut: list[int] = field(default_factory=list)
    res_mac_xsec_data: list[float] = field(default_factory=list)
    elem_selector_ioni_start_index_per_mat_cut: list[int] = field(default_factory=list)
    elem_selector_ioni_data: list[float] = field(default_factory=list)
    elem_selector_brem_sb_start_index_per_mat_cut: list[int] = field(default_factory=list)
    elem_selector_brem_sb_data: list[float] = field(default_factory=list)
    elem_selector_brem_rb_start_index_per_mat_cut: list[int] = field(default_factory=list)
    elem_selector_brem_rb_data: list[float] = field(default_factory=list)

    @property
    def eloss_energy_grid_size(self) -> int:
        """Number of kinetic energies in the energy loss grid."""
        return len(self.eloss_energy_grid)

    @property
    def res_mac_xsec_num_data(self) -> int:
        """Number of restricted macroscopic cross section values."""
        return len(self.res_mac_xsec_data)

    @property
    def elem_selector_ioni_num_data(self) -> int:
        """Number of ionisation element selector values."""
        return len(self.elem_selector_ioni_data)

    @property
    def elem_selector_brem_sb_num_data(self) -> int:
        """Number of Seltzer-Berger bremsstrahlung element selector values."""
        return len(self.elem_selector_brem_sb_data)

    @property
    def elem_selector_brem_rb_num_data(self) -> int:
        """Number of relativistic bremsstrahlung element selector values."""
        return len(self.elem_selector_brem_rb_data)

    def eloss_data_size(self) -> int:
        """Expected number of energy loss values over all couples."""
        return ELOSS_VALUES_PER_ENERGY * self.eloss_energy_grid_size * self.num_mat_cuts

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this data; empty arrays become null."""
        return {
            "fNumMatCuts": self.num_mat_cuts,
            "fELossLogMinEkin": self.eloss_log_min_ekin,
            "fELossEILDelta": self.eloss_eil_delta,
            "fELossEnergyGrid": _span(self.eloss_energy_grid),
            "fELossData": _span(self.eloss_data),
            "fResMacXSecStartIndexPerMatCut": _span(self.res_mac_xsec_start_index_per_mat_cut),
            "fResMacXSecData": _span(self.res_mac_xsec_data),
            "fElemSelectorIoniStartIndexPerMatCut": _span(
                self.elem_selector_ioni_start_index_per_mat_cut
            ),
            "fElemSelectorIoniData": _span(self.elem_selector_ioni_data),
            "fElemSelectorBremSBStartIndexPerMatCut": _span(
                self.elem_selector_brem_sb_start_index_per_mat_cut
            ),
            "fElemSelectorBremSBData": _span(self.elem_selector_brem_sb_data),
            "fElemSelectorBremRBStartIndexPerMatCut": _span(
                self.elem_selector_brem_rb_start_index_per_mat_cut
            ),
            "fElemSelectorBremRBData": _span(self.elem_selector_brem_rb_data),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> ElectronData:
        """Build electron data from a mapping.

        Missing keys raise KeyError and values of the wrong type raise TypeError.
        Array sizes are taken from the arrays themselves.
        """
        result = make_electron_data()
        result.num_mat_cuts = int(_number(obj["fNumMatCuts"], "fNumMatCuts"))
        result.eloss_log_min_ekin = float(_number(obj["fELossLogMinEkin"], "fELossLogMinEkin"))
        result.eloss_eil_delta = float(_number(obj["fELossEILDelta"], "fELossEILDelta"))
        result.eloss_energy_grid = _floats(obj, "fELossEnergyGrid")
        result.eloss_data = _floats(obj, "fELossData")
        result.res_mac_xsec_start_index_per_mat_cut = _ints(obj, "fResMacXSecStartIndexPerMatCut")
        result.res_mac_xsec_data = _floats(obj, "fResMacXSecData")
        result.elem_selector_ioni_start_index_per_mat_cut = _ints(
            obj, "fElemSelectorIoniStartIndexPerMatCut"
        )
        result.elem_selector_ioni_data = _floats(obj, "fElemSelectorIoniData")
        result.elem_selector_brem_sb_start_index_per_mat_cut = _ints(
            obj, "fElemSelectorBremSBStartIndexPerMatCut"
        )
        result.elem_selector_brem_sb_data = _floats(obj, "fElemSelectorBremSBData")
        result.elem_selector_brem_rb_start_index_per_mat_cut = _ints(
            obj, "fElemSelectorBremRBStartIndexPerMatCut"
        )
        result.elem_selector_brem_rb_data = _floats(obj, "fElemSelectorBremRBData")
        return result


def make_electron_data() -> ElectronData:
    """Create empty electron data: no couples and no tables."""
    return ElectronData()
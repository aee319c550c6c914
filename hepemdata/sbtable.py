"""Sampling tables of the energy transfer for the Seltzer-Berger bremsstrahlung model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

MAX_ZET = 99
"""Largest atomic number with a prepared sampling table."""
NUM_EL_ENERGY = 65
"""Number of electron kinetic energies per element."""
NUM_KAPPA = 54
"""Number of reduced photon energies per electron kinetic energy."""
NUM_START_PER_Z = 121
"""Length of the per-Z start index table."""


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


def _fixed(value: Any, size: int, what: str, kind: type) -> list[Any]:
    """Read a JSON array that must hold exactly ``size`` items."""
    items = _array(value, what)
    if len(items) != size:
        raise ValueError(
            f"JSON array size is different than expected for {what}: "
            f"{len(items)} != {size}"
        )
    return [kind(_number(v, f"{what} item")) for v in items]


def _span(values: Sequence[Any]) -> list[Any] | None:
    """Write an array, using null for an empty one."""
    return list(values) if values else None


@dataclass
class SBTableData:
    """Seltzer-Berger sampling tables and their lookup indices.

    For each Z, the table data starting at ``sb_tables_start_per_z[Z]`` hold
    the number of data, the min/max energy grid indices, the number of gamma
    cuts, and then the sampling tables themselves.
    """

    log_min_el_energy: float = 0.0
    il_delta_el_energy: float = 0.0
    el_energy_vect: list[float] = field(default_factory=lambda: [0.0] * NUM_EL_ENERGY)
    l_el_energy_vect: list[float] = field(default_factory=lambda: [0.0] * NUM_EL_ENERGY)
    kappa_vect: list[float] = field(default_factory=lambda: [0.0] * NUM_KAPPA)
    l_kappa_vect: list[float] = field(default_factory=lambda: [0.0] * NUM_KAPPA)
    gamma_cut_indx_start_index_per_mc: list[int] = field(default_factory=list)
    gamma_cut_indices: list[int] = field(default_factory=list)
    sb_tables_start_per_z: list[int] = field(default_factory=lambda: [0] * NUM_START_PER_Z)
    sb_table_data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name, size in (
            ("el_energy_vect", NUM_EL_ENERGY),
            ("l_el_energy_vect", NUM_EL_ENERGY),
            ("kappa_vect", NUM_KAPPA),
            ("l_kappa_vect", NUM_KAPPA),
            ("sb_tables_start_per_z", NUM_START_PER_Z),
        ):
            length = len(getattr(self, name))
            if length != size:
                raise ValueError(f"{name} must hold {size} values, got {length}")

    @property
    def num_hepem_mat_cuts(self) -> int:
        """Number of material-cuts couples."""
        return len(self.gamma_cut_indx_start_index_per_mc)

    @property
    def num_elems_in_mat_cuts(self) -> int:
        """Number of elements summed over all material-cuts couples."""
        return len(self.gamma_cut_indices)

    @property
    def num_sb_table_data(self) -> int:
        """Number of values in the sampling table data."""
        return len(self.sb_table_data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of the sampling tables."""
        return {
            "fLogMinElEnergy": self.log_min_el_energy,
            "fILDeltaElEnergy": self.il_delta_el_energy,
            "fElEnergyVect": list(self.el_energy_vect),
            "fLElEnergyVect": list(self.l_el_energy_vect),
            "fKappaVect": list(self.kappa_vect),
            "fLKappaVect": list(self.l_kappa_vect),
            "fGammaCutIndxStartIndexPerMC": _span(self.gamma_cut_indx_start_index_per_mc),
            "fGammaCutIndices": _span(self.gamma_cut_indices),
            "fSBStartTablesStartPerZ": list(self.sb_tables_start_per_z),
            "fSBTableData": _span(self.sb_table_data),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> SBTableData:
        """Build sampling tables from a mapping.

        Missing keys raise KeyError; fixed-size arrays of the wrong length raise
        ValueError.
        """
        start_indices = _array(obj["fGammaCutIndxStartIndexPerMC"], "fGammaCutIndxStartIndexPerMC")
        cut_indices = _array(obj["fGammaCutIndices"], "fGammaCutIndices")
        table_data = _array(obj["fSBTableData"], "fSBTableData")

        result = make_sb_table_data(len(start_indices), len(cut_indices), len(table_data))
        result.gamma_cut_indx_start_index_per_mc = [
            int(_number(v, "fGammaCutIndxStartIndexPerMC item")) for v in start_indices
        ]
        result.gamma_cut_indices = [int(_number(v, "fGammaCutIndices item")) for v in cut_indices]
        result.sb_table_data = [float(_number(v, "fSBTableData item")) for v in table_data]

        result.log_min_el_energy = float(_number(obj["fLogMinElEnergy"], "fLogMinElEnergy"))
        result.il_delta_el_energy = float(_number(obj["fILDeltaElEnergy"], "fILDeltaElEnergy"))
        result.el_energy_vect = _fixed(obj["fElEnergyVect"], NUM_EL_ENERGY, "fElEnergyVect", float)
        result.l_el_energy_vect = _fixed(
            obj["fLElEnergyVect"], NUM_EL_ENERGY, "fLElEnergyVect", float
        )
        result.kappa_vect = _fixed(obj["fKappaVect"], NUM_KAPPA, "fKappaVect", float)
        result.l_kappa_vect = _fixed(obj["fLKappaVect"], NUM_KAPPA, "fLKappaVect", float)
        result.sb_tables_start_per_z = _fixed(
            obj["fSBStartTablesStartPerZ"], NUM_START_PER_Z, "fSBStartTablesStartPerZ", int
        )
        return result


def make_sb_table_data(
    num_hepem_mat_cuts: int, num_elems_in_mc: int, num_sb_data: int
) -> SBTableData:
    """Create sampling tables sized for the given numbers of couples, elements and data.

    The per-couple start indices and the gamma cut indices start at -1.
    """
    if num_hepem_mat_cuts < 0 or num_elems_in_mc < 0 or num_sb_data < 0:
        raise ValueError("table sizes must not be negative")
    return SBTableData(
        gamma_cut_indx_start_index_per_mc=[-1] * num_hepem_mat_cuts,
        gamma_cut_indices=[-1] * num_elems_in_mc,
        sb_table_data=[0.0] * num_sb_data,
    )
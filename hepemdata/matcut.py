"""Material-cuts couple data for all couples used in the current geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


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


def _span(values: Sequence[Any]) -> list[Any] | None:
    """Write an array, using null for an empty one."""
    return list(values) if values else None


@dataclass
class MCCData:
    """A single material-cuts couple: production thresholds and indices.

    Energies are in MeV; ``hepem_mat_index`` points into the material data.
    """

    sec_el_prod_cut_e: float = 0.0
    sec_gam_prod_cut_e: float = 0.0
    log_sec_gam_cut_e: float = 0.0
    hepem_mat_index: int = -1
    g4_mat_cut_index: int = -1

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this couple."""
        return {
            "fSecElProdCutE": self.sec_el_prod_cut_e,
            "fSecGamProdCutE": self.sec_gam_prod_cut_e,
            "fLogSecGamCutE": self.log_sec_gam_cut_e,
            "fHepEmMatIndex": self.hepem_mat_index,
            "fG4MatCutIndex": self.g4_mat_cut_index,
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> MCCData:
        """Build a couple from a mapping; missing keys raise KeyError."""
        return cls(
            sec_el_prod_cut_e=float(_number(obj["fSecElProdCutE"], "fSecElProdCutE")),
            sec_gam_prod_cut_e=float(_number(obj["fSecGamProdCutE"], "fSecGamProdCutE")),
            log_sec_gam_cut_e=float(_number(obj["fLogSecGamCutE"], "fLogSecGamCutE")),
            hepem_mat_index=int(_number(obj["fHepEmMatIndex"], "fHepEmMatIndex")),
            g4_mat_cut_index=int(_number(obj["fG4MatCutIndex"], "fG4MatCutIndex")),
        )


@dataclass
class MatCutData:
    """All used material-cuts couples, with the Geant4-to-local index map.

    ``g4_mc_index_to_hepem_mc_index[i]`` is the index into ``mat_cut_data`` of
    the Geant4 couple with index ``i``, or -1 if it is not used.
    """

    g4_mc_index_to_hepem_mc_index: list[int] = field(default_factory=list)
    mat_cut_data: list[MCCData] = field(default_factory=list)

    @property
    def num_g4_mat_cuts(self) -> int:
        """Number of Geant4 material-cuts couples, used or not."""
        return len(self.g4_mc_index_to_hepem_mc_index)

    @property
    def num_mat_cut_data(self) -> int:
        """Number of couples translated."""
        return len(self.mat_cut_data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of all couple data."""
        return {
            "fNumG4MatCuts": self.num_g4_mat_cuts,
            "fNumMatCutData": self.num_mat_cut_data,
            "fG4MCIndexToHepEmMCIndex": _span(self.g4_mc_index_to_hepem_mc_index),
            "fMatCutData": _span([m.to_dict() for m in self.mat_cut_data]),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> MatCutData:
        """Build couple data from a mapping.

        The stored counts fix the sizes; entries not given in the arrays keep
        their defaults. Arrays longer than the counts raise ValueError.
        """
        num_g4 = int(_number(obj["fNumG4MatCuts"], "fNumG4MatCuts"))
        num_used = int(_number(obj["fNumMatCutData"], "fNumMatCutData"))
        result = make_mat_cut_data(num_g4, num_used)

        indices = _array(obj["fG4MCIndexToHepEmMCIndex"], "fG4MCIndexToHepEmMCIndex")
        if len(indices) > num_g4:
            raise ValueError(
                f"fG4MCIndexToHepEmMCIndex has {len(indices)} entries, "
                f"more than fNumG4MatCuts = {num_g4}"
            )
        for pos, value in enumerate(indices):
            result.g4_mc_index_to_hepem_mc_index[pos] = int(
                _number(value, "fG4MCIndexToHepEmMCIndex item")
            )

        couples = _array(obj["fMatCutData"], "fMatCutData")
        if len(couples) > num_used:
            raise ValueError(
                f"fMatCutData has {len(couples)} entries, "
                f"more than fNumMatCutData = {num_used}"
            )
        for pos, item in enumerate(couples):
            result.mat_cut_data[pos] = MCCData.from_dict(item)
        return result


def make_mat_cut_data(num_g4_mat_cuts: int, num_used_g4_mat_cuts: int) -> MatCutData:
    """Create couple data sized for the given numbers of couples.

    Every Geant4 couple is marked unused (-1) and every couple entry starts
    from its defaults.
    """
    if num_g4_mat_cuts < 0 or num_used_g4_mat_cuts < 0:
        raise ValueError("material-cuts couple counts must not be negative")
    return MatCutData(
        g4_mc_index_to_hepem_mc_index=[-1] * num_g4_mat_cuts,
        mat_cut_data=[MCCData() for _ in range(num_used_g4_mat_cuts)],
    )
"""Physics configuration parameters used at initialisation and run time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _number(obj: Mapping[str, Any], key: str) -> float | int:
    value = obj[key]
    if not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return value


@dataclass
class Parameters:
    """Physics modelling configuration.

    Energies are in internal energy units; ``num_loss_table_bins`` is the number
    of log-spaced bins of the energy loss table grid.
    """

    electron_tracking_cut: float
    min_loss_table_energy: float
    max_loss_table_energy: float
    num_loss_table_bins: int
    final_range: float
    drover_range: float
    lin_eloss_limit: float
    electron_brem_model_lim: float

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of these parameters."""
        return {
            "fElectronTrackingCut": self.electron_tracking_cut,
            "fMinLossTableEnergy": self.min_loss_table_energy,
            "fMaxLossTableEnergy": self.max_loss_table_energy,
            "fNumLossTableBins": self.num_loss_table_bins,
            "fFinalRange": self.final_range,
            "fDRoverRange": self.drover_range,
            "fLinELossLimit": self.lin_eloss_limit,
            "fElectronBremModelLim": self.electron_brem_model_lim,
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> Parameters:
        """Build parameters from a mapping; missing keys raise KeyError."""
        return cls(
            electron_tracking_cut=float(_number(obj, "fElectronTrackingCut")),
            min_loss_table_energy=float(_number(obj, "fMinLossTableEnergy")),
            max_loss_table_energy=float(_number(obj, "fMaxLossTableEnergy")),
            num_loss_table_bins=int(_number(obj, "fNumLossTableBins")),
            final_range=float(_number(obj, "fFinalRange")),
            drover_range=float(_number(obj, "fDRoverRange")),
            lin_eloss_limit=float(_number(obj, "fLinELossLimit")),
            electron_brem_model_lim=float(_number(obj, "fElectronBremModelLim")),
        )
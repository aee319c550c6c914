"""Access to the per-couple energy loss tables stored in electron data."""

from __future__ import annotations

from dataclasses import dataclass

from hepemdata.electron import ELOSS_VALUES_PER_ENERGY, ElectronData


def _check_couple(data: ElectronData, imc: int) -> None:
    if not 0 <= imc < data.num_mat_cuts:
        raise IndexError(
            f"material-cuts couple index {imc} outside 0..{data.num_mat_cuts - 1}"
        )


def range_start(data: ElectronData, imc: int) -> int:
    """Index in ``eloss_data`` where the range values of couple ``imc`` start."""
    _check_couple(data, imc)
    return imc * ELOSS_VALUES_PER_ENERGY * data.eloss_energy_grid_size


def dedx_start(data: ElectronData, imc: int) -> int:
    """Index in ``eloss_data`` where the dE/dx values of couple ``imc`` start."""
    return range_start(data, imc) + 2 * data.eloss_energy_grid_size


def inverse_range_start(data: ElectronData, imc: int) -> int:
    """Index in ``eloss_data`` where the inverse range second derivatives of couple ``imc`` start."""
    return range_start(data, imc) + 4 * data.eloss_energy_grid_size


@dataclass(frozen=True)
class ELossBlock:
    """The energy loss tables of one material-cuts couple over the energy grid."""

    energies: tuple[float, ...]
    range: tuple[float, ...]
    range_sd: tuple[float, ...]
    dedx: tuple[float, ...]
    dedx_sd: tuple[float, ...]
    inv_range_sd: tuple[float, ...]


def eloss_block(data: ElectronData, imc: int) -> ELossBlock:
    """Split out the range, dE/dx and inverse range tables of couple ``imc``.

    Raises IndexError for an unknown couple and ValueError when the stored
    energy loss data are too short to hold the couple's tables.
    """
    size = data.eloss_energy_grid_size
    start = range_start(data, imc)
    end = start + ELOSS_VALUES_PER_ENERGY * size
    if len(data.eloss_data) < end:
        raise ValueError(
            f"energy loss data hold {len(data.eloss_data)} values, "
            f"couple {imc} needs {end}"
        )
    values = data.eloss_data
    range_pairs = values[start : start + 2 * size]
    dedx_pairs = values[start + 2 * size : start + 4 * size]
    return ELossBlock(
        energies=tuple(data.eloss_energy_grid),
        range=tuple(range_pairs[0::2]),
        range_sd=tuple(range_pairs[1::2]),
        dedx=tuple(dedx_pairs[0::2]),
        dedx_sd=tuple(dedx_pairs[1::2]),
        inv_range_sd=tuple(values[start + 4 * size : end]),
    )
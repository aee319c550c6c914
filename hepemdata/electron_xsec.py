"""Access to the restricted macroscopic cross section and target element selector tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from hepemdata.electron import ElectronData

_XSEC_HEADER = 5
_SELECTOR_HEADER = 4


class SelectorModel(Enum):
    """Interaction models that carry a target element selector."""

    IONI = "ioni"
    BREM_SB = "brem_sb"
    BREM_RB = "brem_rb"


_SELECTOR_FIELDS = {
    SelectorModel.IONI: (
        "elem_selector_ioni_start_index_per_mat_cut",
        "elem_selector_ioni_data",
    ),
    SelectorModel.BREM_SB: (
        "elem_selector_brem_sb_start_index_per_mat_cut",
        "elem_selector_brem_sb_data",
    ),
    SelectorModel.BREM_RB: (
        "elem_selector_brem_rb_start_index_per_mat_cut",
        "elem_selector_brem_rb_data",
    ),
}


@dataclass(frozen=True)
class XSecTable:
    """A restricted macroscopic cross section table of one couple and one interaction."""

    num_energies: int
    argmax: int
    max_value: float
    log_min_ekin: float
    eil_delta: float
    energies: tuple[float, ...]
    xsec: tuple[float, ...]
    xsec_sd: tuple[float, ...]


@dataclass(frozen=True)
class ElemSelectorTable:
    """Normalised element-wise cross section contributions of one couple.

    ``probabilities[i]`` holds the contributions of the first ``num_elements - 1``
    elements at ``energies[i]``; the last element's is 1 by normalisation.
    """

    num_energies: int
    num_elements: int
    log_min_ekin: float
    eil_delta: float
    energies: tuple[float, ...]
    probabilities: tuple[tuple[float, ...], ...]


def _check_couple(data: ElectronData, imc: int, starts: Sequence[int], what: str) -> int:
    if not 0 <= imc < data.num_mat_cuts:
        raise IndexError(
            f"material-cuts couple index {imc} outside 0..{data.num_mat_cuts - 1}"
        )
    if imc >= len(starts):
        raise ValueError(f"{what} start indices hold {len(starts)} entries, need {imc + 1}")
    return starts[imc]


def _count(values: Sequence[float], index: int, what: str) -> int:
    count = int(values[index])
    if count < 0:
        raise ValueError(f"{what} has a negative count {count}")
    return count


def _read_xsec(values: Sequence[float], start: int) -> tuple[XSecTable, int]:
    if start < 0 or len(values) < start + _XSEC_HEADER:
        raise ValueError(f"cross section data too short for a table at index {start}")
    num = _count(values, start, "cross section table")
    end = start + _XSEC_HEADER + 3 * num
    if len(values) < end:
        raise ValueError(
            f"cross section data hold {len(values)} values, table at {start} needs {end}"
        )
    triples = values[start + _XSEC_HEADER : end]
    table = XSecTable(
        num_energies=num,
        argmax=int(values[start + 1]),
        max_value=float(values[start + 2]),
        log_min_ekin=float(values[start + 3]),
        eil_delta=float(values[start + 4]),
        energies=tuple(triples[0::3]),
        xsec=tuple(triples[1::3]),
        xsec_sd=tuple(triples[2::3]),
    )
    return table, end


def ioni_xsec_start(data: ElectronData, imc: int) -> int:
    """Index in ``res_mac_xsec_data`` where the ionisation table of couple ``imc`` starts."""
    return _check_couple(
        data, imc, data.res_mac_xsec_start_index_per_mat_cut, "cross section"
    )


def brem_xsec_start(data: ElectronData, imc: int) -> int:
    """Index in ``res_mac_xsec_data`` where the bremsstrahlung table of couple ``imc`` starts."""
    _, end = _read_xsec(data.res_mac_xsec_data, ioni_xsec_start(data, imc))
    return end


def ioni_xsec(data: ElectronData, imc: int) -> XSecTable:
    """The restricted ionisation cross section table of couple ``imc``."""
    table, _ = _read_xsec(data.res_mac_xsec_data, ioni_xsec_start(data, imc))
    return table


def brem_xsec(data: ElectronData, imc: int) -> XSecTable:
    """The restricted bremsstrahlung cross section table of couple ``imc``."""
    table, _ = _read_xsec(data.res_mac_xsec_data, brem_xsec_start(data, imc))
    return table


def elem_selector(
    data: ElectronData, model: SelectorModel | str, imc: int
) -> ElemSelectorTable | None:
    """The target element selector of ``model`` for couple ``imc``.

    Returns None for single-element materials (start index -1).
    """
    model = SelectorModel(model)
    starts_name, values_name = _SELECTOR_FIELDS[model]
    starts = getattr(data, starts_name)
    values = getattr(data, values_name)
    start = _check_couple(data, imc, starts, f"{model.value} element selector")
    if start == -1:
        return None
    if start < 0 or len(values) < start + _SELECTOR_HEADER:
        raise ValueError(f"element selector data too short for a table at index {start}")
    num_energies = _count(values, start, "element selector")
    num_elements = _count(values, start + 1, "element selector")
    if num_elements < 1:
        raise ValueError("element selector must cover at least one element")
    first = start + _SELECTOR_HEADER
    end = first + num_elements * num_energies
    if len(values) < end:
        raise ValueError(
            f"element selector data hold {len(values)} values, table at {start} needs {end}"
        )
    rows = [
        tuple(values[row : row + num_elements])
        for row in range(first, end, num_elements)
    ]
    return ElemSelectorTable(
        num_energies=num_energies,
        num_elements=num_elements,
        log_min_ekin=float(values[start + 2]),
        eil_delta=float(values[start + 3]),
        energies=tuple(float(row[0]) for row in rows),
        probabilities=tuple(tuple(row[1:]) for row in rows),
    )
import pytest

from hepemdata.electron import ElectronData
from hepemdata.electron_eloss import (
    ELossBlock,
    dedx_start,
    eloss_block,
    inverse_range_start,
    range_start,
)

GRID = [1.0, 10.0, 100.0]


def _couple_tables(c):
    n = len(GRID)
    rng = [c * 1000.0 + i for i in range(n)]
    rng_sd = [c * 1000.0 + 100 + i for i in range(n)]
    dedx = [c * 1000.0 + 200 + i for i in range(n)]
    dedx_sd = [c * 1000.0 + 300 + i for i in range(n)]
    inv = [c * 1000.0 + 400 + i for i in range(n)]
    return rng, rng_sd, dedx, dedx_sd, inv


def _layout(c):
    rng, rng_sd, dedx, dedx_sd, inv = _couple_tables(c)
    out = []
    for r, rs in zip(rng, rng_sd):
        out += [r, rs]
    for d, ds in zip(dedx, dedx_sd):
        out += [d, ds]
    return out + inv


@pytest.fixture
def data():
    eloss = []
    for c in range(3):
        eloss += _layout(c)
    return ElectronData(num_mat_cuts=3, eloss_energy_grid=list(GRID), eloss_data=eloss)


def test_first_couple_starts_at_zero(data):
    assert range_start(data, 0) == 0


def test_starts_are_spaced_by_layout(data):
    n = len(GRID)
    for imc in range(3):
        assert dedx_start(data, imc) - range_start(data, imc) == 2 * n
        assert inverse_range_start(data, imc) - range_start(data, imc) == 4 * n
    assert range_start(data, 2) - range_start(data, 1) == 5 * n


@pytest.mark.parametrize("imc", [0, 1, 2])
def test_block_matches_layout(data, imc):
    rng, rng_sd, dedx, dedx_sd, inv = _couple_tables(imc)
    block = eloss_block(data, imc)
    assert block == ELossBlock(
        energies=tuple(GRID),
        range=tuple(rng),
        range_sd=tuple(rng_sd),
        dedx=tuple(dedx),
        dedx_sd=tuple(dedx_sd),
        inv_range_sd=tuple(inv),
    )


def test_block_values_found_at_start_indices(data):
    block = eloss_block(data, 1)
    assert data.eloss_data[range_start(data, 1)] == block.range[0]
    assert data.eloss_data[dedx_start(data, 1)] == block.dedx[0]
    assert data.eloss_data[inverse_range_start(data, 1)] == block.inv_range_sd[0]


@pytest.mark.parametrize("imc", [-1, 3, 10])
def test_unknown_couple_raises(data, imc):
    with pytest.raises(IndexError):
        range_start(data, imc)
    with pytest.raises(IndexError):
        eloss_block(data, imc)


def test_short_data_raises(data):
    data.eloss_data = data.eloss_data[:-1]
    with pytest.raises(ValueError):
        eloss_block(data, 2)
    assert eloss_block(data, 0).range == tuple(_couple_tables(0)[0])
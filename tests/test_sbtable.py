import pytest

from hepemdata.sbtable import (
    NUM_EL_ENERGY,
    NUM_KAPPA,
    NUM_START_PER_Z,
    SBTableData,
    make_sb_table_data,
)


def _filled():
    data = make_sb_table_data(2, 3, 4)
    data.log_min_el_energy = -6.9
    data.il_delta_el_energy = 4.2
    data.el_energy_vect = [float(i) for i in range(NUM_EL_ENERGY)]
    data.l_el_energy_vect = [0.5 * i for i in range(NUM_EL_ENERGY)]
    data.kappa_vect = [i / NUM_KAPPA for i in range(NUM_KAPPA)]
    data.l_kappa_vect = [-float(i) for i in range(NUM_KAPPA)]
    data.gamma_cut_indx_start_index_per_mc = [0, 2]
    data.gamma_cut_indices = [0, 1, 0]
    data.sb_tables_start_per_z = list(range(NUM_START_PER_Z))
    data.sb_table_data = [1.5, 2.5, 3.5, 4.5]
    return data


def test_fixed_sizes():
    data = make_sb_table_data(0, 0, 0)
    assert len(data.el_energy_vect) == 65
    assert len(data.kappa_vect) == 54
    assert len(data.sb_tables_start_per_z) == 121


def test_make_fills_indices_with_minus_one():
    data = make_sb_table_data(3, 5, 7)
    assert data.gamma_cut_indx_start_index_per_mc == [-1, -1, -1]
    assert data.gamma_cut_indices == [-1] * 5
    assert data.num_hepem_mat_cuts == 3
    assert data.num_elems_in_mat_cuts == 5
    assert data.num_sb_table_data == 7


def test_make_negative_size():
    with pytest.raises(ValueError):
        make_sb_table_data(-1, 0, 0)


def test_round_trip():
    data = _filled()
    assert SBTableData.from_dict(data.to_dict()) == data


def test_dict_uses_start_per_z_key():
    d = _filled().to_dict()
    assert d["fSBStartTablesStartPerZ"] == list(range(NUM_START_PER_Z))
    assert "fSBTablesStartPerZ" not in d


def test_empty_dynamic_arrays_are_null():
    d = make_sb_table_data(0, 0, 0).to_dict()
    assert d["fGammaCutIndxStartIndexPerMC"] is None
    assert d["fGammaCutIndices"] is None
    assert d["fSBTableData"] is None
    restored = SBTableData.from_dict(d)
    assert restored.num_sb_table_data == 0
    assert restored.num_hepem_mat_cuts == 0


def test_wrong_fixed_size_raises():
    d = _filled().to_dict()
    d["fKappaVect"] = d["fKappaVect"][:-1]
    with pytest.raises(ValueError):
        SBTableData.from_dict(d)


def test_null_fixed_array_raises():
    d = _filled().to_dict()
    d["fElEnergyVect"] = None
    with pytest.raises(ValueError):
        SBTableData.from_dict(d)


def test_missing_key_raises():
    d = _filled().to_dict()
    del d["fLogMinElEnergy"]
    with pytest.raises(KeyError):
        SBTableData.from_dict(d)


def test_constructor_checks_fixed_sizes():
    with pytest.raises(ValueError):
        SBTableData(kappa_vect=[0.0])
import json

import pytest

from hepemdata.gamma import GammaData, make_gamma_data


@pytest.fixture
def filled():
    return GammaData(
        num_materials=2,
        conv_log_min_ekin=0.021759358706830,
        conv_eil_delta=7.935247775833226,
        conv_energy_grid=[1.1, 2.2, 3.3],
        comp_log_min_ekin=-9.210340371976182,
        comp_eil_delta=3.040061373322763,
        comp_energy_grid=[0.0001, 0.001],
        conv_comp_mac_xsec_data=[0.5, 0.25, 0.125],
        elem_selector_conv_log_min_ekin=1.5,
        elem_selector_conv_eil_delta=2.5,
        elem_selector_conv_start_index_per_mat=[-1, 0],
        elem_selector_conv_egrid=[1.0, 2.0],
        elem_selector_conv_data=[0.3, 0.7, 0.4, 0.6],
    )


def test_fixed_grid_sizes():
    data = make_gamma_data()
    assert data.conv_energy_grid_size == 147
    assert data.comp_energy_grid_size == 85


def test_empty_defaults():
    data = make_gamma_data()
    assert data.num_materials == 0
    assert data.mac_xsec_size() == 0
    assert data.elem_selector_conv_num_data == 0
    assert data.elem_selector_conv_egrid_size == 0


def test_mac_xsec_size_scales_with_materials():
    one = GammaData(num_materials=1).mac_xsec_size()
    three = GammaData(num_materials=3).mac_xsec_size()
    assert three == 3 * one
    assert one == 2 * (
        GammaData().conv_energy_grid_size + GammaData().comp_energy_grid_size
    )


def test_round_trip(filled):
    again = GammaData.from_dict(filled.to_dict())
    assert again == filled
    assert again.elem_selector_conv_num_data == len(filled.elem_selector_conv_data)


def test_round_trip_through_json_text(filled):
    text = json.dumps(filled.to_dict())
    assert GammaData.from_dict(json.loads(text)) == filled


def test_empty_arrays_written_as_null():
    out = make_gamma_data().to_dict()
    for key in (
        "fConvEnergyGrid",
        "fCompEnergyGrid",
        "fConvCompMacXsecData",
        "fElemSelectorConvStartIndexPerMat",
        "fElemSelectorConvEgrid",
        "fElemSelectorConvData",
    ):
        assert out[key] is None
    assert GammaData.from_dict(out) == make_gamma_data()


def test_keys_written(filled):
    out = filled.to_dict()
    assert out["fNumMaterials"] == 2
    assert out["fElemSelectorConvStartIndexPerMat"] == [-1, 0]
    assert out["fConvEILDelta"] == filled.conv_eil_delta


def test_missing_key_raises(filled):
    obj = filled.to_dict()
    del obj["fCompEILDelta"]
    with pytest.raises(KeyError):
        GammaData.from_dict(obj)


def test_wrong_type_raises(filled):
    obj = filled.to_dict()
    obj["fConvEnergyGrid"] = "grid"
    with pytest.raises(TypeError):
        GammaData.from_dict(obj)
    obj = filled.to_dict()
    obj["fNumMaterials"] = "two"
    with pytest.raises(TypeError):
        GammaData.from_dict(obj)
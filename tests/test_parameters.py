import json

import pytest

from hepemdata.parameters import Parameters


def _params():
    return Parameters(
        electron_tracking_cut=0.001,
        min_loss_table_energy=1.0e-4,
        max_loss_table_energy=1.0e8,
        num_loss_table_bins=84,
        final_range=1.0,
        drover_range=0.2,
        lin_eloss_limit=0.01,
        electron_brem_model_lim=1000.0,
    )


def test_to_dict_uses_format_keys():
    d = _params().to_dict()
    assert set(d) == {
        "fElectronTrackingCut",
        "fMinLossTableEnergy",
        "fMaxLossTableEnergy",
        "fNumLossTableBins",
        "fFinalRange",
        "fDRoverRange",
        "fLinELossLimit",
        "fElectronBremModelLim",
    }
    assert d["fNumLossTableBins"] == 84
    assert d["fDRoverRange"] == 0.2


def test_round_trip_through_json_text():
    p = _params()
    restored = Parameters.from_dict(json.loads(json.dumps(p.to_dict())))
    assert restored == p


def test_int_field_from_float_value_is_truncated():
    d = _params().to_dict()
    d["fNumLossTableBins"] = 84.0
    restored = Parameters.from_dict(d)
    assert restored.num_loss_table_bins == 84
    assert isinstance(restored.num_loss_table_bins, int)


def test_integer_energy_becomes_float():
    d = _params().to_dict()
    d["fMaxLossTableEnergy"] = 100
    restored = Parameters.from_dict(d)
    assert restored.max_loss_table_energy == 100.0
    assert isinstance(restored.max_loss_table_energy, float)


@pytest.mark.parametrize("key", list(_params().to_dict()))
def test_missing_key_raises(key):
    d = _params().to_dict()
    del d[key]
    with pytest.raises(KeyError):
        Parameters.from_dict(d)


def test_non_numeric_value_raises():
    d = _params().to_dict()
    d["fFinalRange"] = "1.0"
    with pytest.raises(TypeError):
        Parameters.from_dict(d)
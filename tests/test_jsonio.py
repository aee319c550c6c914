import io
import json

import pytest

from hepemdata.data import HepEmData, State
from hepemdata.electron import ElectronData
from hepemdata.elements import ElemData, make_element_data
from hepemdata.jsonio import (
    JsonFormatError,
    data_from_json,
    data_to_json,
    parameters_from_json,
    parameters_to_json,
    state_from_json,
    state_to_json,
)
from hepemdata.matcut import MCCData, make_mat_cut_data
from hepemdata.parameters import Parameters


def _parameters():
    return Parameters(0.001, 0.0001, 1.0e8, 84, 1.0, 0.2, 0.01, 1000.0)


def _data():
    matcut = make_mat_cut_data(2, 1)
    matcut.g4_mc_index_to_hepem_mc_index[0] = 0
    matcut.mat_cut_data[0] = MCCData(0.5, 0.1, -2.3, 0, 0)
    elements = make_element_data()
    elements.element_data[82] = ElemData(zet=82.0, log_z=4.4)
    electron = ElectronData(
        num_mat_cuts=1,
        eloss_energy_grid=[0.001, 0.01],
        eloss_data=[float(i) for i in range(10)],
    )
    return HepEmData(mat_cut_data=matcut, element_data=elements, electron_data=electron)


def _write(writer, obj):
    stream = io.StringIO()
    writer(stream, obj)
    return stream.getvalue()


def test_parameters_round_trip():
    params = _parameters()
    text = _write(parameters_to_json, params)
    assert parameters_from_json(io.StringIO(text)) == params


def test_parameters_json_holds_given_values():
    text = _write(parameters_to_json, _parameters())
    assert '"fNumLossTableBins":84' in text
    assert json.loads(text)["fElectronBremModelLim"] == 1000.0


def test_output_is_compact_with_sorted_keys():
    text = _write(state_to_json, State(parameters=_parameters(), data=_data()))
    assert " " not in text
    obj = json.loads(text)
    assert list(obj) == sorted(obj)
    assert list(obj["fData"]) == sorted(obj["fData"])


def test_data_round_trip():
    data = _data()
    text = _write(data_to_json, data)
    assert data_from_json(io.StringIO(text)) == data


def test_state_round_trip():
    state = State(parameters=_parameters(), data=_data())
    text = _write(state_to_json, state)
    assert state_from_json(io.StringIO(text)) == state


def test_state_round_trip_through_file(tmp_path):
    state = State(parameters=_parameters(), data=None)
    path = tmp_path / "state.json"
    with path.open("w") as out:
        state_to_json(out, state)
    with path.open() as inp:
        assert state_from_json(inp) == state


def test_none_is_written_as_null_and_read_back():
    assert _write(data_to_json, None) == "null"
    assert data_from_json(io.StringIO("null")) is None
    assert parameters_from_json(io.StringIO("null")) is None
    assert state_from_json(io.StringIO("null")) is None


def test_invalid_json_raises():
    with pytest.raises(JsonFormatError):
        data_from_json(io.StringIO("{not json"))


def test_missing_key_raises():
    with pytest.raises(JsonFormatError):
        state_from_json(io.StringIO('{"fParameters": null}'))


def test_wrong_value_type_raises():
    obj = _parameters().to_dict()
    obj["fFinalRange"] = "far"
    with pytest.raises(JsonFormatError):
        parameters_from_json(io.StringIO(json.dumps(obj)))


def test_non_object_top_level_raises_value_error():
    with pytest.raises(ValueError):
        data_from_json(io.StringIO("[1, 2]"))


def test_oversized_count_mismatch_raises():
    obj = HepEmData().to_dict()
    obj["fTheMatCutData"] = {
        "fNumG4MatCuts": 1,
        "fNumMatCutData": 0,
        "fG4MCIndexToHepEmMCIndex": [0, 1],
        "fMatCutData": None,
    }
    with pytest.raises(JsonFormatError):
        data_from_json(io.StringIO(json.dumps(obj)))
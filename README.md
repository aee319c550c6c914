# hepemdata

Plain Python containers for the tables used to simulate electromagnetic
showers of e-, e+ and gamma. The package can also read and write these
tables as JSON.

## The containers

- `hepemdata.parameters.Parameters` holds the physics settings. These are the tracking cut, the energy grid of the loss tables, the step-limit parameters and the energy limit between the two bremsstrahlung models.
- `hepemdata.elements.ElementData` holds one `ElemData` slot for every atomic number from 0 to `MAX_ZET` (120). An element with `zet <= 0` marks an unused slot.
- `hepemdata.materials.MaterialData` holds the materials in use as `MatData` entries, each with its element composition. It also maps Geant4 material indices to local indices.
- `hepemdata.matcut.MatCutData` holds the material-cuts couples as `MCCData` entries, each with its production thresholds. It also maps Geant4 couple indices to local indices.
- `hepemdata.electron.ElectronData` holds the e- or e+ tables in flat arrays. These are the energy-loss tables, the restricted macroscopic cross sections and the target element selectors.
- `hepemdata.sbtable.SBTableData` holds the Seltzer-Berger bremsstrahlung sampling tables.
- `hepemdata.gamma.GammaData` holds the macroscopic cross sections for conversion and Compton scattering, and the element selector for conversion.
- `hepemdata.data.HepEmData` collects all of the tables above. Each member is `None` until it is set. `clear()` drops every member.
- `hepemdata.data.State` pairs a `Parameters` with a `HepEmData`.

Array sizes such as `num_material_data` and `eloss_energy_grid_size` are
read-only properties. Their values come from the lengths of the lists they
describe.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Creating containers

- `make_material_data(num_g4_mat, num_used_g4_mat)` sets every index-map entry to -1, which means "not used". It creates the requested number of default `MatData` entries.
- `make_mat_cut_data(num_g4_mat_cuts, num_used_g4_mat_cuts)` works the same way for couples.
- `make_sb_table_data(num_hepem_mat_cuts, num_elems_in_mc, num_sb_data)` sets the start indices and the gamma-cut indices to -1. It sets the table data to zeros.
- `make_element_data()` creates slots for Z = 0 to 120. Every slot holds default values.
- `make_electron_data()` and `make_gamma_data()` return empty containers.

Negative counts raise `ValueError`.

```python
from hepemdata.materials import make_material_data
from hepemdata.matcut import make_mat_cut_data
from hepemdata.elements import make_element_data

materials = make_material_data(num_g4_mat=10, num_used_g4_mat=3)
couples = make_mat_cut_data(num_g4_mat_cuts=12, num_used_g4_mat_cuts=4)
elements = make_element_data()
```

## Reading the flat electron tables

Two modules slice out the tables of one material-cuts couple, selected by
its index `imc`.

`hepemdata.electron_eloss`:

- `range_start`, `dedx_start` and `inverse_range_start` return the start offsets in `eloss_data`.
- `eloss_block` returns an `ELossBlock` with these fields: the energies, range, dE/dx, their second derivatives, and the second derivatives of the inverse range.

`hepemdata.electron_xsec`:

- `ioni_xsec_start` and `brem_xsec_start` return the start offsets of the cross-section tables.
- `ioni_xsec` and `brem_xsec` return `XSecTable` objects.
- `elem_selector(data, model, imc)` returns an `ElemSelectorTable` for a `SelectorModel`: `IONI`, `BREM_SB` or `BREM_RB`. The strings `"ioni"`, `"brem_sb"` and `"brem_rb"` are also accepted. It returns `None` when the couple's material has a single element.

An unknown couple index raises `IndexError`. Data too short to hold the
requested table raise `ValueError`.

```python
from hepemdata.electron_eloss import eloss_block
from hepemdata.electron_xsec import ioni_xsec, brem_xsec, elem_selector, SelectorModel

block = eloss_block(electron_data, imc=0)
ioni = ioni_xsec(electron_data, imc=0)
brem = brem_xsec(electron_data, imc=0)
selector = elem_selector(electron_data, SelectorModel.IONI, imc=0)
```

## JSON input and output

Every container has `to_dict` and `from_dict`. The exception is
`ElementData`, which uses `to_list` and `from_list`.

`hepemdata.jsonio` reads and writes open text streams:

- `parameters_to_json` and `parameters_from_json`
- `data_to_json` and `data_from_json`
- `state_to_json` and `state_from_json`

Output is compact JSON with sorted keys. Details of the format:

- Empty arrays are written as `null`. `None` is written as `null`.
- Reading a JSON `null` gives `None`.
- Only elements with a positive Z are written. On reading, each element goes back into the slot for its Z. Element data with no used element is written as `null`.
- When a document is invalid JSON, lacks a key, or holds a value of the wrong type or size, the read functions raise `JsonFormatError`, a subclass of `ValueError`.

```python
from hepemdata.jsonio import state_to_json, state_from_json

with open("state.json", "w") as out:
    state_to_json(out, state)

with open("state.json") as src:
    restored = state_from_json(src)
```

## What the package does not do

The package stores, slices and serialises tables. It does not compute
them: there is no code that builds materials, cross sections or sampling
tables from a detector geometry or from physics models. There is no
interpolation or sampling at run time, and there is no command-line
program.
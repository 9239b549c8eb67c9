# annrigd

Gamma-ray cascade generators for thermal neutron capture on gadolinium,
together with the per-event bookkeeping for a germanium detector array
that has BGO veto counters.

## What it provides

- **Cascade models** (`annrigd.discrete156`, `annrigd.discrete158`,
  `annrigd.continuum`). `Gd156DiscreteModel` and `Gd158DiscreteModel` pick one
  of the measured discrete transition sequences by its relative intensity.
  `Gd156ContinuumModel` and `Gd158ContinuumModel` build continuum cascades by
  repeated look-ups in a two-dimensional `LookupTable` until the residual
  excitation energy drops below 0.2 MeV. Every model has
  `cascade_energies()`, which returns `(pdg_id, kinetic_energy)` pairs in MeV,
  and `generate()`, which returns `ReactionProduct` objects with isotropic
  random directions. `DummyModel` is a placeholder that produces nothing.
- **Look-up tables.** `LookupTable(x_edges, y_edges, contents)` takes the bin
  edges of the residual-energy axis and of the random-number axis and a
  `(nx, ny)` array of gamma-ray energies. `save(path)` writes it as a numpy
  archive and `LookupTable.load(path)` reads it back. A continuum model accepts
  either a table or a path to such an archive.
- **Generator** (`annrigd.generator`). `GdCaptureGammaGenerator` chooses the
  isotope for natural Gd (`generate_nat_gd`), then the continuum or discrete
  component (`generate_156gd`, `generate_158gd`), or draws one component
  directly. `set_model` raises `ModelRejected` for a missing, placeholder or
  mismatched model. `annrigd.configurator.configure` installs the models a
  capture id (1 natural, 2 157Gd, 3 155Gd) and cascade id (1 both,
  2 discrete, 3 continuum) need.
- **Detector bookkeeping** (`annrigd.hits`, `annrigd.event`).
  `EnergyDepositCollector` sums deposits per channel and turns them into `Hit`
  objects at `end_event()`. `build_event_record` converts Ge, side-BGO and
  top-BGO hits to keV, applies the BGO veto per detector half and the
  thresholds, and returns an `EventRecord` with the hit pattern `bit` and the
  upper and lower sums. `count_capture_gammas`, `format_trajectory`,
  `format_hit_crystals` and `format_hit_bgo` help with per-event reports.
- **Settings text** (`annrigd.messages`, `annrigd.app`). Descriptions of the
  beam duct, target, particle source and veto setting, the start-up summary
  `describe_settings`, and the run-log entries `run_log_header` and
  `run_log_footer`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Example

```python
import random
from annrigd.discrete158 import Gd158DiscreteModel

model = Gd158DiscreteModel(random.Random(1234))
for product in model.generate():
    print(product.particle_name(), product.e_tot, product.momentum())
print(model.last_cascade)
```

## Command line

```
annrigd
```

prints the settings summary and appends a start and an end entry to the run
log (`MC.log` unless `--log` names another file). Options:

- `--events N` draws N cascades with the ANNRI-Gd models and prints, per
  cascade, the number of gamma rays followed by their energies in MeV.
- `--seed S` sets the random seed; otherwise one is derived from the clock.
- `--capture {1,2,3}` and `--cascade {1,2,3}` select the capture process and
  cascade type (defaults 2 and 3).
- `--gd156-table PATH` and `--gd158-table PATH` name the look-up table
  archives for the continuum models.

## What it does not do

There is no detector geometry and no particle transport: the package does not
track gamma rays through the Ge crystals and BGO counters. Hits have to be
supplied by the caller, and the command line only prints the drawn cascades
rather than writing a tree of detector responses.

## Running the tests

```
pytest
```
# sphgrid

This package provides building blocks for particle-based fluid simulation (smoothed particle
hydrodynamics) in 2D and 3D. It uses only the standard library. Points and vectors are plain
tuples of floats.

## What it offers

- `sphgrid.hgrid`: `HGrid` is a spatial hash grid with integer cell keys. It offers
  `insert`, `key`, `cell`, `cell_containing_point`, `cells`, `neighbor_cells`,
  `cells_intersecting_aabb` and `clear`. The helpers `cell_range` and `cell_range_around`
  enumerate blocks of cells, with the first axis varying fastest.
- `sphgrid.contacts`: neighbour search between fluid and boundary particles.
  - `insert_fluids_to_grid` and `insert_boundaries_to_grid` put particles on a grid as
    `HGridEntry` values.
  - `compute_contacts` fills per-particle `ParticlesContacts` lists for fluid–fluid,
    fluid–boundary and boundary–boundary pairs.
  - `compute_self_contacts` does the same for the particles of a single fluid.
  - Any object with a `positions` sequence can serve as a fluid or a boundary.
  - The grid's cell width must equal the search radius `h`.
  - Contacts are created with a zero weight and a zero gradient.
- `sphgrid.contact_manager`: `ContactManager` holds the three groups of contact lists.
  `update_contacts` refreshes them and `ncontacts` gives the total count.
- `sphgrid.counters`: an accumulating `Timer` that measures only while enabled; you can pass
  your own clock. `Counters` groups `StagesCounters`, `CollisionDetectionCounters` and
  `SolverCounters`. Each of these has `enable`, `disable`, `reset` and a text report through
  `str()`.
- `sphgrid.scenes`: helpers for setting up scenes.
  - `cube_points` builds a block of particle centres centred on the origin.
  - `heightfield_heights_2d` and `heightfield_heights_3d` build ground profiles with raised
    borders.
  - Demo selection by name uses `camel_case`, `demo_name_from_args`, `sort_demo_names` and
    `select_demo`.
- `sphgrid.vectors`: tuple vector helpers: `add`, `sub`, `scale`, `dot`, `norm`,
  `distance_squared`, `lerp`, `normalize_or_none` and `gcross_matrix`.
- `sphgrid.masks`: `filter_from_mask` drops the items whose mask entry is true.

## What it does not do

This package finds neighbouring particles and keeps the bookkeeping around them. It does not
simulate fluids:

- It has no smoothing kernels.
- It has no pressure or viscosity solver and no time stepping.
- It has no coupling with rigid bodies.
- It has no rendering and no command-line program.

## Installing

```
pip install .
```

## Example

```python
from types import SimpleNamespace

from sphgrid.contacts import ParticlesContacts, compute_self_contacts
from sphgrid.scenes import cube_points

radius = 0.1
h = radius * 2.0 * 2.0
fluid = SimpleNamespace(positions=cube_points((4, 4), radius))

contacts = ParticlesContacts()
compute_self_contacts(h, fluid, contacts)
print(len(contacts), len(contacts.particle_contacts(0)))
```

## Running the tests

```
pip install .[test]
pytest
```
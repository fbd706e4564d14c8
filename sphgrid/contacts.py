"""Neighbourhood search between fluid and boundary particles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence, Sequence

from sphgrid.counters import Counters
from sphgrid.hgrid import Cell, HGrid
from sphgrid.vectors import Vector, distance_squared

# Half of the neighbourhood of a cell: every unordered pair of adjacent
# cells is visited exactly once when each cell is combined with these offsets.
_NEIGHBOUR_OFFSETS: dict[int, tuple[Cell, ...]] = {
    2: ((0, 0), (0, 1), (1, -1), (1, 0), (1, 1)),
    3: (
        (0, 0, 0),
        (0, 0, 1),
        (0, 1, -1),
        (0, 1, 0),
        (0, 1, 1),
        (1, -1, -1),
        (1, -1, 0),
        (1, -1, 1),
        (1, 0, -1),
        (1, 0, 0),
        (1, 0, 1),
        (1, 1, -1),
        (1, 1, 0),
        (1, 1, 1),
    ),
}


@dataclass(frozen=True)
class HGridEntry:
    """A particle inserted on a spatial grid: its object index and particle index."""

    model: int
    particle: int
    is_boundary: bool = False

    def into_tuple(self) -> tuple[int, int, bool]:
        """Return ``(object index, particle index, is_boundary)``."""
        return self.model, self.particle, self.is_boundary


@dataclass
class Contact:
    """A one-way contact: particle ``j`` of ``j_model`` acting on particle ``i`` of ``i_model``."""

    i: int
    i_model: int
    j: int
    j_model: int
    weight: float = 0.0
    gradient: Vector = ()

    def flip(self) -> Contact:
        """The same contact seen from the other particle, with the gradient negated."""
        return Contact(
            i=self.j,
            i_model=self.j_model,
            j=self.i,
            j_model=self.i_model,
            weight=self.weight,
            gradient=tuple(-g for g in self.gradient),
        )

    def is_same_particle_contact(self) -> bool:
        """Whether this contact involves a single particle with itself."""
        return self.i_model == self.j_model and self.i == self.j

    def is_same_model_contact(self) -> bool:
        """Whether both particles belong to the same object."""
        return self.i_model == self.j_model


class ParticlesContacts:
    """The contacts affecting each particle of one object."""

    def __init__(self) -> None:
        self._contacts: list[list[Contact]] = []

    def __repr__(self) -> str:
        return f"ParticlesContacts(particles={len(self._contacts)}, contacts={len(self)})"

    @property
    def contacts(self) -> list[list[Contact]]:
        """Per-particle contact lists; entry ``i`` holds the contacts of particle ``i``."""
        return self._contacts

    def particle_contacts(self, i: int) -> list[Contact]:
        """The contacts affecting particle ``i``."""
        return self._contacts[i]

    def reset(self, num_particles: int) -> None:
        """Drop every contact and size the set for ``num_particles`` particles."""
        if num_particles < 0:
            raise ValueError(f"number of particles must be non-negative, got {num_particles}")
        for contacts in self._contacts:
            contacts.clear()
        del self._contacts[num_particles:]
        self._contacts.extend([] for _ in range(num_particles - len(self._contacts)))

    def __len__(self) -> int:
        return sum(len(contacts) for contacts in self._contacts)


def insert_fluids_to_grid(fluids: Sequence[Any], grid: HGrid) -> None:
    """Insert every fluid particle into ``grid``."""
    for fluid_id, fluid in enumerate(fluids):
        for particle_id, point in enumerate(fluid.positions):
            grid.insert(point, HGridEntry(fluid_id, particle_id, is_boundary=False))


def insert_boundaries_to_grid(boundaries: Sequence[Any], grid: HGrid) -> None:
    """Insert every boundary particle into ``grid``."""
    for boundary_id, boundary in enumerate(boundaries):
        for particle_id, point in enumerate(boundary.positions):
            grid.insert(point, HGridEntry(boundary_id, particle_id, is_boundary=True))


def _resize(sets: MutableSequence[ParticlesContacts], size: int) -> None:
    del sets[size:]
    sets.extend(ParticlesContacts() for _ in range(size - len(sets)))


def _zero_contact(
    i_model: int, i: int, j_model: int, j: int, dim: int
) -> Contact:
    return Contact(i=i, i_model=i_model, j=j, j_model=j_model, weight=0.0, gradient=(0.0,) * dim)


def compute_contacts(
    counters: Counters,
    h: float,
    fluids: Sequence[Any],
    boundaries: Sequence[Any],
    fluid_fluid_contacts: MutableSequence[ParticlesContacts],
    fluid_boundary_contacts: MutableSequence[ParticlesContacts],
    boundary_boundary_contacts: MutableSequence[ParticlesContacts],
    grid: HGrid,
) -> None:
    """Compute the contacts between all particles inserted in ``grid``.

    The contact lists are resized to match ``fluids`` and ``boundaries`` and filled in place.
    The grid cell width must equal ``h``.
    """
    if h != grid.cell_width:
        raise ValueError(
            f"kernel radius {h} must equal the grid cell width {grid.cell_width}"
        )

    timer = counters.cd.neighborhood_search_time
    timer.resume()
    try:
        _resize(fluid_fluid_contacts, len(fluids))
        _resize(fluid_boundary_contacts, len(fluids))
        _resize(boundary_boundary_contacts, len(boundaries))

        for fluid, contacts in zip(fluids, fluid_fluid_contacts):
            contacts.reset(len(fluid.positions))
        for fluid, contacts in zip(fluids, fluid_boundary_contacts):
            contacts.reset(len(fluid.positions))
        for boundary, contacts in zip(boundaries, boundary_boundary_contacts):
            contacts.reset(len(boundary.positions))

        for curr_cell, curr_particles in grid.cells():
            offsets = _NEIGHBOUR_OFFSETS.get(len(curr_cell))
            if offsets is None:
                raise ValueError(
                    f"contacts need 2D or 3D cells, got {len(curr_cell)} components"
                )
            for offset in offsets:
                neighbor_cell = tuple(c + o for c, o in zip(curr_cell, offset))
                neighbor_particles = grid.cell(neighbor_cell)
                if neighbor_particles is not None:
                    _contacts_for_pair_of_cells(
                        h,
                        fluids,
                        boundaries,
                        fluid_fluid_contacts,
                        fluid_boundary_contacts,
                        boundary_boundary_contacts,
                        curr_cell == neighbor_cell,
                        curr_particles,
                        neighbor_particles,
                    )
    finally:
        timer.pause()


def _contacts_for_pair_of_cells(
    h: float,
    fluids: Sequence[Any],
    boundaries: Sequence[Any],
    fluid_fluid_contacts: Sequence[ParticlesContacts],
    fluid_boundary_contacts: Sequence[ParticlesContacts],
    boundary_boundary_contacts: Sequence[ParticlesContacts],
    same_cell: bool,
    curr_particles: Sequence[HGridEntry],
    neighbor_particles: Sequence[HGridEntry],
) -> None:
    hh = h * h
    for entry_i in curr_particles:
        model_i, particle_i, boundary_i = entry_i.into_tuple()
        if boundary_i:
            pi = boundaries[model_i].positions[particle_i]
            for entry_j in neighbor_particles:
                model_j, particle_j, boundary_j = entry_j.into_tuple()
                if boundary_j:
                    pj = boundaries[model_j].positions[particle_j]
                    if distance_squared(pi, pj) <= hh:
                        contact = _zero_contact(model_i, particle_i, model_j, particle_j, len(pi))
                        boundary_boundary_contacts[model_i].contacts[particle_i].append(contact)
                        if not same_cell:
                            boundary_boundary_contacts[model_j].contacts[particle_j].append(
                                contact.flip()
                            )
                else:
                    # Inside one cell the fluid particle's own pass records this pair.
                    if same_cell:
                        continue
                    pj = fluids[model_j].positions[particle_j]
                    if distance_squared(pi, pj) <= hh:
                        contact = _zero_contact(model_j, particle_j, model_i, particle_i, len(pi))
                        fluid_boundary_contacts[model_j].contacts[particle_j].append(contact)
        else:
            pi = fluids[model_i].positions[particle_i]
            for entry_j in neighbor_particles:
                model_j, particle_j, boundary_j = entry_j.into_tuple()
                owner = boundaries if boundary_j else fluids
                pj = owner[model_j].positions[particle_j]
                if distance_squared(pi, pj) > hh:
                    continue
                contact = _zero_contact(model_i, particle_i, model_j, particle_j, len(pi))
                if boundary_j:
                    fluid_boundary_contacts[model_i].contacts[particle_i].append(contact)
                else:
                    fluid_fluid_contacts[model_i].contacts[particle_i].append(contact)
                    if not same_cell:
                        fluid_fluid_contacts[model_j].contacts[particle_j].append(contact.flip())


def compute_self_contacts(h: float, fluid: Any, contacts: ParticlesContacts) -> None:
    """Compute the contacts between the particles of a single fluid."""
    positions = fluid.positions
    contacts.reset(len(positions))

    grid: HGrid[int] = HGrid(h)
    for index, point in enumerate(positions):
        grid.insert(point, index)

    hh = h * h
    for cell, curr_particles in grid.cells():
        neighbors = list(grid.neighbor_cells(cell, h))
        for particle_i in curr_particles:
            pi = positions[particle_i]
            for _, nbh_particles in neighbors:
                for particle_j in nbh_particles:
                    if distance_squared(pi, positions[particle_j]) <= hh:
                        contacts.contacts[particle_i].append(
                            _zero_contact(0, particle_i, 0, particle_j, len(pi))
                        )
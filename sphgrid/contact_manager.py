"""Grouping of all contacts between fluid and boundary particles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from sphgrid.contacts import ParticlesContacts, compute_contacts
from sphgrid.counters import Counters
from sphgrid.hgrid import HGrid


@dataclass
class ContactManager:
    """Computes and holds the contacts of every fluid and boundary object."""

    fluid_fluid_contacts: list[ParticlesContacts] = field(default_factory=list)
    fluid_boundary_contacts: list[ParticlesContacts] = field(default_factory=list)
    boundary_boundary_contacts: list[ParticlesContacts] = field(default_factory=list)

    def ncontacts(self) -> int:
        """Total number of contacts; each pair of distinct particles counts twice."""
        return sum(
            len(contacts)
            for group in (
                self.fluid_fluid_contacts,
                self.fluid_boundary_contacts,
                self.boundary_boundary_contacts,
            )
            for contacts in group
        )

    def update_contacts(
        self,
        counters: Counters,
        h: float,
        fluids: Sequence[Any],
        boundaries: Sequence[Any],
        hgrid: HGrid,
    ) -> None:
        """Recompute every contact between the particles inserted on ``hgrid``."""
        compute_contacts(
            counters,
            h,
            fluids,
            boundaries,
            self.fluid_fluid_contacts,
            self.fluid_boundary_contacts,
            self.boundary_boundary_contacts,
            hgrid,
        )
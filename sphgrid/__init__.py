"""Spatial hash grids, neighbour contacts, counters and scene helpers for SPH fluid simulation."""

__version__ = "0.1.0"
__all__ = [
    "contact_manager",
    "contacts",
    "counters",
    "hgrid",
    "masks",
    "scenes",
    "vectors",
]
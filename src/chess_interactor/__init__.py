"""Interactive judge for the King+Queen vs King mating exercise."""

__version__ = "0.1.0"

"""Instruction generation, validation and PNG previews for a belt-driven drawing machine."""

__version__ = "0.1.0"
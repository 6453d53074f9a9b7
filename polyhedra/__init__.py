"""Platonic solid classification, polyhedral mesh import, triangle subdivision and UCD export."""

__version__ = "1.0.0"
__all__ = ["mesh", "ucd", "importer", "triangulation", "cli"]
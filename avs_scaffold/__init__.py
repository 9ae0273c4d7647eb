"""Scaffolding generator for EigenLayer AVS projects."""

__version__ = "1.0.0"

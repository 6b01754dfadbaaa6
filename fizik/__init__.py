"""Two-dimensional particle simulation with gravity, Coulomb forces and collisions, rendered as block-character text."""

__version__ = "0.1.0"
__all__ = ["shapes", "physics", "io", "cli"]
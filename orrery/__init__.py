"""N-body solar system simulation with relativistic corrections, a gravity-well grid, geometry and camera controls."""

__version__ = "0.1.0"
"""Live departure board for multi-leg transit journeys between two stations."""

__version__ = "0.1.0"

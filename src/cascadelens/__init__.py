"""cascadelens - CSS specificity calculation and cascade conflict resolution."""

__version__ = "0.1.0"

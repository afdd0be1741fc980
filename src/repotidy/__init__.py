"""Repository housekeeping utilities: remote branch sweeping and route inventory."""

__version__ = "0.1.0"

__all__ = ["__version__"]

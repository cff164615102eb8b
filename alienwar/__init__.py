"""Containers, units and armies for a simulation of an Earth army fighting an alien army."""

__version__ = "0.1.0"
__all__ = ["__version__"]
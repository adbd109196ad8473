"""Rectiling — rectangular tiling generation by local constraint propagation."""

__version__ = "0.1.0"

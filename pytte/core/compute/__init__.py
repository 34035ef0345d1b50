"""
Compute utilities shared by the fitting and plotting layers.
"""

from pytte.core.compute.timing import Timer

__all__ = ["Timer"]

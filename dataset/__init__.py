"""
dataset/
--------
Core data layer.  Public API:

    from dataset import Dataset, Marker
"""

from dataset.markers import Marker
from dataset.dataset import Dataset

__all__ = [
    "Dataset",
    "Marker",
]

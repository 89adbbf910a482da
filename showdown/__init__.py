"""Showdown - five-card poker hand evaluation.

Classifies 5-card hands into the ten standard categories and orders any
two hands for settling a showdown.
"""

__version__ = "0.1.0"
__author__ = "Showdown Team"

from showdown.rules import Comparison, HandCategory, classify_hand, compare_hands
from showdown.utils.seeding import set_seed

__all__ = [
    "__version__",
    "Comparison",
    "HandCategory",
    "classify_hand",
    "compare_hands",
    "set_seed",
]

"""Play simulation core.

Accuracy evaluation, judgement-count synthesis and combo counting.
"""

from .accuracy import evaluate, percent_to_fraction, weighted_sum
from .combo import max_combo, resolve_combo
from .synth import shift_coarse, shift_fine, synthesize

__all__ = [
    "evaluate",
    "percent_to_fraction",
    "weighted_sum",
    "max_combo",
    "resolve_combo",
    "shift_coarse",
    "shift_fine",
    "synthesize",
]

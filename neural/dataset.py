"""
neuron_classifier module: neural/dataset.py

Fixed Dog/Cat training set.

Features, in order: weight, height, pointy ears, whiskers, vertical pupil.
Label 0 is a dog, 1 is a cat.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Sample:
    features: Tuple[float, ...]
    label: int


def _sample(features: Tuple[int, ...], label: int) -> Sample:
    return Sample(features=tuple(float(f) for f in features), label=label)


TRAINING_SAMPLES: List[Sample] = [
    _sample((1, 1, 1, 0, 0), 0),
    _sample((1, 0, 0, 0, 0), 0),
    _sample((0, 0, 0, 0, 0), 0),
    _sample((0, 0, 1, 0, 0), 0),
    _sample((1, 0, 0, 1, 1), 1),
    _sample((1, 1, 1, 1, 1), 1),
    _sample((0, 0, 0, 1, 1), 1),
    _sample((0, 0, 0, 0, 1), 1),
]

# inputs classified by the CLI after training
PREDICTION_INPUTS: List[Tuple[float, ...]] = [
    (1.0, 1.0, 0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0, 1.0, 1.0),
]

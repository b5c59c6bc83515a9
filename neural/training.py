"""
neuron_classifier module: neural/training.py

Online training driver plus inference helpers.
"""

from __future__ import annotations
import random
from typing import Sequence

import config
from neural.dataset import Sample
from neural.neuron import Neuron


RULES = ("delta", "perceptron")


def pick_sample_index(rng: random.Random, index_range: int = config.SAMPLE_INDEX_RANGE) -> int:
    return rng.randrange(index_range)


def train(
    neuron: Neuron,
    samples: Sequence[Sample],
    rng: random.Random,
    iterations: int = config.TRAIN_ITERATIONS,
    index_range: int = config.SAMPLE_INDEX_RANGE,
    rule: str = config.TRAINING_RULE,
) -> None:
    """
    Run ``iterations`` single-sample updates in place.

    Samples are drawn uniformly from indices [0, index_range); with the
    default range of 7 the last of the 8 built-in samples is never used.
    """
    if rule not in RULES:
        raise ValueError(f"Unknown training rule '{rule}', expected one of {RULES}")
    if not 0 < index_range <= len(samples):
        raise ValueError(f"index_range {index_range} outside 1..{len(samples)}")

    update = neuron.train_step if rule == "delta" else neuron.perceptron_step
    for _ in range(iterations):
        sample = samples[pick_sample_index(rng, index_range)]
        update(sample.features, sample.label)


def classify(neuron: Neuron, inputs: Sequence[float], labels: Sequence[str] = config.LABELS) -> str:
    return labels[neuron.step_activation(inputs)]


def accuracy(neuron: Neuron, samples: Sequence[Sample]) -> float:
    if not samples:
        return 0.0
    hits = sum(1 for s in samples if neuron.step_activation(s.features) == s.label)
    return hits / len(samples)

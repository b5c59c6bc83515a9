"""
Train the Dog/Cat neuron on the built-in samples and print two predictions.
"""

from __future__ import annotations
import random
import time
from typing import List, Optional

import config
from neural.dataset import PREDICTION_INPUTS, TRAINING_SAMPLES
from neural.neuron import Neuron
from neural.training import classify, train


def make_rng(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed)


def run(seed: Optional[int] = None) -> List[str]:
    rng = make_rng(seed)
    neuron = Neuron(config.NUM_FEATURES, rng=rng)
    train(neuron, TRAINING_SAMPLES, rng)
    return [f"Prediction: {classify(neuron, inputs)}" for inputs in PREDICTION_INPUTS]


def main():
    for line in run(config.SEED):
        print(line)


if __name__ == "__main__":
    main()

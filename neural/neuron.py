"""
neuron_classifier module: neural/neuron.py

Single logistic neuron:
- one weight per input feature plus a bias weight at index 0
- continuous (logistic) output while training, hard 0/1 output at inference
- online delta-rule update scaled by a fixed bias multiplier and learning rate
"""

from __future__ import annotations
import math
import random
from typing import List, Optional, Sequence

import config


class InvalidInputError(ValueError):
    """Input vector or target does not match what the neuron was built for."""


def logistic(x: float) -> float:
    # clamp so math.exp stays in range for very negative sums
    return 1.0 / (1.0 + math.exp(-max(-500.0, min(500.0, x))))


def step(x: float) -> int:
    return 1 if x >= 0 else 0


def weight_delta(error: float, output: float) -> float:
    # error scaled by the logistic derivative at ``output``
    return error * output * (1.0 - output)


class Neuron:
    def __init__(
        self,
        num_features: int,
        rng: Optional[random.Random] = None,
        bias: float = config.BIAS,
        learning_rate: float = config.LEARNING_RATE,
    ):
        if num_features < 1:
            raise ValueError(f"num_features must be >= 1, got {num_features}")

        self.num_features = num_features
        self.bias = bias
        self.learning_rate = learning_rate
        self.weights: List[float] = [0.0] * (num_features + 1)
        self.initialize_weights(rng if rng is not None else random.Random())

    def initialize_weights(self, rng: random.Random) -> None:
        """
        Fill every slot (bias weight included) with a uniform draw in [lo, hi).
        """
        lo, hi = config.WEIGHT_INIT_RANGE
        for i in range(len(self.weights)):
            self.weights[i] = lo + rng.random() * (hi - lo)

    def _check_inputs(self, inputs: Sequence[float]) -> None:
        if len(inputs) != self.num_features:
            raise InvalidInputError(
                f"expected {self.num_features} inputs, got {len(inputs)}"
            )

    def weighted_sum(self, inputs: Sequence[float]) -> float:
        self._check_inputs(inputs)
        total = self.weights[0]
        for i, x in enumerate(inputs):
            total += x * self.weights[i + 1]
        return total

    def continuous_activation(self, inputs: Sequence[float]) -> float:
        return logistic(self.weighted_sum(inputs))

    def step_activation(self, inputs: Sequence[float]) -> int:
        return step(self.weighted_sum(inputs))

    def evaluate(self, inputs: Sequence[float], training: bool) -> float | int:
        """
        Training mode returns the logistic output in (0, 1);
        inference mode returns the 0/1 decision.
        """
        if training:
            return self.continuous_activation(inputs)
        return self.step_activation(inputs)

    def train_step(self, inputs: Sequence[float], target: int) -> None:
        _check_target(target)
        predicted = self.continuous_activation(inputs)
        delta = weight_delta(target - predicted, predicted)
        scale = delta * self.bias * self.learning_rate

        self.weights[0] += scale
        for i, x in enumerate(inputs):
            self.weights[i + 1] += scale * x

    def perceptron_step(self, inputs: Sequence[float], target: int) -> None:
        """
        Classic threshold perceptron rule: no change when the step output
        already matches ``target``.
        """
        _check_target(target)
        error = target - self.step_activation(inputs)
        if error == 0:
            return

        self.weights[0] += error * self.bias
        for i, x in enumerate(inputs):
            self.weights[i + 1] += error * x * self.bias


def _check_target(target: int) -> None:
    if target not in (0, 1):
        raise InvalidInputError(f"target must be 0 or 1, got {target!r}")

"""
Classifier tuning knobs.
"""

# Neuron shape
NUM_FEATURES = 5
BIAS = 0.1  # fixed multiplier applied to every weight update
WEIGHT_INIT_RANGE = (-1.0, 1.0)

# Learning
LEARNING_RATE = 0.9
TRAIN_ITERATIONS = 10_000
SAMPLE_INDEX_RANGE = 7  # samples [0, 7) are drawn; the 8th is never trained on
TRAINING_RULE = "delta"

# Randomness
SEED = None  # None -> time-based seed

# Output
LABELS = ("Dog", "Cat")

"""
settings.py

Constants shared across infosource.
"""

# Seed used by the test-suite for reproducible probability draws.
SEED = 42

# Allowed deviation of a probability vector's sum from 1.0.
PROBABILITY_TOLERANCE = 0.005

# Largest byte value with a single decimal digit rendering.
MAX_DIGIT = 9

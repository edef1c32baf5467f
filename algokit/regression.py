"""Single-weight regression and a two-input gate fitted by finite-difference descent."""

import random

LINEAR_DATA = ((0.0, 0.0), (1.0, 2.0), (2.0, 4.0), (3.0, 6.0), (4.0, 8.0))
OR_GATE_DATA = ((0.0, 0.0, 0.0), (0.0, 1.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0))


def _samples(data):
    samples = tuple(data)
    if not samples:
        raise ValueError("training data is empty")
    return samples


def linear_cost(w, data=LINEAR_DATA):
    """Mean squared error of ``y = x * w`` over ``(x, y)`` samples."""
    samples = _samples(data)
    return sum((x * w - y) ** 2 for x, y in samples) / len(samples)


def gate_cost(w1, w2, data=OR_GATE_DATA):
    """Mean squared error of ``y = x1 * w1 + x2 * w2`` over ``(x1, x2, y)`` samples."""
    samples = _samples(data)
    return sum((x1 * w1 + x2 * w2 - y) ** 2 for x1, x2, y in samples) / len(samples)


def train_linear(data=LINEAR_DATA, iterations=500, rate=1e-3, eps=1e-3, seed=None):
    """Fit ``w`` from a random start in ``[0, 10)`` and return it."""
    samples = _samples(data)
    rng = random.Random(seed)
    w = rng.random() * 10.0
    for _ in range(iterations):
        cost = linear_cost(w, samples)
        gradient = (linear_cost(w + eps, samples) - cost) / eps
        w -= rate * gradient
    return w


def train_gate(data=OR_GATE_DATA, iterations=5000, rate=1e-3, eps=1e-3, seed=None):
    """Fit ``(w1, w2)`` from a random start in ``[0, 1)`` and return them."""
    samples = _samples(data)
    rng = random.Random(seed)
    w1 = rng.random()
    w2 = rng.random()
    for _ in range(iterations):
        cost = gate_cost(w1, w2, samples)
        dw1 = (gate_cost(w1 + eps, w2, samples) - cost) / eps
        dw2 = (gate_cost(w1, w2 + eps, samples) - cost) / eps
        w1 -= rate * dw1
        w2 -= rate * dw2
    return w1, w2
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Scalar activation functions for use with `apply_function`.

Currently implemented:
- ReLU
- Sigmoid (logistic)
- GELU (tanh approximation, GPT-2 style)

Each comes with its derivative, evaluated at the pre-activation value.
"""

import math

_GELU_C = math.sqrt(2.0 / math.pi)


def relu(x: float) -> float:
    """Rectified Linear Unit: max(0, x)."""
    return x if x > 0.0 else 0.0


def relu_backward(x: float) -> float:
    """Derivative of ReLU: 1 if x > 0 else 0."""
    return 1.0 if x > 0.0 else 0.0


def sigmoid(x: float) -> float:
    """
    Logistic function 1 / (1 + e^-x).

    Evaluated on the side that keeps the exponent non-positive so large
    |x| never overflows.
    """
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def sigmoid_backward(x: float) -> float:
    s = sigmoid(x)
    return s * (1.0 - s)


def gelu(x: float) -> float:
    """
    Gaussian Error Linear Unit (approximate).

    GELU(x) = x * Phi(x) where Phi is the CDF of standard normal.
    Using the tanh approximation from the original paper:
        GELU(x) ~= 0.5 * x * (1 + tanh(sqrt(2/pi) * (x + 0.044715 * x^3)))
    """
    return 0.5 * x * (1.0 + math.tanh(_GELU_C * (x + 0.044715 * x**3)))


def gelu_backward(x: float) -> float:
    """Derivative of the tanh-approximate GELU."""
    inner = _GELU_C * (x + 0.044715 * x**3)
    tanh_inner = math.tanh(inner)
    sech2 = 1.0 - tanh_inner**2
    inner_deriv = _GELU_C * (1.0 + 3.0 * 0.044715 * x**2)
    return 0.5 * (1.0 + tanh_inner) + 0.5 * x * sech2 * inner_deriv


# Registry for easy lookup by name
ACTIVATIONS = {
    "relu": (relu, relu_backward),
    "sigmoid": (sigmoid, sigmoid_backward),
    "gelu": (gelu, gelu_backward),
}


def get_activation(name: str):
    """
    Get activation function and its derivative by name.

    Returns:
        Tuple of (forward_fn, backward_fn).

    Raises:
        KeyError: If activation name is not recognized.
    """
    if name not in ACTIVATIONS:
        raise KeyError(f"Unknown activation: {name}. Available: {list(ACTIVATIONS.keys())}")
    return ACTIVATIONS[name]

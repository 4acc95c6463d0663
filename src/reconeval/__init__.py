"""
reconeval - Reconstruction Robustness Evaluation
================================================

Evaluates a binary image discriminator on original images and on their
autoencoder reconstructions.

Version: 0.1.0
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]

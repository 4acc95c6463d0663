"""Core Module

Image normalization, model inference, confusion statistics and reporting for
the reconstruction robustness evaluation.

Submodules:
    - config: TOML configuration cascade
    - confusion: Binary confusion accumulator and metrics
    - exceptions: Error taxonomy
    - images: Pillow-backed image decoding and encoding
    - inference: onnxruntime model handles
    - logger: Package logging setup
    - normalize: Image <-> tensor conversions
    - report: CSV report and summaries

Import from specific submodules as needed:
    from reconeval.core.normalize import to_discriminator_input
    from reconeval.core.confusion import ConfusionAccumulator
"""

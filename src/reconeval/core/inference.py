"""
ONNX Inference Adapter
======================

Wraps the autoencoder and discriminator ONNX sessions behind a uniform
"tensor in, tensor out" contract.

Model handles are acquired once at startup and released on every exit path:

    with open_models("autoencoder.onnx", "discriminator.onnx") as models:
        restored = models.restore(to_autoencoder_input(image))
        probability = models.classify(to_discriminator_input(image))
"""

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence

import numpy as np
import onnxruntime as ort

from reconeval.core.exceptions import InferenceError, ModelLoadError
from reconeval.core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PROVIDERS = ["CPUExecutionProvider"]


@dataclass
class ModelHandle:
    """A loaded inference session and the name of its first input."""

    name: str
    path: str
    session: Optional[Any]
    input_name: str

    @property
    def is_open(self) -> bool:
        return self.session is not None

    def close(self) -> None:
        """Release the underlying session."""
        if self.session is not None:
            logger.debug(f"Releasing {self.name} model ({self.path})")
        self.session = None


def load_model(
    path: str,
    name: str,
    providers: Optional[Sequence[str]] = None,
) -> ModelHandle:
    """
    Load an ONNX model into an inference session.

    Args:
        path: Path to the .onnx artifact
        name: Human readable model name used in logs and errors
        providers: onnxruntime execution providers (default: CPU)

    Returns:
        ModelHandle for the loaded session

    Raises:
        ModelLoadError: If the file is missing or cannot be loaded
    """
    if not Path(path).is_file():
        raise ModelLoadError(f"{name} model file not found.", model_path=str(path))

    try:
        session = ort.InferenceSession(str(path), providers=list(providers or DEFAULT_PROVIDERS))
    except Exception as e:
        raise ModelLoadError(f"Cannot load {name} model: {e}", model_path=str(path)) from e

    inputs = session.get_inputs()
    if not inputs:
        raise ModelLoadError(f"{name} model declares no inputs.", model_path=str(path))

    logger.info(f"Loaded {name} model from {path}")
    return ModelHandle(name=name, path=str(path), session=session, input_name=inputs[0].name)


def run(model: ModelHandle, tensor: np.ndarray) -> np.ndarray:
    """
    Run a single synchronous inference call.

    Args:
        model: Loaded model handle
        tensor: 4-D input tensor with batch size 1

    Returns:
        First output tensor of the model

    Raises:
        InferenceError: On a malformed input, a released handle or a runtime failure
    """
    if not model.is_open:
        raise InferenceError("Model handle has been released.", model_name=model.name)

    tensor = np.asarray(tensor)
    if tensor.ndim != 4:
        raise InferenceError(
            f"Expected a 4-D (N, C, H, W) tensor, got shape {tensor.shape}.", model_name=model.name
        )
    if tensor.shape[0] != 1:
        raise InferenceError(
            f"Only batch size 1 is supported, got {tensor.shape[0]}.", model_name=model.name
        )

    try:
        outputs = model.session.run(None, {model.input_name: tensor.astype(np.float32, copy=False)})
    except Exception as e:
        raise InferenceError(f"Inference call failed: {e}", model_name=model.name) from e

    if not outputs:
        raise InferenceError("Model returned no outputs.", model_name=model.name)

    return np.asarray(outputs[0])


class InferenceAdapter:
    """
    Holds the autoencoder and discriminator handles.

    Stateless apart from the handles; safe to reuse for every sample.
    """

    def __init__(self, autoencoder: ModelHandle, discriminator: ModelHandle) -> None:
        self.autoencoder = autoencoder
        self.discriminator = discriminator

    def restore(self, tensor: np.ndarray) -> np.ndarray:
        """
        Reconstruct an image tensor with the autoencoder.

        Args:
            tensor: (1, 3, H, W) tensor in [0, 1]

        Returns:
            (1, 3, H, W) reconstructed tensor
        """
        output = run(self.autoencoder, tensor)
        if output.shape != np.shape(tensor):
            raise InferenceError(
                f"Reconstruction shape {output.shape} does not match input {np.shape(tensor)}.",
                model_name=self.autoencoder.name,
            )
        return output

    def classify(self, tensor: np.ndarray) -> float:
        """
        Score an image tensor with the discriminator.

        Args:
            tensor: (1, 1, H, W) tensor in [-1, 1]

        Returns:
            Probability of the target class (first element of the first output)
        """
        output = run(self.discriminator, tensor)
        if output.size == 0:
            raise InferenceError("Discriminator returned an empty output.", model_name=self.discriminator.name)

        probability = float(output.reshape(-1)[0])
        if not np.isfinite(probability):
            raise InferenceError(
                f"Discriminator returned a non-finite score: {probability}",
                model_name=self.discriminator.name,
            )
        return probability

    def close(self) -> None:
        """Release both model handles."""
        self.autoencoder.close()
        self.discriminator.close()


@contextmanager
def open_models(
    autoencoder_path: str,
    discriminator_path: str,
    providers: Optional[List[str]] = None,
) -> Iterator[InferenceAdapter]:
    """
    Acquire both models for the duration of a run.

    Handles that were loaded are released on every exit path, including when
    the discriminator fails to load after the autoencoder succeeded.

    Raises:
        ModelLoadError: If either model cannot be loaded
    """
    loaded: List[ModelHandle] = []
    try:
        autoencoder = load_model(autoencoder_path, "autoencoder", providers)
        loaded.append(autoencoder)
        discriminator = load_model(discriminator_path, "discriminator", providers)
        loaded.append(discriminator)
        yield InferenceAdapter(autoencoder, discriminator)
    finally:
        for handle in loaded:
            handle.close()

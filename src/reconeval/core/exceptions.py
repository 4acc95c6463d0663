"""
Custom Exception Classes for Reconstruction Evaluation

This module defines the exceptions raised by the evaluation pipeline. Sample
level errors (InvalidImageError, InferenceError) cause a single image to be
skipped; startup errors (ModelLoadError, DatasetNotFoundError) abort the run
before any sample is processed.

File write failures are reported with the built-in OSError.
"""

from typing import Optional


class ReconevalError(Exception):
    """Base class for all reconeval errors."""

    def __init__(self, message: str = "An evaluation error occurred.") -> None:
        super().__init__(message)
        self.message = message


class InvalidImageError(ReconevalError):
    """
    Exception raised when an image is malformed or cannot be decoded.

    Also raised by the normalizer when a buffer or tensor has undefined,
    zero or negative dimensions.

    Attributes:
        message (str): Explanation of the error
        path (Optional[str]): Path of the offending image, when known
    """

    def __init__(
        self,
        message: str = "Image is malformed or cannot be decoded.",
        path: Optional[str] = None,
    ) -> None:
        """
        Initialize the InvalidImageError.

        Args:
            message (str): Custom error message
            path (Optional[str]): Path of the offending image
        """
        full_message = f"{message} Path: {path}" if path else message
        super().__init__(full_message)
        self.message = message
        self.path = path


class InferenceError(ReconevalError):
    """
    Exception raised when a model invocation fails.

    Covers malformed input tensors, released model handles and runtime
    failures inside the inference session.

    Attributes:
        message (str): Explanation of the error
        model_name (Optional[str]): Name of the model that failed
    """

    def __init__(
        self,
        message: str = "Model inference failed.",
        model_name: Optional[str] = None,
    ) -> None:
        full_message = f"{message} Model: {model_name}" if model_name else message
        super().__init__(full_message)
        self.message = message
        self.model_name = model_name


class ModelLoadError(ReconevalError):
    """
    Exception raised when model loading fails.

    Raised at startup when a model artifact is missing, corrupted or
    incompatible with the inference runtime.

    Attributes:
        message (str): Explanation of the error
        model_path (Optional[str]): Path to the model that failed to load
    """

    def __init__(
        self,
        message: str = "Failed to load model.",
        model_path: Optional[str] = None,
    ) -> None:
        """
        Initialize the ModelLoadError.

        Args:
            message (str): Custom error message
            model_path (Optional[str]): Path to the model file
        """
        full_message = f"{message} Model path: {model_path}" if model_path else message
        super().__init__(full_message)
        self.message = message
        self.model_path = model_path


class DatasetNotFoundError(ReconevalError):
    """Exception raised when the dataset root directory does not exist."""

    def __init__(self, root: str) -> None:
        super().__init__(f"Dataset root not found: {root}")
        self.root = root

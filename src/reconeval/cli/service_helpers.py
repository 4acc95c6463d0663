"""
CLI Service Helpers
===================

Singleton ServiceFactory access and consistent error handling for CLI
commands.

Usage:
    from reconeval.cli.service_helpers import get_factory, handle_result

    service = get_factory().create_evaluation_service()
    evaluation = handle_result(service.run(settings))  # exits on failure
"""

from typing import TYPE_CHECKING, Optional, TypeVar

if TYPE_CHECKING:
    from reconeval.services.base import ServiceResult
    from reconeval.services.factory import ServiceFactory

T = TypeVar("T")

_factory: "Optional[ServiceFactory]" = None


def get_factory() -> "ServiceFactory":
    """
    Get the singleton ServiceFactory instance for the CLI.

    Lazily created on first access; use set_factory() to inject a custom one.
    """
    global _factory
    if _factory is None:
        from reconeval.services.factory import ServiceFactory

        _factory = ServiceFactory()
    return _factory


def set_factory(factory: "Optional[ServiceFactory]") -> None:
    """
    Set a custom ServiceFactory instance, or None to reset to the default.

    Example:
        # In tests
        set_factory(ServiceFactory(model_loader=fake_loader))
    """
    global _factory
    _factory = factory


def exit_with_error(message: str, code: int = 1) -> None:
    """Print an error message and exit."""
    from reconeval.cli.progress import print_error

    print_error(message)
    raise SystemExit(code)


def handle_result(result: "ServiceResult[T]") -> T:
    """
    Return the data of a successful result, or exit with its error.

    Args:
        result: Service result to unwrap

    Returns:
        result.data
    """
    if not result.success:
        exit_with_error(result.error or "Operation failed")
    return result.data

# ABOUTME: Loading indicator for async operations using Rich's status spinner
# ABOUTME: Keeps the spinner alive until the wrapped coroutine finishes

from collections.abc import Awaitable, Callable
from typing import TypeVar

from rich.console import Console

T = TypeVar("T")


class ProgressReporter:
    """Runs async operations behind a rich status spinner."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    async def run_with_status(
        self,
        operation: Callable[[], Awaitable[T]],
        message: str,
        success_message: str | None = None,
        spinner: str = "dots",
    ) -> T:
        """Run an async operation with a rich status indicator.

        Args:
            operation: Async operation to run
            message: Status message to display
            success_message: Message to show on success
            spinner: Spinner style

        Returns:
            Result from the operation
        """
        with self.console.status(message, spinner=spinner):
            result = await operation()

        if success_message:
            self.console.print(success_message)

        return result

"""
core/context.py

Completion context for one directive invocation.

A handler reports its outcome through exactly one of `succeed` or `fail`. The
context refuses a second completion so a handler bug cannot answer twice.
"""

from typing import Any, Callable, Dict, Optional


class CompletionContext:
    """
    Binds the success and error callbacks of one invocation.

    Args:
        on_success (Callable[[Dict[str, Any]], None]): Receives the response envelope.
        on_error (Callable[[BaseException], None]): Receives the error; its message is
            available as str(error).
    """

    def __init__(
        self,
        on_success: Callable[[Dict[str, Any]], None],
        on_error: Callable[[BaseException], None],
    ):
        self._on_success = on_success
        self._on_error = on_error
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def _complete(self) -> None:
        if self._done:
            raise RuntimeError("Completion context already completed")
        self._done = True

    def succeed(self, result: Dict[str, Any]) -> None:
        self._complete()
        self._on_success(result)

    def fail(self, error: BaseException) -> None:
        self._complete()
        self._on_error(error)


class CapturingContext(CompletionContext):
    """
    Completion context that records the outcome for synchronous callers.

    Used by the HTTP and Lambda entry points: they run the handler and then read
    `result` or `error`.
    """

    def __init__(self):
        self.result: Optional[Dict[str, Any]] = None
        self.error: Optional[BaseException] = None
        super().__init__(on_success=self._store_result, on_error=self._store_error)

    def _store_result(self, result: Dict[str, Any]) -> None:
        self.result = result

    def _store_error(self, error: BaseException) -> None:
        self.error = error

"""Callback support for SDK coroutines.

Every network-bound SDK operation returns an awaitable and also accepts an
optional ``callback(error, result)``. Both channels are fed from the same
underlying coroutine.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

Callback = Callable[[Optional[BaseException], Any], None]


def _retrieve_exception(task: 'asyncio.Future[Any]') -> None:
    # The error was already handed to the callback; reading it here keeps
    # asyncio from reporting it as never retrieved when nobody awaits the task.
    if not task.cancelled():
        task.exception()


def _invoke(callback: Callback, error: Optional[BaseException], result: Any) -> None:
    # A failing callback must not change the operation's outcome.
    try:
        callback(error, result)
    except Exception as e:
        logger.warning(f"Callback {callback!r} raised {e!r}; operation outcome unchanged")


def with_callback(
    awaitable: Awaitable[T],
    callback: Optional[Callback] = None
) -> Awaitable[T]:
    """Fork the outcome of ``awaitable`` to an optional callback.

    Without a callback the awaitable is returned untouched. With one, the
    work is scheduled as a task on the running event loop (one must be
    running) so the callback fires even if the caller never awaits; the task
    is returned and settles with the same result or exception. An exception
    raised by the callback itself is logged as a warning and does not affect
    the task.

    Args:
        awaitable: The operation to run
        callback: Called exactly once as ``callback(error, None)`` or
            ``callback(None, result)``

    Returns:
        An awaitable resolving to the operation's result
    """
    if callback is None:
        return awaitable

    async def settle() -> T:
        try:
            result = await awaitable
        except Exception as e:
            logger.debug(f"Delivering error to callback: {e!r}")
            _invoke(callback, e, None)
            raise
        _invoke(callback, None, result)
        return result

    task = asyncio.get_running_loop().create_task(settle())
    task.add_done_callback(_retrieve_exception)
    return task

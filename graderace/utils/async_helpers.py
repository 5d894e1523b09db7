"""
Helpers for calling the async pipeline from synchronous code
"""

import asyncio
import threading
from typing import Any, Coroutine, Dict, TypeVar

T = TypeVar('T')


def sync_wrapper(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run a coroutine to completion from synchronous code

    Uses asyncio.run when no loop is running in this thread. Inside a
    running loop (e.g. a notebook) the coroutine runs on a fresh loop in a
    worker thread, and the caller blocks until it finishes.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    return _run_in_thread(coro)


def _run_in_thread(coro: Coroutine[Any, Any, T]) -> T:
    outcome: Dict[str, Any] = {}

    def target():
        try:
            outcome["value"] = asyncio.run(coro)
        except BaseException as e:
            outcome["error"] = e

    thread = threading.Thread(target=target, name="graderace-sync")
    thread.start()
    thread.join()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]

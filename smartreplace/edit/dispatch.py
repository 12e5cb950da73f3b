# smartreplace/edit/dispatch.py
"""
Serialized execution of commit phases.

Editor hosts usually own one thread that may mutate documents. The commit
phase of an edit has to run there and the caller has to wait for it, so the
tool call that triggered the edit sees a definite outcome.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")

__all__ = ["Dispatcher", "InlineDispatcher", "SerialDispatcher"]


class Dispatcher(Protocol):
    def invoke_and_wait(self, fn: Callable[[], T]) -> T:
        """Run `fn` on the mutation thread, block until done, return its result or raise its error."""
        ...


class InlineDispatcher:
    """Runs work on the calling thread. Used when no host dispatcher is given."""

    def invoke_and_wait(self, fn: Callable[[], T]) -> T:
        return fn()


class SerialDispatcher:
    """
    One dedicated worker thread; every submitted call runs there, in order.

    Calls made from the worker itself run inline instead of deadlocking on
    their own queue.
    """

    def __init__(self, name: str = "smartreplace-dispatch") -> None:
        self._thread_id: Optional[int] = None
        self._executor = ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix=name,
            initializer=self._remember_thread,
        )

    def _remember_thread(self) -> None:
        self._thread_id = threading.get_ident()

    def is_dispatch_thread(self) -> bool:
        return self._thread_id is not None and threading.get_ident() == self._thread_id

    def invoke_and_wait(self, fn: Callable[[], T]) -> T:
        if self.is_dispatch_thread():
            return fn()
        return self._executor.submit(fn).result()

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "SerialDispatcher":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()

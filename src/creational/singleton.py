from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from creational.exceptions import InitializationFailedError
from creational.lock_mode import LockMode

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING_INSTANCE: Any = object()


class LazySingleton(Generic[T]):
    """Hold one lazily created value and hand the same object to every caller.

    The value is built on the first ``get``/``aget`` call by calling ``factory``
    with that call's arguments. Later calls ignore their arguments and return
    the published value.

    Construction uses double-checked acquisition: an unlocked read serves the
    steady state, and a second read under the lock keeps racing callers from
    building the value twice. When the factory raises, nothing is published and
    the next caller retries.

    Instances of this class are explicit registry handles. Pass one around when
    ambient process-wide state is not wanted; use ``get_instance`` for the
    process-wide shared instance.
    """

    def __init__(
        self,
        factory: Callable[..., T],
        *,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        """Initialize an empty holder.

        Args:
            factory: Callable that builds the value. It may return an awaitable
                when the value is requested through ``aget``.
            lock_mode: ``THREAD`` guards ``get`` with ``threading.Lock``.
                ``ASYNC`` additionally guards ``aget`` with ``asyncio.Lock``.
                ``NONE`` disables locking for single-threaded callers.

        """
        self._factory = factory
        self._lock_mode = lock_mode
        self._instance: T = _MISSING_INSTANCE
        self._thread_lock = threading.Lock()
        self._async_lock = asyncio.Lock()
        self._pending: asyncio.Future[T] | None = None

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    @property
    def is_initialized(self) -> bool:
        """Return whether the value has been published."""
        return self._instance is not _MISSING_INSTANCE

    def get(self, *args: Any, **kwargs: Any) -> T:
        """Return the shared value, building it with the given arguments on first use.

        Args:
            *args: Positional arguments for the factory, used only by the call
                that performs construction.
            **kwargs: Keyword arguments for the factory, with the same rule.

        Returns:
            The single published value.

        Raises:
            InitializationFailedError: If the factory raises or returns an
                awaitable. The holder stays uninitialized.

        """
        if (instance := self._instance) is not _MISSING_INSTANCE:
            return instance

        if self._lock_mode is LockMode.NONE:
            return self._build(args, kwargs)

        with self._thread_lock:
            if (instance := self._instance) is not _MISSING_INSTANCE:
                return instance
            return self._build(args, kwargs)

    async def aget(self, *args: Any, **kwargs: Any) -> T:
        """Return the shared value from async code.

        With ``LockMode.ASYNC`` coroutines are serialized by an ``asyncio.Lock``
        and awaitable factory results are awaited before publication. The build
        is shielded: a cancelled caller does not abort it, and the next caller
        joins the same in-flight build. The factory call and the publication
        also take the thread lock used by ``get``, so a thread and a coroutine
        never both publish; a synchronous factory runs under it exactly once.

        With ``LockMode.THREAD`` this delegates to ``get``, so the factory must
        be synchronous.

        Raises:
            InitializationFailedError: If the factory or its awaitable raises.

        """
        if (instance := self._instance) is not _MISSING_INSTANCE:
            return instance

        if self._lock_mode is LockMode.THREAD:
            return self.get(*args, **kwargs)

        if self._lock_mode is LockMode.NONE:
            return await self._abuild(args, kwargs)

        async with self._async_lock:
            if (instance := self._instance) is not _MISSING_INSTANCE:
                return instance
            pending = self._pending
            if pending is None or pending.done():
                pending = self._pending = asyncio.ensure_future(self._abuild(args, kwargs))
            try:
                return await asyncio.shield(pending)
            finally:
                if pending.done():
                    self._pending = None

    def _build(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> T:
        try:
            value = self._factory(*args, **kwargs)
        except Exception as exc:
            msg = f"Failed to initialize shared instance with {self._factory_name()}."
            raise InitializationFailedError(msg) from exc

        if inspect.isawaitable(value):
            if inspect.iscoroutine(value):
                value.close()
            msg = (
                f"Factory {self._factory_name()} returned an awaitable. "
                "Use a LockMode.ASYNC holder and `await holder.aget(...)`."
            )
            raise InitializationFailedError(msg)

        return self._publish(value)

    async def _abuild(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> T:
        msg = f"Failed to initialize shared instance with {self._factory_name()}."
        with self._thread_lock:
            if (instance := self._instance) is not _MISSING_INSTANCE:
                return instance
            try:
                value = self._factory(*args, **kwargs)
            except Exception as exc:
                raise InitializationFailedError(msg) from exc
            if not inspect.isawaitable(value):
                return self._publish(value)

        try:
            value = await value
        except Exception as exc:
            raise InitializationFailedError(msg) from exc

        with self._thread_lock:
            if (instance := self._instance) is not _MISSING_INSTANCE:
                return instance
            return self._publish(cast("T", value))

    def _publish(self, value: T) -> T:
        self._instance = value
        logger.debug(
            "Shared instance published: factory=%s type=%s lock_mode=%s",
            self._factory_name(),
            type(value).__qualname__,
            self._lock_mode.value,
        )
        return value

    def _factory_name(self) -> str:
        return getattr(self._factory, "__qualname__", repr(self._factory))

    def __repr__(self) -> str:
        state = "initialized" if self.is_initialized else "empty"
        return f"LazySingleton({self._factory_name()}, {state}, lock_mode={self._lock_mode.value})"


@dataclass
class SharedInstance:
    """Process-wide shared value.

    ``val`` is mutable so holders can observe that they share one object.
    """

    val: str


_shared_instance: LazySingleton[SharedInstance] = LazySingleton(
    SharedInstance,
    lock_mode=LockMode.THREAD,
)


def get_instance(val: str) -> SharedInstance:
    """Return the process-wide ``SharedInstance``.

    The first call across all threads creates it with ``val``. Every later call
    returns the same object and ignores its argument.

    Args:
        val: Initialization value, used only when no instance exists yet.

    """
    return _shared_instance.get(val)


def some_business_logic(val: str) -> str:
    """Run a trivial operation against the process-wide instance."""
    message = f"This is {get_instance(val).val}!"
    logger.info("Shared instance business logic: %s", message)
    return message


__all__ = [
    "LazySingleton",
    "SharedInstance",
    "get_instance",
    "some_business_logic",
]

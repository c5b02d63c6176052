from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Generic, Literal, TypeVar, overload

from creational.exceptions import InvalidRegistrationError, VariantNotRegisteredError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class VariantRegistry(Generic[T]):
    """Map variant names to constructors selected at runtime.

    Registration is thread-safe. Lookups do not lock because entries are only
    ever added, never replaced or removed.
    """

    def __init__(self, kind: str) -> None:
        """Initialize an empty registry.

        Args:
            kind: Human-readable name of what is registered, used in error
                messages (for example ``"product family"``).

        """
        self._kind = kind
        self._variants: dict[str, T] = {}
        self._lock = threading.Lock()

    @property
    def kind(self) -> str:
        return self._kind

    @overload
    def register(self, name: str, value: T) -> T: ...

    @overload
    def register(
        self,
        name: str,
        value: Literal["from_decorator"] = "from_decorator",
    ) -> Callable[[T], T]: ...

    def register(
        self,
        name: str,
        value: T | Literal["from_decorator"] = "from_decorator",
    ) -> T | Callable[[T], T]:
        """Register ``value`` under ``name``, directly or as a decorator.

        Args:
            name: Unique, non-empty variant name.
            value: Constructor to register, or ``"from_decorator"`` to use the
                decorator form.

        Returns:
            The registered value in direct form, or a decorator that registers
            and returns its argument.

        Raises:
            InvalidRegistrationError: If ``name`` is empty or already
                registered.

        """
        if isinstance(value, str) and value == "from_decorator":

            def decorator(decorated: T) -> T:
                self._add(name, decorated)
                return decorated

            return decorator

        self._add(name, value)
        return value

    def get(self, name: str) -> T:
        """Return the value registered under ``name``.

        Raises:
            VariantNotRegisteredError: If nothing is registered under ``name``.

        """
        try:
            return self._variants[name]
        except KeyError:
            known = ", ".join(repr(variant) for variant in self.names()) or "none"
            msg = f"{self._kind.capitalize()} {name!r} is not registered. Known variants: {known}."
            raise VariantNotRegisteredError(msg) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._variants)

    def _add(self, name: str, value: T) -> None:
        if not isinstance(name, str) or not name:
            msg = f"{self._kind.capitalize()} name must be a non-empty string, got {name!r}."
            raise InvalidRegistrationError(msg)
        with self._lock:
            if name in self._variants:
                msg = f"{self._kind.capitalize()} {name!r} is already registered."
                raise InvalidRegistrationError(msg)
            self._variants[name] = value
        logger.debug("Registered %s %r: %r", self._kind, name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._variants)


__all__ = ["VariantRegistry"]

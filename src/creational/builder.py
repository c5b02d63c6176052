from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from creational.exceptions import BuilderNotSetError

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class BuiltProduct:
    """Product assembled part by part."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> str:
        return f"Product parts: {', '.join(self.parts)}"


class Builder(Protocol):
    """Construction steps a ``Director`` can drive."""

    def build_part_a(self) -> Builder: ...

    def build_part_b(self) -> Builder: ...

    def build_part_c(self) -> Builder: ...


class ConcreteBuilder:
    """Builder whose steps all work on the same in-progress ``BuiltProduct``.

    Steps return the builder so they can be chained. ``get_product`` hands the
    result over and starts a fresh product, so one builder can produce many.
    """

    def __init__(self) -> None:
        self._product = BuiltProduct()

    def reset(self) -> None:
        self._product = BuiltProduct()

    def build_part_a(self) -> Self:
        self._product.add("PartA1")
        return self

    def build_part_b(self) -> Self:
        self._product.add("PartB1")
        return self

    def build_part_c(self) -> Self:
        self._product.add("PartC1")
        return self

    def get_product(self) -> BuiltProduct:
        result = self._product
        self.reset()
        logger.debug("Builder produced %s", result.list_parts())
        return result


class Director:
    """Run fixed sequences of construction steps against a builder.

    The director is optional: clients may call builder steps directly.
    """

    def __init__(self, builder: Builder | None = None) -> None:
        self._builder = builder

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            msg = "Director has no builder. Pass `builder=...` or assign `director.builder`."
            raise BuilderNotSetError(msg)
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self.builder.build_part_a()

    def build_full_featured_product(self) -> None:
        builder = self.builder
        builder.build_part_a()
        builder.build_part_b()
        builder.build_part_c()


__all__ = ["Builder", "BuiltProduct", "ConcreteBuilder", "Director"]

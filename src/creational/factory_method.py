from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from creational.registry import VariantRegistry
from creational.settings import CreationalSettings, get_settings

logger = logging.getLogger(__name__)


class Product(Protocol):
    """Operations every product built by a ``Creator`` supports."""

    def operation(self) -> str: ...


class ConcreteProduct1:
    def operation(self) -> str:
        return "{Result of ConcreteProduct1}"


class ConcreteProduct2:
    def operation(self) -> str:
        return "{Result of ConcreteProduct2}"


ProductConstructor = Callable[[], Product]

product_constructors: VariantRegistry[ProductConstructor] = VariantRegistry("product constructor")
product_constructors.register("1", ConcreteProduct1)
product_constructors.register("2", ConcreteProduct2)


@dataclass(frozen=True)
class Creator:
    """Business logic that works on whatever product its factory method builds.

    The factory method is a plain constructor function, so the product type is
    chosen when the creator is built, not by subclassing.
    """

    factory_method: ProductConstructor

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


def creator_for(
    variant: str | None = None,
    *,
    settings: CreationalSettings | None = None,
) -> Creator:
    """Build a ``Creator`` around a registered product constructor.

    Args:
        variant: Registered variant name. ``None`` uses
            ``settings.factory_variant``.
        settings: Settings to read the default from. ``None`` uses
            ``get_settings()``.

    Raises:
        VariantNotRegisteredError: If the variant is unknown.

    """
    if variant is None:
        variant = (settings or get_settings()).factory_variant
    constructor = product_constructors.get(variant)
    logger.debug("Creator selected product constructor %r: %r", variant, constructor)
    return Creator(factory_method=constructor)


def client_code(creator: Creator) -> str:
    """Run the creator through its public operation only."""
    return "Client: I'm not aware of the creator's class, but it still works.\n" + (
        creator.some_operation()
    )


__all__ = [
    "ConcreteProduct1",
    "ConcreteProduct2",
    "Creator",
    "Product",
    "ProductConstructor",
    "client_code",
    "creator_for",
    "product_constructors",
]

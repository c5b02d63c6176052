"""Families of related products that must be used together.

Each ``ProductFamily`` pairs one product A constructor with the product B
constructor of the same variant. Clients pick a family by name and never touch
the concrete product classes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from creational.registry import VariantRegistry
from creational.settings import CreationalSettings, get_settings

logger = logging.getLogger(__name__)


class AbstractProductA(Protocol):
    def useful_function_a(self) -> str: ...


class AbstractProductB(Protocol):
    def useful_function_b(self) -> str: ...

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """Work with a product A. Correct results need an A of the same variant."""
        ...


class ConcreteProductA1:
    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2:
    def useful_function_a(self) -> str:
        return "The result of the product A2."


class ConcreteProductB1:
    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        return f"The result of the B1 collaborating with the ({collaborator.useful_function_a()})"


class ConcreteProductB2:
    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        return f"The result of the B2 collaborating with the ({collaborator.useful_function_a()})"


@dataclass(frozen=True)
class ProductFamily:
    """Constructors for one variant of every product in the family."""

    name: str
    product_a: Callable[[], AbstractProductA]
    product_b: Callable[[], AbstractProductB]

    def create_product_a(self) -> AbstractProductA:
        return self.product_a()

    def create_product_b(self) -> AbstractProductB:
        return self.product_b()


product_families: VariantRegistry[ProductFamily] = VariantRegistry("product family")
product_families.register(
    "1",
    ProductFamily(name="1", product_a=ConcreteProductA1, product_b=ConcreteProductB1),
)
product_families.register(
    "2",
    ProductFamily(name="2", product_a=ConcreteProductA2, product_b=ConcreteProductB2),
)


def family_for(
    variant: str | None = None,
    *,
    settings: CreationalSettings | None = None,
) -> ProductFamily:
    """Return a registered family; ``None`` follows ``settings.family_variant``."""
    if variant is None:
        variant = (settings or get_settings()).family_variant
    return product_families.get(variant)


def client_code(family: ProductFamily) -> tuple[str, str]:
    """Build one product of each kind and let them collaborate.

    Returns:
        Product B's own result and its result when collaborating with
        product A.

    """
    product_a = family.create_product_a()
    product_b = family.create_product_b()
    logger.debug("Family %r built %r and %r", family.name, product_a, product_b)
    return (
        product_b.useful_function_b(),
        product_b.another_useful_function_b(product_a),
    )


__all__ = [
    "AbstractProductA",
    "AbstractProductB",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    "ProductFamily",
    "client_code",
    "family_for",
    "product_families",
]

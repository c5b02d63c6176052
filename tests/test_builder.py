"""Tests for ConcreteBuilder and Director."""

import pytest

from creational.builder import BuiltProduct, ConcreteBuilder, Director
from creational.exceptions import BuilderNotSetError


@pytest.fixture()
def builder() -> ConcreteBuilder:
    return ConcreteBuilder()


class TestDirector:
    def test_minimal_viable_product(self, builder: ConcreteBuilder) -> None:
        director = Director()
        director.builder = builder

        director.build_minimal_viable_product()

        assert builder.get_product().list_parts() == "Product parts: PartA1"

    def test_full_featured_product(self, builder: ConcreteBuilder) -> None:
        director = Director(builder)

        director.build_full_featured_product()

        assert builder.get_product().list_parts() == "Product parts: PartA1, PartB1, PartC1"

    def test_requires_builder(self) -> None:
        director = Director()

        with pytest.raises(BuilderNotSetError):
            director.build_full_featured_product()


class TestConcreteBuilder:
    def test_custom_product_without_director(self, builder: ConcreteBuilder) -> None:
        builder.build_part_a().build_part_c()

        assert builder.get_product().parts == ["PartA1", "PartC1"]

    def test_get_product_resets_builder(self, builder: ConcreteBuilder) -> None:
        builder.build_part_a()
        first = builder.get_product()
        builder.build_part_b()
        second = builder.get_product()

        assert first is not second
        assert first.parts == ["PartA1"]
        assert second.parts == ["PartB1"]

    def test_reset_discards_in_progress_parts(self, builder: ConcreteBuilder) -> None:
        builder.build_part_a().build_part_b()
        builder.reset()

        assert builder.get_product().parts == []

    def test_empty_product_lists_no_parts(self) -> None:
        assert BuiltProduct().list_parts() == "Product parts: "

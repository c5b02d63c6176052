"""Tests for shallow and deep cloning of Person."""

from datetime import date

import pytest

from creational.prototype import IdInfo, Person


@pytest.fixture()
def person() -> Person:
    return Person(
        id_info=IdInfo(666),
        name="Jack Daniels",
        birthdate=date(1977, 1, 1),
        age=42,
    )


class TestClones:
    def test_clones_start_equal_but_distinct(self, person: Person) -> None:
        shallow = person.shallow_clone()
        deep = person.deep_clone()

        assert shallow == person
        assert deep == person
        assert shallow is not person
        assert deep is not person

    def test_shallow_clone_shares_id_info(self, person: Person) -> None:
        shallow = person.shallow_clone()

        assert shallow.id_info is person.id_info

    def test_deep_clone_owns_id_info(self, person: Person) -> None:
        deep = person.deep_clone()

        assert deep.id_info is not person.id_info
        assert deep.id_info == person.id_info

    def test_changes_to_original_after_cloning(self, person: Person) -> None:
        shallow = person.shallow_clone()
        deep = person.deep_clone()

        person.id_info.id = 7878
        person.name = "Frank"
        person.birthdate = date(1900, 1, 1)
        person.age = 32

        assert shallow.id_info.id == 7878
        assert (shallow.name, shallow.birthdate, shallow.age) == (
            "Jack Daniels",
            date(1977, 1, 1),
            42,
        )
        assert deep.id_info.id == 666
        assert (deep.name, deep.birthdate, deep.age) == ("Jack Daniels", date(1977, 1, 1), 42)

    def test_changes_to_deep_clone_do_not_leak(self, person: Person) -> None:
        deep = person.deep_clone()

        deep.id_info.id = 1

        assert person.id_info.id == 666

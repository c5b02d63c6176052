from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger(__name__)


@dataclass
class IdInfo:
    """Mutable identifier record owned by a ``Person``."""

    id: int


@dataclass
class Person:
    """Prototype with explicit shallow and deep clone operations.

    Per-field copy policy:

    * ``id_info``: shared by ``shallow_clone``, duplicated by ``deep_clone``.
    * ``name``, ``birthdate``, ``age``: immutable values. Both clones hold the
      same values, and rebinding them on one object never affects another.
    """

    id_info: IdInfo
    name: str
    birthdate: date
    age: int

    def shallow_clone(self) -> Person:
        """Return a new ``Person`` that shares ``id_info`` with this one."""
        clone = dataclasses.replace(self)
        logger.debug("Shallow clone of %r shares id_info=%r", self.name, clone.id_info)
        return clone

    def deep_clone(self) -> Person:
        """Return a new ``Person`` with its own copy of ``id_info``."""
        clone = dataclasses.replace(self, id_info=IdInfo(self.id_info.id))
        logger.debug("Deep clone of %r owns id_info=%r", self.name, clone.id_info)
        return clone


__all__ = ["IdInfo", "Person"]

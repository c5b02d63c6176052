from creational.builder import BuiltProduct, ConcreteBuilder, Director
from creational.exceptions import (
    BuilderNotSetError,
    CreationalError,
    InitializationFailedError,
    InvalidRegistrationError,
    VariantNotRegisteredError,
)
from creational.lock_mode import LockMode
from creational.prototype import IdInfo, Person
from creational.registry import VariantRegistry
from creational.settings import CreationalSettings, get_settings
from creational.singleton import LazySingleton, SharedInstance, get_instance

__all__ = [
    "BuilderNotSetError",
    "BuiltProduct",
    "ConcreteBuilder",
    "CreationalError",
    "CreationalSettings",
    "Director",
    "IdInfo",
    "InitializationFailedError",
    "InvalidRegistrationError",
    "LazySingleton",
    "LockMode",
    "Person",
    "SharedInstance",
    "VariantNotRegisteredError",
    "VariantRegistry",
    "get_instance",
    "get_settings",
]

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from creational.singleton import LazySingleton


class CreationalSettings(BaseSettings):
    """Runtime configuration read from ``CREATIONAL_*`` environment variables.

    Variant names select which registered constructor ``creator_for`` and
    ``family_for`` use when the caller does not name one.
    """

    model_config = SettingsConfigDict(env_prefix="CREATIONAL_", extra="ignore")

    factory_variant: str = Field(
        default="1",
        min_length=1,
        description="Default product constructor variant for the factory method creator.",
    )
    family_variant: str = Field(
        default="1",
        min_length=1,
        description="Default product family for the abstract factory.",
    )


_settings: LazySingleton[CreationalSettings] = LazySingleton(CreationalSettings)


def get_settings() -> CreationalSettings:
    """Return the process-wide settings, read from the environment on first use."""
    return _settings.get()


__all__ = ["CreationalSettings", "get_settings"]

"""Shared pytest fixtures for creational tests."""

import pytest

from creational import settings, singleton
from creational.lock_mode import LockMode
from creational.settings import CreationalSettings
from creational.singleton import LazySingleton, SharedInstance


@pytest.fixture()
def holder() -> LazySingleton[SharedInstance]:
    """Fresh thread-locked holder for SharedInstance."""
    return LazySingleton(SharedInstance)


@pytest.fixture()
def async_holder() -> LazySingleton[SharedInstance]:
    """Fresh holder guarded by an asyncio lock."""
    return LazySingleton(SharedInstance, lock_mode=LockMode.ASYNC)


@pytest.fixture()
def fresh_shared_instance(monkeypatch: pytest.MonkeyPatch) -> LazySingleton[SharedInstance]:
    """Swap the process-wide holder for an empty one for the duration of a test."""
    fresh: LazySingleton[SharedInstance] = LazySingleton(SharedInstance)
    monkeypatch.setattr(singleton, "_shared_instance", fresh)
    return fresh


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove CREATIONAL_* variables so settings fall back to defaults."""
    for name in ("CREATIONAL_FACTORY_VARIANT", "CREATIONAL_FAMILY_VARIANT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture()
def default_settings(clean_env: pytest.MonkeyPatch) -> CreationalSettings:
    return CreationalSettings()


@pytest.fixture()
def fresh_settings(clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Swap the process-wide settings holder so the next read sees the test environment."""
    fresh: LazySingleton[CreationalSettings] = LazySingleton(CreationalSettings)
    clean_env.setattr(settings, "_settings", fresh)
    return clean_env

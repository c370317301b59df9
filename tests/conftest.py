"""Shared pytest fixtures and configuration for the rgw-admin test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests pass ``argv`` explicitly and read output via ``capsys``.
* Tests must not depend on the caller's ``RGW_ADMIN_*`` environment.
"""

from __future__ import annotations

import pytest

from rgw_admin.config import Settings
from rgw_admin.core.handlers import build_registry
from rgw_admin.core.registry import CommandRegistry


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RGW_ADMIN_PROG", "RGW_ADMIN_STRICT_EXIT", "RGW_ADMIN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> CommandRegistry:
    return build_registry()


@pytest.fixture
def settings() -> Settings:
    return Settings()

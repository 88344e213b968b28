from __future__ import annotations

import pytest

from bootstrap_theme.bootstrap import BootstrapInstaller
from bootstrap_theme.core.registry import SettingsRegistry
from tests.fakes.host import FakeGuard, FakeHost, FakePackagingInstaller, FakeSelectorInstaller


@pytest.fixture
def registry() -> SettingsRegistry:
    return SettingsRegistry()


@pytest.fixture
def selectors() -> FakeSelectorInstaller:
    return FakeSelectorInstaller()


@pytest.fixture
def packaging() -> FakePackagingInstaller:
    return FakePackagingInstaller()


@pytest.fixture
def installer(
    registry: SettingsRegistry,
    selectors: FakeSelectorInstaller,
    packaging: FakePackagingInstaller,
) -> BootstrapInstaller:
    return BootstrapInstaller(registry, selectors=selectors, packaging=packaging)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost(FakeGuard())

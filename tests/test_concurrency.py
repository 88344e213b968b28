"""Concurrent first installs on the same host."""

import threading
from typing import Any

from bootstrap_theme.bootstrap import BootstrapInstaller
from bootstrap_theme.config import BootstrapSettings
from bootstrap_theme.core.errors import DuplicateInstallationError
from bootstrap_theme.core.registry import SettingsRegistry
from tests.fakes.host import FakeGuard, FakeHost, FakePackagingInstaller, FakeSelectorInstaller


class CountingRegistry(SettingsRegistry):
    def __init__(self) -> None:
        super().__init__()
        self.duplicates = 0
        self._count_lock = threading.Lock()

    def put(self, host: Any, value: Any) -> None:
        try:
            super().put(host, value)
        except DuplicateInstallationError:
            with self._count_lock:
                self.duplicates += 1
            raise


def test_racing_installs_keep_exactly_one_settings_instance() -> None:
    registry = CountingRegistry()
    # both threads block in the selector step until the other one arrives,
    # so both pass the registry check before either commits
    selectors = FakeSelectorInstaller(barrier=threading.Barrier(2))
    installer = BootstrapInstaller(registry, selectors=selectors, packaging=FakePackagingInstaller())
    host = FakeHost(FakeGuard())
    settings_a = BootstrapSettings(theme="darkly")
    settings_b = BootstrapSettings(theme="lux")
    errors: list[BaseException] = []

    def run(settings: BootstrapSettings) -> None:
        try:
            installer.install(host, settings)
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [
        threading.Thread(target=run, args=(settings_a,)),
        threading.Thread(target=run, args=(settings_b,)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert installer.get_settings(host) in (settings_a, settings_b)
    assert registry.duplicates == 1
    assert len(registry) == 1
    # side effects of both callers reached the host
    assert len(selectors.install_calls) == 2
    assert len(host.listeners) == 2

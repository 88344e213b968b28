"""Tests for the FastAPI host adapter and the showcase server."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bootstrap_theme.bootstrap import GUARD_PATTERNS, BootstrapInstaller
from bootstrap_theme.config import BootstrapSettings
from bootstrap_theme.core.context import bind_host, current_host
from bootstrap_theme.core.host import is_web_capable
from bootstrap_theme.core.registry import SettingsRegistry
from bootstrap_theme.integrations import MOUNT_NAME, SelectorUtilities, StaticPackagingInstaller
from bootstrap_theme.resources import HeaderResponse, ResourceKind
from bootstrap_theme.server import create_app
from bootstrap_theme.web import BasicResourceGuard, Component, Page, WebApplication


@pytest.fixture
def vendor_dir(tmp_path: Path) -> Path:
    css = tmp_path / "bootstrap" / "5.3.3" / "css"
    css.mkdir(parents=True)
    (css / "bootstrap.min.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    js = tmp_path / "bootstrap" / "5.3.3" / "js"
    js.mkdir(parents=True)
    (js / "bootstrap.bundle.min.js").write_text("/* bundle */\n", encoding="utf-8")
    fonts = tmp_path / "bootstrap" / "5.3.3" / "fonts"
    fonts.mkdir(parents=True)
    (fonts / "icons.woff2").write_bytes(b"wOF2")
    (fonts / "README.md").write_text("fonts\n", encoding="utf-8")
    return tmp_path


def _installer() -> BootstrapInstaller:
    return BootstrapInstaller(
        SettingsRegistry(),
        selectors=SelectorUtilities(),
        packaging=StaticPackagingInstaller(),
    )


def _local(vendor_dir: Path, **overrides: object) -> BootstrapSettings:
    return BootstrapSettings(resource_directory=str(vendor_dir), **overrides)  # type: ignore[arg-type]


def test_web_application_is_web_capable() -> None:
    assert is_web_capable(WebApplication())


def test_install_configures_web_application(vendor_dir: Path) -> None:
    web_app = WebApplication()
    installer = _installer()

    installer.install(web_app, _local(vendor_dir))

    assert web_app.markup_settings.strip_framework_tags is True
    assert set(GUARD_PATTERNS) <= set(web_app.get_resource_guard().patterns)
    assert len(web_app.instantiation_listeners) == 1
    assert [route.name for route in web_app.routes].count(MOUNT_NAME) == 1


def test_packaging_mount_is_idempotent(vendor_dir: Path) -> None:
    web_app = WebApplication()
    packaging = StaticPackagingInstaller()

    packaging.install(web_app, _local(vendor_dir))
    packaging.install(web_app, _local(vendor_dir))

    assert [route.name for route in web_app.routes].count(MOUNT_NAME) == 1


def test_packaged_resources_served_through_guard(vendor_dir: Path) -> None:
    web_app = WebApplication()
    _installer().install(web_app, _local(vendor_dir))
    client = TestClient(web_app.app)

    css = client.get("/vendor/bootstrap/5.3.3/css/bootstrap.min.css")
    font = client.get("/vendor/bootstrap/5.3.3/fonts/icons.woff2")
    readme = client.get("/vendor/bootstrap/5.3.3/fonts/README.md")

    assert css.status_code == 200
    assert "margin" in css.text
    assert font.status_code == 200
    assert readme.status_code == 403


def test_fonts_rejected_without_security_update(vendor_dir: Path) -> None:
    web_app = WebApplication()
    _installer().install(web_app, _local(vendor_dir, update_security_manager=False))
    client = TestClient(web_app.app)

    assert client.get("/vendor/bootstrap/5.3.3/fonts/icons.woff2").status_code == 403


def test_custom_mount_path_serves_rendered_references(vendor_dir: Path) -> None:
    web_app = WebApplication()
    installer = _installer()
    installer.install(web_app, _local(vendor_dir, resource_mount_path="/static/vendor/"))
    client = TestClient(web_app.app)

    response = HeaderResponse()
    installer.render_head(response, Page("home", host=web_app))

    urls = [reference.url for reference in response.references]
    assert urls == [
        "/static/vendor/bootstrap/5.3.3/css/bootstrap.min.css",
        "/static/vendor/bootstrap/5.3.3/js/bootstrap.bundle.min.js",
    ]
    assert all(client.get(url).status_code == 200 for url in urls)


def test_basic_guard_left_alone(vendor_dir: Path) -> None:
    guard = BasicResourceGuard()
    web_app = WebApplication(resource_guard=guard)
    installer = _installer()

    installer.install(web_app, _local(vendor_dir))

    assert installer.is_installed(web_app)
    assert web_app.get_resource_guard() is guard
    assert not guard.accepts("app/settings.py")


def test_component_uses_current_host() -> None:
    web_app = WebApplication()

    with bind_host(web_app):
        component = Component("panel")

    assert component.host is web_app


def test_page_document_contains_head_and_strips_markup(vendor_dir: Path) -> None:
    web_app = WebApplication()
    _installer().install(web_app, _local(vendor_dir))
    page = Page("home", title="Home", host=web_app)
    page.add(Component("panel", host=web_app))

    document = page.render_document("<p>hi</p>")

    assert document.count('<link rel="stylesheet" href="/vendor/bootstrap/5.3.3/css/bootstrap.min.css">') == 1
    assert '<script src="/vendor/bootstrap/5.3.3/js/bootstrap.bundle.min.js"></script>' in document
    assert "<body>" in document
    assert "data-page" not in document


def test_page_keeps_markup_attributes_before_install() -> None:
    web_app = WebApplication()
    page = Page("home", host=web_app)

    document = page.render_document()

    assert '<body data-page="home">' in document
    assert "<link" not in document


def test_default_showcase_never_links_missing_packaged_files() -> None:
    web_app = create_app()
    client = TestClient(web_app.app)

    with bind_host(web_app):
        response = HeaderResponse()
        Page("home").render_head(response)

    assert client.get("/").status_code == 200
    assert [reference.kind for reference in response.references] == [ResourceKind.CSS, ResourceKind.JS]
    for reference in response.references:
        if reference.url.startswith("/"):
            assert client.get(reference.url).status_code == 200
        else:
            assert reference.url.startswith("https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/")


def test_showcase_with_packaged_directory_serves_both_default_urls(vendor_dir: Path) -> None:
    web_app = create_app(_local(vendor_dir))
    client = TestClient(web_app.app)

    page = client.get("/")

    assert page.status_code == 200
    for url in (
        "/vendor/bootstrap/5.3.3/css/bootstrap.min.css",
        "/vendor/bootstrap/5.3.3/js/bootstrap.bundle.min.js",
    ):
        assert f'"{url}"' in page.text
        assert client.get(url).status_code == 200


def test_showcase_server_renders_page_and_settings() -> None:
    web_app = create_app(BootstrapSettings(theme="darkly", use_cdn_resources=True))
    client = TestClient(web_app.app)

    page = client.get("/")
    settings = client.get("/bootstrap/settings")

    assert page.status_code == 200
    assert "https://cdn.jsdelivr.net/npm/bootswatch@5.3.3/dist/darkly/bootstrap.min.css" in page.text
    assert 'data-bs-target="#theme-details"' in page.text
    assert 'id="theme-details"' in page.text
    assert settings.json()["theme"] == "darkly"
    assert settings.json()["use_cdn_resources"] is True
    assert settings.json()["resource_mount_path"] == "/vendor"
    assert current_host() is None

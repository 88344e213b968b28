from __future__ import annotations

import html
import logging
from typing import Optional

from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .bootstrap import get_settings, install
from .config import BootstrapSettings
from .integrations.selectors import SELECTOR_UTILITIES
from .web import Component, Page, WebApplication

logger = logging.getLogger(__name__)

_SHOWCASE_BODY = """\
    <main class="container py-5">
      <h1 class="display-5">Bootstrap theme</h1>
      <p class="lead">Theme <code>{theme}</code>, Bootstrap {version}.</p>
      <button type="button" class="btn btn-primary">Primary</button>
      <button type="button" class="btn btn-outline-secondary" data-bs-toggle="collapse"
              data-bs-target="{details_selector}" aria-controls="{details_id}">Details</button>
      <div class="collapse mt-3" id="{details_id}">
        <div class="card card-body">Served from <code>{source}</code>.</div>
      </div>
    </main>"""


class SettingsView(BaseModel):
    version: str
    theme: str
    use_cdn_resources: bool
    use_resource_packaging: bool
    update_security_manager: bool
    auto_append_resources: bool
    minify: bool
    defer_javascript: bool
    resource_mount_path: str


def create_app(settings: Optional[BootstrapSettings] = None) -> WebApplication:
    """Build the showcase application with Bootstrap installed."""

    web_app = WebApplication(title="Bootstrap Theme Showcase")
    install(web_app, settings)

    @web_app.app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        current = get_settings()
        page = Page("index", title="Bootstrap Theme Showcase")
        details = Component("theme-details")
        page.add(details)
        body = _SHOWCASE_BODY.format(
            theme=html.escape(current.theme),
            version=html.escape(current.version),
            details_id=html.escape(SELECTOR_UTILITIES.markup_id(details), quote=True),
            details_selector=html.escape(SELECTOR_UTILITIES.selector_for(details), quote=True),
            source="CDN" if current.use_cdn_resources else "packaged resources, CDN where missing",
        )
        return HTMLResponse(page.render_document(body))

    @web_app.app.get("/bootstrap/settings", response_model=SettingsView)
    async def installed_settings() -> SettingsView:
        current = get_settings()
        return SettingsView(
            version=current.version,
            theme=current.theme,
            use_cdn_resources=current.use_cdn_resources,
            use_resource_packaging=current.use_resource_packaging,
            update_security_manager=current.update_security_manager,
            auto_append_resources=current.auto_append_resources,
            minify=current.minify,
            defer_javascript=current.defer_javascript,
            resource_mount_path=current.resource_mount_path,
        )

    return web_app


def run_local_server(
    host: str = "127.0.0.1",
    port: int = 8000,
    settings: Optional[BootstrapSettings] = None,
) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    web_app = create_app(settings)
    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Bootstrap showcase on http://%s:%s", host, port)
    asyncio.run(serve(web_app.app, config))


__all__ = ["SettingsView", "create_app", "run_local_server"]

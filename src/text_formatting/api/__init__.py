from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from .. import __version__
from ..config import load_config
from ..core import FormattingService
from .routers import health, tools


def create_app(config_path: Path | None = None, *, require_enabled: bool = True) -> FastAPI:
    config = load_config(config_path)
    if require_enabled and not config.runtime.enable_local_api:
        raise RuntimeError("Local API is disabled. Enable it via configuration or environment.")

    app = FastAPI(title="Text Formatting Server", version=__version__)
    app.state.config = config
    app.state.service = FormattingService(config)

    app.include_router(health.router)
    app.include_router(tools.router)
    return app


__all__ = ["create_app"]

from fastapi import FastAPI, HTTPException

from text_formatting.api import create_app

try:
    app = create_app(require_enabled=True)
except RuntimeError:
    app = FastAPI(title="Text Formatting Server", version="1.0.0")

    @app.get("/")
    async def api_disabled() -> dict[str, str]:
        raise HTTPException(
            status_code=503,
            detail="Local API disabled. Enable by setting enable_local_api = true in config.toml",
        )

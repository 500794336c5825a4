from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


CONFIG_FILE = Path("config.toml")
ENV_PREFIX = "TFS_"


@dataclass(slots=True)
class RuntimeConfig:
    output_dir: Path = Path(".")
    log_file: str = ""
    preview_chars: int = 0
    enable_local_api: bool = True

    @property
    def log_path(self) -> Path | None:
        if not self.log_file:
            return None
        return Path(self.log_file)


@dataclass(slots=True)
class APIConfig:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(slots=True)
class AppConfig:
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    api: APIConfig = field(default_factory=APIConfig)


def _read_toml(path: Path) -> Mapping[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _build_runtime(data: Mapping[str, object] | None) -> RuntimeConfig:
    if not data:
        return RuntimeConfig()
    return RuntimeConfig(
        output_dir=Path(str(data.get("output_dir", "."))),
        log_file=str(data.get("log_file", "")),
        preview_chars=max(0, int(data.get("preview_chars", 0))),
        enable_local_api=bool(data.get("enable_local_api", True)),
    )


def _build_api(data: Mapping[str, object] | None) -> APIConfig:
    if not data:
        return APIConfig()
    return APIConfig(host=str(data.get("host", "127.0.0.1")), port=int(data.get("port", 8000)))


def _parse_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return None


def config_path_from_env() -> Path:
    value = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    return Path(value) if value else CONFIG_FILE


def load_config(path: Path | None = None) -> AppConfig:
    """Read *path* (default: ``$TFS_CONFIG_PATH`` or ./config.toml).

    ``$TFS_ENABLE_LOCAL_API``, when set to a recognised boolean, overrides the
    file's ``runtime.enable_local_api``.
    """

    path = path or config_path_from_env()
    raw = _read_toml(path)
    runtime_data = raw.get("runtime") if isinstance(raw, Mapping) else None
    api_data = raw.get("api") if isinstance(raw, Mapping) else None
    runtime = _build_runtime(runtime_data if isinstance(runtime_data, Mapping) else None)
    api = _build_api(api_data if isinstance(api_data, Mapping) else None)
    enabled = _parse_bool(os.getenv(f"{ENV_PREFIX}ENABLE_LOCAL_API"))
    if enabled is not None:
        runtime.enable_local_api = enabled
    return AppConfig(runtime=runtime, api=api)


def dump_config(config: AppConfig) -> str:
    payload = {
        "runtime": {
            "output_dir": str(config.runtime.output_dir),
            "log_file": config.runtime.log_file,
            "preview_chars": config.runtime.preview_chars,
            "enable_local_api": config.runtime.enable_local_api,
        },
        "api": {
            "host": config.api.host,
            "port": config.api.port,
        },
    }
    return json.dumps(payload, indent=2)

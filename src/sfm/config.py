from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os
import sys

from sfm.domain.errors import ConfigError

DEFAULT_API_BASE_URL = "http://localhost:3001"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class AppPaths:
    base_dir: Path
    logs_dir: Path
    exports_dir: Path


@dataclass(frozen=True)
class AppConfig:
    api_base_url: str
    request_timeout: float
    paths: AppPaths


def _windows_appdata() -> Path:
    return Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))


def _mac_app_support() -> Path:
    return Path.home() / "Library" / "Application Support"


def get_app_paths(app_name: str = "StorefrontManager", home: Optional[str] = None) -> AppPaths:
    if home:
        base = Path(home)
    elif sys.platform.startswith("win"):
        base = _windows_appdata() / app_name
    elif sys.platform == "darwin":
        base = _mac_app_support() / app_name
    else:
        base = Path.home() / f".{app_name.lower()}"

    logs = base / "logs"
    exports = base / "exports"

    base.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)
    exports.mkdir(parents=True, exist_ok=True)

    return AppPaths(base_dir=base, logs_dir=logs, exports_dir=exports)


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"SFM_REQUEST_TIMEOUT must be a number. Received: {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"SFM_REQUEST_TIMEOUT must be > 0. Received: {timeout}")
    return timeout


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    env = os.environ if environ is None else environ

    base_url = (env.get("SFM_API_BASE_URL") or DEFAULT_API_BASE_URL).strip().rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        raise ConfigError(f"SFM_API_BASE_URL must be an http(s) URL. Received: {base_url!r}")

    raw_timeout = (env.get("SFM_REQUEST_TIMEOUT") or "").strip()
    timeout = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT

    return AppConfig(
        api_base_url=base_url,
        request_timeout=timeout,
        paths=get_app_paths(home=env.get("SFM_HOME") or None),
    )

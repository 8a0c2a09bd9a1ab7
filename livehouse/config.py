import os
import tomllib
from pathlib import Path
from typing import Any

_DEFAULT_CONFIG_PATH = Path("config.toml")
_DEFAULT_ENV_PATH = Path("secrets")

DEFAULT_PORT = 3000
DEFAULT_ADMIN_PASSWORD = "admin"


def load(path: Path = _DEFAULT_CONFIG_PATH, env_path: Path = _DEFAULT_ENV_PATH) -> dict[str, Any]:
    """Load config from TOML (if present), then overlay the environment and secrets file."""
    cfg: dict[str, Any] = {}
    if path.exists():
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    _load_env(env_path, cfg)
    return cfg


def _load_env(env_path: Path, cfg: dict) -> None:
    """
    Parse a .env-style file and inject values into the config dict.

    Supported variable names:
      PORT                      -> cfg["server"]["port"]
      LIVEHOUSE_ENV             -> cfg["server"]["env"]
      LIVEHOUSE_ADMIN_PASSWORD  -> cfg["secrets"]["admin_password"]

    Shell environment variables take precedence over values in the file.
    """
    _apply_env_vars(cfg)

    if not env_path.exists():
        return

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key not in os.environ:
                os.environ[key] = value

    _apply_env_vars(cfg)


def _apply_env_vars(cfg: dict) -> None:
    server = cfg.setdefault("server", {})
    secrets = cfg.setdefault("secrets", {})
    if v := os.environ.get("PORT"):
        server["port"] = v
    if v := os.environ.get("LIVEHOUSE_ENV"):
        server["env"] = v
    if v := os.environ.get("LIVEHOUSE_ADMIN_PASSWORD"):
        secrets["admin_password"] = v


def get_site(cfg: dict) -> dict:
    return cfg.get("site", {})


def get_server(cfg: dict) -> dict:
    return cfg.get("server", {})


def get_port(cfg: dict) -> int:
    try:
        return int(get_server(cfg).get("port", DEFAULT_PORT))
    except (TypeError, ValueError):
        return DEFAULT_PORT


def is_production(cfg: dict) -> bool:
    return str(get_server(cfg).get("env", "development")).lower() == "production"


def get_database_path(cfg: dict) -> Path:
    return Path(cfg.get("database", {}).get("path", "data/livehouse.db"))


def get_upload_dir(cfg: dict) -> Path:
    return Path(cfg.get("uploads", {}).get("dir", "uploads"))


def get_dist_dir(cfg: dict) -> Path:
    return Path(get_site(cfg).get("output_dir", "dist"))


def get_admin_password(cfg: dict) -> str:
    return cfg.get("secrets", {}).get("admin_password") or DEFAULT_ADMIN_PASSWORD

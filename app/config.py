# app/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

COLLISION_POLICIES = ("overwrite", "reject")

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

@dataclass(frozen=True)
class Config:
    # Server
    port: int
    # Storage
    upload_dir: Path
    max_file_size: int          # bytes; declared upload sizes above this are rejected
    on_collision: str           # "overwrite" | "reject" for same-named files in a job
    # URLs handed back to clients; empty -> derived from the request
    public_base_url: str
    # API / CORS
    allowed_origins: List[str]
    # Logging
    log_level: str
    access_log: bool

def load_config() -> Config:
    on_collision = os.getenv("ON_COLLISION", "overwrite").strip().lower()
    if on_collision not in COLLISION_POLICIES:
        raise ValueError(f"ON_COLLISION must be one of {COLLISION_POLICIES}, got {on_collision!r}")
    return Config(
        port = int(os.getenv("PORT", "8080")),
        upload_dir = Path(os.getenv("UPLOAD_DIR", "./uploads")).expanduser(),
        max_file_size = int(os.getenv("MAX_FILE_SIZE", str(10 * 1024 * 1024 * 1024))),
        on_collision = on_collision,
        public_base_url = os.getenv("BASE_URL", "").rstrip("/"),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
        access_log = _env_bool("ACCESS_LOG", True),
    )

# Loaded once for the process entry points; tests build their own Config
config = load_config()

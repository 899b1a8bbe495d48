# app/lib/deps.py
from fastapi import Request

from app.config import Config
from app.lib.store import JobFileStore


def get_store(request: Request) -> JobFileStore:
    return request.app.state.store


def get_config(request: Request) -> Config:
    return request.app.state.config


def base_url(request: Request) -> str:
    """Configured public URL if set, else the URL the client used to reach us."""
    configured = request.app.state.config.public_base_url
    return (configured or str(request.base_url)).rstrip("/")

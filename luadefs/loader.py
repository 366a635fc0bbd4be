"""Fetch and load the Core Lua API document.

The document is fetched once per run from the platform documentation
repository; a saved copy can be loaded from disk instead.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

API_URL = (
    "https://raw.githubusercontent.com/ManticoreGamesInc/platform-documentation/"
    "development/src/assets/api/CoreLuaAPI.json"
)


def fetch_api(url: str = API_URL, client: httpx.Client | None = None) -> dict[str, Any]:
    """Download the API document. Transport and status errors propagate."""
    if client is None:
        response = httpx.get(url, timeout=None, follow_redirects=True)
    else:
        response = client.get(url, follow_redirects=True)
    response.raise_for_status()
    return response.json()


def load_api(path: Path) -> dict[str, Any]:
    """Load a saved copy of the API document from disk."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def get_classes(api: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract class records from the document."""
    return api["Classes"]


def get_namespaces(api: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract namespace records from the document."""
    return api["Namespaces"]


def get_enums(api: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract enum records from the document."""
    return api["Enums"]

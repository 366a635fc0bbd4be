"""Entry point: python -m luadefs

Fetches CoreLuaAPI.json, generates generated/core-games-api.def.lua.
"""

from __future__ import annotations

from .codegen import generate
from .context_builder import build_context
from .loader import fetch_api


def main() -> None:
    api = fetch_api()
    context = build_context(api)
    generate(context)


if __name__ == "__main__":
    main()

"""Generate EmmyLua annotations for the Core Lua API."""

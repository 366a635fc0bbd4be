"""Shared fixtures: small CoreLuaAPI.json documents."""

from __future__ import annotations

import copy
from typing import Any

import pytest


def _signature(parameters=None, returns=None) -> dict[str, Any]:
    return {"Parameters": parameters or [], "Returns": returns or []}


FOO_CLASS: dict[str, Any] = {
    "Name": "Foo",
    "BaseType": "Object",
    "Properties": [{"Name": "x", "Type": "Number"}],
    "MemberFunctions": [{"Name": "Bar", "Signatures": [_signature()]}],
}

PLAYER_CLASS: dict[str, Any] = {
    "Name": "Player",
    "BaseType": "CoreObject",
    "Description": "Player is an object representation of the state of a player.\nSecond line.",
    "Events": [{"Name": "damagedEvent", "Description": "Fired when damaged."}],
    "Constructors": [{
        "Name": "New",
        "Signatures": [_signature([{"Name": "name", "Type": "string"}], [{"Type": "Player"}])],
    }],
    "StaticFunctions": [{
        "Name": "Find",
        "Description": "Finds a player by id.",
        "Signatures": [
            _signature([{"Name": "id", "Type": "string"}], [{"Type": "Player"}]),
            _signature(
                [{"Name": "end", "Type": "Integer", "IsOptional": True}],
                [{"Type": "Player"}, {"Type": "bool"}],
            ),
        ],
    }],
    "Properties": [
        {"Name": "name", "Type": "string", "Description": "The player's name."},
        {"Name": "hitPoints", "Type": "Integer"},
    ],
    "MemberFunctions": [{
        "Name": "SetData",
        "Signatures": [_signature([
            {"Name": "key", "Type": "string"},
            {"Name": "values", "Type": "any", "IsVariadic": True},
        ])],
    }],
    "Constants": [{"Name": "MAX_HEALTH", "Type": "Number"}],
}

EVENTS_NAMESPACE: dict[str, Any] = {
    "Name": "Events",
    "StaticFunctions": [{
        "Name": "Broadcast",
        "Signatures": [_signature([{"Name": "eventName", "Type": "string"}])],
    }],
}

GAME_NAMESPACE: dict[str, Any] = {
    "Name": "Game",
    "StaticEvents": [{"Name": "playerJoinedEvent"}],
    "StaticFunctions": [{"Name": "GetPlayers", "Signatures": [_signature(returns=[{"Type": "Array<Player>"}])]}],
    "Constants": [{"Name": "MAX_PLAYERS", "Type": "Integer"}],
}

ABILITY_PHASE_ENUM: dict[str, Any] = {
    "Name": "AbilityPhase",
    "Values": [
        {"Name": "READY", "Value": 0},
        {"Name": "CAST", "Value": 1},
        {"Name": "EXECUTE", "Value": 2},
        {"Name": "RECOVERY", "Value": 3},
        {"Name": "COOLDOWN", "Value": 4},
    ],
}


@pytest.fixture
def empty_api() -> dict[str, Any]:
    return {"Classes": [], "Namespaces": [], "Enums": []}


@pytest.fixture
def sample_api() -> dict[str, Any]:
    return copy.deepcopy({
        "Classes": [FOO_CLASS, PLAYER_CLASS],
        "Namespaces": [EVENTS_NAMESPACE, GAME_NAMESPACE],
        "Enums": [ABILITY_PHASE_ENUM],
    })

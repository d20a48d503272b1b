# tonal_scheme/output.py
from __future__ import annotations

import json
from typing import Dict, Mapping, Optional

from .core_types import RGBTuple, rgb_to_hex
from .roles import ALL_ROLES, Role

OutputMapping = Dict[str, str]


def format_scheme(scheme: Mapping[Role, RGBTuple]) -> OutputMapping:
    """Role name -> 'rrggbb' (lowercase, no '#'), in Role order."""
    return {
        role.value: rgb_to_hex(scheme[role], prefix="")
        for role in ALL_ROLES
        if role in scheme
    }


def render_json(mapping: Mapping[str, str], indent: Optional[int] = None) -> str:
    """Serialize the output mapping as a single JSON object."""
    return json.dumps(dict(mapping), indent=indent)


__all__ = ["OutputMapping", "format_scheme", "render_json"]

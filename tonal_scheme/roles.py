# tonal_scheme/roles.py
from __future__ import annotations

"""
Scheme role identifiers.

Exports:
- Role                 : every role emitted by the tonal algebra, in output order.
- CORRECTION_ROLES     : the fixed set darkened by the baseline correction.
- role_from_name(name) : snake_case or camelCase name -> Role.
"""

from enum import Enum
from typing import FrozenSet, Tuple


class Role(str, Enum):
    BACKGROUND = "background"
    ON_BACKGROUND = "on_background"
    SURFACE = "surface"
    SURFACE_DIM = "surface_dim"
    SURFACE_BRIGHT = "surface_bright"
    SURFACE_CONTAINER_LOWEST = "surface_container_lowest"
    SURFACE_CONTAINER_LOW = "surface_container_low"
    SURFACE_CONTAINER = "surface_container"
    SURFACE_CONTAINER_HIGH = "surface_container_high"
    SURFACE_CONTAINER_HIGHEST = "surface_container_highest"
    ON_SURFACE = "on_surface"
    SURFACE_VARIANT = "surface_variant"
    ON_SURFACE_VARIANT = "on_surface_variant"
    INVERSE_SURFACE = "inverse_surface"
    INVERSE_ON_SURFACE = "inverse_on_surface"
    OUTLINE = "outline"
    OUTLINE_VARIANT = "outline_variant"
    SHADOW = "shadow"
    SCRIM = "scrim"
    SURFACE_TINT = "surface_tint"
    PRIMARY = "primary"
    ON_PRIMARY = "on_primary"
    PRIMARY_CONTAINER = "primary_container"
    ON_PRIMARY_CONTAINER = "on_primary_container"
    INVERSE_PRIMARY = "inverse_primary"
    SECONDARY = "secondary"
    ON_SECONDARY = "on_secondary"
    SECONDARY_CONTAINER = "secondary_container"
    ON_SECONDARY_CONTAINER = "on_secondary_container"
    TERTIARY = "tertiary"
    ON_TERTIARY = "on_tertiary"
    TERTIARY_CONTAINER = "tertiary_container"
    ON_TERTIARY_CONTAINER = "on_tertiary_container"
    ERROR = "error"
    ON_ERROR = "on_error"
    ERROR_CONTAINER = "error_container"
    ON_ERROR_CONTAINER = "on_error_container"
    PRIMARY_FIXED = "primary_fixed"
    PRIMARY_FIXED_DIM = "primary_fixed_dim"
    ON_PRIMARY_FIXED = "on_primary_fixed"
    ON_PRIMARY_FIXED_VARIANT = "on_primary_fixed_variant"
    SECONDARY_FIXED = "secondary_fixed"
    SECONDARY_FIXED_DIM = "secondary_fixed_dim"
    ON_SECONDARY_FIXED = "on_secondary_fixed"
    ON_SECONDARY_FIXED_VARIANT = "on_secondary_fixed_variant"
    TERTIARY_FIXED = "tertiary_fixed"
    TERTIARY_FIXED_DIM = "tertiary_fixed_dim"
    ON_TERTIARY_FIXED = "on_tertiary_fixed"
    ON_TERTIARY_FIXED_VARIANT = "on_tertiary_fixed_variant"

    @property
    def dynamic_color_name(self) -> str:
        """Attribute name on materialyoucolor's MaterialDynamicColors."""
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)

    def __str__(self) -> str:
        return self.value


ALL_ROLES: Tuple[Role, ...] = tuple(Role)

CORRECTION_ROLES: FrozenSet[Role] = frozenset(
    {
        Role.SURFACE,
        Role.SURFACE_DIM,
        Role.SURFACE_BRIGHT,
        Role.SURFACE_CONTAINER,
        Role.SURFACE_CONTAINER_LOWEST,
        Role.SURFACE_CONTAINER_LOW,
        Role.SURFACE_CONTAINER_HIGH,
        Role.SURFACE_CONTAINER_HIGHEST,
        Role.INVERSE_SURFACE,
        Role.PRIMARY,
        Role.SECONDARY,
        Role.TERTIARY,
        Role.PRIMARY_CONTAINER,
        Role.SECONDARY_CONTAINER,
        Role.TERTIARY_CONTAINER,
        Role.ERROR,
    }
)

_BY_CAMEL = {role.dynamic_color_name: role for role in Role}


def role_from_name(name: str) -> Role:
    """Look up a Role by its snake_case value or camelCase dynamic colour name."""
    try:
        return Role(name)
    except ValueError:
        pass
    try:
        return _BY_CAMEL[name]
    except KeyError:
        raise ValueError(f"unknown role: {name!r}") from None


__all__ = ["Role", "ALL_ROLES", "CORRECTION_ROLES", "role_from_name"]

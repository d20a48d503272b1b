# tonal_scheme/correct.py
from __future__ import annotations

"""
Role correction pass.

Material surfaces come out a little too bright, so every generated scheme is
post-processed in two stages:

  1. Baseline: each role in CORRECTION_ROLES is darkened with the channel
     shift (BASELINE_CORRECTIONS).
  2. Mode rules (MODE_RULES), read against the already darkened scheme:
       dark   : surface_dim darkened once more, surface_bright re-derived
                from surface with its HSL lightness scaled by 1.35
       light  : surface_bright brightened with the same channel shift
       amoled : nothing

Rules are plain data; correct_scheme() only walks the tables.
"""

from dataclasses import dataclass
from typing import Mapping, Tuple, Union

from .colour_convert import scale_lightness, shift_channels
from .constants import (
    BASELINE_SHIFT_AMOUNT,
    DARK_SURFACE_BRIGHT_LIGHTNESS,
    DARK_SURFACE_DIM_AMOUNT,
    LIGHT_SURFACE_BRIGHT_AMOUNT,
)
from .core_types import RGBTuple
from .errors import MissingRoleError
from .mode import SchemeMode
from .roles import ALL_ROLES, CORRECTION_ROLES, Role
from .scheme import Scheme


def _lookup(scheme: Mapping[Role, RGBTuple], role: Role) -> RGBTuple:
    try:
        return scheme[role]
    except KeyError:
        raise MissingRoleError(f"scheme has no role {role.value!r}") from None


@dataclass(frozen=True)
class Shift:
    """Channel shift of one role by a signed amount (negative darkens)."""

    role: Role
    amount: float

    def apply(self, scheme: Scheme) -> None:
        scheme[self.role] = shift_channels(_lookup(scheme, self.role), self.amount)


@dataclass(frozen=True)
class DeriveLightness:
    """Replace target with source, HSL lightness multiplied by factor."""

    target: Role
    source: Role
    factor: float

    def apply(self, scheme: Scheme) -> None:
        _lookup(scheme, self.target)  # replaced, never added
        scheme[self.target] = scale_lightness(
            _lookup(scheme, self.source), self.factor
        )


Rule = Union[Shift, DeriveLightness]

BASELINE_CORRECTIONS: Tuple[Shift, ...] = tuple(
    Shift(role, BASELINE_SHIFT_AMOUNT) for role in ALL_ROLES if role in CORRECTION_ROLES
)

MODE_RULES: Mapping[SchemeMode, Tuple[Rule, ...]] = {
    SchemeMode.DARK: (
        Shift(Role.SURFACE_DIM, DARK_SURFACE_DIM_AMOUNT),
        DeriveLightness(
            Role.SURFACE_BRIGHT, Role.SURFACE, DARK_SURFACE_BRIGHT_LIGHTNESS
        ),
    ),
    SchemeMode.LIGHT: (Shift(Role.SURFACE_BRIGHT, LIGHT_SURFACE_BRIGHT_AMOUNT),),
    SchemeMode.AMOLED: (),
}


def apply_rules(scheme: Mapping[Role, RGBTuple], rules: Tuple[Rule, ...]) -> Scheme:
    """Apply rules in order to a copy of scheme."""
    out: Scheme = dict(scheme)
    for rule in rules:
        rule.apply(out)
    return out


def apply_baseline(scheme: Mapping[Role, RGBTuple]) -> Scheme:
    return apply_rules(scheme, BASELINE_CORRECTIONS)


def apply_mode_rules(scheme: Mapping[Role, RGBTuple], mode: SchemeMode) -> Scheme:
    return apply_rules(scheme, MODE_RULES[mode])


def correct_scheme(scheme: Mapping[Role, RGBTuple], mode: SchemeMode) -> Scheme:
    """
    Full correction pass. The input mapping is not modified.

    Raises MissingRoleError if a role named by a rule is absent.
    """
    return apply_mode_rules(apply_baseline(scheme), mode)


__all__ = [
    "Shift",
    "DeriveLightness",
    "Rule",
    "BASELINE_CORRECTIONS",
    "MODE_RULES",
    "apply_rules",
    "apply_baseline",
    "apply_mode_rules",
    "correct_scheme",
]

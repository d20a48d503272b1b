# tonal_scheme/pipeline.py
from __future__ import annotations

"""
One run, end to end:
  resolve source -> generate scheme -> correct roles -> format.

Nothing is shared between runs; every intermediate lives in the returned
SchemeResult.
"""

from dataclasses import dataclass

from .core_types import SourceColor
from .correct import correct_scheme
from .mode import PaletteVariant, SchemeMode
from .output import OutputMapping, format_scheme
from .scheme import Scheme, generate_scheme
from .source import Source, resolve_source_color


@dataclass(frozen=True)
class SchemeResult:
    source_color: SourceColor
    mode: SchemeMode
    variant: PaletteVariant
    generated: Scheme
    corrected: Scheme
    output: OutputMapping


def build_from_color(
    source_color: SourceColor,
    mode: SchemeMode = SchemeMode.DARK,
    variant: PaletteVariant = PaletteVariant.DEFAULT,
) -> SchemeResult:
    generated = generate_scheme(source_color, variant, mode)
    corrected = correct_scheme(generated, mode)
    return SchemeResult(
        source_color=source_color,
        mode=mode,
        variant=variant,
        generated=generated,
        corrected=corrected,
        output=format_scheme(corrected),
    )


def run(
    source: Source,
    mode: SchemeMode = SchemeMode.DARK,
    variant: PaletteVariant = PaletteVariant.DEFAULT,
) -> SchemeResult:
    """
    Resolve the source and build its corrected scheme.

    Input errors (HexColorError, ImageDecodeError) propagate before any
    scheme is generated.
    """
    return build_from_color(resolve_source_color(source), mode, variant)


__all__ = ["SchemeResult", "build_from_color", "run"]

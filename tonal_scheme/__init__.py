# tonal_scheme/__init__.py
"""
tonal_scheme package.

Purpose:
  Derive a Material-style colour scheme from an image or a hex colour, with a
  post-processing pass that tames over-bright surfaces. See make_scheme.py
  for the CLI.

Public API:
  run              : source -> SchemeResult (source colour, schemes, output).
  ImageSource      : seed from an image file.
  ColorSource      : seed from a literal hex colour.
  SchemeMode       : amoled | dark | light.
  PaletteVariant   : tonal-algebra flavour (default, vibrant, ...).
  Role             : scheme role identifiers.
  correct          : the role correction tables and pass.
  colour_convert   : HSL conversion and the channel shift.
  image_io         : image loading and sampling.

Quick start:
  from tonal_scheme import run, ColorSource, SchemeMode
  result = run(ColorSource("#a1b2c3"), SchemeMode.LIGHT)
  print(result.output["primary"])
"""

__version__ = "0.2.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import correct
from . import errors
from . import image_io
from . import output
from . import roles

from .errors import HexColorError, ImageDecodeError, InputError, MissingRoleError
from .mode import PaletteVariant, SchemeMode
from .pipeline import SchemeResult, run
from .roles import Role
from .source import ColorSource, ImageSource

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "correct",
    "errors",
    "image_io",
    "output",
    "roles",
    "HexColorError",
    "ImageDecodeError",
    "InputError",
    "MissingRoleError",
    "PaletteVariant",
    "SchemeMode",
    "SchemeResult",
    "run",
    "Role",
    "ColorSource",
    "ImageSource",
]

# tonal_scheme/errors.py
"""
Error taxonomy.

InputError and its subclasses are user-facing: the run aborts and nothing is
printed on stdout. MissingRoleError marks a broken contract with the tonal
scheme generator and is treated as a defect, never caught by the CLI.
"""


class SchemeError(Exception):
    code = "E_SCHEME"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class InputError(SchemeError):
    code = "E_INPUT"


class HexColorError(InputError, ValueError):
    code = "E_HEX_COLOR"


class ImageDecodeError(InputError):
    code = "E_IMAGE_DECODE"


class MissingRoleError(SchemeError, KeyError):
    code = "E_MISSING_ROLE"

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "SchemeError",
    "InputError",
    "HexColorError",
    "ImageDecodeError",
    "MissingRoleError",
]

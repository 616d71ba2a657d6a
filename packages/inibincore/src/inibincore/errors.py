from __future__ import annotations


class InibinError(Exception):
    """Base class of every error raised by the inibin packages."""


# -----------------------------------------------------------------------------
# Parse-time (format decoder). Fatal to the whole parse call.
# -----------------------------------------------------------------------------
class FormatError(InibinError, ValueError):
    pass


class InvalidVersionError(FormatError):
    def __init__(self, version: int):
        super().__init__(f"unknown inibin version byte 0x{version:02x}")
        self.version = version


class TruncatedError(FormatError):
    pass


class InvalidStringError(FormatError):
    def __init__(self, key: int, reason: str):
        super().__init__(f"key 0x{key:08x}: string is not valid UTF-8 ({reason})")
        self.key = key


# -----------------------------------------------------------------------------
# Decode-time (schema decoder). Recoverable by the caller.
# -----------------------------------------------------------------------------
class DecodeError(InibinError):
    pass


class FieldNotFoundError(DecodeError, KeyError):
    def __init__(self, key: int, name: str | None = None):
        label = f"{name} " if name else ""
        super().__init__(f"required field {label}(0x{key:08x}) not found")
        self.key = key
        self.name = name

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class TypeUnsupportedError(DecodeError, TypeError):
    pass


# -----------------------------------------------------------------------------
# Caller / schema mismatches. Correct schemas never trigger these.
# -----------------------------------------------------------------------------
class SchemaMismatchError(InibinError, RuntimeError):
    pass


class SchemaExhaustedError(SchemaMismatchError):
    pass


class CursorExhaustedError(SchemaMismatchError):
    pass


__all__ = [
    "InibinError",
    "FormatError", "InvalidVersionError", "TruncatedError", "InvalidStringError",
    "DecodeError", "FieldNotFoundError", "TypeUnsupportedError",
    "SchemaMismatchError", "SchemaExhaustedError", "CursorExhaustedError",
]

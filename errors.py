# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every failure raised by the simulator."""


# ── alphabet & permutation ────────────────────────────────────────
class InvalidAlphabet(EnigmaError):
    pass


class InvalidSymbol(EnigmaError):
    pass


class MalformedCycles(EnigmaError):
    pass


# ── rotors ────────────────────────────────────────────────────────
class InvalidReflector(EnigmaError):
    pass


class InvalidNotch(EnigmaError):
    pass


class UnknownRotorCategory(EnigmaError):
    pass


# ── machine assembly ──────────────────────────────────────────────
class WrongSlotCount(EnigmaError):
    pass


class DuplicateRotor(EnigmaError):
    pass


class UnknownRotor(EnigmaError):
    pass


class InvalidAssembly(EnigmaError):
    pass


class BadSettingLength(EnigmaError):
    pass


# ── I/O layer ─────────────────────────────────────────────────────
class ConfigError(EnigmaError):
    """Malformed configuration file, settings line or message stream."""

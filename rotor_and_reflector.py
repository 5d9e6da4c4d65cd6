# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import InvalidNotch, InvalidReflector, UnknownRotorCategory

debug = Debug()


class RotorKind(Enum):
    PLAIN = "plain"
    MOVING = "M"
    FIXED = "N"
    REFLECTOR = "R"


class Rotor:
    """A rotor named NAME whose permutation at setting 0 is PERM.

    The plain rotor neither rotates nor reflects; the subclasses below are
    the only other variants.
    """

    kind: RotorKind = RotorKind.PLAIN

    def __init__(self, name: str, perm: Permutation) -> None:
        self.name = name
        self.permutation = perm
        self._setting = 0

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    def size(self) -> int:
        return self.permutation.size()

    # ── variant contract ─────────────────────────────────────────
    def rotates(self) -> bool:
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    @property
    def notches(self) -> str:
        return ""

    def at_notch(self) -> bool:
        return False

    # ── setting ──────────────────────────────────────────────────
    @property
    def setting(self) -> int:
        return self._setting

    def set(self, posn: int | str) -> None:
        if isinstance(posn, str):
            self._setting = self.alphabet.to_index(posn)
        else:
            self._setting = self.permutation.wrap(posn)

    def advance(self) -> None:
        pass

    def reset(self) -> None:
        """Return to setting 0, as when freshly placed in a machine."""
        self._setting = 0

    # ── signal paths ---------------------------------------------
    def convert_forward(self, p: int) -> int:
        perm = self.permutation
        mapped = perm.permute(perm.wrap(p + self._setting))
        return perm.wrap(mapped - self._setting)

    def convert_backward(self, e: int) -> int:
        perm = self.permutation
        mapped = perm.invert(perm.wrap(e + self._setting))
        return perm.wrap(mapped - self._setting)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} pos={self._setting}>"


class MovingRotor(Rotor):
    """A rotor that advances under a pawl and carries its notches with it."""

    kind = RotorKind.MOVING

    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        self._check_notches(notches)
        self._initial_notches = notches
        self._notches = notches

    def _check_notches(self, notches: str) -> None:
        for ch in notches:
            if ch not in self.alphabet:
                raise InvalidNotch(
                    f"Notch {ch!r} of rotor {self.name} is not in the alphabet"
                )

    @property
    def notches(self) -> str:
        return self._notches

    def set_notches(self, notches: str) -> None:
        self._check_notches(notches)
        self._notches = notches

    def at_notch(self) -> bool:
        return self.alphabet.to_symbol(self._setting) in self._notches

    def advance(self) -> None:
        self.set(self._setting + 1)
        if debug.active("rotor"):
            debug.log("rotor", f"{self.name} -> {self.alphabet.to_symbol(self._setting)}")

    def reset(self) -> None:
        super().reset()
        self._notches = self._initial_notches


class FixedRotor(Rotor):
    """A rotor that may sit in any non-reflector slot but never steps."""

    kind = RotorKind.FIXED


class Reflector(FixedRotor):
    """A fixed rotor whose permutation has no fixed points."""

    kind = RotorKind.REFLECTOR

    def __init__(self, name: str, perm: Permutation) -> None:
        if not perm.derangement():
            raise InvalidReflector(
                f"Reflector {name} must map every symbol to another symbol"
            )
        super().__init__(name, perm)


# ── roster construction ──────────────────────────────────────────
def make_rotor(name: str, tag: str, cycles: str, alphabet: Alphabet) -> Rotor:
    """Build one rotor from a configuration entry.

    TAG is ``M<notches>`` for a moving rotor, ``N`` for a fixed rotor, or
    ``R`` for a reflector.
    """
    try:
        kind = RotorKind(tag[:1])
    except ValueError:
        raise UnknownRotorCategory(
            f"Rotor {name}: type {tag!r} must start with M, N or R"
        ) from None

    perm = Permutation(cycles, alphabet)
    match kind:
        case RotorKind.MOVING:
            return MovingRotor(name, perm, tag[1:])
        case RotorKind.FIXED:
            return FixedRotor(name, perm)
        case RotorKind.REFLECTOR:
            return Reflector(name, perm)
        case _:
            raise UnknownRotorCategory(f"Rotor {name}: type {tag!r} is not configurable")

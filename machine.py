# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import (
    BadSettingLength,
    DuplicateRotor,
    InvalidAssembly,
    UnknownRotor,
    WrongSlotCount,
)
from rotor_and_reflector import Rotor

debug = Debug()


class Machine:
    """An Enigma machine with NUM_ROTORS slots and PAWLS pawls.

    Slot 0 holds the reflector and slot ``num_rotors - 1`` the fast rotor.
    ``all_rotors`` is the roster of every rotor available to ``insert_rotors``.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        if num_rotors <= 1:
            raise InvalidAssembly(
                f"Number of rotor slots must be greater than 1, got {num_rotors}"
            )
        if not 0 <= pawls < num_rotors:
            raise InvalidAssembly(
                f"Number of pawls must be in 0–{num_rotors - 1}, got {pawls}"
            )

        self.alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls

        self._roster: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.alphabet.chars != alphabet.chars:
                raise InvalidAssembly(
                    f"Rotor {rotor.name} uses a different alphabet than the machine"
                )
            if rotor.name in self._roster:
                raise DuplicateRotor(f"Rotor {rotor.name} defined more than once")
            self._roster[rotor.name] = rotor

        self._slots: list[Rotor] = []
        self._plugboard = Permutation("", alphabet)

    # ── accessors ───────────────────────────────────────────────

    @property
    def num_rotors(self) -> int:
        return self._num_rotors

    @property
    def num_pawls(self) -> int:
        return self._pawls

    @property
    def roster(self) -> dict[str, Rotor]:
        return dict(self._roster)

    @property
    def slots(self) -> tuple[Rotor, ...]:
        return tuple(self._slots)

    def rotor(self, k: int) -> Rotor:
        """Rotor in slot K; slot 0 is the reflector."""
        return self._slots[k]

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet.chars != self.alphabet.chars:
            raise InvalidAssembly("Plugboard uses a different alphabet than the machine")
        self._plugboard = plugboard

    def window(self) -> str:
        """Current settings of slots 1.. as symbols."""
        return "".join(
            self.alphabet.to_symbol(r.setting) for r in self._slots[1:]
        )

    # ── assembly ────────────────────────────────────────────────

    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill the slots with the rotors NAMES (NAMES[0] is the reflector).

        Every inserted rotor is reset to setting 0 with its original notches.
        On failure the previous assignment is kept.
        """
        if len(names) != self._num_rotors:
            raise WrongSlotCount(
                f"Expected {self._num_rotors} rotor names, got {len(names)}"
            )
        if len(set(names)) != len(names):
            dup = next(n for n in names if list(names).count(n) > 1)
            raise DuplicateRotor(f"Rotor {dup} named more than once")

        candidate: list[Rotor] = []
        for name in names:
            try:
                candidate.append(self._roster[name])
            except KeyError:
                raise UnknownRotor(f"No rotor named {name}") from None

        self._check_assembly(candidate)

        for rotor in candidate:
            rotor.reset()
        self._slots = candidate

    def _check_assembly(self, rotors: list[Rotor]) -> None:
        if not rotors[0].reflecting():
            raise InvalidAssembly(f"First rotor {rotors[0].name} must be a reflector")

        moving = 0
        boundary = self._num_rotors - self._pawls
        for i, rotor in enumerate(rotors[1:], start=1):
            if rotor.reflecting():
                raise InvalidAssembly(
                    f"Reflector {rotor.name} is only allowed in the first slot"
                )
            if rotor.rotates():
                moving += 1
            elif i > boundary:
                raise InvalidAssembly(
                    f"Fixed rotor {rotor.name} cannot sit in slot {i} (> {boundary})"
                )

        if moving != self._pawls:
            raise InvalidAssembly(
                f"{moving} moving rotors inserted for {self._pawls} pawls"
            )
        if not rotors[-1].rotates():
            raise InvalidAssembly("Rightmost rotor must be a moving rotor")

    def _require_rotors(self) -> None:
        if not self._slots:
            raise InvalidAssembly("No rotors inserted")

    def _indices(self, setting: str, what: str) -> list[int]:
        if len(setting) != self._num_rotors - 1:
            raise BadSettingLength(
                f"{what} {setting!r} must have {self._num_rotors - 1} symbols"
            )
        return [self.alphabet.to_index(ch) for ch in setting]

    def set_rotors(self, setting: str) -> None:
        """Set slots 1.. left to right from the symbols of SETTING."""
        self._require_rotors()
        for rotor, posn in zip(self._slots[1:], self._indices(setting, "Setting")):
            rotor.set(posn)

    def apply_ring_setting(self, ring: str) -> None:
        """Shift settings and notches of slots 1.. back by the ring offsets.

        Must follow ``set_rotors``; the ring offset moves where the wiring
        meets the window while the notches stay with the visible letters.
        """
        self._require_rotors()
        offsets = self._indices(ring, "Ring setting")
        for rotor, offset in zip(self._slots[1:], offsets):
            rotor.set(rotor.setting - offset)
            if rotor.rotates():
                shifted = "".join(
                    self.alphabet.to_symbol(
                        rotor.permutation.wrap(self.alphabet.to_index(n) - offset)
                    )
                    for n in rotor.notches
                )
                rotor.set_notches(shifted)

    # ── stepping logic  ─────────────────────────────────────────

    def advance_rotors(self) -> None:
        """Advance the rotors for one key-press, double step included."""
        self._require_rotors()
        slots = self._slots
        prior = [r.setting for r in slots]

        slots[-1].advance()
        for i in range(len(slots) - 2, 0, -1):
            rotor, right = slots[i], slots[i + 1]
            if not rotor.rotates():
                continue
            if self.alphabet.to_symbol(prior[i + 1]) in right.notches:
                rotor.advance()
                # the right neighbour is pushed along when it did not step itself
                if right.setting == prior[i + 1]:
                    right.advance()

        if debug.active("stepping"):
            debug.log("stepping", f"[{self.window()}]")

    # ── encipher  ───────────────────────────────────────────────

    def _apply_rotors(self, c: int) -> int:
        for rotor in reversed(self._slots[1:]):
            c = rotor.convert_forward(c)
        for rotor in self._slots:
            c = rotor.convert_backward(c)
        return c

    def convert_index(self, c: int) -> int:
        """Convert symbol index C after first advancing the machine."""
        self.advance_rotors()
        trace = debug.active("convert")
        if trace:
            sym = self.alphabet.to_symbol
            before = f"[{self.window()}] {sym(c)} -> "

        c = self._plugboard.permute(c)
        if trace:
            before += f"{sym(c)} -> "
        c = self._apply_rotors(c)
        c = self._plugboard.permute(c)

        if trace:
            debug.log("convert", f"{before}{sym(c)}")
        return c

    def convert(self, msg: int | str) -> int | str:
        """Convert an index, or every symbol of MSG in turn."""
        if isinstance(msg, int):
            return self.convert_index(msg)
        alpha = self.alphabet
        return "".join(
            alpha.to_symbol(self.convert_index(alpha.to_index(ch))) for ch in msg
        )

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self._slots) or "-"
        return f"<Machine slots={self._num_rotors} pawls={self._pawls} [{names}]>"

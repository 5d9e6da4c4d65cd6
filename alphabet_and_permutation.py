# alphabet_and_permutation.py
from __future__ import annotations

from debug import Debug
from errors import InvalidAlphabet, InvalidSymbol, MalformedCycles

debug = Debug()

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
RESERVED = "*()"


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """Ordered, duplicate-free set of symbols. The K-th symbol has index K."""

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise InvalidAlphabet("Alphabet is empty")
        for ch in chars:
            if ch in RESERVED or ch.isspace():
                raise InvalidAlphabet(f"Reserved character {ch!r} in alphabet")

        self.chars: str = chars
        self.symbol_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(chars)
        }
        if len(self.symbol_to_index) != len(chars):
            dups = sorted({ch for ch in chars if chars.count(ch) > 1})
            raise InvalidAlphabet(f"Alphabet contains duplicates: {''.join(dups)}")

        debug.log("alphabet", f"{len(chars)} symbols: {chars}")

    def size(self) -> int:
        return len(self.chars)

    __len__ = size

    def contains(self, symbol: str) -> bool:
        return symbol in self.symbol_to_index

    __contains__ = contains

    # symbol → integer index
    def to_index(self, symbol: str) -> int:
        try:
            return self.symbol_to_index[symbol]
        except KeyError:
            raise InvalidSymbol(
                f"Invalid character {symbol!r} for current alphabet."
            ) from None

    # integer index → symbol
    def to_symbol(self, index: int) -> str:
        if not (0 <= index < len(self.chars)):
            hi = len(self.chars) - 1
            raise InvalidSymbol(f"Index {index} out of range 0–{hi}")
        return self.chars[index]

    def __repr__(self) -> str:
        return f"<Alphabet {self.chars}>"


# ── Permutation ───────────────────────────────────────────────────
class Permutation:
    """A bijection over the indices of an Alphabet, given in cycle notation.

    ``cycles`` has the form ``"(cccc) (cc) ..."``; symbols of the alphabet that
    appear in no cycle map to themselves. Whitespace is ignored everywhere.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self.alphabet = alphabet
        self.cycles: tuple[str, ...] = self._parse(cycles, alphabet)

        size = alphabet.size()
        # integer lookup tables, identity until a cycle says otherwise
        self._fwd = list(range(size))
        self._inv = list(range(size))

        for cycle in self.cycles:
            idx = [alphabet.to_index(ch) for ch in cycle]
            for here, there in zip(idx, idx[1:] + idx[:1]):
                self._fwd[here] = there
                self._inv[there] = here

        debug.log("permutation", f"{self.cycle_string()} over {size} symbols")

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        """Build from a wiring string: the image of each alphabet symbol, in order."""
        if sorted(wiring) != sorted(alphabet.chars):
            raise MalformedCycles("wiring must be a permutation of alphabet")

        seen: set[str] = set()
        groups: list[str] = []
        for start in alphabet.chars:
            if start in seen:
                continue
            group = ""
            ch = start
            while ch not in seen:
                seen.add(ch)
                group += ch
                ch = wiring[alphabet.to_index(ch)]
            if len(group) > 1:
                groups.append(group)
        return cls("".join(f"({g})" for g in groups), alphabet)

    # ── parsing ──────────────────────────────────────────────────
    @staticmethod
    def _parse(cycles: str, alphabet: Alphabet) -> tuple[str, ...]:
        text = "".join(cycles.split())
        groups: list[str] = []
        current: str | None = None
        used: set[str] = set()

        for ch in text:
            if ch == "(":
                if current is not None:
                    raise MalformedCycles(f"Nested parentheses in {cycles!r}")
                current = ""
            elif ch == ")":
                if current is None:
                    raise MalformedCycles(f"Unbalanced ')' in {cycles!r}")
                if not current:
                    raise MalformedCycles(f"Empty cycle in {cycles!r}")
                groups.append(current)
                current = None
            elif current is None:
                raise MalformedCycles(f"{ch!r} outside of a cycle in {cycles!r}")
            elif ch not in alphabet:
                raise MalformedCycles(f"{ch!r} in {cycles!r} is not in the alphabet")
            elif ch in used:
                raise MalformedCycles(f"{ch!r} appears twice in {cycles!r}")
            else:
                current += ch
                used.add(ch)

        if current is not None:
            raise MalformedCycles(f"Unclosed cycle in {cycles!r}")
        return tuple(groups)

    # ── mapping ──────────────────────────────────────────────────
    def size(self) -> int:
        return self.alphabet.size()

    def wrap(self, p: int) -> int:
        """Return P modulo the alphabet size (never negative)."""
        return p % self.size()

    def permute(self, p: int | str) -> int | str:
        if isinstance(p, str):
            return self.alphabet.to_symbol(self._fwd[self.alphabet.to_index(p)])
        return self._fwd[self.wrap(p)]

    def invert(self, c: int | str) -> int | str:
        if isinstance(c, str):
            return self.alphabet.to_symbol(self._inv[self.alphabet.to_index(c)])
        return self._inv[self.wrap(c)]

    def derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        return all(i != j for i, j in enumerate(self._fwd))

    # ── niceties ─────────────────────────────────────────────────
    def cycle_string(self) -> str:
        return " ".join(f"({c})" for c in self.cycles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.alphabet is other.alphabet and self._fwd == other._fwd

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Permutation {self.cycle_string() or '()'}>"

# suites.py
from __future__ import annotations

from typing import Dict, List, Tuple

from alphabet_and_permutation import UPPER, Alphabet, Permutation
from machine import Machine
from rotor_and_reflector import Rotor, make_rotor

Alpha26 = UPPER

# name: (tag, wiring). The wiring lists the image of A, B, C, ... in order.
LEGACY_WHEELS: Dict[str, Tuple[str, str]] = {
    "I":      ("MQ",  "EKMFLGDQVZNTOWYHXUSPAIBRCJ"),
    "II":     ("ME",  "AJDKSIRUXBLHWTMCQGZNPYFVOE"),
    "III":    ("MV",  "BDFHJLCPRTXVZNYEIWGAKMUSQO"),
    "IV":     ("MJ",  "ESOVPZJAYQUIRHXLNFTGKDCMWB"),
    "V":      ("MZ",  "VZBRGITYUPSDNHLXAWMJQOFECK"),
    "VI":     ("MZM", "JPGVOUMFYQBENHZRDKASXLICTW"),
    "VII":    ("MZM", "NZJHGRCXMYSWBOUFAIVLPEKQDT"),
    "VIII":   ("MZM", "FKQHTLXOCBJSPDZRAMEWNIUYGV"),
    "Beta":   ("N",   "LEYJVCNIXWPBQMDRTAKZGFUHOS"),
    "Gamma":  ("N",   "FSOKANUERHMBTIPCWLQGZYVXJD"),
    "B":      ("R",   "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C":      ("R",   "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
    "B_THIN": ("R",   "ENKQAUYWJICOPBLMDXZVFTHRGS"),
    "C_THIN": ("R",   "RDOBJNTKVEHMLFCWZAXGYIPSUQ"),
}

LEGACY_SLOTS = 5
LEGACY_PAWLS = 3


def legacy_roster(alphabet: Alphabet | None = None) -> List[Rotor]:
    """Fresh rotor objects for the historical wheel set."""
    alphabet = alphabet or Alphabet(Alpha26)
    return [
        make_rotor(
            name, tag, Permutation.from_wiring(wiring, alphabet).cycle_string(), alphabet
        )
        for name, (tag, wiring) in LEGACY_WHEELS.items()
    ]


def legacy_machine(
    num_rotors: int = LEGACY_SLOTS, pawls: int = LEGACY_PAWLS
) -> Machine:
    """A machine over A–Z with every historical wheel in its roster."""
    alphabet = Alphabet(Alpha26)
    return Machine(alphabet, num_rotors, pawls, legacy_roster(alphabet))

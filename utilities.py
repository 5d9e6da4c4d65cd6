# utilities.py
from __future__ import annotations

import json
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import List

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import ConfigError
from machine import Machine
from rotor_and_reflector import Rotor, make_rotor

debug = Debug()

# ────────────────────────────────────────────────────────────────────────
#  0. Regex & trivial helpers
# ────────────────────────────────────────────────────────────────────────

_cycles_re = re.compile(r"^(\([^()*]+\))+$")
_plug_pair_re = re.compile(r"\(([^()]*)\)")

SETTINGS_MARK = "*"


def _to_int(token: str | int, what: str) -> int:
    if isinstance(token, bool) or not isinstance(token, (int, str)):
        raise ConfigError(f"{what} must be an integer, got {token!r}")
    try:
        return int(token)
    except ValueError:
        raise ConfigError(f"{what} must be an integer, got {token!r}") from None


def _require_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{what} must be a string, got {value!r}")
    return value


# ────────────────────────────────────────────────────────────────────────
#  1. Machine configuration
# ────────────────────────────────────────────────────────────────────────


def read_config(text: str) -> Machine:
    """Build a machine from the text configuration format:

    alphabet, slot count, pawl count, then one ``NAME TAG CYCLES...``
    description per rotor.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise ConfigError("configuration file truncated")

    alphabet = Alphabet(tokens[0])
    slots = _to_int(tokens[1], "Number of rotor slots")
    pawls = _to_int(tokens[2], "Number of pawls")

    rotors: List[Rotor] = []
    pos = 3
    while pos < len(tokens):
        if pos + 1 >= len(tokens):
            raise ConfigError(f"bad rotor description for {tokens[pos]}")
        name, tag = tokens[pos], tokens[pos + 1]
        pos += 2
        cycles = []
        while pos < len(tokens) and tokens[pos].startswith("("):
            cycles.append(tokens[pos])
            pos += 1
        rotors.append(make_rotor(name, tag, " ".join(cycles), alphabet))

    debug.log("config", f"{len(rotors)} rotors, {slots} slots, {pawls} pawls")
    return Machine(alphabet, slots, pawls, rotors)


REQUIRED_KEYS = {"alphabet", "slots", "pawls", "rotors"}


def machine_from_json(data: dict) -> Machine:
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a JSON object, got {type(data).__name__}")
    missing = REQUIRED_KEYS - data.keys()
    if missing:
        raise ConfigError(f"Missing keys in config: {', '.join(sorted(missing))}")

    alphabet = Alphabet(_require_str(data["alphabet"], "alphabet"))
    if not isinstance(data["rotors"], list):
        raise ConfigError(f"rotors must be a list, got {data['rotors']!r}")

    rotors = []
    for entry in data["rotors"]:
        if not isinstance(entry, dict):
            raise ConfigError(f"Rotor entry {entry!r} must be an object")
        try:
            name = _require_str(entry["name"], "Rotor name")
            tag = _require_str(entry["tag"], f"Type of rotor {name}")
        except KeyError as e:
            raise ConfigError(f"Rotor entry {entry!r} lacks {e.args[0]!r}") from None
        cycles = _require_str(entry.get("cycles", ""), f"Cycles of rotor {name}")
        rotors.append(make_rotor(name, tag, cycles, alphabet))
    slots = _to_int(data["slots"], "Number of rotor slots")
    pawls = _to_int(data["pawls"], "Number of pawls")
    return Machine(alphabet, slots, pawls, rotors)


def load_config(path: str | Path) -> Machine:
    """Read a ``.json`` or text configuration file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"could not open {path}: {e.strerror}") from None

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: {e}") from None
        return machine_from_json(data)
    return read_config(text)


# ────────────────────────────────────────────────────────────────────────
#  2. Settings lines
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Settings:
    """One parsed ``* ROTORS SETTING [RING] [PLUGBOARD]`` line."""

    rotors: List[str]
    setting: str
    ring: str | None = None
    plugboard: str = ""


def parse_settings(line: str, num_rotors: int, alphabet: Alphabet) -> Settings:
    tokens = line.split()
    if not tokens or tokens[0] != SETTINGS_MARK:
        raise ConfigError("settings need * to initiate")
    if len(tokens) < num_rotors + 2:
        raise ConfigError(f"settings line {line.strip()!r} is truncated")

    names = tokens[1 : num_rotors + 1]
    setting = tokens[num_rotors + 1]
    rest = tokens[num_rotors + 2 :]

    ring = None
    if rest and not rest[0].startswith("("):
        ring = rest.pop(0)
        for ch in ring:
            if ch not in alphabet:
                raise ConfigError(f"ring setting symbol {ch!r} not in alphabet")

    for token in rest:
        if not _cycles_re.match(token):
            raise ConfigError(f"incorrect plugboard cycle format: {token!r}")
    plugboard = " ".join(rest)
    for pair in _plug_pair_re.findall(plugboard):
        if len(pair) > 2:
            raise ConfigError(f"plugboard cycle ({pair}) is longer than 2")

    return Settings(names, setting, ring, plugboard)


def set_up(machine: Machine, line: str) -> Settings:
    """Apply a settings line: rotors, setting, ring setting, plugboard."""
    s = parse_settings(line, machine.num_rotors, machine.alphabet)
    machine.insert_rotors(s.rotors)
    machine.set_rotors(s.setting)
    if s.ring is not None:
        machine.apply_ring_setting(s.ring)
    machine.set_plugboard(Permutation(s.plugboard, machine.alphabet))
    if debug.active("config"):
        debug.log("config", f"{line.strip()} -> [{machine.window()}]")
    return s


# ────────────────────────────────────────────────────────────────────────
#  3. Message text
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str) -> str:
    """Drop every whitespace character."""
    return "".join(msg.split())


def format_groups(msg: str, block: int = 5) -> str:
    """Split MSG into groups of BLOCK symbols (the last may be shorter)."""
    return " ".join(msg[i : i + block] for i in range(0, len(msg), block))


def process_messages(
    machine: Machine, lines: Iterable[str], block: int = 5
) -> Iterator[str]:
    """Yield one output line per message line; ``*`` lines reconfigure."""
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        tokens = line.split()
        if tokens and tokens[0] == SETTINGS_MARK:
            set_up(machine, line)
            configured = True
        elif configured:
            yield format_groups(machine.convert(preprocess_message(line)), block)
        elif not tokens:
            yield ""
        else:
            raise ConfigError("settings need * to initiate")


__all__ = [
    "Settings",
    "format_groups",
    "load_config",
    "machine_from_json",
    "parse_settings",
    "preprocess_message",
    "process_messages",
    "read_config",
    "set_up",
]

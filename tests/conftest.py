"""Shared fixtures for the simulator tests."""

import pytest

from alphabet_and_permutation import UPPER, Alphabet
from debug import Debug
from suites import legacy_machine

ROTOR_I_CYCLES = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"

DEFAULT_CONF = """\
ABCDEFGHIJKLMNOPQRSTUVWXYZ
 5 3
 I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
 III MV    (ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)
 IV MJ     (AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)
 Beta N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
 B R       (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO)
           (MP) (RX) (SZ) (TV)
"""

AXLE_SETTINGS = "* B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)"


@pytest.fixture
def upper():
    return Alphabet(UPPER)


@pytest.fixture
def three_rotor():
    """Reflector B with I, II, III: four slots, three pawls."""
    m = legacy_machine(4, 3)
    m.insert_rotors(["B", "I", "II", "III"])
    return m


@pytest.fixture(autouse=True)
def quiet_debug():
    """Every logging component starts and ends switched off."""
    dbg = Debug()
    dbg.disable(*dbg.status())
    dbg.toggle_global(True)
    yield
    dbg.disable(*dbg.status())

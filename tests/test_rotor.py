"""Tests for the rotor variants."""

import pytest

from alphabet_and_permutation import Permutation
from errors import InvalidNotch, InvalidReflector, InvalidSymbol, UnknownRotorCategory
from rotor_and_reflector import (
    FixedRotor,
    MovingRotor,
    Reflector,
    Rotor,
    RotorKind,
    make_rotor,
)
from conftest import ROTOR_I_CYCLES

B_CYCLES = "(AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)"


@pytest.fixture
def main_rotor(upper):
    return Rotor("mainRotor", Permutation(ROTOR_I_CYCLES, upper))


class TestRotor:
    """Conversion and setting of a plain rotor."""

    def test_convert_forward(self, main_rotor):
        assert main_rotor.convert_forward(11) == 19

    def test_convert_backward(self, main_rotor):
        assert main_rotor.convert_backward(11) == 4

    def test_convert_with_setting(self, main_rotor):
        main_rotor.set(1)
        # B -> K, shifted back by one
        assert main_rotor.convert_forward(0) == 9
        assert main_rotor.convert_backward(9) == 0

    def test_forward_backward_inverse(self, main_rotor):
        for posn in range(26):
            main_rotor.set(posn)
            for i in range(26):
                assert main_rotor.convert_backward(main_rotor.convert_forward(i)) == i

    def test_set_by_symbol(self, main_rotor):
        main_rotor.set("E")
        assert main_rotor.setting == 4
        assert not main_rotor.at_notch()

    def test_set_wraps(self, main_rotor):
        main_rotor.set(27)
        assert main_rotor.setting == 1
        main_rotor.set(-1)
        assert main_rotor.setting == 25

    def test_set_unknown_symbol(self, main_rotor):
        with pytest.raises(InvalidSymbol):
            main_rotor.set("?")

    def test_plain_contract(self, main_rotor):
        assert main_rotor.kind is RotorKind.PLAIN
        assert not main_rotor.rotates()
        assert not main_rotor.reflecting()
        assert main_rotor.notches == ""
        main_rotor.set(3)
        main_rotor.advance()
        assert main_rotor.setting == 3


class TestMovingRotor:
    """Stepping and notches."""

    def test_advance_and_wrap(self, upper):
        rotor = MovingRotor("I", Permutation(ROTOR_I_CYCLES, upper), "Q")
        rotor.set("Y")
        rotor.advance()
        assert rotor.setting == 25
        rotor.advance()
        assert rotor.setting == 0

    def test_at_notch(self, upper):
        rotor = MovingRotor("VI", Permutation("", upper), "ZM")
        rotor.set("M")
        assert rotor.at_notch()
        rotor.advance()
        assert not rotor.at_notch()
        rotor.set("Z")
        assert rotor.at_notch()

    def test_invalid_notch(self, upper):
        with pytest.raises(InvalidNotch):
            MovingRotor("I", Permutation("", upper), "Q1")

    def test_set_notches_validates(self, upper):
        rotor = MovingRotor("I", Permutation("", upper), "Q")
        with pytest.raises(InvalidNotch):
            rotor.set_notches("q")
        assert rotor.notches == "Q"

    def test_reset_restores_notches(self, upper):
        rotor = MovingRotor("I", Permutation("", upper), "Q")
        rotor.set_notches("P")
        rotor.set("K")
        rotor.reset()
        assert rotor.notches == "Q"
        assert rotor.setting == 0

    def test_contract(self, upper):
        rotor = MovingRotor("I", Permutation("", upper), "Q")
        assert rotor.rotates()
        assert not rotor.reflecting()


class TestFixedAndReflector:
    """Non-moving variants."""

    def test_fixed_does_not_step(self, upper):
        rotor = FixedRotor("Beta", Permutation("(AB)", upper))
        rotor.set("C")
        rotor.advance()
        assert rotor.setting == 2
        assert not rotor.rotates()
        assert not rotor.reflecting()
        assert not rotor.at_notch()

    def test_reflector(self, upper):
        refl = Reflector("B", Permutation(B_CYCLES, upper))
        assert refl.reflecting()
        assert not refl.rotates()
        for i in range(26):
            assert refl.convert_forward(i) != i

    def test_reflector_needs_derangement(self, upper):
        cycles = (
            "(A) (BD) (CO) (EJ) (FN) (GT) "
            "(HK) (IV) (LM) (PW) (QZ) (SX) (UY)"
        )
        with pytest.raises(InvalidReflector):
            Reflector("B", Permutation(cycles, upper))


class TestMakeRotor:
    """Category dispatch from configuration tags."""

    def test_moving(self, upper):
        rotor = make_rotor("VI", "MZM", ROTOR_I_CYCLES, upper)
        assert isinstance(rotor, MovingRotor)
        assert rotor.notches == "ZM"

    def test_moving_without_notches(self, upper):
        rotor = make_rotor("X", "M", "", upper)
        assert isinstance(rotor, MovingRotor)
        assert rotor.notches == ""

    def test_fixed(self, upper):
        assert type(make_rotor("Beta", "N", "(AB)", upper)) is FixedRotor

    def test_reflector(self, upper):
        assert isinstance(make_rotor("B", "R", B_CYCLES, upper), Reflector)

    def test_bad_notch(self, upper):
        with pytest.raises(InvalidNotch):
            make_rotor("I", "Mq", "", upper)

    @pytest.mark.parametrize("tag", ["", "X", "m", "plain"])
    def test_unknown_category(self, upper, tag):
        with pytest.raises(UnknownRotorCategory):
            make_rotor("I", tag, "", upper)

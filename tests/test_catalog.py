"""
Tests for the wheel catalog.
"""

import pytest

import catalog
from errors import UnknownRotor
from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import WheelSpec


class TestLookup:

    def test_known_rotor(self):
        spec = catalog.lookup("I")
        assert spec.wiring == "JGDQOXUSCAMIFRVTPNEWKBLZYH"
        assert spec.notches == {"Q"}
        assert not spec.fixed

    def test_two_notch_rotor(self):
        assert catalog.lookup("VII").notches == {"Z", "M"}

    def test_reflector_is_fixed_without_notch(self):
        spec = catalog.lookup("Reflector B")
        assert spec.fixed
        assert spec.notches == frozenset()

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownRotor) as exc:
            catalog.lookup("IX")
        assert exc.value.name == "IX"

    def test_lookup_is_case_sensitive(self):
        with pytest.raises(UnknownRotor):
            catalog.lookup("reflector b")

    def test_unknown_rotor_is_value_error(self):
        with pytest.raises(ValueError):
            catalog.lookup("")


class TestTable:

    def test_sixteen_entries(self):
        assert len(catalog.WHEELS) == 16
        assert len(catalog.names(fixed=False)) == 11
        assert len(catalog.names(fixed=True)) == 5

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            catalog.WHEELS["X"] = catalog.lookup("I")

    def test_every_wiring_is_a_permutation(self):
        for spec in catalog.WHEELS.values():
            assert sorted(spec.wiring) == list(ALPHABET)

    def test_reflectors_are_involutions(self):
        for name in catalog.names(fixed=True):
            wiring = catalog.lookup(name).wiring
            for i, c in enumerate(wiring):
                assert wiring[ALPHABET.index(c)] == ALPHABET[i]
                assert c != ALPHABET[i]

    def test_spec_is_immutable(self):
        spec = catalog.lookup("II")
        with pytest.raises(AttributeError):
            spec.wiring = ALPHABET


class TestWheelSpecValidation:

    def test_short_wiring_rejected(self):
        with pytest.raises(ValueError):
            WheelSpec("bad", "ABC")

    def test_repeated_letter_rejected(self):
        with pytest.raises(ValueError):
            WheelSpec("bad", "A" + ALPHABET[:-1])

    def test_notch_outside_alphabet_rejected(self):
        with pytest.raises(ValueError):
            WheelSpec("bad", ALPHABET, frozenset("1"))

# catalog.py
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from errors import UnknownRotor
from rotor_and_reflector import WheelSpec

# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

_WHEELS = (
    # Commercial rotors -----------------------------------------------------
    WheelSpec("IC",   "DMTWSILRUYQNKFEJCAZBPGXOHV", frozenset("Q")),
    WheelSpec("IIC",  "HQZGPJTMOBLNCIFDYAWVEUSRKX", frozenset("E")),
    WheelSpec("IIIC", "UQNTLSZFMREHDPXKIBVYGJCWOA", frozenset("V")),
    # Railway rotors --------------------------------------------------------
    WheelSpec("I",    "JGDQOXUSCAMIFRVTPNEWKBLZYH", frozenset("Q")),
    WheelSpec("II",   "NTZPSFBOKMWRCJDIVLAEYUXHGQ", frozenset("E")),
    WheelSpec("III",  "JVIUBHTCDYAKEQZPOSGXNRMWFL", frozenset("V")),
    # Service rotors --------------------------------------------------------
    WheelSpec("IV",   "ESOVPZJAYQUIRHXLNFTGKDCMWB", frozenset("J")),
    WheelSpec("V",    "VZBRGITYUPSDNHLXAWMJQOFECK", frozenset("Z")),
    WheelSpec("VI",   "JPGVOUMFYQBENHZRDKASXLICTW", frozenset("ZM")),
    WheelSpec("VII",  "NZJHGRCXMYSWBOUFAIVLPEKQDT", frozenset("ZM")),
    WheelSpec("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", frozenset("ZM")),
    # Reflectors ------------------------------------------------------------
    WheelSpec("Reflector A",      "EJMZALYXVBWFCRQUONTSPIKHGD", fixed=True),
    WheelSpec("Reflector B",      "YRUHQSLDPXNGOKMIEBFZCWVJAT", fixed=True),
    WheelSpec("Reflector C",      "FVPJIAOYEDRZXWGCTKUQSBNMHL", fixed=True),
    WheelSpec("Reflector B Thin", "ENKQAUYWJICOPBLMDXZVFTHRGS", fixed=True),
    WheelSpec("Reflector C Thin", "RDOBJNTKVEHMLFCWZAXGYIPSUQ", fixed=True),
)

WHEELS: Mapping[str, WheelSpec] = MappingProxyType({w.name: w for w in _WHEELS})


def lookup(name: str) -> WheelSpec:
    try:
        return WHEELS[name]
    except (KeyError, TypeError):
        raise UnknownRotor(name) from None


def names(*, fixed: bool | None = None) -> List[str]:
    """Catalog names in table order, optionally only rotors or reflectors."""
    return [w.name for w in _WHEELS if fixed is None or w.fixed == fixed]


__all__ = ["WHEELS", "lookup", "names"]

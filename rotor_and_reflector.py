# rotor_and_reflector.py
from __future__ import annotations

from dataclasses import dataclass

from debug import Debug
from errors import InvalidLetter, InvalidPosition
from keyboard_and_plugboard import ALPHABET

debug = Debug()

SIZE = len(ALPHABET)


@dataclass(frozen=True, slots=True)
class WheelSpec:
    """Catalog entry: a wiring permutation plus its notch letters.

    Rotors and reflectors share this type; a reflector is simply
    ``fixed=True`` and never steps.
    """

    name: str
    wiring: str
    notches: frozenset[str] = frozenset()
    fixed: bool = False

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ValueError(f"{self.name}: wiring must be a permutation of the alphabet")
        object.__setattr__(self, "notches", frozenset(self.notches))
        if not self.notches <= set(ALPHABET):
            raise ValueError(f"{self.name}: notch letters must be in the alphabet")


class Wheel:
    def __init__(self, spec: WheelSpec, offset: int = 0) -> None:
        self.spec = spec
        self.offset = 0
        self.set_offset(offset)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def fixed(self) -> bool:
        return self.spec.fixed

    @property
    def window(self) -> str:
        """Letter currently showing in the window."""
        return ALPHABET[self.offset]

    # ── position helpers ─────────────────────────────────────────
    def set_offset(self, offset: int | str) -> "Wheel":
        self.offset = to_offset(offset)
        return self

    def on_notch(self) -> bool:
        return self.window in self.spec.notches

    def step(self) -> bool:
        """Advance one and return True when the new position is a notch."""
        self.offset = (self.offset + 1) % SIZE
        hit = self.on_notch()
        debug.log("wheel", f"{self.name} -> {self.window}, notch_hit={hit}")
        return hit

    # ── signal paths ─────────────────────────────────────────────
    def send_right(self, c: str) -> str:
        """Stator side towards the reflector."""
        p = ALPHABET.find(c)
        if len(c) != 1 or p < 0:
            raise InvalidLetter(c)
        return self.spec.wiring[(p + self.offset) % SIZE]

    def send_left(self, c: str) -> str:
        """Reflector side back towards the stator; inverse of send_right."""
        q = self.spec.wiring.find(c)
        if len(c) != 1 or q < 0:
            raise InvalidLetter(c)
        return ALPHABET[(q - self.offset) % SIZE]

    def __repr__(self) -> str:
        return f"<Wheel {self.name} pos={self.window}{' fixed' if self.fixed else ''}>"


def to_offset(value: int | str) -> int:
    """Accept 0..25 or a window letter; anything else is InvalidPosition."""
    if isinstance(value, bool):
        raise InvalidPosition(f"Position {value!r} must be 0-{SIZE - 1} or a letter")
    if isinstance(value, int):
        if not 0 <= value < SIZE:
            raise InvalidPosition(f"Position {value} out of range 0-{SIZE - 1}")
        return value
    if isinstance(value, str) and len(value) == 1 and value.upper() in ALPHABET:
        return ALPHABET.index(value.upper())
    raise InvalidPosition(f"Position {value!r} must be 0-{SIZE - 1} or a letter")

# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable, Mapping

from debug import Debug
from errors import InvalidLetter, InvalidPlug

debug = Debug()

ALPHABET = string.ascii_uppercase
PlugPairs = Mapping[str, str] | Iterable[str | tuple[str, str]]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def __contains__(self, letter: str) -> bool:
        return letter in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            index = self.alpha_to_index[letter]
        except KeyError:
            raise InvalidLetter(letter) from None
        debug.log("keyboard", f"{letter}->{index}")
        return index


KEYBOARD = Keyboard()


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Self-inverse letter swaps applied on the way in and on the way out.

    *pairs* may be a mapping (``{"A": "B"}``), 2-letter strings (``"AB"``)
    or 2-tuples. Letters are case-folded; every letter may be plugged once.
    """

    def __init__(self, pairs: PlugPairs = (), alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.mapping: dict[str, str] = {ch: ch for ch in alphabet}
        used: set[str] = set()

        if isinstance(pairs, Mapping):
            pairs = list(pairs.items())

        for raw in pairs:
            # normalise to (a, b)
            if isinstance(raw, str):
                if len(raw) != 2:
                    raise InvalidPlug(f"Pair {raw!r} must be exactly 2 letters")
                a, b = raw
            else:
                try:
                    a, b = raw
                except (TypeError, ValueError):
                    raise InvalidPlug(f"Pair {raw!r} must be exactly 2 letters") from None
            if not isinstance(a, str) or not isinstance(b, str):
                raise InvalidPlug(f"Pair {raw!r} must be exactly 2 letters")
            a, b = a.upper(), b.upper()

            if a not in self.mapping or b not in self.mapping:
                bad = a if a not in self.mapping else b
                raise InvalidPlug(f"Symbol {bad!r} not in alphabet")
            if a == b:
                raise InvalidPlug(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise InvalidPlug(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))

    # the same lookup serves both passes
    def _map(self, letter: str) -> str:
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    forward = _map        # alias: entry pass
    backward = _map       # alias: exit pass

    def pairs(self) -> list[tuple[str, str]]:
        return [(a, b) for a, b in self.mapping.items() if a < b]

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.pairs()]
        return f"<Plugboard {' '.join(swaps)}>"

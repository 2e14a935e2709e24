# enigma.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

import catalog
from debug import Debug
from errors import EmptyStack, InvalidPosition
from keyboard_and_plugboard import KEYBOARD, Plugboard, PlugPairs
from rotor_and_reflector import Wheel, to_offset

debug = Debug()


class Enigma:
    """Wheel stack plus plugboard.

    ``wheels`` runs from the stator side (index 0, the fast wheel) to the
    reflector, which must be the last entry. Every enciphered letter moves
    the wheels, so one instance must not be shared between threads without
    a lock.
    """

    def __init__(self, wheels: Sequence[Wheel], plugboard: Plugboard | None = None) -> None:
        self.wheels: list[Wheel] = list(wheels)
        self.plugboard = plugboard if plugboard is not None else Plugboard()
        self._start = [w.offset for w in self.wheels]

    @classmethod
    def configure(
        cls,
        wheel_configs: Iterable[tuple[str, int | str]],
        plug_pairs: PlugPairs = (),
    ) -> "Enigma":
        """Build a machine from ``(name, start)`` pairs and plug pairs.

        Raises UnknownRotor, InvalidPosition or InvalidPlug; nothing is
        returned on failure.
        """
        wheels = []
        for name, start in wheel_configs:
            spec = catalog.lookup(name)
            offset = to_offset(start)
            if spec.fixed and offset:
                raise InvalidPosition(f"{name} is fixed and cannot start at {start!r}")
            wheels.append(Wheel(spec, offset))
        return cls(wheels, Plugboard(plug_pairs))

    # ── position helpers ────────────────────────────────────────

    @property
    def moving(self) -> list[Wheel]:
        return [w for w in self.wheels if not w.fixed]

    def positions(self) -> str:
        """Window letters of the moving wheels, in stack order."""
        return "".join(w.window for w in self.moving)

    def set_positions(self, key: Sequence[int | str]) -> None:
        """Turn the moving wheels to *key*; the new positions become the start."""
        moving = self.moving
        if len(key) != len(moving):
            raise InvalidPosition(f"Need {len(moving)} positions, got {len(key)}")
        for wheel, pos in zip(moving, key):
            wheel.set_offset(pos)
        self._start = [w.offset for w in self.wheels]

    def reset(self) -> None:
        """Turn every wheel to A, discarding the configured start."""
        for wheel in self.wheels:
            wheel.offset = 0

    def restore(self) -> None:
        """Turn every wheel back to its configured start."""
        for wheel, offset in zip(self.wheels, self._start):
            wheel.offset = offset

    # ── stepping logic  ─────────────────────────────────────────

    def step_wheels(self) -> None:
        """Advance the moving wheels for one key press.

        A wheel moves when the previous one carried into it, or when it sits
        on its own notch and is not the last moving wheel (double step).
        Fixed wheels take no part.
        """
        moving = self.moving
        last = len(moving) - 1
        carry = True                       # fast wheel always steps
        for i, wheel in enumerate(moving):
            if carry or (i < last and wheel.on_notch()):
                carry = wheel.step()
            else:
                carry = False
        debug.log("stepping", f"positions {self.positions()}")

    # ── encipher one letter  ────────────────────────────────────

    def route(self, c: str) -> str:
        """Signal path for the current wheel positions; does not step."""
        if not self.wheels:
            raise EmptyStack()

        trail = [c]
        c = self.plugboard.forward(c)
        trail.append(c)

        for wheel in self.wheels:
            c = wheel.send_right(c)
            trail.append(c)

        # the reflector was the last forward hop
        for wheel in reversed(self.wheels[:-1]):
            c = wheel.send_left(c)
            trail.append(c)

        c = self.plugboard.backward(c)
        trail.append(c)
        debug.log("routing", "->".join(trail))
        return c

    def send(self, c: str) -> str:
        KEYBOARD.forward(c)
        self.step_wheels()
        return self.route(c)

    def encrypt(self, text: str) -> str:
        """Encipher a line. Letters move the wheels; everything else passes through."""
        out = []
        for ch in text.upper():
            out.append(self.send(ch) if ch in KEYBOARD else ch)
        result = "".join(out)
        debug.log("encrypt", f"{text!r} -> {result!r}")
        return result

    # nicety for debugging
    def __repr__(self) -> str:
        names = ", ".join(w.name for w in self.wheels)
        return f"<Enigma [{names}] pos={self.positions()} {self.plugboard!r}>"

# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base for every setup-time failure of the machine."""


class UnknownRotor(EnigmaError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown wheel {name!r}")
        self.name = name


class InvalidPlug(EnigmaError):
    pass


class InvalidPosition(EnigmaError):
    pass


class InvalidLetter(EnigmaError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"Invalid character {letter!r} for current alphabet.")
        self.letter = letter


class EmptyStack(EnigmaError):
    def __init__(self) -> None:
        super().__init__("No wheels configured: cannot route a signal")


class SettingsError(EnigmaError):
    pass

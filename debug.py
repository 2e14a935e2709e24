# debug.py
from __future__ import annotations
import logging
from typing import Dict, Iterable

COMPONENTS = (
    "keyboard",
    "plugboard",
    "wheel",
    "stepping",
    "routing",
    "encrypt",
    "settings",
)

FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class Debug:
    _root_configured: bool = False          # class-level guard
    _components: Dict[str, bool] = {c: False for c in COMPONENTS}

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file.
        Every Debug() instance shares the root logger config and the
        component map, so a switch flipped by the CLI reaches all modules.
        """
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format=FORMAT,
                datefmt=DATEFMT,
                handlers=handlers,
            )
            Debug._root_configured = True
        elif log_to:
            handler = logging.FileHandler(log_to, encoding="utf-8")
            handler.setFormatter(logging.Formatter(FORMAT, DATEFMT))
            logging.getLogger().addHandler(handler)

        self.logger = logging.getLogger("ENIGMA")
        self.components = Debug._components

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def active(self, component: str) -> bool:
        return self.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle_global(self, state: bool, components: Iterable[str] = COMPONENTS) -> None:
        """Switch every component on/off at once."""
        for c in components:
            self._require(c)
            self.components[c] = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug active={active}>"

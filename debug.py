# debug.py
from __future__ import annotations
import logging
from typing import Dict

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"


class Debug:
    _root_configured: bool = False          # class-level guard
    _enabled: bool = True                   # global switch, shared

    # component map shared by every instance
    _components: Dict[str, bool] = {
        "alphabet":    False,
        "permutation": False,
        "rotor":       False,
        "stepping":    False,
        "convert":     False,
        "config":      False,
    }

    def __init__(self) -> None:
        self.logger = logging.getLogger("ENIGMA")

    @classmethod
    def configure(cls, *, log_to: str | None = None) -> None:
        """
        Set up root logging once. If `log_to` is given, messages also
        stream to that file. Later calls are no-ops.
        """
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=logging.DEBUG,
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return Debug._enabled and Debug._components.get(component, False)

    def log(self, component: str, message: str) -> None:
        if self.active(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = True
        Debug.configure()

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._components[component] = not Debug._components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"

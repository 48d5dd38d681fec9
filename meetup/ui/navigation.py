"""Navigation entre les écrans de la fenêtre principale."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from meetup.logger import get_logger

logger = get_logger(__name__)


class Raisable(Protocol):
    def tkraise(self) -> None: ...


@dataclass(slots=True)
class _Screen:
    frame: Raisable
    on_enter: Callable[[], None] | None = None
    on_leave: Callable[[], None] | None = None


class FrameNavigator:
    """Associe une route à un cadre et met au premier plan celui demandé."""

    def __init__(self) -> None:
        self._screens: dict[str, _Screen] = {}
        self.current_route: str | None = None

    def register(
        self,
        route: str,
        frame: Raisable,
        *,
        on_enter: Callable[[], None] | None = None,
        on_leave: Callable[[], None] | None = None,
    ) -> None:
        self._screens[route] = _Screen(frame, on_enter, on_leave)

    def go_to(self, route: str) -> None:
        screen = self._screens.get(route)
        if screen is None:
            raise ValueError(f"Route inconnue : {route!r}")

        previous = self._screens.get(self.current_route) if self.current_route else None
        if previous is not None and self.current_route != route and previous.on_leave:
            previous.on_leave()

        logger.debug("Navigation %s -> %s", self.current_route, route)
        self.current_route = route
        screen.frame.tkraise()
        if screen.on_enter:
            screen.on_enter()

"""Rendering boundary: the controller only ever talks to a ``Renderer``."""

from __future__ import annotations

from typing import List, Optional, Protocol

from .models import ControlsState, DisplayState


class Renderer(Protocol):
    def set_display_state(self, state: DisplayState) -> None: ...

    def set_controls(self, controls: ControlsState) -> None: ...


class RecordingRenderer:
    """Keeps every update it receives; the web app renders the latest one."""

    def __init__(self) -> None:
        self.states: List[DisplayState] = []
        self.controls_history: List[ControlsState] = []

    def set_display_state(self, state: DisplayState) -> None:
        self.states.append(state)

    def set_controls(self, controls: ControlsState) -> None:
        self.controls_history.append(controls)

    @property
    def state(self) -> Optional[DisplayState]:
        return self.states[-1] if self.states else None

    @property
    def controls(self) -> Optional[ControlsState]:
        return self.controls_history[-1] if self.controls_history else None

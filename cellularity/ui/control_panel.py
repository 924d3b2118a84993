"""Play/pause/step/reset controls for the simulator, independent of toolkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ControlAction(Enum):
    """What the user asked the simulator to do."""

    NONE = "none"
    PLAY = "play"
    PAUSE = "pause"
    STEP = "step"
    RESET = "reset"


class ControlButton(Enum):
    """A button on the control panel; the value is its label."""

    PLAY = "▶ Play"
    PAUSE = "⏸ Pause"
    STEP = "⏭ Step"
    RESET = "⏹ Reset"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class ControlPanel:
    """State of the control bar: whether playing, and the generation shown."""

    generation: int
    is_playing: bool = field(default=False, init=False)

    def buttons(self) -> list[ControlButton]:
        """The buttons currently shown, left to right."""
        toggle = ControlButton.PAUSE if self.is_playing else ControlButton.PLAY
        return [toggle, ControlButton.STEP, ControlButton.RESET]

    def press(self, button: ControlButton) -> ControlAction:
        """Handle a click on ``button`` and return the resulting action."""
        if button not in self.buttons():
            raise ValueError(f"button {button.name} is not shown")
        if button is ControlButton.PLAY:
            self.is_playing = True
            return ControlAction.PLAY
        if button is ControlButton.PAUSE:
            self.is_playing = False
            return ControlAction.PAUSE
        if button is ControlButton.STEP:
            return ControlAction.STEP
        self.is_playing = False
        return ControlAction.RESET

    def generation_label(self) -> str:
        return f"Generation: {self.generation}"
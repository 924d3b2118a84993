"""Desktop window that runs and displays the automaton."""

from __future__ import annotations

import argparse
import time
from typing import Any

from cellularity.automata import Automata
from cellularity.boundary import ToroidalBoundary
from cellularity.cell import CellState, Position
from cellularity.neighborhood import MooreNeighborhood
from cellularity.rules import ConwayRule
from cellularity.ui.control_panel import ControlAction, ControlButton, ControlPanel
from cellularity.ui.grid_view import Color, draw_grid

_FRAME_MS = 16


class CellularityApp:
    """The simulator: automaton, controls and timing, optionally in a Tk window."""

    def __init__(self, root: Any = None) -> None:
        self.automata = Automata(
            50, 30, ConwayRule(), ToroidalBoundary(), MooreNeighborhood()
        )
        for x in (10, 11, 12):
            self.automata.grid().set(Position(x, 10), CellState.ALIVE)

        self.control_panel = ControlPanel(0)
        self.cell_size = 16.0
        self.alive_color = Color(60, 220, 120)
        self.dead_color = Color(30, 30, 35)
        self.update_interval = 0.1
        self.last_update = time.monotonic()

        self.root = root
        self._toggle_button: Any = None
        self._generation_label: Any = None
        self._canvas: Any = None
        if root is not None:
            self._build(root)

    def _build(self, root: Any) -> None:
        import tkinter as tk

        bar = tk.Frame(root)
        bar.pack(side=tk.TOP, fill=tk.X)
        self._toggle_button = tk.Button(
            bar, command=lambda: self._press(self.control_panel.buttons()[0])
        )
        self._toggle_button.pack(side=tk.LEFT)
        for button in (ControlButton.STEP, ControlButton.RESET):
            tk.Button(
                bar, text=button.label, command=lambda b=button: self._press(b)
            ).pack(side=tk.LEFT)
        self._generation_label = tk.Label(bar)
        self._generation_label.pack(side=tk.LEFT, padx=8)
        self._canvas = tk.Canvas(root, highlightthickness=0)
        self._canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self._refresh()

    def _press(self, button: ControlButton) -> None:
        self.handle_action(self.control_panel.press(button))
        self._refresh()

    def _sync_generation(self) -> None:
        self.control_panel.generation = self.automata.generation()

    def handle_action(self, action: ControlAction) -> None:
        """Carry out an action chosen on the control panel."""
        if action is ControlAction.PLAY:
            self.control_panel.is_playing = True
        elif action is ControlAction.PAUSE:
            self.control_panel.is_playing = False
        elif action is ControlAction.STEP:
            self.automata.step()
        elif action is ControlAction.RESET:
            self.automata.reset()
            self.control_panel.is_playing = False
        self._sync_generation()

    def tick(self, now: float | None = None) -> bool:
        """Step once if playing and the update interval has passed.

        Returns whether a step was taken.
        """
        if now is None:
            now = time.monotonic()
        stepped = False
        if (
            self.control_panel.is_playing
            and now - self.last_update >= self.update_interval
        ):
            self.automata.step()
            self.last_update = now
            stepped = True
        self._sync_generation()
        return stepped

    def _refresh(self) -> None:
        if self.root is None:
            return
        self._toggle_button.configure(text=self.control_panel.buttons()[0].label)
        self._generation_label.configure(text=self.control_panel.generation_label())
        draw_grid(
            self._canvas,
            self.automata.grid(),
            self.cell_size,
            self.alive_color,
            self.dead_color,
        )

    def _frame(self) -> None:
        self.tick()
        self._refresh()
        self.root.after(_FRAME_MS, self._frame)

    def run(self) -> None:
        """Run the window's event loop until it is closed."""
        if self.root is None:
            raise RuntimeError("the application has no window to run in")
        self._refresh()
        self.root.after(_FRAME_MS, self._frame)
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cellularity", description="Interactive cellular automaton simulator."
    )
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title("Cellularity")
    CellularityApp(root).run()
    return 0
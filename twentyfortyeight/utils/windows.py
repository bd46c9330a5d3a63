# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
from collections.abc import Callable

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.widgets import Button


class WindowBoard:
    """
    Window to draw the 2048 board, the score and a "New Game" button using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    # ##: Colors
    COLORS = {
        0: "#E5E5E5",
        2: "#E5E5CC",
        4: "#E5CC99",
        8: "#E59966",
        16: "#E56633",
        32: "#CC331A",
        64: "#B31A1A",
        128: "#991A1A",
        256: "#801A1A",
        512: "#661A1A",
        1024: "#4D1A1A",
        2048: "#331A1A",
    }
    DEFAULT_COLOR = "#E5E5E5"

    def __init__(self, title: str, size: int):
        # ## ----> Create support.
        self.fig = plt.figure(figsize=(4.5, 5.5))
        self.fig.canvas.manager.set_window_title(title)
        self.fig.suptitle("2048", fontsize="xx-large", fontweight="bold")
        self.score_text = self.fig.text(0.5, 0.88, "Score: 0", horizontalalignment="center", fontsize="x-large")

        # ## ----> Add cell for board.
        grid = self.fig.add_gridspec(size, size, left=0.05, right=0.95, bottom=0.15, top=0.85, wspace=0.08, hspace=0.08)
        self.axes = [self.fig.add_subplot(grid[r, c]) for r in range(size) for c in range(size)]
        self.textes = []
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
                color="white",
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> New game button.
        self.button_axe = self.fig.add_axes([0.35, 0.03, 0.3, 0.08])
        self.button = Button(self.button_axe, "New Game", color="#1E6FD9", hovercolor="#3A86EB")
        self.button.label.set_color("white")

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    @classmethod
    def color_for_tile(cls, value: int) -> str:
        """Background color of a tile."""
        return cls.COLORS.get(int(value), cls.DEFAULT_COLOR)

    def show_image(self, board: np.ndarray, score: int):
        """
        Show the board and the score or update the ones being shown.

        Parameters
        ----------
        board: np.ndarray
            Board to show
        score: int
            Score to show
        """
        # ## ----> Update the image data.
        values = np.reshape(board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            text.set_text(str(int(value)) if value else "")
            _ax.set_facecolor(self.color_for_tile(value))
        self.score_text.set_text(f"Score: {score}")

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_drag_handler(self, drag_handler: Callable[[float, float], None]):
        """
        Register a handler called with the displacement of each mouse drag.

        The vertical displacement follows screen convention: positive downward.

        Parameters
        ----------
        drag_handler: Callable
            Called with ``(dx, dy)`` in pixels when the mouse button is released
        """
        origin = {}

        def on_press(event):
            if event.inaxes is self.button_axe:
                return
            origin["xy"] = (event.x, event.y)

        def on_release(event):
            if "xy" not in origin:
                return
            start_x, start_y = origin.pop("xy")
            # ## ----> Display coordinates grow upward.
            drag_handler(event.x - start_x, start_y - event.y)

        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("button_release_event", on_release)

    def register_reset_handler(self, reset_handler: Callable[[], None]):
        """
        Register the handler of the "New Game" button.

        Parameters
        ----------
        reset_handler: Callable
            Called without argument when the button is clicked
        """
        self.button.on_clicked(lambda event: reset_handler())

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True

# -*-  coding: utf-8 -*-
"""
Set of test for the game window and its wiring to the engine.
"""
from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import MagicMock

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402

from manuals_control import bind, drag_handler, key_handler  # noqa: E402
from twentyfortyeight import GameConfig, TwentyFortyEight  # noqa: E402
from twentyfortyeight.core.gameboard import Direction  # noqa: E402
from twentyfortyeight.utils.windows import WindowBoard  # noqa: E402


class TestWindowBoard(TestCase):
    """Test the drawing of the board."""

    def setUp(self):
        self.window = WindowBoard(title="2048 Game", size=4)

    def tearDown(self):
        self.window.close()

    def test_cells(self):
        self.assertEqual(len(self.window.axes), 16)
        self.assertEqual(len(self.window.textes), 16)

    def test_show_image(self):
        """Tiles show their value, empty cells show nothing."""
        board = np.array([[2, 0, 0, 0], [0, 4, 0, 0], [0, 0, 2048, 0], [0, 0, 0, 4096]])
        self.window.show_image(board, 36)

        self.assertEqual(self.window.textes[0].get_text(), "2")
        self.assertEqual(self.window.textes[1].get_text(), "")
        self.assertEqual(self.window.textes[10].get_text(), "2048")
        self.assertEqual(self.window.score_text.get_text(), "Score: 36")

    def test_color_for_tile(self):
        self.assertEqual(WindowBoard.color_for_tile(2), "#E5E5CC")
        self.assertEqual(WindowBoard.color_for_tile(4096), WindowBoard.DEFAULT_COLOR)

    def test_close(self):
        self.window.close()
        self.assertTrue(self.window.closed)


class TestControl(TestCase):
    """Test the handlers binding user input to the engine."""

    def setUp(self):
        self.env = TwentyFortyEight(config=GameConfig(seed=1))
        self.window = MagicMock(spec=WindowBoard)

    def test_bind_redraws_on_change(self):
        bind(self.env, self.window)
        self.window.show_image.assert_called_once()

        self.env.reset()
        self.assertEqual(self.window.show_image.call_count, 2)
        self.window.register_reset_handler.assert_called_once()

    def test_arrow_key_moves(self):
        self.env._board = np.array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], dtype=np.int64)
        key_handler(self.env, self.window, SimpleNamespace(key="left"))
        self.assertEqual(self.env.board[0, 0], 2)

    def test_escape_closes(self):
        key_handler(self.env, self.window, SimpleNamespace(key="escape"))
        self.window.close.assert_called_once()

    def test_backspace_resets(self):
        self.env._score = 64
        key_handler(self.env, self.window, SimpleNamespace(key="backspace"))
        self.assertEqual(self.env.score, 0)

    def test_unbound_key_ignored(self):
        self.env.move = MagicMock()
        key_handler(self.env, self.window, SimpleNamespace(key="q"))
        self.env.move.assert_not_called()

    def test_swipe_moves(self):
        self.env.move = MagicMock()
        drag_handler(self.env, 5.0, -150.0)
        self.env.move.assert_called_once_with(Direction.UP)

    def test_click_ignored(self):
        self.env.move = MagicMock()
        drag_handler(self.env, 2.0, 3.0)
        self.env.move.assert_not_called()


if __name__ == "__main__":
    main()

"""2048 game engine owning the board and the score of a session."""

import logging
from collections.abc import Callable

from numpy import int64, ndarray, zeros
from numpy.random import Generator, default_rng

from twentyfortyeight.config import GameConfig
from twentyfortyeight.core.gameboard import BOARD_SIZE, Direction, fill_cells, is_same, latent_state

logger = logging.getLogger(__name__)

Observer = Callable[[ndarray, int], None]


class TwentyFortyEight:
    """
    2048 game engine.

    The engine exclusively owns the board and the score. All mutation goes through `reset` and `move`;
    observers registered with `subscribe` are notified after each state change.
    """

    def __init__(self, config: GameConfig | None = None, rng: Generator | None = None):
        """
        Initialize the engine and start a new game.

        Parameters
        ----------
        config : GameConfig, optional
            Game configuration (default is ``GameConfig()``).
        rng : Generator, optional
            Random generator used to spawn tiles. Built from ``config.seed`` when omitted.
        """
        self.config = config if config is not None else GameConfig()
        self._rng = rng if rng is not None else default_rng(self.config.seed)
        self._observers: list[Observer] = []

        self._board: ndarray = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)
        self._score: int = 0

        self.reset()

    @property
    def board(self) -> ndarray:
        """
        Get the current board.

        Returns
        -------
        ndarray
            Read-only view of the 4x4 board, 0 marks an empty cell.
        """
        view = self._board.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> int:
        """Cumulative score of the current game."""
        return self._score

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback notified with ``(board, score)`` after each state change.

        Parameters
        ----------
        observer : Callable[[ndarray, int], None]
            The callback to register.

        Returns
        -------
        Callable[[], None]
            Function removing the callback.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        board = self.board
        for observer in list(self._observers):
            observer(board, self._score)

    def reset(self) -> ndarray:
        """
        Start a new game: clear the board, zero the score and place the initial tiles.

        Returns
        -------
        ndarray
            The new board.
        """
        self._board = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)
        self._score = 0
        fill_cells(self._board, number_tile=self.config.initial_tiles, rng=self._rng, tile_values=self.config.tile_values)
        logger.info('New game with %d tiles', int((self._board != 0).sum()))

        self._notify()
        return self.board

    def move(self, direction: Direction | int) -> bool:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction or int
            The direction of the move (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        bool
            True if the board changed, False if the move was a no-op.

        Notes
        -----
        - A move that neither slides nor merges a tile leaves the board and the score untouched
          and spawns nothing.
        - After a move that changes the board, the merge gains are added to the score and one
          new tile is spawned.
        """
        direction = Direction(direction)
        candidate, gain = latent_state(self._board, direction)

        if is_same(candidate, self._board):
            logger.debug('Move %s has no effect', direction.name)
            return False

        self._board = candidate
        self._score += gain
        fill_cells(self._board, number_tile=1, rng=self._rng, tile_values=self.config.tile_values)
        logger.debug('Move %s: gain=%d, score=%d', direction.name, gain, self._score)

        self._notify()
        return True

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))

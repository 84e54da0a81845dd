"""
Game state machine.

Spawn -> fall -> (lock pending <-> fall) -> lock -> clear -> spawn, with
pause as an orthogonal switch and game over as the terminal state.

The engine owns no clock. A driver calls `tick(now)` on its gravity cadence
(see `Game.gravity_interval`) and `handle_input(command, now)` for player
commands; `now` is a millisecond timestamp from the driver's clock. Calls
must be serialized by the driver.

All game data lives in one `GameState`; `reset()` replaces it wholesale.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field as dc_field, replace
from enum import Enum, auto
from typing import List, Optional, Sequence

from tetris_board import Field, is_valid, merge, sweep
from tetris_config import CONFIG
from tetris_piece import KINDS, Piece, rotate_left, rotate_right, shape_of
from tetris_rng import BagRandom

logger = logging.getLogger(__name__)

LINE_POINTS = 100        # per cleared row
LOCK_POINTS = 10         # per locked piece
HARD_DROP_PER_CELL = 2   # per row fallen on hard drop


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    HARD_DROP = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    HOLD = auto()
    TOGGLE_PAUSE = auto()


@dataclass
class GameState:
    field: Field
    bag: BagRandom
    current: Optional[Piece] = None
    hold: Optional[Piece] = None
    queue: List[str] = dc_field(default_factory=list)
    score: int = 0
    lines: int = 0
    game_over: bool = False
    paused: bool = False
    can_hold: bool = True
    lock_deadline: Optional[int] = None


class Game:
    def __init__(self, cols: int = CONFIG["COLS"], rows: int = CONFIG["ROWS"],
                 seed: Optional[int] = CONFIG["SEED"],
                 preview: int = CONFIG["PREVIEW_COUNT"],
                 lock_delay_ms: int = CONFIG["LOCK_DELAY_MS"],
                 gravity_base_ms: int = CONFIG["GRAVITY_BASE_MS"],
                 gravity_step_ms: int = CONFIG["GRAVITY_STEP_MS"],
                 gravity_min_ms: int = CONFIG["GRAVITY_MIN_MS"],
                 kinds: Sequence[str] = KINDS):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"field dimensions must be positive, got {cols}x{rows}")
        if not kinds:
            raise ValueError("piece catalog is empty")
        if preview < 2:
            raise ValueError(f"preview count must be at least 2, got {preview}")
        for t in kinds:
            shape_of(t)
        self.cols, self.rows = cols, rows
        self.preview_count = preview
        self.lock_delay_ms = lock_delay_ms
        self.gravity_base_ms = gravity_base_ms
        self.gravity_step_ms = gravity_step_ms
        self.gravity_min_ms = gravity_min_ms
        self.kinds = tuple(kinds)
        self.rng = random.Random(seed)
        self.state: GameState
        self.reset()

    # ---------- lifecycle ----------
    def reset(self):
        bag = BagRandom(self.rng, self.kinds)
        self.state = GameState(field=Field.empty(self.cols, self.rows), bag=bag)
        first = bag.next_piece()
        self.state.queue = [bag.next_piece() for _ in range(self.preview_count)]
        self._spawn(Piece.spawn(first, self.cols))
        logger.info("new game %dx%d, first piece %s", self.cols, self.rows, first)

    def gravity_interval(self) -> int:
        """Milliseconds between gravity ticks at the current line count."""
        return max(self.gravity_min_ms, self.gravity_base_ms - self.gravity_step_ms * self.state.lines)

    @property
    def preview(self) -> List[str]:
        return list(self.state.queue)

    # ---------- driver entry points ----------
    def tick(self, now: int):
        s = self.state
        if s.paused or s.game_over or s.current is None:
            return
        self._step_down(now)

    def handle_input(self, command: Command, now: int):
        s = self.state
        if s.game_over:
            return
        if command is Command.TOGGLE_PAUSE:
            s.paused = not s.paused
            logger.info("paused" if s.paused else "resumed")
            return
        if s.paused or s.current is None:
            return

        if command is Command.MOVE_LEFT:
            self._try_commit(s.current.moved(-1, 0))
        elif command is Command.MOVE_RIGHT:
            self._try_commit(s.current.moved(1, 0))
        elif command is Command.SOFT_DROP:
            self._step_down(now)
        elif command is Command.ROTATE_LEFT:
            self._try_commit(rotate_left(s.current))
        elif command is Command.ROTATE_RIGHT:
            self._try_commit(rotate_right(s.current))
        elif command is Command.HOLD:
            self._hold()
        elif command is Command.HARD_DROP:
            self._hard_drop()

    # ---------- transitions ----------
    def _try_commit(self, candidate: Piece) -> bool:
        if is_valid(self.state.field, candidate):
            self.state.current = candidate
            return True
        return False

    def _step_down(self, now: int):
        """One row down, or run the lock-delay check when blocked."""
        s = self.state
        if self._try_commit(s.current.moved(0, 1)):
            s.lock_deadline = None
            return
        if s.lock_deadline is None:
            s.lock_deadline = now + self.lock_delay_ms
        elif now >= s.lock_deadline:
            self._lock(0)

    def _hard_drop(self):
        s = self.state
        start = s.current.y
        while self._try_commit(s.current.moved(0, 1)):
            pass
        self._lock(s.current.y - start)

    def _lock(self, dropped: int):
        s = self.state
        s.field, cleared = sweep(merge(s.field, s.current))
        s.score += LINE_POINTS * cleared + LOCK_POINTS + HARD_DROP_PER_CELL * dropped
        s.lines += cleared
        s.lock_deadline = None
        s.can_hold = True
        logger.debug("locked %s at (%d, %d)", s.current.t, s.current.x, s.current.y)
        if cleared:
            logger.info("cleared %d line(s), total %d, score %d", cleared, s.lines, s.score)
        self._spawn(Piece.spawn(self._draw(), self.cols))

    def _draw(self) -> str:
        s = self.state
        s.queue.append(s.bag.next_piece())
        return s.queue.pop(0)

    def _spawn(self, piece: Piece):
        s = self.state
        if is_valid(s.field, piece):
            s.current = piece
        else:
            s.current = None
            s.game_over = True
            logger.info("game over: score %d, lines %d", s.score, s.lines)

    def _hold(self):
        s = self.state
        if not s.can_hold:
            return
        held = s.hold
        s.hold = replace(s.current, x=0, y=0)
        s.can_hold = False
        s.lock_deadline = None
        logger.debug("hold %s", s.hold.t)
        if held is None:
            self._spawn(Piece.spawn(self._draw(), self.cols))
        else:
            # keeps the held orientation, centred on its own width
            self._spawn(replace(held, x=self.cols//2 - len(held.shape[0])//2, y=0))

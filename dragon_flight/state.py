"""Session states and the logical input events that drive them."""

from __future__ import annotations

from enum import Enum


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class InputEvent(Enum):
    FLAP = "flap"
    BEGIN = "begin"
    RESET = "reset"


# Events each state reacts to; anything else is ignored
ACCEPTED_EVENTS: dict[GameState, frozenset[InputEvent]] = {
    GameState.START: frozenset({InputEvent.BEGIN}),
    GameState.PLAYING: frozenset({InputEvent.FLAP}),
    GameState.GAME_OVER: frozenset({InputEvent.RESET}),
}

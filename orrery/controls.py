"""
This module defines the control intents the interactive layer can issue and applies them
to the time and view state.

An intent is what the user asked for (zoom in, run backwards, pick speed preset two),
independent of the key or button that produced it. apply_intent routes each intent to the
matching TimeState or ViewState mutator; intents never touch the bodies.
"""

from __future__ import annotations
import enum

from .time_control import Direction, TimeState
from .view_state import ViewState


class ControlIntent(enum.Enum):
	ZOOM_IN = "zoom_in"
	ZOOM_OUT = "zoom_out"
	TIME_FORWARD = "time_forward"
	TIME_BACKWARD = "time_backward"
	SPEED_1 = "speed_1"
	SPEED_2 = "speed_2"
	SPEED_3 = "speed_3"
	TOGGLE_PAUSE = "toggle_pause"


_SPEED_PRESET_INDEX = {
	ControlIntent.SPEED_1: 0,
	ControlIntent.SPEED_2: 1,
	ControlIntent.SPEED_3: 2,
}


def apply_intent(intent: ControlIntent, time_state: TimeState, view_state: ViewState) -> None:
	intent = ControlIntent(intent)
	if intent is ControlIntent.ZOOM_IN:
		view_state.zoom_in()
	elif intent is ControlIntent.ZOOM_OUT:
		view_state.zoom_out()
	elif intent is ControlIntent.TIME_FORWARD:
		time_state.set_direction(Direction.FORWARD)
	elif intent is ControlIntent.TIME_BACKWARD:
		time_state.set_direction(Direction.BACKWARD)
	elif intent is ControlIntent.TOGGLE_PAUSE:
		time_state.toggle_pause()
	else:
		time_state.set_speed(_SPEED_PRESET_INDEX[intent])

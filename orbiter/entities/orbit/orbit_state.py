"""
orbit_state.py
--------------
Per-frame button signal consumed by the OrbitController.
"""

from dataclasses import dataclass

from orbiter.core.runtime.game_settings import Input


@dataclass(frozen=True)
class ButtonSignal:
    """
    State of the single gameplay button for one frame.

    pressed and released are edges, held is the level. On the frame a
    press begins both pressed and held are True.
    """

    pressed: bool = False
    held: bool = False
    released: bool = False

    @classmethod
    def from_input(cls, input_manager, action: str = Input.ACTION) -> "ButtonSignal":
        """Snapshot an action's edge state from the InputManager."""
        return cls(
            pressed=input_manager.action_pressed(action),
            held=input_manager.action_held(action),
            released=input_manager.action_released(action),
        )


ButtonSignal.IDLE = ButtonSignal()
ButtonSignal.PRESS = ButtonSignal(pressed=True, held=True)
ButtonSignal.HOLD = ButtonSignal(held=True)
ButtonSignal.RELEASE = ButtonSignal(released=True)

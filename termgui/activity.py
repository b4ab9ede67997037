"""Activities: the windows that hold a tree of views."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .connection import ProtocolError
from .layouts import Parent


@dataclass
class Flags:
    """Options for creating an activity."""

    dialog: bool = False
    pip: bool = False
    cancel_outside: bool = False
    lock_screen: bool = False
    overlay: bool = False
    tid: int | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "dialog": bool(self.dialog),
            "pip": bool(self.pip),
            "cancel_outside": bool(self.cancel_outside),
            "lock_screen": bool(self.lock_screen),
            "overlay": bool(self.overlay),
        }
        if self.tid is not None:
            params["tid"] = self.tid
        return params


class InputMode(Enum):
    """Behaviour when the soft keyboard shows up."""

    RESIZE = "resize"
    PAN = "pan"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Activity(Parent):
    """An activity created through a GUI connection."""

    def __init__(self, gui: Any, flags: Flags | None = None) -> None:
        reply = gui.send_recv_msg("newActivity", (flags or Flags()).to_params())
        if not (isinstance(reply, list) and len(reply) == 2 and all(map(_is_int, reply))):
            raise ProtocolError(f"expected [aid, tid] reply, got {reply!r}")
        self._gui = gui
        self._aid, self._tid = reply

    @property
    def aid(self) -> int:
        return self._aid

    @property
    def tid(self) -> int:
        return self._tid

    @property
    def gui(self) -> Any:
        return self._gui

    @property
    def activity(self) -> Activity:
        return self

    @property
    def parent_id(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"Activity(aid={self._aid})"

    def _with_aid(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        message: dict[str, Any] = {"aid": self._aid}
        if params:
            message.update(params)
        return message

    def send_recv_msg(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send a method call addressed to this activity and return the reply."""
        return self._gui.send_recv_msg(method, self._with_aid(params))

    def send_msg(self, method: str, params: Mapping[str, Any] | None = None) -> None:
        """Send a method call addressed to this activity."""
        self._gui.send_msg(method, self._with_aid(params))

    def finish(self) -> None:
        self.send_msg("finishActivity")

    def set_input_mode(self, mode: InputMode | str) -> None:
        self.send_msg("setInputMode", {"mode": InputMode(mode).value})
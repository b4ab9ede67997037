"""Events delivered by the GUI service on the event socket."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .connection import ProtocolError, decode_payload
from .utils import Vec2

KEY = "key"
ITEM_SELECTED = "itemselected"
OVERLAY_TOUCH = "overlay_touch"
OVERLAY_SCALE = "overlay_scale"

_I32 = (-(2**31), 2**31 - 1)
_U32 = (0, 2**32 - 1)
_U64 = (0, 2**64 - 1)


class EventParseError(ProtocolError):
    """Raised when a message matches no known event shape."""


class _Mismatch(Exception):
    pass


class SystemEventType(Enum):
    SCREEN_ON = "screen_on"
    SCREEN_OFF = "screen_off"
    AIRPLANE = "airplane"
    LOCALE = "locale"
    TIMEZONE = "timezone"
    CONFIG = "config"


@dataclass(frozen=True)
class SystemEvent:
    """An operating-system event unrelated to any activity.

    ``value`` is the airplane-mode flag or the ISO 639 language code.
    """

    type: SystemEventType
    value: bool | str | None = None


@dataclass(frozen=True)
class PipChanged:
    """The app entered or left picture-in-picture mode."""

    value: bool


class ActivityEventType(Enum):
    RESUME = "resume"
    START = "start"
    STOP = "stop"
    DESTROY = "destroy"
    CREATE = "create"
    PAUSE = "pause"
    BACK = "back"
    USER_LEAVE_HINT = "UserLeaveHint"


_FINISHING_TYPES = {ActivityEventType.STOP, ActivityEventType.DESTROY, ActivityEventType.PAUSE}


@dataclass(frozen=True)
class ActivityEvent:
    """A lifecycle event of one activity."""

    aid: int
    type: ActivityEventType
    finishing: bool | None = None


@dataclass(frozen=True)
class Click:
    set: bool = False


@dataclass(frozen=True)
class LongClick:
    pass


@dataclass(frozen=True)
class Text:
    """The text of a view changed, including changes made by the program."""

    text: str


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class FocusChange:
    focus: bool


class TouchActionType(Enum):
    UP = "up"
    DOWN = "down"
    POINTER_UP = "pointer_up"
    POINTER_DOWN = "pointer_down"
    CANCEL = "cancel"
    MOVE = "move"


_INDEXED_ACTIONS = {TouchActionType.POINTER_UP, TouchActionType.POINTER_DOWN}


@dataclass(frozen=True)
class TouchAction:
    type: TouchActionType
    index: int | None = None


@dataclass(frozen=True)
class TouchPoint:
    """A pointer position inside the view, with an id stable across the gesture."""

    pos: Vec2[int]
    id: int


@dataclass(frozen=True)
class Touch:
    """A touch event; ``time`` is milliseconds since boot excluding sleep."""

    action: TouchAction
    time: int
    pointers: tuple[TouchPoint, ...]


@dataclass(frozen=True)
class Selected:
    """A radio button in a group was selected; ``selected`` is its id."""

    selected: int


WidgetKind = Union[Click, LongClick, Text, Refresh, FocusChange, Touch, Selected]


@dataclass(frozen=True)
class WidgetEvent:
    id: int
    aid: int
    kind: WidgetKind


Event = Union[WidgetEvent, ActivityEvent, SystemEvent, PipChanged]


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise _Mismatch(f"missing field {key!r}") from None


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _field(data, key)
    if not isinstance(value, bool):
        raise _Mismatch(f"field {key!r} must be a boolean")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise _Mismatch(f"field {key!r} must be a string")
    return value


def _int(data: Mapping[str, Any], key: str, bounds: tuple[int, int]) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise _Mismatch(f"field {key!r} must be an integer")
    low, high = bounds
    if not low <= value <= high:
        raise _Mismatch(f"field {key!r} out of range: {value}")
    return value


def _enum(enum_type: type[Enum], data: Mapping[str, Any], key: str) -> Any:
    tag = _str(data, key)
    try:
        return enum_type(tag)
    except ValueError:
        raise _Mismatch(f"unknown {key} {tag!r}") from None


def _touch_point(item: Any) -> TouchPoint:
    if not isinstance(item, Mapping):
        raise _Mismatch("touch pointer must be an object")
    return TouchPoint(
        pos=Vec2(_int(item, "x", _U32), _int(item, "y", _U32)),
        id=_int(item, "id", _U32),
    )


def _touch(data: Mapping[str, Any]) -> Touch:
    action_type = _enum(TouchActionType, data, "action")
    index = _int(data, "index", _U32) if action_type in _INDEXED_ACTIONS else None
    pointers = _field(data, "pointers")
    if not isinstance(pointers, list):
        raise _Mismatch("field 'pointers' must be a list")
    return Touch(
        action=TouchAction(action_type, index),
        time=_int(data, "time", _U64),
        pointers=tuple(_touch_point(item) for item in pointers),
    )


def _widget_kind(data: Mapping[str, Any]) -> WidgetKind:
    match _str(data, "type"):
        case "click":
            return Click(set=_bool(data, "set") if "set" in data else False)
        case "longClick":
            return LongClick()
        case "text":
            return Text(_str(data, "text"))
        case "refresh":
            return Refresh()
        case "focusChange":
            return FocusChange(_bool(data, "focus"))
        case "touch":
            return _touch(data)
        case "selected":
            return Selected(_int(data, "selected", _I32))
        case other:
            raise _Mismatch(f"unknown widget event {other!r}")


def _widget_event(data: Mapping[str, Any]) -> WidgetEvent:
    return WidgetEvent(
        id=_int(data, "id", _I32),
        aid=_int(data, "aid", _I32),
        kind=_widget_kind(data),
    )


def _activity_event(data: Mapping[str, Any]) -> ActivityEvent:
    aid = _int(data, "aid", _I32)
    kind = _enum(ActivityEventType, data, "type")
    finishing = _bool(data, "finishing") if kind in _FINISHING_TYPES else None
    return ActivityEvent(aid=aid, type=kind, finishing=finishing)


def _system_event(data: Mapping[str, Any]) -> SystemEvent:
    kind = _enum(SystemEventType, data, "type")
    if kind is SystemEventType.AIRPLANE:
        return SystemEvent(kind, _bool(data, "value"))
    if kind is SystemEventType.LOCALE:
        return SystemEvent(kind, _str(data, "value"))
    return SystemEvent(kind)


def _app_event(data: Mapping[str, Any]) -> PipChanged:
    if len(data) != 1 or "pipchanged" not in data:
        raise _Mismatch("not an app event")
    inner = data["pipchanged"]
    if not isinstance(inner, Mapping):
        raise _Mismatch("pipchanged payload must be an object")
    return PipChanged(_bool(inner, "value"))


_PARSERS = (_widget_event, _activity_event, _system_event, _app_event)


def parse_event(data: Mapping[str, Any] | bytes | str) -> Event:
    """Turn a decoded message (or its raw JSON) into an event object."""
    if isinstance(data, (bytes, bytearray, str)):
        data = decode_payload(data)
    if not isinstance(data, Mapping):
        raise EventParseError(f"event must be a JSON object, got {type(data).__name__}")
    for parser in _PARSERS:
        try:
            return parser(data)
        except _Mismatch:
            continue
    raise EventParseError(f"data did not match any event variant: {dict(data)!r}")
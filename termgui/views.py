"""Widgets that can be placed inside an activity or a layout.

A *parent* is any object with an ``activity`` attribute (the owning activity)
and a ``parent_id`` attribute (the id of the containing view, or ``None`` for
the top level of an activity).
"""

from __future__ import annotations

import base64
import io
from collections.abc import Iterable, Mapping
from typing import Any

from PIL import Image

from .connection import ProtocolError
from .utils import Color, Vec2

_U8 = (0, 0xFF)
_U16 = (0, 0xFFFF)
_I32 = (-(2**31), 2**31 - 1)

MATCH_PARENT = "MATCH_PARENT"


def _checked_int(name: str, value: Any, bounds: tuple[int, int]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {value!r}")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} out of range {low}..{high}: {value}")
    return value


def _checked_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {value!r}")
    return value


def _reply_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProtocolError(f"expected an integer reply, got {value!r}")
    return value


def _reply_vec2(value: Any) -> Vec2[int]:
    if isinstance(value, Mapping):
        try:
            x, y = value["x"], value["y"]
        except KeyError as exc:
            raise ProtocolError(f"missing field {exc.args[0]!r} in {value!r}") from None
    elif isinstance(value, list) and len(value) == 2:
        x, y = value
    else:
        raise ProtocolError(f"expected a coordinate pair, got {value!r}")
    return Vec2(_reply_int(x), _reply_int(y))


def _checkable_args(text: str, checked: bool) -> dict[str, Any]:
    return {"text": _checked_str("text", text), "checked": bool(checked)}


class Widget:
    """A view created in an activity and addressed by its id."""

    def __init__(self, name: str, parent: Any, args: Mapping[str, Any] | None = None) -> None:
        activity = parent.activity
        params: dict[str, Any] = {}
        if parent.parent_id is not None:
            params["parent"] = parent.parent_id
        if args:
            params.update(args)
        self._activity = activity
        self._id = _reply_int(activity.send_recv_msg(f"create{name}", params))

    @property
    def id(self) -> int:
        return self._id

    @property
    def activity(self) -> Any:
        return self._activity

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"

    def _with_id(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        message: dict[str, Any] = {"id": self._id}
        if params:
            message.update(params)
        return message

    def send_msg(self, method: str, params: Mapping[str, Any] | None = None) -> None:
        """Send a method call addressed to this view."""
        self._activity.send_msg(method, self._with_id(params))

    def send_recv_msg(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send a method call addressed to this view and return the reply."""
        return self._activity.send_recv_msg(method, self._with_id(params))

    def delete(self) -> None:
        self.send_msg("deleteView")

    def set_margin(self, margin: int, direction: str | None = None) -> None:
        args: dict[str, Any] = {"margin": _checked_int("margin", margin, _I32)}
        if direction is not None:
            args["dir"] = _checked_str("direction", direction)
        self.send_msg("setMargin", args)

    def set_width(self, width: int, px: bool = False) -> None:
        self.send_msg("setWidth", {"width": _checked_int("width", width, _U16), "px": bool(px)})

    def set_height(self, height: int, px: bool = False) -> None:
        self.send_msg(
            "setHeight", {"height": _checked_int("height", height, _U16), "px": bool(px)}
        )

    def set_dimensions(self, dimensions: Vec2[int], px: bool = False) -> None:
        self.set_width(dimensions.x, px)
        self.set_height(dimensions.y, px)

    def set_linear_layout_params(self, weight: int) -> None:
        self.send_msg("setLinearLayoutParams", {"weight": _checked_int("weight", weight, _U16)})

    def send_touch_event(self, send: bool) -> None:
        self.send_msg("sendTouchEvent", {"send": bool(send)})

    def send_click_event(self, send: bool) -> None:
        self.send_msg("sendClickEvent", {"send": bool(send)})

    def send_long_click_event(self, send: bool) -> None:
        self.send_msg("sendLongClickEvent", {"send": bool(send)})

    def send_focus_change_event(self, send: bool) -> None:
        self.send_msg("sendFocusChangeEvent", {"send": bool(send)})

    def get_dimensions(self) -> Vec2[int]:
        return _reply_vec2(self.send_recv_msg("getDimensions"))

    def set_background_color(self, color: Color) -> None:
        self.send_msg("setBackgroundColor", {"color": color.to_u32()})

    def set_visibility(self, visibility: int) -> None:
        self.send_msg("setVisibility", {"vis": _checked_int("visibility", visibility, _U8)})

    def focus(self, force_soft: bool = False) -> None:
        self.send_msg("requestFocus", {"forceSoft": bool(force_soft)})


class TextView(Widget):
    """A view that displays text."""

    def set_text_size(self, size: int) -> None:
        self.send_msg("setTextSize", {"size": _checked_int("size", size, _U8)})

    def set_text(self, text: str) -> None:
        self.send_msg("setText", {"text": _checked_str("text", text)})

    def get_text(self) -> str:
        reply = self.send_recv_msg("getText")
        if not isinstance(reply, str):
            raise ProtocolError(f"expected a string reply, got {reply!r}")
        return reply

    def set_text_color(self, color: Color) -> None:
        self.send_msg("setTextColor", {"color": color.to_u32()})

    def set_text_event(self, send: bool) -> None:
        self.send_msg("sendTextEvent", {"send": bool(send)})


class CompoundButton(TextView):
    """A text view with a checked state."""

    def set_checked(self, checked: bool) -> None:
        self.send_msg("setChecked", {"checked": bool(checked)})


class Label(TextView):
    def __init__(
        self,
        parent: Any,
        text: str,
        selectable_text: bool = False,
        clickable_links: bool = False,
    ) -> None:
        super().__init__(
            "TextView",
            parent,
            {
                "text": _checked_str("text", text),
                "selectableText": bool(selectable_text),
                "clickableLinks": bool(clickable_links),
            },
        )


class Button(TextView):
    def __init__(self, parent: Any, text: str) -> None:
        super().__init__("Button", parent, {"text": _checked_str("text", text)})


class EditText(TextView):
    def __init__(
        self,
        parent: Any,
        text: str = "",
        single_line: bool = False,
        line: bool = True,
        block_input: bool = False,
        input_type: str = "text",
    ) -> None:
        super().__init__(
            "EditText",
            parent,
            {
                "text": _checked_str("text", text),
                "singleline": bool(single_line),
                "line": bool(line),
                "blockinput": bool(block_input),
                "type": _checked_str("input_type", input_type),
            },
        )

    def show_cursor(self, show: bool) -> None:
        self.send_msg("showCursor", {"show": bool(show)})


class CheckBox(CompoundButton):
    def __init__(self, parent: Any, text: str, checked: bool = False) -> None:
        super().__init__("CheckBox", parent, _checkable_args(text, checked))


class RadioButton(CompoundButton):
    def __init__(self, parent: Any, text: str, checked: bool = False) -> None:
        super().__init__("RadioButton", parent, _checkable_args(text, checked))


class Switch(CompoundButton):
    def __init__(self, parent: Any, text: str, checked: bool = False) -> None:
        super().__init__("Switch", parent, _checkable_args(text, checked))


class ToggleButton(CompoundButton):
    def __init__(self, parent: Any, text: str, checked: bool = False) -> None:
        super().__init__("ToggleButton", parent, _checkable_args(text, checked))


class Spinner(Widget):
    def __init__(self, parent: Any) -> None:
        super().__init__("Spinner", parent)

    def set_list(self, items: Iterable[str]) -> None:
        entries = [_checked_str("item", item) for item in items]
        self.send_msg("setList", {"list": entries})


class Space(Widget):
    def __init__(self, parent: Any) -> None:
        super().__init__("Space", parent)


class ProgressBar(Widget):
    def __init__(self, parent: Any) -> None:
        super().__init__("ProgressBar", parent)

    def set_progress(self, progress: int) -> None:
        self.send_msg("setProgress", {"progress": _checked_int("progress", progress, _U8)})


class ImageView(Widget):
    def __init__(self, parent: Any) -> None:
        super().__init__("ImageView", parent)

    def set_image(self, path: str) -> None:
        """Load an image file, re-encode it as PNG and display it."""
        buffer = io.BytesIO()
        with Image.open(path) as image:
            image.save(buffer, format="PNG")
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
        self.send_msg("setImage", {"img": encoded})


class WebView(Widget):
    def __init__(self, parent: Any) -> None:
        super().__init__("WebView", parent)
        self.send_msg("setWidth", {"width": MATCH_PARENT})
        self.send_msg("setHeight", {"height": MATCH_PARENT})

    def set_data(self, text: str, mime: str) -> None:
        doc = base64.b64encode(_checked_str("text", text).encode("utf-8")).decode("ascii")
        self.send_msg(
            "setData",
            {"base64": True, "mime": _checked_str("mime", mime), "doc": doc},
        )
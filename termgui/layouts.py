"""Containers for widgets and the parent protocol used to create views.

A parent is anything widgets can be created in: an activity, a view group,
or a one-shot token for a layout that holds a single child. Every parent
exposes ``activity`` (the owning activity) and ``parent_id`` (the id of the
containing view, or ``None`` at the top level of an activity).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .utils import Vec2
from .views import (
    Button,
    CheckBox,
    EditText,
    ImageView,
    Label,
    ProgressBar,
    RadioButton,
    Space,
    Spinner,
    Switch,
    ToggleButton,
    WebView,
    Widget,
    _checked_int,
    _checked_str,
    _reply_vec2,
)

_U16 = (0, 0xFFFF)


def _set_scroll_position(view: Widget, pos: Vec2[int], smooth: bool) -> None:
    view.send_msg(
        "setScrollPosition",
        {
            "x": _checked_int("x", pos.x, _U16),
            "y": _checked_int("y", pos.y, _U16),
            "soft": bool(smooth),
        },
    )


def _get_scroll_position(view: Widget) -> Vec2[int]:
    return _reply_vec2(view.send_recv_msg("getScrollPosition"))


class Parent:
    """Factory methods for creating views inside this parent."""

    def radio_button(self, text: str, checked: bool = False) -> RadioButton:
        return RadioButton(self, text, checked)

    def toggle_button(self, text: str, checked: bool = False) -> ToggleButton:
        return ToggleButton(self, text, checked)

    def switch(self, text: str, checked: bool = False) -> Switch:
        return Switch(self, text, checked)

    def check_box(self, text: str, checked: bool = False) -> CheckBox:
        return CheckBox(self, text, checked)

    def label(
        self, text: str, selectable_text: bool = False, clickable_links: bool = False
    ) -> Label:
        return Label(self, text, selectable_text, clickable_links)

    def image_view(self) -> ImageView:
        return ImageView(self)

    def web_view(self) -> WebView:
        return WebView(self)

    def spinner(self) -> Spinner:
        return Spinner(self)

    def space(self) -> Space:
        return Space(self)

    def progress_bar(self) -> ProgressBar:
        return ProgressBar(self)

    def button(self, text: str) -> Button:
        return Button(self, text)

    def edit_text(
        self,
        text: str = "",
        single_line: bool = False,
        line: bool = True,
        block_input: bool = False,
        input_type: str = "text",
    ) -> EditText:
        return EditText(self, text, single_line, line, block_input, input_type)

    def linear_layout(self, vertical: bool = True) -> LinearLayout:
        return LinearLayout(self, vertical)

    def swipe_refresh_layout(self) -> tuple[SwipeRefreshLayout, OneChildParent]:
        layout = SwipeRefreshLayout(self)
        return layout, layout.child_parent()

    def radio_group(self) -> RadioGroup:
        return RadioGroup(self)

    def tab_layout(self) -> TabLayout:
        return TabLayout(self)

    def frame_layout(self) -> FrameLayout:
        return FrameLayout(self)

    def nested_scroll_view(
        self, fill_viewport: bool = False, snapping: bool = False, no_bar: bool = False
    ) -> tuple[NestedScrollView, OneChildParent]:
        view = NestedScrollView(self, fill_viewport, snapping, no_bar)
        return view, view.child_parent()

    def horizontal_scroll_view(
        self, fill_viewport: bool = False, snapping: bool = False, no_bar: bool = False
    ) -> tuple[HorizontalScrollView, OneChildParent]:
        view = HorizontalScrollView(self, fill_viewport, snapping, no_bar)
        return view, view.child_parent()


class OneChildParent(Parent):
    """A token for registering the single child of a layout."""

    def __init__(self, activity: Any, parent_id: int) -> None:
        self.activity = activity
        self.parent_id = parent_id

    def __repr__(self) -> str:
        return f"OneChildParent(parent_id={self.parent_id})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OneChildParent):
            return NotImplemented
        return self.activity is other.activity and self.parent_id == other.parent_id

    def __hash__(self) -> int:
        return hash((id(self.activity), self.parent_id))


class ViewGroup(Widget, Parent):
    """A widget that contains other widgets."""

    @property
    def parent_id(self) -> int:
        return self.id

    def clear_children(self) -> OneChildParent:
        """Remove all children and return a token for adding a new one."""
        self.send_msg("deleteChildren")
        return OneChildParent(self.activity, self.id)


class LinearLayout(ViewGroup):
    def __init__(self, parent: Any, vertical: bool = True) -> None:
        super().__init__("LinearLayout", parent, {"vertical": bool(vertical)})


class FrameLayout(ViewGroup):
    def __init__(self, parent: Any) -> None:
        super().__init__("FrameLayout", parent)


class RadioGroup(ViewGroup):
    def __init__(self, parent: Any) -> None:
        super().__init__("RadioGroup", parent)


class SwipeRefreshLayout(ViewGroup):
    def __init__(self, parent: Any) -> None:
        super().__init__("SwipeRefreshLayout", parent)

    def child_parent(self) -> OneChildParent:
        return OneChildParent(self.activity, self.id)

    def set_refreshing(self, refresh: bool) -> None:
        self.send_msg("setRefreshing", {"refresh": bool(refresh)})


class ScrollView(ViewGroup):
    """A scrollable container holding a single child."""

    _kind = ""

    def __init__(
        self,
        parent: Any,
        fill_viewport: bool = False,
        snapping: bool = False,
        no_bar: bool = False,
    ) -> None:
        super().__init__(
            self._kind,
            parent,
            {
                "fillviewport": bool(fill_viewport),
                "snapping": bool(snapping),
                "nobar": bool(no_bar),
            },
        )

    def child_parent(self) -> OneChildParent:
        return OneChildParent(self.activity, self.id)

    def set_scroll_position(self, pos: Vec2[int], smooth: bool = False) -> None:
        _set_scroll_position(self, pos, smooth)

    def get_scroll_position(self) -> Vec2[int]:
        return _get_scroll_position(self)


class NestedScrollView(ScrollView):
    _kind = "NestedScrollView"

    def __init__(
        self,
        parent: Any,
        fill_viewport: bool = False,
        snapping: bool = False,
        no_bar: bool = False,
    ) -> None:
        super().__init__(parent, fill_viewport, snapping, no_bar)


class HorizontalScrollView(ScrollView):
    _kind = "HorizontalScrollView"

    def __init__(
        self,
        parent: Any,
        fill_viewport: bool = False,
        snapping: bool = False,
        no_bar: bool = False,
    ) -> None:
        super().__init__(parent, fill_viewport, snapping, no_bar)


class TabLayout(ViewGroup):
    def __init__(self, parent: Any) -> None:
        super().__init__("TabLayout", parent)

    def set_scroll_position(self, pos: Vec2[int], smooth: bool = False) -> None:
        _set_scroll_position(self, pos, smooth)

    def get_scroll_position(self) -> Vec2[int]:
        return _get_scroll_position(self)

    def set_list(self, items: Iterable[str]) -> None:
        entries = [_checked_str("item", item) for item in items]
        self.send_msg("setList", {"list": entries})
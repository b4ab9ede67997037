"""Dispatching events to callbacks registered per activity and per widget."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .activity import Activity, Flags
from .events import (
    ActivityEvent,
    ActivityEventType,
    Click,
    Event,
    LongClick,
    Refresh,
    WidgetEvent,
)

ActivityCallback = Callable[[ActivityEvent, "Handler"], Any]
WidgetCallback = Callable[[Any, "Handler"], Any]


@dataclass
class _ActivityInfo:
    handlers: list[ActivityCallback] = field(default_factory=list)
    widgets: dict[int, list[WidgetCallback]] = field(default_factory=dict)


class Handler:
    """Routes events from a GUI connection to registered callbacks.

    Exceptions raised by callbacks propagate out of ``dispatch`` and
    ``handle_all_events``.
    """

    def __init__(self, tgui: Any) -> None:
        self._tgui = tgui
        self._activities: dict[int, _ActivityInfo] = {}

    @property
    def tgui(self) -> Any:
        return self._tgui

    @property
    def activity_ids(self) -> frozenset[int]:
        """Ids of the activities whose events are tracked."""
        return frozenset(self._activities)

    def dispatch(self, event: Event) -> None:
        """Call the callbacks registered for one event.

        Callbacks registered while the event is being handled are not called
        for that event.
        """
        match event:
            case ActivityEvent(aid=aid):
                for callback in list(self._activities[aid].handlers):
                    callback(event, self)
            case WidgetEvent(aid=aid, id=widget_id, kind=kind):
                callbacks = self._activities[aid].widgets.get(widget_id, ())
                for callback in list(callbacks):
                    callback(kind, self)
            case _:
                pass

    def handle_all_events(self) -> None:
        """Handle events until every tracked activity has finished."""
        while True:
            event = self._tgui.event()
            self.dispatch(event)
            if (
                isinstance(event, ActivityEvent)
                and event.type is ActivityEventType.DESTROY
                and event.finishing is True
            ):
                del self._activities[event.aid]
                if not self._activities:
                    return
            elif self._tgui.debug:
                print(repr(event), file=sys.stderr)

    def add_activity(self, activity: Activity, callback: ActivityCallback) -> None:
        self._activities[activity.aid].handlers.append(callback)

    def add_widget(self, widget: Any, callback: WidgetCallback) -> None:
        info = self._activities[widget.activity.aid]
        info.widgets.setdefault(widget.id, []).append(callback)

    def on_click(self, view: Any, callback: Callable[[Handler], Any]) -> None:
        """Call ``callback(handler)`` whenever the view is clicked."""

        def handle(kind: Any, handler: Handler) -> None:
            if isinstance(kind, Click):
                callback(handler)

        self.add_widget(view, handle)

    def on_long_click(self, view: Any, callback: Callable[[Handler], Any]) -> None:
        """Enable long-click events for the view and call ``callback(handler)`` on each."""
        view.send_long_click_event(True)

        def handle(kind: Any, handler: Handler) -> None:
            if isinstance(kind, LongClick):
                callback(handler)

        self.add_widget(view, handle)

    def on_refresh(self, view: Any, callback: Callable[[Handler], Any]) -> None:
        """Call ``callback(handler)`` on refresh, then stop the refresh spinner."""

        def handle(kind: Any, handler: Handler) -> None:
            if isinstance(kind, Refresh):
                callback(handler)
                view.set_refreshing(False)

        self.add_widget(view, handle)

    def new_activity(
        self,
        flags: Flags | None,
        callback: Callable[[Activity, Handler], Any],
    ) -> Activity:
        """Create an activity and track its events.

        ``callback(activity, handler)`` runs every time the activity is
        (re)created by the system.
        """
        activity = self._tgui.new_activity(flags)
        self._activities[activity.aid] = _ActivityInfo()

        def handle(event: ActivityEvent, handler: Handler) -> None:
            if event.type is ActivityEventType.CREATE:
                callback(activity, handler)

        self.add_activity(activity, handle)
        return activity
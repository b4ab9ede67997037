import json
import socket

import pytest

from termgui.activity import Flags
from termgui.connection import read_frame, send_frame
from termgui.events import (
    ActivityEvent,
    ActivityEventType,
    Click,
    LongClick,
    Refresh,
    WidgetEvent,
)
from termgui.gui import TGui
from termgui.handler import Handler


class _Service:
    def __init__(self):
        self.gui_main, self.main = socket.socketpair()
        self.gui_event, self.event = socket.socketpair()
        self.gui = TGui(self.gui_main, self.gui_event)

    def reply(self, value):
        send_frame(self.main, json.dumps(value).encode())

    def push(self, value):
        send_frame(self.event, json.dumps(value).encode())

    def sent(self):
        self.main.settimeout(0.05)
        out = []
        try:
            while True:
                out.append(json.loads(read_frame(self.main)))
        except TimeoutError:
            pass
        finally:
            self.main.settimeout(None)
        return out

    def close(self):
        self.gui.close()
        self.main.close()
        self.event.close()


@pytest.fixture
def service():
    svc = _Service()
    yield svc
    svc.close()


def _handler_with_activity(service, callback=lambda a, h: None):
    service.reply([1, 0])
    handler = Handler(service.gui)
    activity = handler.new_activity(Flags(), callback)
    return handler, activity


def test_new_activity_callback_only_on_create(service):
    calls = []
    handler, activity = _handler_with_activity(
        service, lambda a, h: calls.append((a, h))
    )
    handler.dispatch(ActivityEvent(1, ActivityEventType.START))
    assert calls == []
    handler.dispatch(ActivityEvent(1, ActivityEventType.CREATE))
    assert calls == [(activity, handler)]
    assert handler.activity_ids == frozenset({1})


def test_new_activity_sends_flags(service):
    service.reply([1, 0])
    Handler(service.gui).new_activity(Flags(dialog=True, cancel_outside=True), lambda a, h: None)
    [message] = service.sent()
    assert message["method"] == "newActivity"
    assert message["params"]["dialog"] is True
    assert message["params"]["cancel_outside"] is True


def test_on_click_only_for_its_widget(service):
    handler, activity = _handler_with_activity(service)
    service.reply(5)
    button = activity.button("Go")
    clicks = []
    handler.on_click(button, lambda h: clicks.append(h))
    handler.dispatch(WidgetEvent(6, 1, Click()))
    handler.dispatch(WidgetEvent(5, 1, LongClick()))
    assert clicks == []
    handler.dispatch(WidgetEvent(5, 1, Click()))
    assert clicks == [handler]


def test_on_long_click_enables_events(service):
    handler, activity = _handler_with_activity(service)
    service.reply(5)
    button = activity.button("Go")
    service.sent()
    calls = []
    handler.on_long_click(button, lambda h: calls.append(1))
    assert service.sent() == [
        {"method": "sendLongClickEvent", "params": {"aid": 1, "id": 5, "send": True}}
    ]
    handler.dispatch(WidgetEvent(5, 1, Click()))
    handler.dispatch(WidgetEvent(5, 1, LongClick()))
    assert calls == [1]


def test_on_refresh_clears_spinner(service):
    handler, activity = _handler_with_activity(service)
    service.reply(4)
    layout, _child = activity.swipe_refresh_layout()
    service.sent()
    calls = []
    handler.on_refresh(layout, lambda h: calls.append(1))
    handler.dispatch(WidgetEvent(4, 1, Refresh()))
    assert calls == [1]
    assert service.sent() == [
        {"method": "setRefreshing", "params": {"aid": 1, "id": 4, "refresh": False}}
    ]


def test_handlers_added_during_dispatch_wait_for_next_event(service):
    handler, activity = _handler_with_activity(service)
    late = []

    def first(event, h):
        h.add_activity(activity, lambda e, hh: late.append(e))

    handler.add_activity(activity, first)
    handler.dispatch(ActivityEvent(1, ActivityEventType.RESUME))
    assert late == []
    handler.dispatch(ActivityEvent(1, ActivityEventType.PAUSE, False))
    assert late == [ActivityEvent(1, ActivityEventType.PAUSE, False)]


def test_add_activity_unknown_raises(service):
    handler, activity = _handler_with_activity(service)
    service.reply([2, 0])
    other = service.gui.new_activity()
    with pytest.raises(KeyError):
        handler.add_activity(other, lambda e, h: None)


def test_handle_all_events_runs_until_destroyed(service):
    service.reply([1, 0])
    service.reply(5)
    clicks = []

    def build(activity, handler):
        button = activity.button("Go")
        handler.on_click(button, lambda h: clicks.append(1))

    handler = Handler(service.gui)
    handler.new_activity(Flags(), build)
    service.push({"type": "create", "value": {"aid": 1}})
    service.push({"type": "click", "value": {"id": 5, "aid": 1}})
    service.push({"type": "destroy", "value": {"aid": 1, "finishing": True}})
    handler.handle_all_events()
    assert clicks == [1]
    assert handler.activity_ids == frozenset()


def test_handle_all_events_propagates_errors(service):
    handler, activity = _handler_with_activity(service)

    def fail(event, h):
        raise RuntimeError("boom")

    handler.add_activity(activity, fail)
    service.push({"type": "resume", "value": {"aid": 1}})
    with pytest.raises(RuntimeError, match="boom"):
        handler.handle_all_events()


def test_debug_prints_events(service, capsys):
    handler, _activity = _handler_with_activity(service)
    service.gui.debug = True
    service.push({"type": "click", "value": {"id": 9, "aid": 1}})
    service.push({"type": "destroy", "value": {"aid": 1, "finishing": True}})
    handler.handle_all_events()
    err = capsys.readouterr().err
    assert repr(WidgetEvent(9, 1, Click())) in err
    assert "DESTROY" not in err
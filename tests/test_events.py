import pytest

from termgui.connection import ProtocolError
from termgui.events import (
    ActivityEvent,
    ActivityEventType,
    Click,
    EventParseError,
    FocusChange,
    LongClick,
    PipChanged,
    Refresh,
    Selected,
    SystemEvent,
    SystemEventType,
    Text,
    Touch,
    TouchActionType,
    WidgetEvent,
    parse_event,
)
from termgui.utils import Vec2


def test_click_defaults_set_to_false():
    event = parse_event({"type": "click", "id": 4, "aid": 1})
    assert event == WidgetEvent(id=4, aid=1, kind=Click(set=False))


def test_click_with_set():
    event = parse_event({"type": "click", "id": 4, "aid": 1, "set": True})
    assert event.kind == Click(set=True)


def test_raw_bytes_are_decoded_and_flattened():
    event = parse_event(b'{"type":"click","value":{"id":2,"aid":9}}')
    assert event == WidgetEvent(id=2, aid=9, kind=Click())


@pytest.mark.parametrize(
    "payload, kind",
    [
        ({"type": "longClick"}, LongClick()),
        ({"type": "refresh"}, Refresh()),
        ({"type": "text", "text": "abc"}, Text("abc")),
        ({"type": "focusChange", "focus": True}, FocusChange(True)),
        ({"type": "selected", "selected": 12}, Selected(12)),
    ],
)
def test_widget_kinds(payload, kind):
    event = parse_event({"id": 5, "aid": 2, **payload})
    assert isinstance(event, WidgetEvent)
    assert event.kind == kind


def test_touch_event():
    event = parse_event(
        {
            "type": "touch",
            "id": 1,
            "aid": 0,
            "action": "pointer_up",
            "index": 1,
            "time": 123456,
            "pointers": [{"x": 10, "y": 20, "id": 0}, {"x": 30, "y": 40, "id": 1}],
        }
    )
    assert isinstance(event.kind, Touch)
    assert event.kind.action.type is TouchActionType.POINTER_UP
    assert event.kind.action.index == 1
    assert event.kind.time == 123456
    assert [p.pos for p in event.kind.pointers] == [Vec2(10, 20), Vec2(30, 40)]
    assert [p.id for p in event.kind.pointers] == [0, 1]


def test_touch_down_has_no_index():
    event = parse_event(
        {"type": "touch", "id": 1, "aid": 0, "action": "down", "time": 1, "pointers": []}
    )
    assert event.kind.action.index is None
    assert event.kind.pointers == ()


def test_touch_negative_coordinate_is_rejected():
    with pytest.raises(EventParseError):
        parse_event(
            {
                "type": "touch",
                "id": 1,
                "aid": 0,
                "action": "move",
                "time": 1,
                "pointers": [{"x": -1, "y": 0, "id": 0}],
            }
        )


def test_activity_destroy():
    event = parse_event({"type": "destroy", "aid": 3, "finishing": True})
    assert event == ActivityEvent(aid=3, type=ActivityEventType.DESTROY, finishing=True)


def test_activity_create_without_finishing():
    event = parse_event({"type": "create", "aid": 3})
    assert event == ActivityEvent(aid=3, type=ActivityEventType.CREATE)


def test_user_leave_hint_keeps_its_spelling():
    event = parse_event({"type": "UserLeaveHint", "aid": 0})
    assert event.type is ActivityEventType.USER_LEAVE_HINT


def test_activity_type_wins_over_widget_when_unknown_widget_kind():
    event = parse_event({"type": "pause", "aid": 1, "id": 8, "finishing": False})
    assert event == ActivityEvent(aid=1, type=ActivityEventType.PAUSE, finishing=False)


def test_stop_without_finishing_is_rejected():
    with pytest.raises(EventParseError):
        parse_event({"type": "stop", "aid": 1})


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"type": "screen_on"}, SystemEvent(SystemEventType.SCREEN_ON)),
        ({"type": "timezone"}, SystemEvent(SystemEventType.TIMEZONE)),
        ({"type": "airplane", "value": True}, SystemEvent(SystemEventType.AIRPLANE, True)),
        ({"type": "locale", "value": "de"}, SystemEvent(SystemEventType.LOCALE, "de")),
    ],
)
def test_system_events(payload, expected):
    assert parse_event(payload) == expected


def test_pip_changed():
    assert parse_event({"pipchanged": {"value": True}}) == PipChanged(True)


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "unknown"},
        {"type": "click", "id": True, "aid": 1},
        {"type": "airplane", "value": "yes"},
        {"pipchanged": {"value": 1}},
        {},
    ],
)
def test_unmatched_payloads(payload):
    with pytest.raises(EventParseError):
        parse_event(payload)


def test_non_object_input():
    with pytest.raises(ProtocolError):
        parse_event(b"[1]")


def test_event_parse_error_is_protocol_error():
    with pytest.raises(ProtocolError):
        parse_event({"type": "nope"})
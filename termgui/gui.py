"""The connection to the GUI service and the calls that are not tied to a view."""

from __future__ import annotations

import json
import socket
import sys
from typing import Any

from .activity import Activity, Flags
from .connection import ProtocolError, connect, encode_message, read_frame, recv_msg, send_frame
from .events import Event, EventParseError, parse_event


class TGui:
    """A pair of sockets to the GUI service: one for calls, one for events."""

    def __init__(
        self,
        main: socket.socket | None = None,
        event: socket.socket | None = None,
        debug: bool = False,
    ) -> None:
        if main is None and event is None:
            main, event = connect()
        elif main is None or event is None:
            raise ValueError("main and event sockets must be given together")
        self._main = main
        self._event = event
        self.debug = debug

    def __enter__(self) -> TGui:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close both sockets."""
        self._main.close()
        self._event.close()

    def send_msg(self, method: str, params: Any = None) -> None:
        """Send a method call without waiting for a reply."""
        data = encode_message(method, params)
        if self.debug:
            print(data.decode("utf-8"), file=sys.stderr)
        send_frame(self._main, data)

    def send_recv_msg(self, method: str, params: Any = None) -> Any:
        """Send a method call and return the decoded JSON reply."""
        self.send_msg(method, params)
        data = read_frame(self._main)
        try:
            return json.loads(data)
        except ValueError as exc:
            raise ProtocolError(f"invalid JSON reply to {method}: {exc}") from exc

    def new_activity(self, flags: Flags | None = None) -> Activity:
        return Activity(self, flags)

    def event(self) -> Event:
        """Block until the next event arrives and return it."""
        message = recv_msg(self._event)
        try:
            return parse_event(message)
        except EventParseError:
            print(f"error parsing event from {message!r}", file=sys.stderr)
            raise

    def toast(self, text: str, long: bool = False) -> None:
        self.send_msg("toast", {"text": text, "long": bool(long)})

    def turn_screen_on(self) -> None:
        self.send_msg("turnScreenOn")

    def is_locked(self) -> bool:
        reply = self.send_recv_msg("isLocked")
        if not isinstance(reply, bool):
            raise ProtocolError(f"expected a boolean reply, got {reply!r}")
        return reply
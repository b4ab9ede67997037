"""Small demonstration programs."""

from __future__ import annotations

import argparse
import time
from typing import Any

from .activity import Flags
from .events import ActivityEvent, ActivityEventType, Click, WidgetEvent
from .gui import TGui
from .handler import Handler
from .utils import Color
from .views import Label


def hello_world(tgui: Any, pause: float = 5.0) -> Label:
    """Show a label, then change its text and colour."""
    activity = tgui.new_activity(Flags())
    label = activity.label("Hello")
    time.sleep(pause)
    label.set_text("Bye World")
    label.set_text_color(Color.from_rgb(160, 200, 240))
    time.sleep(pause)
    return label


def download_dialog(tgui: Any) -> None:
    """Show a download form in a dialog; the Cancel button closes it."""
    handler = Handler(tgui)

    def build(activity: Any, handler: Handler) -> None:
        layout = activity.linear_layout(True)
        title = layout.label("Download Video")
        title.set_text_size(30)
        title.set_margin(5)

        layout.label("Video Link")
        layout.edit_text("", False, False, False, "text")

        layout.label("File Name")
        layout.edit_text("", False, False, False, "text")

        buttons = layout.linear_layout(False)
        buttons.button("Download")
        cancel = buttons.button("Cancel")

        handler.on_click(cancel, lambda _handler: activity.finish())

    handler.new_activity(Flags(dialog=True, cancel_outside=True), build)
    handler.handle_all_events()


def input_demo(tgui: Any) -> None:
    """Show a switch in a dialog; clicking it closes the dialog."""
    activity = tgui.new_activity(Flags(dialog=True, cancel_outside=True))
    layout = activity.linear_layout(True)
    title = layout.label("Input Demo")
    title.set_text_size(30)
    title.set_margin(5)
    switch = layout.switch("Switch")

    while True:
        match tgui.event():
            case ActivityEvent(type=ActivityEventType.DESTROY, finishing=True):
                break
            case WidgetEvent(id=widget_id, kind=Click()) if widget_id == switch.id:
                activity.finish()
            case _:
                pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="termgui-demo", description="Run a GUI demo.")
    parser.add_argument("demo", choices=("hello", "download", "input"))
    parser.add_argument("--debug", action="store_true", help="echo messages to stderr")
    parser.add_argument("--pause", type=float, default=5.0, help="seconds between steps")
    args = parser.parse_args(argv)

    with TGui(debug=args.debug) as gui:
        if args.demo == "hello":
            hello_world(gui, args.pause)
        elif args.demo == "download":
            download_dialog(gui)
        else:
            input_demo(gui)
    return 0
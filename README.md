# termgui

termgui lets a Python program running in Termux create native Android
activities, layouts and widgets through the Termux:GUI plugin. It opens two
abstract Unix sockets, one for commands and one for events, asks the plugin to
connect to them with an `am broadcast`, and then exchanges length-prefixed
JSON messages with it.

## Installation

```
pip install termgui
```

The Termux:GUI app must be installed on the device. `ImageView.set_image`
uses Pillow, which is installed along with the package.

## A first window

```python
import time

from termgui.gui import TGui
from termgui.activity import Flags
from termgui.utils import Color

with TGui() as tgui:
    activity = tgui.new_activity(Flags())
    label = activity.label("Hello", False, False)
    time.sleep(5)
    label.set_text("Bye World")
    label.set_text_color(Color.from_rgb(160, 200, 240))
    time.sleep(5)
```

`TGui` connects on construction and closes both sockets when used as a
context manager or when `close()` is called. Set `debug=True` to echo every
outgoing message to stderr.

Activities, view groups and the tokens returned for single-child layouts all
offer the same factory methods: `label`, `button`, `edit_text`, `check_box`,
`radio_button`, `switch`, `toggle_button`, `spinner`, `space`,
`progress_bar`, `image_view`, `web_view`, `linear_layout`, `frame_layout`,
`radio_group`, `tab_layout`, `swipe_refresh_layout`, `nested_scroll_view`
and `horizontal_scroll_view`. The last three return the layout together with
a `OneChildParent` in which its single child is created.

## Reacting to events

A `Handler` sends each event to the callbacks registered for it. It returns
once every activity it tracks has been destroyed for good. Exceptions raised
by callbacks propagate out of `handle_all_events`.

```python
from termgui.gui import TGui
from termgui.activity import Flags
from termgui.handler import Handler

tgui = TGui()
handler = Handler(tgui)

def build(activity, handler):
    layout = activity.linear_layout(True)
    layout.label("Video Link", False, False)
    layout.edit_text("", False, False, False, "text")
    buttons = layout.linear_layout(False)
    buttons.button("Download")
    cancel = buttons.button("Cancel")
    handler.on_click(cancel, lambda handler: activity.finish())

handler.new_activity(Flags(dialog=True, cancel_outside=True), build)
handler.handle_all_events()
```

The callback given to `new_activity` runs each time the system (re)creates
the activity. Besides `on_click`, there are `on_long_click` (which also turns
on long-click events for the view), `on_refresh` (which stops the refresh
spinner after the callback) and the general `add_widget` and `add_activity`.

To read events yourself, call `tgui.event()` in a loop. It returns an
`ActivityEvent`, `WidgetEvent`, `SystemEvent` or `PipChanged` from
`termgui.events`; `parse_event` turns a decoded message or raw JSON into one
of these and raises `EventParseError` when nothing matches.

## Modules

- `termgui.gui`: `TGui`, the connection to the plugin.
- `termgui.activity`: `Activity`, `Flags` and `InputMode`.
- `termgui.layouts`: `Parent`, `OneChildParent`, `ViewGroup`, `LinearLayout`,
  `FrameLayout`, `RadioGroup`, `SwipeRefreshLayout`, `ScrollView`,
  `NestedScrollView`, `HorizontalScrollView` and `TabLayout`.
- `termgui.views`: `Widget`, `TextView`, `CompoundButton`, `Label`, `Button`,
  `EditText`, `CheckBox`, `RadioButton`, `Switch`, `ToggleButton`, `Spinner`,
  `Space`, `ProgressBar`, `ImageView` and `WebView`.
- `termgui.events`: the event types and `parse_event`.
- `termgui.handler`: `Handler`, which dispatches events to callbacks.
- `termgui.connection`: socket setup, message framing and `ProtocolError`.
- `termgui.utils`: `Color` and `Vec2`.

## Demo

On a device with Termux:GUI installed, run one of:

```
termgui-demo hello
termgui-demo download
termgui-demo input
```

`hello` shows a label and changes it after a pause (`--pause` sets the
seconds, default 5). `download` shows a form in a dialog that the Cancel
button closes. `input` shows a switch in a dialog that closes when it is
clicked. `--debug` echoes outgoing messages to stderr.

## Limits

The package only works on Android with the Termux:GUI plugin present; it has
no fallback display. Images are sent to `ImageView` as base64 PNG data; there
is no support for shared-memory image buffers.

## Tests

```
pip install termgui[test]
pytest
```
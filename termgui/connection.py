"""Socket setup and message framing for the GUI service."""

from __future__ import annotations

import itertools
import json
import os
import socket
import subprocess
import sys
from typing import Any

_counter = itertools.count()

_HEADER_SIZE = 4
_MAX_FRAME = 0xFFFFFFFF


class ProtocolError(Exception):
    """Raised when the GUI service sends something unexpected."""


def _listen(name: str) -> socket.socket:
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind("\0" + name)
        sock.listen(1)
    except OSError:
        sock.close()
        raise
    return sock


def connect() -> tuple[socket.socket, socket.socket]:
    """Ask the GUI service to connect and return the (main, event) sockets."""
    serial = next(_counter)
    pid = os.getpid()
    main_addr = f"termgui/{pid}/{serial}/main"
    event_addr = f"termgui/{pid}/{serial}/event"

    with _listen(main_addr) as main_listener, _listen(event_addr) as event_listener:
        subprocess.run(
            [
                "am",
                "broadcast",
                "-n",
                "com.termux.gui/.GUIReceiver",
                "--es",
                "mainSocket",
                main_addr,
                "--es",
                "eventSocket",
                event_addr,
            ],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        main, _ = main_listener.accept()
        event, _ = event_listener.accept()

    try:
        main.sendall(b"\x01")
        reply = _recv_exact(main, 1)
        if reply != b"\x00":
            raise ProtocolError(f"unexpected handshake reply {reply!r}")
    except BaseException:
        main.close()
        event.close()
        raise
    return main, event


def encode_message(method: str, params: Any) -> bytes:
    """Serialise a method call as compact UTF-8 JSON."""
    message = {"method": method, "params": params}
    return json.dumps(message, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def send_frame(sock: socket.socket, data: bytes) -> None:
    """Send data prefixed with its big-endian 32-bit length."""
    if len(data) > _MAX_FRAME:
        raise ValueError(f"frame too large: {len(data)} bytes")
    sock.sendall(len(data).to_bytes(_HEADER_SIZE, "big") + data)


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ProtocolError(
                f"connection closed after {len(chunks)} of {size} bytes"
            )
        chunks += chunk
    return bytes(chunks)


def read_frame(sock: socket.socket) -> bytes:
    """Read one length-prefixed frame."""
    size = int.from_bytes(_recv_exact(sock, _HEADER_SIZE), "big")
    return _recv_exact(sock, size)


def decode_payload(data: bytes | str) -> dict[str, Any]:
    """Parse a JSON object, merging an object under "value" into the top level."""
    try:
        value = json.loads(data)
    except ValueError as exc:
        raise ProtocolError(f"invalid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise ProtocolError(f"expected a JSON object, got {type(value).__name__}")
    if "value" in value and isinstance(value["value"], dict):
        inner = value.pop("value")
        value.update(inner)
    return value


def recv_msg(sock: socket.socket) -> dict[str, Any]:
    """Read and decode one message, reporting undecodable ones on stderr."""
    data = read_frame(sock)
    try:
        return decode_payload(data)
    except ProtocolError:
        print(
            f"error parsing message from {data.decode('utf-8', 'replace')}",
            file=sys.stderr,
        )
        raise
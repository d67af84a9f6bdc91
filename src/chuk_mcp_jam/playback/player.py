"""
MIDI playback through a mido output port.

start() is fire-and-forget: messages are streamed on a daemon thread so the
caller gets control back immediately. pause() stops the stream and silences
the port, and can be called any number of times.
"""

from __future__ import annotations

import logging
import threading

import mido
from mido import MidiFile

from chuk_mcp_jam.errors import PlaybackUnavailable

logger = logging.getLogger(__name__)


class MidiPlayer:
    """
    Streams a MidiFile to a MIDI output port.

    The port is opened on first start() and kept until close().
    """

    def __init__(self, port_name: str | None = None):
        """
        Initialize the player.

        Args:
            port_name: Output port to open (default: the backend's default port)
        """
        self.port_name = port_name
        self._port = None
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()

    @property
    def is_playing(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, sequence: MidiFile) -> None:
        """
        Start streaming a sequence, replacing anything already playing.

        Raises:
            PlaybackUnavailable: If no output port can be opened
        """
        self.pause()
        port = self._open_port()

        self._stop.clear()
        self._thread = threading.Thread(
            target=self._stream,
            args=(sequence, port),
            name="jam-playback",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Playback started ({sequence.length:.1f}s)")

    def pause(self) -> None:
        """Stop streaming and silence held notes."""
        if not self.is_playing:
            return
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
        self._thread = None
        if self._port is not None:
            self._port.reset()
        logger.info("Playback stopped")

    def close(self) -> None:
        """Stop playback and release the port."""
        self.pause()
        if self._port is not None:
            self._port.close()
            self._port = None

    def _open_port(self):
        if self._port is None:
            # Each mido backend raises its own error types (rtmidi.SystemError, ...)
            try:
                self._port = mido.open_output(self.port_name)
            except Exception as e:
                raise PlaybackUnavailable(f"Cannot open MIDI output: {e}") from e
        return self._port

    def _stream(self, sequence: MidiFile, port) -> None:
        # Delta times are in seconds; the stop event doubles as the clock.
        for message in sequence:
            if self._stop.wait(message.time):
                break
            if not message.is_meta:
                port.send(message)

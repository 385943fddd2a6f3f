"""Abstract capture interfaces: contexts, devices and frame streams.

A backend implements these three classes. A context lists the devices it
knows about and opens them. A device reports its streams and controls and
starts streams. A stream hands out frames one at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from eyecam.buffer import Buffer
from eyecam.control import Descriptor as ControlDescriptor
from eyecam.descriptors import DeviceDescription, StreamDescriptor, StreamSettings

ControlState = None | str | bool | float


class Context(ABC):
    """Entry point of a backend: finds and opens capture devices."""

    @abstractmethod
    def devices(self) -> list[DeviceDescription]:
        """Return all devices currently available.

        Raises EyeError when the devices cannot be listed.
        """

    @abstractmethod
    def open_device(self, uri: str) -> Device:
        """Open the device named by ``uri``.

        Raises EyeError when the URI is invalid or the device cannot be opened.
        """


class Device(ABC):
    """An open capture device."""

    @abstractmethod
    def streams(self) -> list[StreamDescriptor]:
        """Return the streams the device supports."""

    @abstractmethod
    def start_stream(self, settings: StreamSettings) -> Stream:
        """Start a stream producing images as described by ``settings``."""

    @abstractmethod
    def controls(self) -> list[ControlDescriptor]:
        """Return the controls the device supports."""

    @abstractmethod
    def control(self, id: int) -> ControlState:
        """Return the current value of the control with identifier ``id``."""

    @abstractmethod
    def set_control(self, id: int, value: ControlState) -> None:
        """Set a control value.

        Raises EyeError when the value type does not fit the control or the
        device does not support setting it.
        """


class Stream(ABC):
    """A source of frames, handing out one buffer at a time.

    A buffer may borrow the stream's memory; it is only valid until the next
    frame is requested. Call ``Buffer.own()`` to keep it longer.

    Iterating over a stream yields frames until the stream ends.
    """

    @abstractmethod
    def next_buffer(self) -> Buffer | None:
        """Advance the stream and return the next frame.

        Returns None when the stream has ended; raises EyeError when a frame
        could not be captured.
        """

    def __iter__(self) -> Iterator[Buffer]:
        return self

    def __next__(self) -> Buffer:
        buffer = self.next_buffer()
        if buffer is None:
            raise StopIteration
        return buffer
"""Descriptions of devices and their image streams."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from eyecam.format import PixelFormat


@dataclass(frozen=True)
class DeviceDescription:
    """A capture device: unique resource identifier and product name."""

    uri: str
    product: str


@dataclass(frozen=True)
class StreamDescriptor:
    """An image stream: size in pixels, pixel format and frame interval."""

    width: int
    height: int
    pixfmt: PixelFormat
    interval: timedelta

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("stream dimensions must not be negative")
        if not isinstance(self.interval, timedelta):
            raise TypeError("interval must be a timedelta")
        if self.interval < timedelta(0):
            raise ValueError("frame interval must not be negative")


@dataclass(frozen=True)
class StreamSettings:
    """Settings for opening a stream; ``buffers_count`` None lets the backend choose."""

    desc: StreamDescriptor
    buffers_count: int | None = None

    def __post_init__(self) -> None:
        if self.buffers_count is not None and self.buffers_count < 0:
            raise ValueError("buffer count must not be negative")
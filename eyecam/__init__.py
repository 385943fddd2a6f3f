"""Camera capture interfaces, pixel formats, frame buffers and format-converting codecs."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "codec",
    "colorconvert",
    "control",
    "descriptors",
    "errors",
    "format",
    "hal",
]
"""Pixel and image format descriptions."""

from __future__ import annotations

from dataclasses import dataclass, replace

_CUSTOM = "Custom"
_DEPTH = "Depth"
_GRAY = "Gray"
_BGR = "Bgr"
_RGB = "Rgb"
_JPEG = "Jpeg"

_BIT_FAMILIES = frozenset({_DEPTH, _GRAY, _BGR, _RGB})
_FAMILIES = _BIT_FAMILIES | {_CUSTOM, _JPEG}


@dataclass(frozen=True)
class PixelFormat:
    """Describes how pixels are laid out.

    ``family`` is one of Custom, Depth, Gray, Bgr, Rgb or Jpeg. The
    uncompressed families carry the depth of a whole pixel in ``bits``;
    Custom carries an application defined ``name``.
    """

    family: str
    bits: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.family not in _FAMILIES:
            raise ValueError(f"unknown pixel format family: {self.family!r}")
        if self.family in _BIT_FAMILIES:
            if not isinstance(self.bits, int) or isinstance(self.bits, bool) or self.bits < 0:
                raise ValueError(f"{self.family} needs a non-negative bit depth")
            if self.name is not None:
                raise ValueError(f"{self.family} takes no name")
        elif self.family == _CUSTOM:
            if not isinstance(self.name, str):
                raise ValueError("Custom needs a name")
            if self.bits is not None:
                raise ValueError("Custom takes no bit depth")
        elif self.bits is not None or self.name is not None:
            raise ValueError("Jpeg takes no parameters")

    @classmethod
    def custom(cls, name: str) -> PixelFormat:
        return cls(_CUSTOM, name=name)

    @classmethod
    def depth(cls, bits: int) -> PixelFormat:
        return cls(_DEPTH, bits=bits)

    @classmethod
    def gray(cls, bits: int) -> PixelFormat:
        return cls(_GRAY, bits=bits)

    @classmethod
    def bgr(cls, bits: int) -> PixelFormat:
        return cls(_BGR, bits=bits)

    @classmethod
    def rgb(cls, bits: int) -> PixelFormat:
        return cls(_RGB, bits=bits)

    @classmethod
    def jpeg(cls) -> PixelFormat:
        return cls(_JPEG)

    def bit_depth(self) -> int | None:
        """Number of bits of a whole pixel, or None for custom and compressed formats."""
        return self.bits

    @classmethod
    def from_fourcc(cls, fourcc: bytes | str) -> PixelFormat:
        """Map a four character code to a pixel format.

        Unknown codes become custom formats named after the code.
        """
        code = fourcc.encode("utf-8") if isinstance(fourcc, str) else bytes(fourcc)
        if len(code) != 4:
            raise ValueError(f"a fourcc has four bytes, got {len(code)}")
        known = _FROM_FOURCC.get(code)
        if known is not None:
            return known
        return cls.custom(code.decode("utf-8"))

    def to_fourcc(self) -> bytes:
        """Return the four character code for this format.

        Raises ValueError when the format has no code.
        """
        if self.family == _CUSTOM:
            raw = self.name.encode("utf-8")
            if len(raw) > 4:
                raise ValueError(f"custom format {self.name!r} does not fit a fourcc")
            return raw.ljust(4, b"\0")
        code = _TO_FOURCC.get(self)
        if code is None:
            raise ValueError(f"no fourcc for pixel format {self}")
        return code

    def __str__(self) -> str:
        if self.family == _CUSTOM:
            return f'Custom("{self.name}")'
        if self.family == _JPEG:
            return _JPEG
        return f"{self.family}({self.bits})"


_FROM_FOURCC: dict[bytes, PixelFormat] = {
    b"GREY": PixelFormat.gray(8),
    b"Y16 ": PixelFormat.gray(16),
    b"Z16 ": PixelFormat.depth(16),
    b"BGR3": PixelFormat.bgr(24),
    b"RGB3": PixelFormat.rgb(24),
    b"MJPG": PixelFormat.jpeg(),
}

_TO_FOURCC: dict[PixelFormat, bytes] = {
    PixelFormat.gray(8): b"GREY",
    PixelFormat.gray(16): b"Y16 ",
    PixelFormat.depth(16): b"Z16 ",
    PixelFormat.bgr(24): b"BGR3",
    PixelFormat.rgb(24): b"RGB3",
    PixelFormat.rgb(32): b"AB24",
    PixelFormat.jpeg(): b"MJPG",
}


@dataclass(frozen=True)
class ImageFormat:
    """Image buffer format: size in pixels, pixel format and row length in bytes."""

    width: int
    height: int
    pixfmt: PixelFormat
    stride: int | None = None

    @classmethod
    def create(cls, width: int, height: int, pixfmt: PixelFormat) -> ImageFormat:
        """Build a format, deriving the stride from the pixel depth where known."""
        bits = pixfmt.bit_depth()
        stride = width * (bits // 8) if bits is not None else None
        return cls(width, height, pixfmt, stride)

    def with_stride(self, stride: int) -> ImageFormat:
        """Return a copy with the given row length in bytes."""
        return replace(self, stride=stride)
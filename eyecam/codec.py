"""Frame codecs that convert buffers between pixel formats."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image

from eyecam.buffer import Buffer
from eyecam.errors import CodecError, CodecErrorKind
from eyecam.format import ImageFormat, PixelFormat


@dataclass(frozen=True)
class Parameters:
    """Codec parameters used for instantiation."""

    pixfmt: PixelFormat
    width: int
    height: int


class Codec(ABC):
    """A configured converter from one pixel format to another."""

    def __init__(self, inparams: Parameters, outparams: Parameters) -> None:
        self.inparams = inparams
        self.outparams = outparams

    @abstractmethod
    def decode(self, inbuf: Buffer) -> Buffer:
        """Convert the input buffer and return the converted frame.

        Raises CodecError when the frame cannot be converted.
        """


class Blueprint(ABC):
    """Describes a codec's capabilities and builds configured instances."""

    def instantiate(self, inparams: Parameters, outparams: Parameters) -> Codec:
        """Build a codec for the given input and output parameters.

        Raises CodecError when the formats are not supported or the sizes differ.
        """
        if inparams.pixfmt not in self.src_fmts() or outparams.pixfmt not in self.dst_fmts():
            raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)
        if inparams.width != outparams.width or inparams.height != outparams.height:
            raise CodecError(CodecErrorKind.INVALID_PARAM)
        return self._create(inparams, outparams)

    @abstractmethod
    def _create(self, inparams: Parameters, outparams: Parameters) -> Codec:
        """Build the codec once the parameters have been checked."""

    @abstractmethod
    def src_fmts(self) -> list[PixelFormat]:
        """All accepted input formats."""

    @abstractmethod
    def dst_fmts(self) -> list[PixelFormat]:
        """All produced output formats."""


class RgbCodec(Codec):
    """Converts packed RGB24 frames to BGR24."""

    def decode(self, inbuf: Buffer) -> Buffer:
        if (self.inparams.pixfmt, self.outparams.pixfmt) != (
            PixelFormat.rgb(24),
            PixelFormat.bgr(24),
        ):
            raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)
        fmt = ImageFormat(self.inparams.width, self.inparams.height, self.inparams.pixfmt)
        return Buffer(convert_to_bgr(inbuf.as_bytes(), fmt))


class RgbBlueprint(Blueprint):
    """Blueprint of the RGB24 to BGR24 converter."""

    def _create(self, inparams: Parameters, outparams: Parameters) -> Codec:
        return RgbCodec(inparams, outparams)

    def src_fmts(self) -> list[PixelFormat]:
        return [PixelFormat.rgb(24)]

    def dst_fmts(self) -> list[PixelFormat]:
        return [PixelFormat.bgr(24)]


class JpegCodec(Codec):
    """Decodes JPEG frames to packed RGB24."""

    def decode(self, inbuf: Buffer) -> Buffer:
        if (self.inparams.pixfmt, self.outparams.pixfmt) != (
            PixelFormat.jpeg(),
            PixelFormat.rgb(24),
        ):
            raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)
        return Buffer(convert_to_rgb(inbuf.as_bytes()))


class JpegBlueprint(Blueprint):
    """Blueprint of the JPEG to RGB24 decoder."""

    def _create(self, inparams: Parameters, outparams: Parameters) -> Codec:
        return JpegCodec(inparams, outparams)

    def src_fmts(self) -> list[PixelFormat]:
        return [PixelFormat.jpeg()]

    def dst_fmts(self) -> list[PixelFormat]:
        return [PixelFormat.rgb(24)]


def blueprints() -> list[Blueprint]:
    """Return all available codec blueprints."""
    return [RgbBlueprint(), JpegBlueprint()]


def convert_to_bgr(src: bytes | bytearray | memoryview, src_fmt: ImageFormat) -> bytes:
    """Convert a packed RGB24 image to BGR24.

    Raises CodecError when ``src`` is too short for the image size.
    """
    size = src_fmt.width * src_fmt.height * 3
    data = bytes(src)
    if len(data) < size:
        raise CodecError(CodecErrorKind.INVALID_BUFFER)
    data = data[:size]
    out = bytearray(size)
    out[0::3] = data[2::3]
    out[1::3] = data[1::3]
    out[2::3] = data[0::3]
    return bytes(out)


def convert_to_rgb(src: bytes | bytearray | memoryview) -> bytes:
    """Decode a JPEG image to packed RGB24 bytes.

    Raises CodecError when the data is not a decodable colour JPEG.
    """
    try:
        with Image.open(io.BytesIO(bytes(src))) as image:
            if image.format != "JPEG":
                raise CodecError(CodecErrorKind.OTHER, "failed to decode JPEG")
            image.load()
            if image.mode != "RGB":
                raise CodecError(CodecErrorKind.OTHER, "cannot handle JPEG format")
            return image.tobytes()
    except (OSError, SyntaxError, ValueError) as exc:
        raise CodecError(CodecErrorKind.OTHER, "failed to decode JPEG") from exc
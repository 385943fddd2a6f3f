"""Devices that transparently convert frames into formats the hardware lacks."""

from __future__ import annotations

from dataclasses import replace

from eyecam import codec as codecs
from eyecam.buffer import Buffer
from eyecam.control import Descriptor as ControlDescriptor
from eyecam.descriptors import StreamDescriptor, StreamSettings
from eyecam.errors import CodecError, EyeError, ErrorKind
from eyecam.hal import Context, ControlState, Device, Stream


class CodecStream(Stream):
    """A stream that passes every frame of another stream through a codec."""

    def __init__(self, inner: Stream, codec: codecs.Codec) -> None:
        self.inner = inner
        self.codec = codec

    def next_buffer(self) -> Buffer | None:
        inbuf = self.inner.next_buffer()
        if inbuf is None:
            return None
        return self.codec.decode(inbuf)


class ConvertingDevice(Device):
    """Wraps a device and offers extra streams produced by format conversion."""

    def __init__(self, inner: Device) -> None:
        self.inner = inner

    @classmethod
    def open(cls, context: Context, uri: str) -> ConvertingDevice:
        """Open the device named by ``uri`` through ``context`` and wrap it."""
        return cls(context.open_device(uri))

    def streams(self) -> list[StreamDescriptor]:
        streams = self.inner.streams()
        for blueprint in codecs.blueprints():
            for src, dst in zip(blueprint.src_fmts(), blueprint.dst_fmts()):
                formats = {stream.pixfmt for stream in streams}
                if src in formats and dst not in formats:
                    streams.extend(
                        replace(stream, pixfmt=dst)
                        for stream in [s for s in streams if s.pixfmt == src]
                    )
        return streams

    def start_stream(self, settings: StreamSettings) -> Stream:
        desc = settings.desc
        native_streams = self.inner.streams()
        native_formats = [stream.pixfmt for stream in native_streams]
        if desc.pixfmt in native_formats:
            return self.inner.start_stream(settings)

        candidates = [bp for bp in codecs.blueprints() if desc.pixfmt in bp.dst_fmts()]
        src_fmt = next(
            (fmt for bp in candidates for fmt in bp.src_fmts() if fmt in native_formats),
            None,
        )
        if src_fmt is None:
            raise EyeError(ErrorKind.OTHER, "no codec blueprint for native pixfmt")

        blueprint = next((bp for bp in candidates if src_fmt in bp.src_fmts()), None)
        if blueprint is None:
            raise EyeError(
                ErrorKind.OTHER, f"no codec blueprint for {src_fmt} -> {desc.pixfmt}"
            )

        try:
            codec = blueprint.instantiate(
                codecs.Parameters(src_fmt, desc.width, desc.height),
                codecs.Parameters(desc.pixfmt, desc.width, desc.height),
            )
        except CodecError as exc:
            raise EyeError(ErrorKind.OTHER, "failed to create codec instance") from exc

        native_stream = self.inner.start_stream(
            StreamSettings(replace(desc, pixfmt=src_fmt), settings.buffers_count)
        )
        return CodecStream(native_stream, codec)

    def controls(self) -> list[ControlDescriptor]:
        return self.inner.controls()

    def control(self, id: int) -> ControlState:
        return self.inner.control(id)

    def set_control(self, id: int, value: ControlState) -> None:
        self.inner.set_control(id, value)
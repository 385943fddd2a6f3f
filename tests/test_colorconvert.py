import io
from datetime import timedelta

import pytest
from PIL import Image

from eyecam.buffer import Buffer
from eyecam.codec import convert_to_bgr, convert_to_rgb
from eyecam.colorconvert import CodecStream, ConvertingDevice
from eyecam.control import Boolean, Descriptor, Flags
from eyecam.descriptors import DeviceDescription, StreamDescriptor, StreamSettings
from eyecam.errors import CodecError, EyeError, ErrorKind
from eyecam.format import ImageFormat, PixelFormat
from eyecam.hal import Context, Device, Stream

RGB24 = PixelFormat.rgb(24)
BGR24 = PixelFormat.bgr(24)
JPEG = PixelFormat.jpeg()
INTERVAL = timedelta(milliseconds=33)


class FakeStream(Stream):
    def __init__(self, frames):
        self.frames = list(frames)

    def next_buffer(self):
        if not self.frames:
            return None
        return Buffer(self.frames.pop(0))


class FakeDevice(Device):
    def __init__(self, streams, frames=()):
        self._streams = list(streams)
        self.frames = list(frames)
        self.started = []
        self.values = {1: True}

    def streams(self):
        return list(self._streams)

    def start_stream(self, settings):
        self.started.append(settings)
        return FakeStream(self.frames)

    def controls(self):
        return [Descriptor(1, "Switch", Boolean(), Flags.READ | Flags.WRITE)]

    def control(self, id):
        if id not in self.values:
            raise EyeError(ErrorKind.OTHER, "unknown control ID")
        return self.values[id]

    def set_control(self, id, value):
        self.values[id] = value


class FakeContext(Context):
    def __init__(self, device):
        self.device = device

    def devices(self):
        return [DeviceDescription("fake://0", "Fake camera")]

    def open_device(self, uri):
        if uri != "fake://0":
            raise EyeError(ErrorKind.OTHER, "invalid URI")
        return self.device


def _desc(pixfmt, width=2, height=1):
    return StreamDescriptor(width, height, pixfmt, INTERVAL)


def _jpeg(size, color):
    out = io.BytesIO()
    Image.new("RGB", size, color).save(out, format="JPEG")
    return out.getvalue()


def test_streams_adds_bgr_for_rgb():
    native = [_desc(RGB24, 2, 1), _desc(RGB24, 4, 2)]
    dev = ConvertingDevice(FakeDevice(native))
    streams = dev.streams()
    assert streams[:2] == native
    assert streams[2:] == [_desc(BGR24, 2, 1), _desc(BGR24, 4, 2)]


def test_streams_no_duplicate_when_native():
    native = [_desc(RGB24), _desc(BGR24)]
    assert ConvertingDevice(FakeDevice(native)).streams() == native


def test_streams_from_jpeg_adds_rgb_only():
    dev = ConvertingDevice(FakeDevice([_desc(JPEG)]))
    assert [s.pixfmt for s in dev.streams()] == [JPEG, RGB24]


def test_start_stream_native_passes_through():
    inner = FakeDevice([_desc(RGB24)], frames=[b"\x01\x02\x03\x04\x05\x06"])
    settings = StreamSettings(_desc(RGB24), 3)
    stream = ConvertingDevice(inner).start_stream(settings)
    assert not isinstance(stream, CodecStream)
    assert inner.started == [settings]
    assert stream.next_buffer() == b"\x01\x02\x03\x04\x05\x06"


def test_start_stream_converts_rgb_to_bgr():
    frames = [bytes(range(6)), bytes(range(10, 16))]
    inner = FakeDevice([_desc(RGB24)], frames=frames)
    stream = ConvertingDevice(inner).start_stream(StreamSettings(_desc(BGR24), 2))
    assert isinstance(stream, CodecStream)
    assert inner.started == [StreamSettings(_desc(RGB24), 2)]
    fmt = ImageFormat.create(2, 1, RGB24)
    got = [bytes(buf) for buf in stream]
    assert got == [convert_to_bgr(frame, fmt) for frame in frames]
    assert stream.next_buffer() is None


def test_start_stream_decodes_jpeg():
    frame = _jpeg((2, 1), (255, 0, 0))
    inner = FakeDevice([_desc(JPEG)], frames=[frame])
    stream = ConvertingDevice(inner).start_stream(StreamSettings(_desc(RGB24)))
    assert inner.started[0].desc.pixfmt == JPEG
    assert inner.started[0].buffers_count is None
    assert stream.next_buffer() == convert_to_rgb(frame)


def test_start_stream_unsupported_target():
    dev = ConvertingDevice(FakeDevice([_desc(RGB24)]))
    with pytest.raises(EyeError) as info:
        dev.start_stream(StreamSettings(_desc(PixelFormat.gray(8))))
    assert str(info.value) == "no codec blueprint for native pixfmt"
    assert info.value.kind is ErrorKind.OTHER


def test_codec_stream_propagates_codec_error():
    inner = FakeDevice([_desc(RGB24)], frames=[b"\x00"])
    stream = ConvertingDevice(inner).start_stream(StreamSettings(_desc(BGR24)))
    with pytest.raises(CodecError):
        stream.next_buffer()


def test_controls_delegate():
    inner = FakeDevice([])
    dev = ConvertingDevice(inner)
    assert dev.controls() == inner.controls()
    assert dev.control(1) is True
    dev.set_control(1, False)
    assert inner.values[1] is False
    assert dev.control(1) is False
    with pytest.raises(EyeError):
        dev.control(99)


def test_open_through_context():
    inner = FakeDevice([_desc(RGB24)])
    dev = ConvertingDevice.open(FakeContext(inner), "fake://0")
    assert dev.inner is inner
    with pytest.raises(EyeError):
        ConvertingDevice.open(FakeContext(inner), "other://1")
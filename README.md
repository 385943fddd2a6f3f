# eyecam

Camera capture building blocks: device and stream descriptions, controls,
pixel formats, frame buffers and codecs that convert frames on the fly.

The package defines the interfaces a capture backend implements, and a
device wrapper that makes extra pixel formats available by converting frames
as they arrive.

## Installation

```
pip install eyecam
```

For running the tests:

```
pip install "eyecam[test]"
pytest
```

## Concepts

- `eyecam.hal.Context` (abstract) lists devices with `devices()` and opens
  one by URI with `open_device(uri)`.
- `eyecam.hal.Device` (abstract) reports its `streams()` and `controls()`,
  reads and writes control values with `control(id)` and
  `set_control(id, value)`, and starts a capture stream with
  `start_stream(settings)`. A control value is `None`, a `str`, a `bool` or a
  `float`.
- `eyecam.hal.Stream` (abstract) hands out one frame at a time via
  `next_buffer()`, which returns `None` once the stream has ended. A stream is
  also an iterator: `for frame in stream: ...` runs until it ends.
- `eyecam.buffer.Buffer` holds a frame. Built from `bytes` it owns its data;
  built from a `bytearray` or `memoryview` it borrows that memory without
  copying. `as_bytes()` gives the raw data, `own()` returns a buffer that owns
  a copy, `is_owned()` tells which kind it is, and `into_bytes()` iterates
  over the byte values.
- `eyecam.format.PixelFormat` describes pixel layouts
  (`PixelFormat.rgb(24)`, `PixelFormat.gray(8)`, `PixelFormat.jpeg()`,
  `PixelFormat.custom("YUYV")`, …). `bit_depth()` gives bits per pixel, and
  `from_fourcc` / `to_fourcc` map to and from four character codes such as
  `b"RGB3"` or `b"MJPG"`; unknown codes become custom formats.
- `eyecam.format.ImageFormat.create(width, height, pixfmt)` derives the row
  stride from the pixel depth; `with_stride(stride)` overrides it.
- `eyecam.descriptors` holds `DeviceDescription` (uri, product),
  `StreamDescriptor` (width, height, pixfmt, interval as a `timedelta`) and
  `StreamSettings` (a descriptor and an optional buffer count).
- `eyecam.control.Descriptor` describes a control: `id`, `name`, a `kind`
  (`Stateless`, `Boolean`, `Number`, `Text`, `Bitmask` or `Menu`) and
  `Flags`; `readable()` and `writable()` check the flags.
- Errors are raised as `eyecam.errors.EyeError` (with an `ErrorKind`) on the
  device side and `eyecam.errors.CodecError` (with a `CodecErrorKind`) on the
  conversion side.

## Format conversion

`eyecam.colorconvert.ConvertingDevice` wraps any `Device`. Its `streams()`
lists the native streams plus every stream a codec can produce from them:
BGR24 from RGB24, and RGB24 from JPEG. Starting a stream in a native format
goes straight to the wrapped device; otherwise the native stream is started
and a `CodecStream` converts each frame as it arrives.

```python
from eyecam.colorconvert import ConvertingDevice
from eyecam.descriptors import StreamSettings
from eyecam.format import PixelFormat

device = ConvertingDevice.open(context, uri)  # context: an eyecam.hal.Context
wanted = next(s for s in device.streams() if s.pixfmt == PixelFormat.bgr(24))
stream = device.start_stream(StreamSettings(desc=wanted))

for frame in stream:
    print(len(frame.as_bytes()))
```

The codecs can also be used on their own:

```python
from eyecam.codec import convert_to_bgr, convert_to_rgb
from eyecam.format import ImageFormat, PixelFormat

fmt = ImageFormat.create(2, 1, PixelFormat.rgb(24))
bgr = convert_to_bgr(bytes([1, 2, 3, 4, 5, 6]), fmt)   # b"\x03\x02\x01\x06\x05\x04"
rgb = convert_to_rgb(jpeg_bytes)                        # decoded RGB24 pixels
```

`eyecam.codec.blueprints()` returns every codec blueprint (`RgbBlueprint`,
`JpegBlueprint`), each reporting its `src_fmts()` and `dst_fmts()` and
building a configured codec with `instantiate(inparams, outparams)`.

## What it does not do

eyecam ships no capture backend. It does not talk to cameras, operating
system video interfaces or USB devices itself, and it has no command-line
tool. To capture real frames, implement `eyecam.hal.Context`,
`eyecam.hal.Device` and `eyecam.hal.Stream` for your platform; everything
else in the package, including format conversion, works on top of them.
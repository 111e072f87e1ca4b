import base64
import io
import json
import struct
import zlib

import pytest
from PIL import Image

from styleai import gemini


def make_data_uri(size: tuple[int, int] = (8, 8), fmt: str = "PNG", mime_type: str = "image/png") -> str:
    buf = io.BytesIO()
    Image.new("RGB", size, "red").save(buf, format=fmt)
    return f"data:{mime_type};base64,{base64.b64encode(buf.getvalue()).decode('ascii')}"


def _png_chunk(tag: bytes, body: bytes) -> bytes:
    return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", zlib.crc32(tag + body))


def make_bomb_data_uri(width: int = 30000, height: int = 30000) -> str:
    """A tiny PNG whose header claims a huge canvas."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    png = (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", zlib.compress(b""))
        + _png_chunk(b"IEND", b"")
    )
    return f"data:image/png;base64,{base64.b64encode(png).decode('ascii')}"


def make_truncated_jpeg_data_uri(size: tuple[int, int] = (2048, 2048)) -> str:
    buf = io.BytesIO()
    Image.effect_noise(size, 64).convert("RGB").save(buf, format="JPEG", quality=90)
    data = buf.getvalue()[:20000]
    return f"data:image/jpeg;base64,{base64.b64encode(data).decode('ascii')}"


class FakeGemini:
    """Stands in for gemini.generate: records every call, replays a canned answer."""

    def __init__(self) -> None:
        self.calls: list[list] = []
        self.response: str = "{}"
        self.error: Exception | None = None

    def respond_with(self, payload) -> None:
        self.response = payload if isinstance(payload, str) else json.dumps(payload)

    async def __call__(self, contents, model=None) -> str:
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def photo_uri() -> str:
    return make_data_uri()


@pytest.fixture
def make_photo():
    return make_data_uri


@pytest.fixture
def fake_gemini(monkeypatch) -> FakeGemini:
    fake = FakeGemini()
    monkeypatch.setattr(gemini, "generate", fake)
    return fake


@pytest.fixture
def bomb_photo_uri() -> str:
    return make_bomb_data_uri()


@pytest.fixture
def truncated_photo_uri() -> str:
    return make_truncated_jpeg_data_uri()

import base64

import pytest

from styleai.config import MAX_DIMENSION, MAX_PHOTO_BYTES
from styleai.media import DataUri, parse_data_uri, prepare_for_upload


def test_parse_valid_png(make_photo):
    photo = parse_data_uri(make_photo())
    assert photo.mime_type == "image/png"
    assert photo.size > 0
    assert photo.data.startswith(b"\x89PNG")


def test_parse_jpeg_with_extra_params(make_photo):
    uri = make_photo(fmt="JPEG", mime_type="image/jpeg").replace(";base64,", ";name=shirt.jpg;base64,")
    assert parse_data_uri(uri).mime_type == "image/jpeg"


def test_round_trips_through_to_uri(make_photo):
    photo = parse_data_uri(make_photo())
    assert parse_data_uri(photo.to_uri()) == photo


def test_rejects_missing_media_type_prefix(make_photo):
    raw = make_photo().split(",", 1)[1]
    with pytest.raises(ValueError, match="data URI"):
        parse_data_uri(raw)


def test_rejects_unsupported_type(make_photo):
    uri = make_photo(fmt="GIF", mime_type="image/gif")
    with pytest.raises(ValueError, match="Unsupported image type"):
        parse_data_uri(uri)


def test_rejects_invalid_base64():
    with pytest.raises(ValueError, match="Invalid base64"):
        parse_data_uri("data:image/png;base64,not*base64!")


def test_rejects_empty_payload():
    with pytest.raises(ValueError, match="empty"):
        parse_data_uri("data:image/png;base64,")


def test_rejects_non_image_payload():
    payload = base64.b64encode(b"definitely not a picture").decode("ascii")
    with pytest.raises(ValueError, match="not a readable image"):
        parse_data_uri(f"data:image/png;base64,{payload}")


def test_rejects_oversized_photo():
    payload = base64.b64encode(b"\0" * (MAX_PHOTO_BYTES + 1)).decode("ascii")
    with pytest.raises(ValueError, match="too large"):
        parse_data_uri(f"data:image/png;base64,{payload}")


def test_prepare_keeps_small_images(make_photo):
    photo = parse_data_uri(make_photo(size=(16, 16)))
    assert prepare_for_upload(photo) is photo


def test_prepare_shrinks_large_images(make_photo):
    photo = parse_data_uri(make_photo(size=(MAX_DIMENSION * 2, MAX_DIMENSION)))
    prepared = prepare_for_upload(photo)
    assert isinstance(prepared, DataUri)
    assert prepared.mime_type == "image/jpeg"
    assert parse_data_uri(prepared.to_uri()).mime_type == "image/jpeg"


def test_rejects_decompression_bomb(bomb_photo_uri):
    with pytest.raises(ValueError, match="not a readable image"):
        parse_data_uri(bomb_photo_uri)


def test_rejects_truncated_jpeg(truncated_photo_uri):
    with pytest.raises(ValueError, match="not a readable image"):
        parse_data_uri(truncated_photo_uri)


def test_rejects_content_that_does_not_match_declared_type(make_photo):
    uri = make_photo(fmt="JPEG", mime_type="image/png")
    with pytest.raises(ValueError, match="does not match"):
        parse_data_uri(uri)

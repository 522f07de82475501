import pytest

from captionkit import InvalidIdentifier, extract_video_id, is_youtube_url


@pytest.mark.parametrize("value", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "http://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=abc",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ?start=10",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    "dQw4w9WgXcQ",
    "  dQw4w9WgXcQ\n",
])
def test_extract_video_id_supported_shapes(value):
    assert extract_video_id(value) == "dQw4w9WgXcQ"


def test_extract_video_id_keeps_dash_and_underscore():
    assert extract_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"


@pytest.mark.parametrize("value", [
    "",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "https://vimeo.com/123456",
    "dQw4w9WgXc",
    "dQw4w9WgXcQQ",
    "https://www.youtube.com/watch?v=short",
    "not a url at all",
])
def test_extract_video_id_rejects_unknown_shapes(value):
    with pytest.raises(InvalidIdentifier):
        extract_video_id(value)


def test_invalid_identifier_is_value_error():
    with pytest.raises(ValueError):
        extract_video_id("nope")


def test_is_youtube_url():
    assert is_youtube_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    assert not is_youtube_url("https://example.com/video")

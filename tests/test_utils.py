import io
import json

import pytest
from PIL import Image

from utils.image_utils import encode_data_url, decode_data_url, describe_photo
from utils.config_utils import load_dynamic_config, DEFAULT_CONFIG
from client.photo import PhotoFile


def create_test_image(width: int = 4, height: int = 3, format: str = "PNG") -> bytes:
    """Create a small solid-colour image as bytes"""
    img = Image.new("RGB", (width, height), (200, 180, 160))
    buffer = io.BytesIO()
    img.save(buffer, format=format)
    return buffer.getvalue()


class TestDataUrls:
    """Tests for data URL helpers"""

    def test_encode_then_decode(self):
        data_url = encode_data_url(b"abc", "image/png")
        assert data_url == "data:image/png;base64,YWJj"
        assert decode_data_url(data_url) == ("image/png", b"abc")

    def test_decode_without_header(self):
        assert decode_data_url("YWJj") == (None, b"abc")

    def test_decode_invalid_payload(self):
        with pytest.raises(ValueError):
            decode_data_url("data:image/png;base64,@@@")

    def test_photo_file_from_path(self, tmp_path):
        path = tmp_path / "face.png"
        path.write_bytes(create_test_image())
        photo = PhotoFile.from_path(str(path))
        assert photo.content_type == "image/png"
        assert photo.size == path.stat().st_size
        assert photo.to_data_url().startswith("data:image/png;base64,iVBOR")


class TestDescribePhoto:
    """Tests for the read-only photo summary"""

    def test_png(self):
        assert describe_photo(encode_data_url(create_test_image(), "image/png")) == "PNG 4x3"

    def test_jpeg(self):
        image = create_test_image(10, 20, "JPEG")
        assert describe_photo(encode_data_url(image, "image/jpeg")) == "JPEG 10x20"

    @pytest.mark.parametrize("data_url", ["data:image/png;base64,AAA=", "data:image/png;base64,%%%"])
    def test_unreadable(self, data_url):
        assert describe_photo(data_url) == "unreadable image"

    def test_missing(self):
        assert describe_photo(None) == "no photo"


class TestDynamicConfig:
    """Tests for the optional client timing overrides"""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_dynamic_config(tmp_path / "config.json") == DEFAULT_CONFIG

    def test_overrides_applied(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"SUCCESS_MESSAGE_SECONDS": 1.5, "UNKNOWN": 9}))
        config = load_dynamic_config(path)
        assert config["SUCCESS_MESSAGE_SECONDS"] == 1.5
        assert config["DELETE_MESSAGE_SECONDS"] == DEFAULT_CONFIG["DELETE_MESSAGE_SECONDS"]
        assert "UNKNOWN" not in config

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"DELETE_MESSAGE_SECONDS": "soon"}'])
    def test_bad_content_ignored(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content)
        assert load_dynamic_config(path) == DEFAULT_CONFIG

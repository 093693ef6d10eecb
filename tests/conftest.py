import pytest
from PIL import Image


@pytest.fixture
def lens_page():
    """Build a minimal Lens results page around a ds:1 data literal."""
    def _page(data: str) -> str:
        return (
            "<html><body>"
            "<script nonce=\"abc\">AF_initDataCallback({key: 'ds:0', data: [1]});</script>"
            f"<script nonce=\"abc\">AF_initDataCallback({{key: 'ds:1', hash: '2', data: {data}, sideChannel: {{}}}});</script>"
            "</body></html>"
        )
    return _page


@pytest.fixture
def lens_ok_html(lens_page):
    return lens_page('[0,0,0,[0,0,0,0,[["Hello","World"]]]]')


@pytest.fixture
def rgba_image():
    return Image.new("RGBA", (64, 32), (255, 255, 255, 255))

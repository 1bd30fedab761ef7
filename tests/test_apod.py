import io
from unittest import mock

import pytest

from puzzlebox.collage import apod

PAGES = {
    "http://archive.example.com/apod/archivepix.html": (
        b"<a href=\"ap240101.html\">one</a>\n"
        b"nothing here\n"
        b"<a href=\"AP240102.HTML\">two</a>\n"
    ),
    "http://archive.example.com/apod/ap240101.html": b'<img src="image/2401/a.jpg">\n',
    "http://archive.example.com/apod/AP240102.HTML": (
        b'<IMG SRC="image/2401/b.png">\nplain\n'
    ),
}


class _Response(io.BytesIO):
    def __init__(self, data, status=200):
        super().__init__(data)
        self.status = status
        self.reason = "Not Found" if status != 200 else "OK"


def _fake_open(url):
    if url in PAGES:
        return _Response(PAGES[url])
    return _Response(b"", status=404)


def test_scrape_collects_first_group():
    with mock.patch.object(apod, "urlopen", _fake_open):
        links = apod.scrape(
            "http://archive.example.com/apod/archivepix.html", apod.PAGE_PATTERN
        )
    assert links == ["ap240101.html", "AP240102.HTML"]


def test_scrape_image_urls():
    with mock.patch.object(apod, "urlopen", _fake_open):
        urls = list(
            apod.scrape_image_urls("http://archive.example.com/apod/archivepix.html")
        )
    assert urls == [
        "http://archive.example.com/apod/image/2401/a.jpg",
        "http://archive.example.com/apod/image/2401/b.png",
    ]


def test_scrape_bad_status():
    with mock.patch.object(apod, "urlopen", _fake_open):
        with pytest.raises(OSError, match="404"):
            apod.scrape("http://archive.example.com/missing", apod.IMAGE_PATTERN)
from PIL import Image

from puzzlebox.collage.bargraph import Bar, BarGraph
from puzzlebox.collage.images import Imgres
from puzzlebox.collage.render import Imgloc, build_collage, layout, write_collage_png


def _make(tmp_path, name, size, colour):
    path = tmp_path / name
    Image.new("RGBA", size, colour).save(path)
    return Imgres(str(path), size[0], size[1])


def _images(tmp_path):
    return [
        _make(tmp_path, "a.png", (10, 10), (255, 0, 0, 255)),
        _make(tmp_path, "b.png", (10, 20), (0, 255, 0, 255)),
        _make(tmp_path, "c.png", (10, 10), (0, 0, 255, 255)),
    ]


def test_layout_positions(tmp_path):
    images = _images(tmp_path)
    locations, bars = layout(2, images)
    assert locations == [
        Imgloc(images[0], 0, 0),
        Imgloc(images[1], 10, 0),
        Imgloc(images[2], 0, 10),
    ]
    assert bars == BarGraph([Bar(w=20, h=20)])


def test_build_collage_pixels(tmp_path):
    images = _images(tmp_path)
    collage = build_collage(2, images)
    assert collage.size == (20, 20)
    assert collage.getpixel((5, 5)) == (255, 0, 0, 255)
    assert collage.getpixel((15, 15)) == (0, 255, 0, 255)
    assert collage.getpixel((5, 15)) == (0, 0, 255, 255)


def test_write_collage_png_round_trip(tmp_path):
    images = _images(tmp_path)
    out = tmp_path / "out.png"
    write_collage_png(out, 2, images)
    with Image.open(out) as written:
        assert written.format == "PNG"
        assert written.size == (20, 20)
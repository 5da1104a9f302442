import pytest

from cubrender.textures import TextureSet, frame_from_buffer, load_texture, mirror_rows
from cubrender.xpm import XpmError, load_xpm_file


def _write_xpm(path, first, second):
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        '"3 2 2 1",\n'
        f'"a c {first}",\n'
        f'"b c {second}",\n'
        '"abb",\n'
        '"bba"\n'
        "};\n"
    )
    return path


def test_mirror_rows_reads_reversed_index():
    pixels = list(range(10, 22))
    width, height = 4, 3
    out = mirror_rows(pixels, width, height)
    assert len(out) == width * height
    for y in range(height):
        for x in range(width):
            src = width * y + width - x
            expected = pixels[src] if src < len(pixels) else 0
            assert out[y * width + x] == expected


def test_mirror_rows_last_pixel_past_end_is_zero():
    out = mirror_rows([5, 6, 7, 8], 2, 2)
    assert out[2] == 0
    assert out[1] == 6


def test_load_texture_mirrors(tmp_path):
    path = _write_xpm(tmp_path / "wall.xpm", "#FF0000", "#00FF00")
    raw = load_xpm_file(path)
    tex = load_texture(path)
    assert (tex.width, tex.height) == (3, 2)
    assert tex.pixels == mirror_rows(raw.pixels, 3, 2)
    assert tex.pixel(1, 0) == raw.pixel(2, 0)


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "absent.xpm")


def test_load_texture_bad_data(tmp_path):
    path = tmp_path / "bad.xpm"
    path.write_text('"0 0 0 0"')
    with pytest.raises(XpmError):
        load_texture(path)


def test_texture_set_order(tmp_path):
    colours = ["#000001", "#000002", "#000003", "#000004", "#000005"]
    paths = [_write_xpm(tmp_path / f"t{i}.xpm", c, c) for i, c in enumerate(colours)]
    textures = TextureSet.load(*paths)
    assert [t.pixel(1, 0) for t in textures] == [1, 2, 3, 4, 5]
    assert textures.east.pixel(1, 0) == 3


def test_frame_from_buffer_layout():
    buf = [[1, 2, 3], [4, 5, 6]]
    frame = frame_from_buffer(buf, 3, 2)
    assert len(frame) == 6
    assert frame[0] == 0
    assert frame[1:4] == [3, 2, 1]
    assert frame[4:6] == [6, 5]
import pytest

from cubrender.scene import SceneConfig, SceneError, pack_rgb

FULL = [
    "R 640 480",
    "NO ./north.xpm",
    "SO ./south.xpm",
    "WE ./west.xpm",
    "EA ./east.xpm",
    "S ./sprite.xpm",
    "F 220,100,0",
    "C 225,30,0",
]


def test_pack_rgb_red():
    assert pack_rgb(255, 0, 0) == 0xFF0000


def test_pack_rgb_channels_roundtrip():
    value = pack_rgb(12, 34, 56)
    assert ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF) == (12, 34, 56)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_pack_rgb_out_of_range(channels):
    with pytest.raises(SceneError) as info:
        pack_rgb(*channels)
    assert info.value.code == 10


def test_resolution_line():
    cfg = SceneConfig()
    assert cfg.feed_line("R 640 480\n") is True
    assert (cfg.width, cfg.height) == (640, 480)


def test_path_lines():
    cfg = SceneConfig()
    cfg.feed_line("NO ./north.xpm")
    cfg.feed_line("SO\t./south.xpm  ")
    cfg.feed_line("S ./sprite.xpm")
    assert cfg.north == "./north.xpm"
    assert cfg.south == "./south.xpm"
    assert cfg.sprite == "./sprite.xpm"


def test_floor_and_ceiling():
    cfg = SceneConfig()
    cfg.feed_line("F 220,100,0")
    cfg.feed_line("C 225, 30, 0")
    assert cfg.floor == pack_rgb(220, 100, 0)
    assert cfg.ceiling == pack_rgb(225, 30, 0)


def test_colour_out_of_range():
    with pytest.raises(SceneError) as info:
        SceneConfig().feed_line("F 256,0,0")
    assert info.value.code == 10


@pytest.mark.parametrize("line", ["F 1,,2,3", "C 1 ,2,3"])
def test_misplaced_comma(line):
    with pytest.raises(SceneError) as info:
        SceneConfig().feed_line(line)
    assert info.value.code == 10


def test_trailing_text():
    with pytest.raises(SceneError) as info:
        SceneConfig().feed_line("F 1,2,3x")
    assert info.value.code == 11


def test_unknown_line_is_ignored():
    cfg = SceneConfig()
    assert cfg.feed_line("   ") is True
    assert cfg == SceneConfig()


def test_complete_after_all_identifiers():
    cfg = SceneConfig()
    for line in FULL:
        cfg.feed_line(line)
    assert cfg.is_complete()
    assert cfg.feed_line("F 1,2,3") is False
    assert cfg.floor == pack_rgb(220, 100, 0)


def test_sprite_not_required():
    cfg = SceneConfig()
    for line in FULL:
        if not line.startswith("S "):
            cfg.feed_line(line)
    assert cfg.is_complete()


def test_feed_lines_returns_remainder():
    cfg = SceneConfig()
    rest = cfg.feed_lines([*FULL, "", "111", "101", "111"])
    assert rest == ["", "111", "101", "111"]
    assert cfg.east == "./east.xpm"


def test_feed_lines_incomplete():
    cfg = SceneConfig()
    assert cfg.feed_lines(FULL[:3]) == []
    assert not cfg.is_complete()
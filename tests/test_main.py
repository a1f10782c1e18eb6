"""Command-line entry point exit codes."""

from unittest.mock import patch

import pytest

import main
from test_schedule import GOOD


@pytest.fixture
def fake_app():
    with patch.object(main, "WallpaperApp") as app:
        yield app


class TestExitCodes:
    def test_missing_argument(self, fake_app):
        assert main.main([]) == 1
        fake_app.assert_not_called()

    def test_malformed_schedule(self, tmp_path, fake_app):
        path = tmp_path / "bad.xml"
        path.write_text("<background><static>", encoding="utf-8")
        assert main.main([str(path)]) == 1
        fake_app.assert_not_called()

    def test_empty_schedule(self, tmp_path, fake_app):
        path = tmp_path / "empty.xml"
        path.write_text("<background><starttime><year>2001</year><month>1</month>"
                        "<day>1</day></starttime></background>", encoding="utf-8")
        assert main.main([str(path)]) == 1

    def test_undecodable_image(self, tmp_path, fake_app):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        assert main.main([str(path)]) == 1
        fake_app.assert_not_called()

    def test_schedule_runs_app(self, tmp_path, fake_app):
        path = tmp_path / "wall.xml"
        path.write_text(GOOD, encoding="utf-8")
        assert main.main([str(path), "--windowed", "--size", "640x360",
                          "--interval", "30"]) == 0
        args, kwargs = fake_app.call_args
        assert len(args[0]) == 2
        assert kwargs == {"fullscreen": False, "size": (640, 360), "interval": 30.0}
        fake_app.return_value.run.assert_called_once_with()

    def test_image_is_preloaded(self, make_png, fake_app):
        path = make_png("wall.png")
        assert main.main([path]) == 0
        timeline, cache = fake_app.call_args[0]
        assert timeline.still
        assert path in cache


class TestArguments:
    @pytest.mark.parametrize("bad", ["640", "0x10", "axb"])
    def test_bad_size(self, bad):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["x.xml", "--size", bad])

    def test_bad_interval(self):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["x.xml", "--interval", "-1"])

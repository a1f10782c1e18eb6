"""Reading and writing the XML schedule format."""

import pytest

from errors import EmptyScheduleError, ScheduleFormatError
from schedule import is_image_path, load_timeline, parse_schedule, read_schedule, write_schedule
from timeline import Static, Timeline, Transition
from timing import local_timestamp

GOOD = """<?xml version="1.0" encoding="UTF-8"?>
<background>
  <starttime>
    <year>2011</year><month>10</month><day>1</day>
    <hour>7</hour><minute>30</minute><second>15</second>
  </starttime>
  <static>
    <duration>10</duration>
    <file>/pics/a.jpg</file>
  </static>
  <transition type="overlay">
    <duration>20</duration>
    <from>/pics/a.jpg</from>
    <to>/pics/b.jpg</to>
  </transition>
</background>
"""


def doc(body, start="<starttime><year>2001</year><month>1</month><day>1</day></starttime>"):
    return f"<background>{start}{body}</background>"


class TestParse:
    def test_events_in_document_order(self):
        tl = parse_schedule(GOOD)
        assert tl.events == (
            Static(10, "/pics/a.jpg"),
            Transition(20, "/pics/a.jpg", "/pics/b.jpg", kind="overlay"),
        )
        assert tl.total_duration() == 30

    def test_anchor_is_local_time(self):
        tl = parse_schedule(GOOD)
        assert tl.anchor == local_timestamp(2011, 10, 1, 7, 30, 15)

    def test_hour_minute_second_default_to_zero(self):
        tl = parse_schedule(doc("<static><duration>5</duration><file>a</file></static>"))
        assert tl.anchor == local_timestamp(2001, 1, 1)

    def test_accepts_bytes(self):
        assert len(parse_schedule(GOOD.encode("utf-8"))) == 2

    def test_unknown_elements_ignored(self):
        tl = parse_schedule(doc("<comment>hi</comment>"
                                "<static><duration>5</duration><file>a</file></static>"))
        assert len(tl) == 1

    def test_transition_type_is_kept(self):
        tl = parse_schedule(doc('<transition type="fade"><duration>3</duration>'
                                "<from>a</from><to>b</to></transition>"))
        assert tl[0].kind == "fade"


class TestMalformed:
    @pytest.mark.parametrize("text", [
        "<background><starttime>",                                    # not XML
        "<wallpaper/>",                                               # wrong root
        "<background><static><duration>5</duration><file>a</file></static></background>",
        doc("<static><duration>ten</duration><file>a</file></static>"),
        doc("<static><duration>0</duration><file>a</file></static>"),
        doc("<static><duration>-5</duration><file>a</file></static>"),
        doc("<static><file>a</file></static>"),
        doc("<static><duration>5</duration></static>"),
        doc("<transition><duration>5</duration><from>a</from></transition>"),
        doc("<static><duration>5</duration><file>a</file></static>",
            start="<starttime><year>2001</year><month>13</month><day>1</day></starttime>"),
        doc("<static><duration>5</duration><file>a</file></static>",
            start="<starttime><month>1</month><day>1</day></starttime>"),
    ])
    def test_format_errors(self, text):
        with pytest.raises(ScheduleFormatError):
            parse_schedule(text)

    def test_no_events(self):
        with pytest.raises(EmptyScheduleError):
            parse_schedule(doc(""))

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ScheduleFormatError):
            read_schedule(str(tmp_path / "missing.xml"))


class TestLoadTimeline:
    def test_image_path_gives_still_timeline(self, tmp_path):
        path = str(tmp_path / "Photo.PNG")
        open(path, "wb").close()
        tl = load_timeline(path)
        assert tl.still
        assert tl[0].source == path

    def test_missing_image_is_treated_as_schedule(self, tmp_path):
        assert not is_image_path(str(tmp_path / "ghost.jpg"))
        with pytest.raises(ScheduleFormatError):
            load_timeline(str(tmp_path / "ghost.jpg"))

    @pytest.mark.parametrize("name", ["a.png", "a.JPG", "a.jpeg", "a.JpEg"])
    def test_image_extensions_case_insensitive(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b"")
        assert is_image_path(str(path))

    def test_schedule_file(self, tmp_path):
        path = tmp_path / "wall.xml"
        path.write_text(GOOD, encoding="utf-8")
        assert len(load_timeline(str(path))) == 2


class TestWrite:
    def test_written_file_reads_back(self, tmp_path):
        anchor = local_timestamp(2001, 1, 1)
        tl = Timeline([Static(27000, "/p/a.png"), Transition(1800, "/p/a.png", "/p/b.png")],
                      anchor)
        path = write_schedule(tl, str(tmp_path / "out.xml"))
        again = read_schedule(path)
        assert again.events == tl.events
        assert again.anchor == anchor

    def test_output_has_declaration_and_schema(self, tmp_path):
        tl = Timeline([Static(5, "a.png")], local_timestamp(2001, 1, 1))
        text = open(write_schedule(tl, str(tmp_path / "out.xml")), encoding="utf-8").read()
        assert text.startswith("<?xml")
        assert "<year>2001</year>" in text
        assert "<duration>5</duration>" in text

    def test_still_timeline_cannot_be_written(self, tmp_path):
        with pytest.raises(ScheduleFormatError):
            write_schedule(Timeline.from_image("a.png"), str(tmp_path / "x.xml"))

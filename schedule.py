"""
schedule.py

Read and write the XML schedule format:

    <background>
      <starttime>
        <year>2001</year><month>1</month><day>1</day>
        <hour>0</hour><minute>0</minute><second>0</second>
      </starttime>
      <static>
        <duration>27000</duration>
        <file>/pics/a.jpg</file>
      </static>
      <transition type="overlay">
        <duration>1800</duration>
        <from>/pics/a.jpg</from>
        <to>/pics/b.jpg</to>
      </transition>
      ...
    </background>

`load_timeline()` is the single entry point used by the CLI: it accepts a
schedule file or a bare image.
"""

from __future__ import annotations

import logging
import math
import os
import xml.etree.ElementTree as ET
from typing import List, Union

import config
from errors import EmptyScheduleError, ScheduleFormatError
from timeline import Event, Static, Timeline, Transition
from timing import local_fields, local_timestamp

logger = logging.getLogger(__name__)

_REQUIRED_TIME = ("year", "month", "day")
_OPTIONAL_TIME = ("hour", "minute", "second")


# ── helpers ────────────────────────────────────────────────────────────────
def is_image_path(path: str) -> bool:
    """True for an existing .png/.jpg/.jpeg file (case-insensitive)."""
    return (os.path.splitext(path)[1].lower() in config.IMAGE_EXTENSIONS
            and os.path.isfile(path))


def _text(parent: ET.Element, tag: str, where: str) -> str:
    node = parent.find(tag)
    if node is None or node.text is None or not node.text.strip():
        raise ScheduleFormatError(f"{where}: missing <{tag}>")
    return node.text.strip()


def _int(parent: ET.Element, tag: str, where: str) -> int:
    raw = _text(parent, tag, where)
    try:
        return int(raw)
    except ValueError:
        raise ScheduleFormatError(f"{where}: <{tag}> is not an integer: {raw!r}") from None


def _duration(node: ET.Element, where: str) -> float:
    raw = _text(node, "duration", where)
    try:
        dur = int(raw)
    except ValueError:
        try:
            dur = float(raw)
        except ValueError:
            raise ScheduleFormatError(f"{where}: duration is not a number: {raw!r}") from None
        if not math.isfinite(dur):
            raise ScheduleFormatError(f"{where}: duration must be finite, got {raw!r}")
    if dur <= 0:
        raise ScheduleFormatError(f"{where}: duration must be > 0, got {dur}")
    return dur


def _anchor(root: ET.Element) -> float:
    node = root.find("starttime")
    if node is None:
        raise ScheduleFormatError("missing <starttime>")
    fields = [_int(node, t, "starttime") for t in _REQUIRED_TIME]
    for tag in _OPTIONAL_TIME:
        fields.append(_int(node, tag, "starttime") if node.find(tag) is not None else 0)
    try:
        return local_timestamp(*fields)
    except (ValueError, OverflowError, OSError) as exc:
        raise ScheduleFormatError(f"starttime: {exc}") from exc


# ── reading ────────────────────────────────────────────────────────────────
def parse_schedule(text: Union[str, bytes]) -> Timeline:
    """Parse schedule XML (text or raw bytes) into a Timeline."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ScheduleFormatError(f"XML parse error: {exc}") from exc

    if root.tag != "background":
        raise ScheduleFormatError(f"root element is <{root.tag}>, expected <background>")

    anchor = _anchor(root)

    events: List[Event] = []
    for i, node in enumerate(root):
        where = f"<{node.tag}> #{i}"
        if node.tag == "static":
            events.append(Static(_duration(node, where), _text(node, "file", where)))
        elif node.tag == "transition":
            events.append(Transition(
                _duration(node, where),
                _text(node, "from", where),
                _text(node, "to", where),
                kind=node.get("type", config.TRANSITION_TYPE),
            ))

    if not events:
        raise EmptyScheduleError("schedule has no <static> or <transition> events")
    return Timeline(events, anchor)


def read_schedule(path: str) -> Timeline:
    try:
        with open(path, "rb") as f:
            text = f.read()
    except OSError as exc:
        raise ScheduleFormatError(f"cannot read schedule {path!r}: {exc}") from exc
    timeline = parse_schedule(text)
    logger.info("loaded %s: %d events, cycle %ss", path, len(timeline),
                int(timeline.total_duration()))
    return timeline


def load_timeline(path: str) -> Timeline:
    """Schedule file or bare image → Timeline."""
    if is_image_path(path):
        logger.info("single image %s", path)
        return Timeline.from_image(path)
    return read_schedule(path)


# ── writing ────────────────────────────────────────────────────────────────
def _sub(parent: ET.Element, tag: str, text) -> ET.Element:
    node = ET.SubElement(parent, tag)
    node.text = str(text)
    return node


def schedule_tree(timeline: Timeline) -> ET.ElementTree:
    if timeline.still:
        raise ScheduleFormatError("a single-image timeline has no schedule form")

    root = ET.Element("background")
    start = ET.SubElement(root, "starttime")
    for tag, value in zip(_REQUIRED_TIME + _OPTIONAL_TIME, local_fields(timeline.anchor)):
        _sub(start, tag, value)

    for ev in timeline:
        dur = int(ev.duration) if float(ev.duration).is_integer() else ev.duration
        if isinstance(ev, Static):
            node = ET.SubElement(root, "static")
            _sub(node, "duration", dur)
            _sub(node, "file", ev.source)
        else:
            node = ET.SubElement(root, "transition", {"type": ev.kind})
            _sub(node, "duration", dur)
            _sub(node, "from", ev.from_source)
            _sub(node, "to", ev.to_source)

    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    return tree


def write_schedule(timeline: Timeline, path: str) -> str:
    """Write *timeline* as schedule XML to *path*; returns the path."""
    schedule_tree(timeline).write(path, encoding="UTF-8", xml_declaration=True)
    return path

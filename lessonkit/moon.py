"""Moonrise, moonset and the Moon's highest point read from a yearly table."""

import re
import struct
import sys
from dataclasses import dataclass
from pathlib import Path

PROMPT = "Enter necessary date (DD.MM.YYYY): "
RETRY_PROMPT = "Enter necessary date (DD.MM.YYYY) again: "

_DATE_PATTERN = re.compile(
    r"\s*([+-]?\d+)\s*([^\d\s+-])\s*([+-]?\d+)\s*([./])\s*([+-]?\d+)\s*"
)
_ROW_PATTERN = re.compile(
    r"\s*(\d+)\s*(\d{1,2})\s*(\d{1,2})\s*(\d{1,2})\s+(\S+)\s+(\S+)\s+(\S+)"
)


def _tdiv(a, b):
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _tmod(a, b):
    return a - b * _tdiv(a, b)


def _f32(value):
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Date:
    """A calendar day."""

    day: int
    month: int
    year: int

    @property
    def key(self):
        """The day as the YYYYMMDD number used in the tables."""
        return self.year * 10000 + self.month * 100 + self.day

    @classmethod
    def from_key(cls, key):
        """Build a date from a YYYYMMDD number."""
        return cls(_tmod(key, 100), _tmod(_tdiv(key, 100), 100), _tdiv(key, 10000))

    def __str__(self):
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True)
class MoonEvent:
    """The Moon crossing the horizon; day is set when it is not the asked day."""

    kind: str
    hour: int
    minute: int
    second: int
    day: "Date | None" = None

    def __str__(self):
        text = f"{self.kind}:\t{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return text if self.day is None else f"{text} of {self.day}"


@dataclass(frozen=True)
class MoonReport:
    """Horizon crossings and the moment of the highest point for one day."""

    date: Date
    events: tuple
    zenith: int

    @property
    def zenith_time(self):
        """The zenith as hours, minutes and seconds."""
        return (
            _tdiv(self.zenith, 10000),
            _tmod(_tdiv(self.zenith, 100), 100),
            _tmod(self.zenith, 100),
        )


@dataclass
class _Reading:
    hour: int = 0
    minute: int = 0
    second: int = 0
    angle: float = 0.0

    @property
    def clock(self):
        return self.hour * 10000 + self.minute * 100 + self.second


def is_valid_date(day, month, year):
    """Tell whether the day exists by the rules the date prompt enforces."""
    if day < 1 or not 1 <= month <= 12:
        return False
    if month == 2:
        # The prompt's own rule: 29 days when the year is not divisible by 4.
        limit = 29 if year % 4 else 28
    elif month < 8:
        limit = 31 if month % 2 else 30
    else:
        limit = 30 if month % 2 else 31
    return day <= limit


def parse_date(text):
    """Parse DD.MM.YYYY (the last separator may also be '/') into a Date."""
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a date: {text!r}")
    day, month, year = (int(match.group(index)) for index in (1, 3, 5))
    if not is_valid_date(day, month, year):
        raise ValueError(f"no such day: {text.strip()!r}")
    return Date(day, month, year)


def read_table(year, directory="."):
    """Return the text of the table file moon<year>.dat in directory."""
    return (Path(directory) / f"moon{year}.dat").read_bytes().decode("latin-1")


def _parse_row(line):
    match = _ROW_PATTERN.match(line)
    if match is None:
        return None
    try:
        float(match.group(5))
        float(match.group(6))
        angle = float(match.group(7))
    except ValueError:
        return None
    key, hour, minute, second = (int(match.group(index)) for index in range(1, 5))
    return key, _Reading(hour, minute, second, angle)


def _horizon(kind, current, previous, key, line_key):
    before = abs(previous.angle)
    span = (current.minute - previous.minute) * 60
    second = previous.second
    if span:
        second = int(second + before / ((abs(current.angle) + before) / span))
    minute = previous.minute + _tdiv(second, 60)
    second = _tmod(second, 60)
    hour = previous.hour + _tdiv(minute, 60)
    minute = _tmod(minute, 60)
    day = None if line_key == key else Date.from_key(line_key)
    return MoonEvent(kind, hour, minute, second, day)


def _zenith_between(later, earlier):
    difference = later - earlier
    seconds = int(
        (_tmod(_tdiv(difference, 100), 100) * 60 + _tmod(difference, 100)) / 2.0
    )
    moment = earlier + _tdiv(seconds, 60) * 100 + _tmod(seconds, 60)
    minutes = _tmod(_tdiv(moment, 100), 100) + _tdiv(_tmod(moment, 100), 60)
    return (
        (_tdiv(moment, 10000) + _tdiv(minutes, 60)) * 10000
        + minutes * 100
        + _tmod(_tmod(moment, 100), 60)
    )


def analyse(date, text):
    """Scan the table from the date's first row for rise, set and zenith."""
    key = date.key
    start = text.find(str(key))
    if start < 0:
        raise LookupError(f"no rows for {date}")

    previous = _Reading()
    events = []
    zenith = 0
    minimum = 360.0
    highest = 0.0
    risen = False
    for line in text[start:].splitlines():
        row = _parse_row(line)
        if row is None:
            continue
        line_key, current = row
        if current.angle * previous.angle < 0:
            if current.angle > 0:
                events.append(_horizon("Moonrise", current, previous, key, line_key))
                risen = True
            elif risen:
                events.append(_horizon("Moonset", current, previous, key, line_key))
            if len(events) >= 2:
                break
        elif (
            current.angle >= highest
            and previous.angle > 0
            and current.angle - previous.angle <= _f32(abs(minimum))
        ):
            minimum = current.angle - previous.angle
            highest = current.angle
            if _f32(minimum) > 0.0:
                zenith = current.clock
            elif _f32(minimum) < 0.0:
                zenith = _zenith_between(previous.clock, zenith)
        previous = current
    return MoonReport(date, tuple(events), zenith)


def format_report(report):
    """Render a report as the lines the program prints."""
    lines = [f"Your date:\t{report.date}"]
    lines.extend(str(event) for event in report.events)
    hour, minute, second = report.zenith_time
    lines.append(f'"Zenith":\t{hour:02d}:{minute:02d}:{second:02d}')
    return "\n".join(lines) + "\n"


def main(argv=None):
    """Ask for a date and print the Moon's day; argv may name the table folder."""
    args = sys.argv[1:] if argv is None else list(argv)
    directory = args[0] if args else "."

    print(PROMPT, end="", flush=True)
    while True:
        line = sys.stdin.readline()
        if not line:
            print()
            return 1
        try:
            date = parse_date(line)
            break
        except ValueError:
            print("Input error!\nPlease, pay attention!")
            print(RETRY_PROMPT, end="", flush=True)

    try:
        text = read_table(date.year, directory)
    except FileNotFoundError:
        print("File is not found...")
        return 1
    except OSError:
        print("Something went wrong...\nMaybe memory error")
        return 1

    try:
        report = analyse(date, text)
    except LookupError:
        print("There is no date which is equal to yours...")
        return 1
    print(format_report(report), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
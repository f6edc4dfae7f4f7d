"""Wall-clock timing of named events during a run."""

import math
from datetime import datetime, timezone


def _now():
    return datetime.now(timezone.utc)


def _format_duration(delta):
    """Render a duration as hours:minutes:seconds with optional microseconds."""
    micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    seconds, fraction = divmod(micros, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if fraction:
        text += f".{fraction:06d}"
    return text


def _total_microseconds(delta):
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


def _ratio(part, whole):
    if whole:
        return part / whole
    if part == 0:
        return math.nan
    return math.copysign(math.inf, part)


class Bench:
    """Records time stamps of named events and reports the gaps between them."""

    def __init__(self, clock=None):
        self._clock = clock if clock is not None else _now
        self._events = []

    @property
    def events(self):
        return tuple(self._events)

    def add_event(self, desc):
        """Record the current time under the name ``desc``."""
        self._events.append((self._clock(), desc))

    def report(self):
        """Return a table of the time spent between consecutive events."""
        if not self._events:
            raise ValueError("no events recorded")
        total = _total_microseconds(self._events[-1][0] - self._events[0][0])
        lines = ["\n\nTimings:\n\n"]
        for (start, start_desc), (stop, stop_desc) in zip(
            self._events, self._events[1:]
        ):
            gap = stop - start
            share = _ratio(_total_microseconds(gap), total)
            lines.append(
                f"[{start_desc}, {stop_desc}]\t{_format_duration(gap)}\t{share:g} %\n"
            )
        lines.append("\n\n")
        return "".join(lines)

    def __str__(self):
        return self.report()
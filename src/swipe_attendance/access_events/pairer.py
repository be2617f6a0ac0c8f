from __future__ import annotations

from typing import Iterable, Sequence

from ..common.time_value import Time
from ..core.enums import AccessPointCategory
from .model import AccessEvent, AccessPointSegment


def _group_by_category(events: Sequence[AccessEvent]) -> dict[AccessPointCategory, list[AccessEvent]]:
    # dict keeps first-seen category order
    groups: dict[AccessPointCategory, list[AccessEvent]] = {}
    for event in events:
        groups.setdefault(event.category, []).append(event)
    return groups


def _pair(category: AccessPointCategory, events: Sequence[AccessEvent]) -> list[AccessPointSegment]:
    segments: list[AccessPointSegment] = []
    for i in range(0, len(events), 2):
        time_in = Time.from_datetime(events[i].timestamp)
        if i + 1 < len(events):
            time_out = Time.from_datetime(events[i + 1].timestamp)
            time_spend = Time.subtract(time_out, time_in)
        else:
            time_out = Time.absent()
            time_spend = Time.absent()
        segments.append(
            AccessPointSegment(category=category, time_in=time_in, time_out=time_out, time_spend=time_spend)
        )
    return segments


def pair_access_events(events: Iterable[AccessEvent]) -> list[AccessPointSegment]:
    """Pair one employee's swipes for one day into in/out segments.

    Events are sorted by timestamp, split per access point category (first-seen
    order), then taken two at a time. A trailing unmatched swipe gives a segment
    with absent time-out and time-spend.
    """
    ordered = sorted(events, key=lambda e: e.timestamp)

    segments: list[AccessPointSegment] = []
    for category, category_events in _group_by_category(ordered).items():
        segments.extend(_pair(category, category_events))
    return segments


def main_entry_times(segments: Iterable[AccessPointSegment]) -> tuple[Time, Time]:
    """First Main time-in and last present Main time-out of the day."""
    main = [s for s in segments if s.category == AccessPointCategory.MAIN]
    if not main:
        return Time.absent(), Time.absent()

    time_in = min(s.time_in for s in main)
    outs = [s.time_out for s in main if s.time_out.is_present]
    time_out = max(outs) if outs else Time.absent()
    return time_in, time_out

"""
Conversion between one worksheet row and one Meeting.

A row is a mapping of column header to the raw cell value openpyxl returned
(str, int, float, datetime, time or None). Reading a row never raises:
missing or malformed cells fall back to defaults.
"""
import math
from datetime import datetime, time

from ...models import (
    AgendaItem,
    Meeting,
    DEFAULT_AGENDA_STATUS,
    DEFAULT_DURATION,
    DEFAULT_MEETING_STATUS,
)
from . import columns as col
from .dates import normalize_date


def cell_text(value):
    """Renders a scalar cell as text, '' for empty cells."""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def time_text(value):
    if isinstance(value, (datetime, time)):
        return value.strftime('%H:%M')
    return cell_text(value)


def split_cell(value, separator):
    """Splits a delimited cell into trimmed, non-empty parts."""
    if not value:
        return []
    return [part.strip() for part in cell_text(value).split(separator) if part.strip()]


def parse_duration(value):
    if isinstance(value, bool):
        return DEFAULT_DURATION
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return DEFAULT_DURATION
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return DEFAULT_DURATION
    minutes = int(value)
    return minutes if minutes > 0 else DEFAULT_DURATION


def parse_agenda(row, row_index):
    titles = split_cell(row.get(col.AGENDA_ITEMS), col.AGENDA_SEPARATOR)
    statuses = split_cell(row.get(col.AGENDA_STATUSES), col.AGENDA_SEPARATOR)
    descriptions = split_cell(row.get(col.AGENDA_DESCRIPTIONS), col.AGENDA_SEPARATOR)

    # The three lists are aligned by position; short lists fall back to defaults
    agenda = []
    for idx, title in enumerate(titles):
        agenda.append(AgendaItem(
            id=f"{row_index}-{idx}",
            title=title,
            description=descriptions[idx] if idx < len(descriptions) else '',
            status=statuses[idx] if idx < len(statuses) else DEFAULT_AGENDA_STATUS,
            assignee=None,
        ))
    return agenda


def row_to_meeting(row, row_index):
    """Builds the Meeting for the data row at 0-based position ``row_index``."""
    next_meeting = row.get(col.NEXT_MEETING)
    return Meeting(
        id=str(row_index + 1),
        title=cell_text(row.get(col.TITLE)),
        stakeholder=cell_text(row.get(col.STAKEHOLDER)),
        date=normalize_date(row.get(col.DATE)),
        time=time_text(row.get(col.TIME)),
        duration=parse_duration(row.get(col.DURATION)),
        status=cell_text(row.get(col.STATUS)) or DEFAULT_MEETING_STATUS,
        location=cell_text(row.get(col.LOCATION)),
        notes=cell_text(row.get(col.NOTES)),
        next_meeting=normalize_date(next_meeting) if next_meeting else None,
        attendees=split_cell(row.get(col.ATTENDEES), col.ATTENDEE_SEPARATOR),
        agenda=parse_agenda(row, row_index),
    )


def meeting_to_row(meeting):
    """Flattens a Meeting into a row keyed by column header.

    Identifiers and agenda assignees have no column and are dropped.
    """
    return {
        col.TITLE: meeting.title,
        col.STAKEHOLDER: meeting.stakeholder,
        col.DATE: meeting.date,
        col.TIME: meeting.time,
        col.DURATION: meeting.duration,
        col.STATUS: meeting.status,
        col.LOCATION: meeting.location,
        col.ATTENDEES: col.ATTENDEE_JOINER.join(meeting.attendees),
        col.AGENDA_ITEMS: col.AGENDA_JOINER.join(item.title for item in meeting.agenda),
        col.AGENDA_STATUSES: col.AGENDA_JOINER.join(item.status for item in meeting.agenda),
        col.AGENDA_DESCRIPTIONS: col.AGENDA_JOINER.join(item.description for item in meeting.agenda),
        col.NOTES: meeting.notes,
        col.NEXT_MEETING: meeting.next_meeting or '',
    }

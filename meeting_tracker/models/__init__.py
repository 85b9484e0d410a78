"""
Models package for the meeting tracker.

Records live in process memory only; see ``meeting_tracker.store``.
"""
from .meeting import (
    Meeting,
    AgendaItem,
    MEETING_STATUSES,
    AGENDA_STATUSES,
    DEFAULT_MEETING_STATUS,
    DEFAULT_AGENDA_STATUS,
    DEFAULT_DURATION,
)
from .fields import (
    MeetingField,
    AgendaField,
    FieldTypeError,
    set_field,
    set_agenda_field,
)

__all__ = [
    'Meeting',
    'AgendaItem',
    'MEETING_STATUSES',
    'AGENDA_STATUSES',
    'DEFAULT_MEETING_STATUS',
    'DEFAULT_AGENDA_STATUS',
    'DEFAULT_DURATION',
    'MeetingField',
    'AgendaField',
    'FieldTypeError',
    'set_field',
    'set_agenda_field',
]

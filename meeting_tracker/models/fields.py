"""
Typed single-field updates for meetings and agenda items.

The edit form sends one field at a time. Instead of assigning arbitrary
attributes by name, every editable field is listed in an enum together with
the type its value must have.
"""
from enum import Enum

from .meeting import AgendaItem


class FieldTypeError(TypeError):
    """Raised when a value does not match the type of the field being set."""


class MeetingField(Enum):
    TITLE = 'title'
    STAKEHOLDER = 'stakeholder'
    DATE = 'date'
    TIME = 'time'
    DURATION = 'duration'
    STATUS = 'status'
    LOCATION = 'location'
    NOTES = 'notes'
    NEXT_MEETING = 'next_meeting'
    ATTENDEES = 'attendees'
    AGENDA = 'agenda'


class AgendaField(Enum):
    TITLE = 'title'
    DESCRIPTION = 'description'
    STATUS = 'status'
    ASSIGNEE = 'assignee'


def _is_str(value):
    return isinstance(value, str)


def _is_optional_str(value):
    return value is None or isinstance(value, str)


def _is_duration(value):
    # bool is an int subclass but never a duration
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_str_list(value):
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _is_agenda_list(value):
    return isinstance(value, list) and all(isinstance(v, AgendaItem) for v in value)


MEETING_FIELD_CHECKS = {
    MeetingField.TITLE: (_is_str, 'a string'),
    MeetingField.STAKEHOLDER: (_is_str, 'a string'),
    MeetingField.DATE: (_is_str, 'a string'),
    MeetingField.TIME: (_is_str, 'a string'),
    MeetingField.DURATION: (_is_duration, 'a positive integer'),
    MeetingField.STATUS: (_is_str, 'a string'),
    MeetingField.LOCATION: (_is_str, 'a string'),
    MeetingField.NOTES: (_is_str, 'a string'),
    MeetingField.NEXT_MEETING: (_is_optional_str, 'a string or None'),
    MeetingField.ATTENDEES: (_is_str_list, 'a list of strings'),
    MeetingField.AGENDA: (_is_agenda_list, 'a list of AgendaItem'),
}

AGENDA_FIELD_CHECKS = {
    AgendaField.TITLE: (_is_str, 'a string'),
    AgendaField.DESCRIPTION: (_is_str, 'a string'),
    AgendaField.STATUS: (_is_str, 'a string'),
    AgendaField.ASSIGNEE: (_is_optional_str, 'a string or None'),
}


def check_mapping(data, what):
    if not isinstance(data, dict):
        raise FieldTypeError(f"{what} must be an object, got {type(data).__name__}")
    return data


def check_value(field, value):
    """Returns ``value`` if it has the type required by ``field``."""
    checks = MEETING_FIELD_CHECKS if isinstance(field, MeetingField) else AGENDA_FIELD_CHECKS
    check, expected = checks[field]
    if not check(value):
        raise FieldTypeError(
            f"{field.value} must be {expected}, got {type(value).__name__}")
    return value


def _set(target, field, value):
    setattr(target, field.value, check_value(field, value))
    return target


def set_field(meeting, field, value):
    """Sets one meeting field after checking the value's type."""
    return _set(meeting, MeetingField(field), value)


def set_agenda_field(item, field, value):
    """Sets one agenda item field after checking the value's type."""
    return _set(item, AgendaField(field), value)

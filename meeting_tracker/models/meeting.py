"""Meeting and agenda item records."""
from dataclasses import dataclass, field, asdict
from typing import List, Optional


MEETING_STATUSES = ('scheduled', 'completed', 'cancelled', 'rescheduled')
AGENDA_STATUSES = ('pending', 'discussed', 'action-required')

DEFAULT_MEETING_STATUS = 'scheduled'
DEFAULT_AGENDA_STATUS = 'pending'
DEFAULT_DURATION = 60


def _present(data, key, default):
    """Returns data[key], or ``default`` when it is missing, None or ''."""
    value = data.get(key)
    return default if value is None or value == '' else value


def _identifier(value):
    from .fields import FieldTypeError

    if value is None:
        return ''
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise FieldTypeError(f"id must be a string, got {type(value).__name__}")
    return str(value)


@dataclass
class AgendaItem:
    """One discussion topic of a meeting."""
    id: str
    title: str
    description: str = ''
    status: str = DEFAULT_AGENDA_STATUS
    assignee: Optional[str] = None  # only kept in memory, never in spreadsheets

    def to_dict(self):
        data = asdict(self)
        if self.assignee is None:
            del data['assignee']
        return data

    @classmethod
    def from_dict(cls, data):
        """Builds an agenda item from JSON; raises FieldTypeError on bad types."""
        from .fields import AgendaField, check_mapping, check_value

        check_mapping(data, 'agenda item')
        return cls(
            id=_identifier(data.get('id')),
            title=check_value(AgendaField.TITLE, _present(data, 'title', '')),
            description=check_value(AgendaField.DESCRIPTION, _present(data, 'description', '')),
            status=check_value(AgendaField.STATUS, _present(data, 'status', DEFAULT_AGENDA_STATUS)),
            assignee=check_value(AgendaField.ASSIGNEE, _present(data, 'assignee', None)),
        )


@dataclass
class Meeting:
    """A stakeholder meeting with its nested agenda.

    ``date`` and ``next_meeting`` hold canonical ``YYYY-MM-DD`` strings,
    ``time`` is ``HH:MM`` and ``duration`` is in minutes. Statuses are kept
    as plain strings; values outside MEETING_STATUSES are passed through.
    """
    id: str
    title: str = ''
    stakeholder: str = ''
    date: str = ''
    time: str = ''
    duration: int = DEFAULT_DURATION
    status: str = DEFAULT_MEETING_STATUS
    location: str = ''
    notes: str = ''
    next_meeting: Optional[str] = None
    attendees: List[str] = field(default_factory=list)
    agenda: List[AgendaItem] = field(default_factory=list)

    def count_agenda(self, status):
        return sum(1 for item in self.agenda if item.status == status)

    def to_dict(self):
        data = {
            'id': self.id,
            'title': self.title,
            'stakeholder': self.stakeholder,
            'date': self.date,
            'time': self.time,
            'duration': self.duration,
            'status': self.status,
            'location': self.location,
            'notes': self.notes,
            'attendees': list(self.attendees),
            'agenda': [item.to_dict() for item in self.agenda],
        }
        if self.next_meeting is not None:
            data['nextMeeting'] = self.next_meeting
        return data

    @classmethod
    def from_dict(cls, data, meeting_id=None):
        """Builds a meeting from the JSON shape used by the dashboard.

        Every value goes through the same type checks as ``set_field``;
        a mismatch raises FieldTypeError.
        """
        from .fields import MeetingField, FieldTypeError, check_mapping, check_value

        check_mapping(data, 'meeting')
        agenda = _present(data, 'agenda', [])
        if not isinstance(agenda, list):
            raise FieldTypeError(f"agenda must be a list of agenda items, got {type(agenda).__name__}")
        attendees = check_value(MeetingField.ATTENDEES, _present(data, 'attendees', []))

        return cls(
            id=_identifier(meeting_id if meeting_id is not None else data.get('id')),
            title=check_value(MeetingField.TITLE, _present(data, 'title', '')),
            stakeholder=check_value(MeetingField.STAKEHOLDER, _present(data, 'stakeholder', '')),
            date=check_value(MeetingField.DATE, _present(data, 'date', '')),
            time=check_value(MeetingField.TIME, _present(data, 'time', '')),
            duration=check_value(MeetingField.DURATION, _present(data, 'duration', DEFAULT_DURATION)),
            status=check_value(MeetingField.STATUS, _present(data, 'status', DEFAULT_MEETING_STATUS)),
            location=check_value(MeetingField.LOCATION, _present(data, 'location', '')),
            notes=check_value(MeetingField.NOTES, _present(data, 'notes', '')),
            next_meeting=check_value(MeetingField.NEXT_MEETING, _present(data, 'nextMeeting', None)),
            attendees=[a.strip() for a in attendees if a.strip()],
            agenda=[AgendaItem.from_dict(item) for item in agenda],
        )

"""Column layout of the "Meetings" worksheet."""

SHEET_TITLE = 'Meetings'

TITLE = 'Meeting Title'
STAKEHOLDER = 'Stakeholder'
DATE = 'Date'
TIME = 'Time'
DURATION = 'Duration (minutes)'
STATUS = 'Status'
LOCATION = 'Location'
ATTENDEES = 'Attendees'
AGENDA_ITEMS = 'Agenda Items'
AGENDA_STATUSES = 'Agenda Statuses'
AGENDA_DESCRIPTIONS = 'Agenda Descriptions'
NOTES = 'Notes'
NEXT_MEETING = 'Next Meeting'

# (header, width in characters)
COLUMN_SPECS = [
    (TITLE, 30),
    (STAKEHOLDER, 20),
    (DATE, 12),
    (TIME, 8),
    (DURATION, 12),
    (STATUS, 12),
    (LOCATION, 25),
    (ATTENDEES, 30),
    (AGENDA_ITEMS, 50),
    (AGENDA_STATUSES, 30),
    (AGENDA_DESCRIPTIONS, 50),
    (NOTES, 50),
    (NEXT_MEETING, 12),
]

COLUMNS = [name for name, _ in COLUMN_SPECS]
COLUMN_WIDTHS = [width for _, width in COLUMN_SPECS]

ATTENDEE_SEPARATOR = ','
ATTENDEE_JOINER = ', '
AGENDA_SEPARATOR = '|'
AGENDA_JOINER = ' | '

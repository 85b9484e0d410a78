"""
Unit tests for the row codec.

Tests cover:
1. Defaults for missing cells
2. Attendee and agenda splitting
3. Misaligned agenda columns
4. Dates, times and durations as openpyxl returns them
5. Flattening a meeting back into a row
"""

import unittest
from datetime import datetime, time

from meeting_tracker.models import AgendaItem, Meeting
from meeting_tracker.services.excel.columns import COLUMNS
from meeting_tracker.services.excel.row_codec import (
    meeting_to_row,
    parse_duration,
    row_to_meeting,
    split_cell,
)


def make_row(**overrides):
    row = {
        'Meeting Title': 'Quarterly Review',
        'Stakeholder': 'Acme Corporation',
        'Date': '2024-01-15',
        'Time': '10:00',
        'Duration (minutes)': 60,
        'Status': 'scheduled',
        'Location': 'Room A',
        'Attendees': 'Alice, Bob',
        'Agenda Items': 'Budget | Hiring',
        'Agenda Statuses': 'pending | discussed',
        'Agenda Descriptions': 'Next year | Two engineers',
        'Notes': 'Bring slides',
        'Next Meeting': '2024-02-15',
    }
    row.update(overrides)
    return row


class TestRowToMeeting(unittest.TestCase):
    """Decoding a worksheet row into a Meeting."""

    def test_full_row(self):
        meeting = row_to_meeting(make_row(), 0)

        self.assertEqual(meeting.id, '1')
        self.assertEqual(meeting.title, 'Quarterly Review')
        self.assertEqual(meeting.stakeholder, 'Acme Corporation')
        self.assertEqual(meeting.date, '2024-01-15')
        self.assertEqual(meeting.time, '10:00')
        self.assertEqual(meeting.duration, 60)
        self.assertEqual(meeting.status, 'scheduled')
        self.assertEqual(meeting.location, 'Room A')
        self.assertEqual(meeting.notes, 'Bring slides')
        self.assertEqual(meeting.next_meeting, '2024-02-15')
        self.assertEqual(meeting.attendees, ['Alice', 'Bob'])
        self.assertEqual([item.title for item in meeting.agenda], ['Budget', 'Hiring'])
        self.assertEqual(meeting.agenda[1].status, 'discussed')
        self.assertEqual(meeting.agenda[1].description, 'Two engineers')

    def test_identifiers_follow_row_position(self):
        meeting = row_to_meeting(make_row(), 4)

        self.assertEqual(meeting.id, '5')
        self.assertEqual([item.id for item in meeting.agenda], ['4-0', '4-1'])

    def test_empty_row_uses_defaults(self):
        meeting = row_to_meeting({}, 0)

        self.assertEqual(meeting.title, '')
        self.assertEqual(meeting.stakeholder, '')
        self.assertEqual(meeting.location, '')
        self.assertEqual(meeting.notes, '')
        self.assertEqual(meeting.date, '')
        self.assertEqual(meeting.time, '')
        self.assertEqual(meeting.duration, 60)
        self.assertEqual(meeting.status, 'scheduled')
        self.assertIsNone(meeting.next_meeting)
        self.assertEqual(meeting.attendees, [])
        self.assertEqual(meeting.agenda, [])

    def test_attendees_are_trimmed(self):
        meeting = row_to_meeting(make_row(Attendees='Alice, Bob ,  Carol'), 0)
        self.assertEqual(meeting.attendees, ['Alice', 'Bob', 'Carol'])

    def test_attendees_drop_empty_segments(self):
        meeting = row_to_meeting(make_row(Attendees=' , Alice,,  ,Bob, '), 0)
        self.assertEqual(meeting.attendees, ['Alice', 'Bob'])

    def test_empty_agenda_ignores_status_and_description_columns(self):
        row = make_row(**{
            'Agenda Items': '',
            'Agenda Statuses': 'discussed | pending',
            'Agenda Descriptions': 'orphan | orphan',
        })
        meeting = row_to_meeting(row, 0)
        self.assertEqual(meeting.agenda, [])

    def test_short_status_column_defaults_to_pending(self):
        row = make_row(**{
            'Agenda Items': 'A | B | C',
            'Agenda Statuses': 'pending',
            'Agenda Descriptions': None,
        })
        meeting = row_to_meeting(row, 0)

        self.assertEqual(len(meeting.agenda), 3)
        self.assertEqual([item.status for item in meeting.agenda], ['pending', 'pending', 'pending'])
        self.assertEqual([item.description for item in meeting.agenda], ['', '', ''])

    def test_statuses_align_by_position(self):
        row = make_row(**{
            'Agenda Items': 'A | B | C',
            'Agenda Statuses': 'action-required',
            'Agenda Descriptions': 'first | second',
        })
        meeting = row_to_meeting(row, 0)

        self.assertEqual([item.status for item in meeting.agenda], ['action-required', 'pending', 'pending'])
        self.assertEqual([item.description for item in meeting.agenda], ['first', 'second', ''])

    def test_extra_statuses_are_ignored(self):
        row = make_row(**{
            'Agenda Items': 'Only',
            'Agenda Statuses': 'discussed | pending | pending',
        })
        meeting = row_to_meeting(row, 0)
        self.assertEqual(len(meeting.agenda), 1)
        self.assertEqual(meeting.agenda[0].status, 'discussed')

    def test_trailing_pipes_do_not_create_items(self):
        meeting = row_to_meeting(make_row(**{'Agenda Items': 'A | | B |'}), 0)
        self.assertEqual([item.title for item in meeting.agenda], ['A', 'B'])

    def test_assignee_is_never_imported(self):
        meeting = row_to_meeting(make_row(), 0)
        self.assertTrue(all(item.assignee is None for item in meeting.agenda))

    def test_unknown_status_passes_through(self):
        meeting = row_to_meeting(make_row(Status='Scheduled'), 0)
        self.assertEqual(meeting.status, 'Scheduled')

        meeting = row_to_meeting(make_row(**{'Agenda Statuses': 'in-progress | pending'}), 0)
        self.assertEqual(meeting.agenda[0].status, 'in-progress')

    def test_numeric_date_cell(self):
        meeting = row_to_meeting(make_row(Date=45306), 0)
        self.assertEqual(meeting.date, '2024-01-15')

    def test_datetime_cells(self):
        row = make_row(Date=datetime(2024, 1, 15), Time=time(9, 5), **{'Next Meeting': datetime(2024, 2, 1, 12, 30)})
        meeting = row_to_meeting(row, 0)

        self.assertEqual(meeting.date, '2024-01-15')
        self.assertEqual(meeting.time, '09:05')
        self.assertEqual(meeting.next_meeting, '2024-02-01')

    def test_unparseable_next_meeting_is_empty_string(self):
        meeting = row_to_meeting(make_row(**{'Next Meeting': 'sometime soon'}), 0)
        self.assertEqual(meeting.next_meeting, '')

    def test_numeric_text_cells(self):
        meeting = row_to_meeting(make_row(**{'Meeting Title': 2024.0, 'Location': 12}), 0)
        self.assertEqual(meeting.title, '2024')
        self.assertEqual(meeting.location, '12')


class TestParseDuration(unittest.TestCase):

    def test_numbers(self):
        self.assertEqual(parse_duration(45), 45)
        self.assertEqual(parse_duration(90.0), 90)
        self.assertEqual(parse_duration('30'), 30)
        self.assertEqual(parse_duration(' 15 '), 15)

    def test_fallback_to_default(self):
        for value in (None, '', 'an hour', 0, -10, True, float('nan'), datetime(2024, 1, 1)):
            self.assertEqual(parse_duration(value), 60, value)


class TestSplitCell(unittest.TestCase):

    def test_missing_value(self):
        self.assertEqual(split_cell(None, ','), [])
        self.assertEqual(split_cell('', '|'), [])

    def test_non_string_value(self):
        self.assertEqual(split_cell(42, '|'), ['42'])


class TestMeetingToRow(unittest.TestCase):

    def setUp(self):
        self.meeting = Meeting(
            id='7',
            title='Kickoff',
            stakeholder='TechStart Inc',
            date='2024-01-12',
            time='14:00',
            duration=90,
            status='completed',
            location='Virtual - Zoom',
            notes='Good start',
            next_meeting=None,
            attendees=['Alice Chen', 'Bob Wilson'],
            agenda=[
                AgendaItem('x', 'Scope', 'Define deliverables', 'discussed'),
                AgendaItem('y', 'Resources', '', 'action-required', assignee='PM'),
            ],
        )

    def test_columns_and_order(self):
        row = meeting_to_row(self.meeting)
        self.assertEqual(list(row.keys()), COLUMNS)

    def test_joined_fields(self):
        row = meeting_to_row(self.meeting)

        self.assertEqual(row['Attendees'], 'Alice Chen, Bob Wilson')
        self.assertEqual(row['Agenda Items'], 'Scope | Resources')
        self.assertEqual(row['Agenda Statuses'], 'discussed | action-required')
        self.assertEqual(row['Agenda Descriptions'], 'Define deliverables | ')
        self.assertEqual(row['Duration (minutes)'], 90)
        self.assertEqual(row['Next Meeting'], '')

    def test_identifier_and_assignee_are_dropped(self):
        row = meeting_to_row(self.meeting)
        values = [str(v) for v in row.values()]
        self.assertNotIn('PM', ' '.join(values).split())
        self.assertNotIn('id', row)

    def test_round_trip(self):
        self.meeting.next_meeting = '2024-01-26'
        self.meeting.agenda[1].description = 'Assign owners'
        decoded = row_to_meeting(meeting_to_row(self.meeting), 0)

        for name in ('title', 'stakeholder', 'date', 'time', 'duration', 'status',
                     'location', 'notes', 'next_meeting', 'attendees'):
            self.assertEqual(getattr(decoded, name), getattr(self.meeting, name), name)
        self.assertEqual(
            [(i.title, i.description, i.status) for i in decoded.agenda],
            [(i.title, i.description, i.status) for i in self.meeting.agenda],
        )
        self.assertIsNone(decoded.agenda[1].assignee)


if __name__ == '__main__':
    unittest.main()

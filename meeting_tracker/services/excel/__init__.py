"""
Excel import/export of the meeting collection.

Each meeting is one row of a single "Meetings" worksheet. Attendees are
comma-separated and the agenda is spread over three pipe-separated columns
(titles, statuses, descriptions) kept aligned by position.

Main entry points:
    MeetingExcelService.read_meetings(data)
    MeetingExcelService.import_meetings(data)
    MeetingExcelService.generate_meetings_xlsx(meetings)
    MeetingExcelService.generate_sample_xlsx()
"""

from .errors import AcquisitionError, ExportError, SpreadsheetError, WorkbookFormatError
from .fetch import fetch_workbook_bytes
from .sample import SAMPLE_FILENAME, sample_meetings
from .service import ImportResult, MeetingExcelService

__all__ = [
    'MeetingExcelService',
    'ImportResult',
    'SpreadsheetError',
    'WorkbookFormatError',
    'AcquisitionError',
    'ExportError',
    'fetch_workbook_bytes',
    'sample_meetings',
    'SAMPLE_FILENAME',
]

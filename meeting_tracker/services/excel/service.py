import io
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

import openpyxl

from ...models import Meeting
from .columns import COLUMNS, COLUMN_WIDTHS, SHEET_TITLE
from .errors import ExportError, WorkbookFormatError
from .formatter import ExportFormatter
from .legacy import is_legacy_workbook, read_legacy_rows
from .row_codec import meeting_to_row, row_to_meeting
from .sample import SAMPLE_FILENAME, sample_meetings

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of a whole-workbook import: either every meeting or an error."""
    meetings: List[Meeting] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, meetings):
        return cls(meetings=list(meetings))

    @classmethod
    def failure(cls, message):
        return cls(meetings=[], error=message)


def _read_header(header_row):
    """Names the columns; repeated headers get a _1, _2 ... suffix."""
    headers = []
    seen = {}
    for value in header_row:
        if value is None or value == '':
            headers.append(None)
            continue
        name = str(value).strip()
        if name in seen:
            seen[name] += 1
            name = f"{name}_{seen[name]}"
        else:
            seen[name] = 0
        headers.append(name)
    return headers


def _is_blank(values):
    return all(value is None or value == '' for value in values)


def _rows_to_records(rows):
    rows = iter(rows)
    header_row = next(rows, None)
    if header_row is None:
        return []

    headers = _read_header(header_row)
    records = []
    for values in rows:
        if _is_blank(values):
            continue
        record = {}
        for name, value in zip(headers, values):
            if name is not None and value is not None:
                record.setdefault(name, value)
        records.append(record)
    return records


def _read_ooxml_rows(data):
    wb = openpyxl.load_workbook(io.BytesIO(data), data_only=True)
    if not wb.worksheets:
        raise WorkbookFormatError("Workbook contains no worksheets")

    # First sheet by position, whatever its name
    return list(wb.worksheets[0].iter_rows(values_only=True))


class MeetingExcelService:
    """Reads and writes the single-sheet meetings workbook."""

    @staticmethod
    def load_rows(data):
        """Returns the data rows of the first worksheet as header-keyed dicts.

        Both OOXML (.xlsx) and legacy BIFF (.xls) workbooks are read.
        """
        try:
            if is_legacy_workbook(data):
                rows = read_legacy_rows(data)
            else:
                rows = _read_ooxml_rows(data)
        except WorkbookFormatError:
            raise
        except Exception as e:
            raise WorkbookFormatError(f"File is not a readable Excel workbook: {e}") from e
        return _rows_to_records(rows)

    @staticmethod
    def read_meetings(data):
        """Decodes workbook bytes into meetings, numbered by row position.

        Raises WorkbookFormatError when ``data`` is not a workbook.
        """
        rows = MeetingExcelService.load_rows(data)
        meetings = [row_to_meeting(row, index) for index, row in enumerate(rows)]
        logger.debug("Decoded %d meetings from workbook", len(meetings))
        return meetings

    @staticmethod
    def import_meetings(data):
        """All-or-nothing variant of read_meetings returning an ImportResult."""
        try:
            return ImportResult.success(MeetingExcelService.read_meetings(data))
        except Exception as e:
            logger.error(f"Error importing meetings: {e}")
            return ImportResult.failure(str(e))

    @staticmethod
    def build_workbook(meetings):
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE

        ws.append(COLUMNS)
        ExportFormatter.apply_header_style(ws)

        for meeting in meetings:
            row = meeting_to_row(meeting)
            ws.append([ExportFormatter.clean_value(row[name]) for name in COLUMNS])
            ExportFormatter.keep_as_text(ws[ws.max_row])

        ExportFormatter.apply_column_widths(ws, COLUMN_WIDTHS)
        return wb

    @staticmethod
    def generate_meetings_xlsx(meetings):
        wb = MeetingExcelService.build_workbook(meetings)
        output = io.BytesIO()
        wb.save(output)
        output.seek(0)
        return output

    @staticmethod
    def write_meetings(meetings, filename):
        wb = MeetingExcelService.build_workbook(meetings)
        try:
            wb.save(filename)
        except OSError as e:
            raise ExportError(f"Could not write {filename}: {e}") from e
        logger.debug("Wrote %d meetings to %s", len(meetings), filename)
        return filename

    @staticmethod
    def generate_sample_xlsx():
        return MeetingExcelService.generate_meetings_xlsx(sample_meetings())

    @staticmethod
    def export_filename(today=None):
        today = today or date.today()
        return f"meetings-export-{today.isoformat()}.xlsx"


__all__ = ['MeetingExcelService', 'ImportResult', 'SAMPLE_FILENAME']

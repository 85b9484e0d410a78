import click
from flask.cli import with_appcontext

from meeting_tracker import get_store
from meeting_tracker.services.excel import (
    MeetingExcelService,
    SpreadsheetError,
    SAMPLE_FILENAME,
    sample_meetings,
)


@click.command('import-meetings')
@click.option('--file', 'file_path', required=True, type=click.Path(exists=True, dir_okay=False),
              help='Path to the .xlsx workbook')
@with_appcontext
def import_meetings(file_path):
    """Replaces the meeting collection with the meetings of a workbook."""
    print(f"Loading workbook: {file_path}")
    with open(file_path, 'rb') as f:
        result = MeetingExcelService.import_meetings(f.read())

    if not result.ok:
        raise click.ClickException(f"Failed to parse Excel file: {result.error}")

    get_store().replace_all(result.meetings)
    print(f"Import Completed: {len(result.meetings)} meetings")


@click.command('export-meetings')
@click.option('--file', 'file_path', default=None, help='Target .xlsx file')
@with_appcontext
def export_meetings(file_path):
    """Writes the current meeting collection to a workbook."""
    file_path = file_path or MeetingExcelService.export_filename()
    meetings = get_store().all()
    try:
        MeetingExcelService.write_meetings(meetings, file_path)
    except SpreadsheetError as e:
        raise click.ClickException(str(e))
    print(f"Exported {len(meetings)} meetings to {file_path}")


@click.command('sample-template')
@click.option('--file', 'file_path', default=SAMPLE_FILENAME, help='Target .xlsx file')
def sample_template(file_path):
    """Writes the example workbook showing the expected columns."""
    try:
        MeetingExcelService.write_meetings(sample_meetings(), file_path)
    except SpreadsheetError as e:
        raise click.ClickException(str(e))
    print(f"Sample template written to {file_path}")

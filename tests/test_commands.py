import os

import openpyxl

from conftest import build_workbook_bytes


def test_import_meetings_command(app, store, tmp_path):
    path = tmp_path / 'in.xlsx'
    path.write_bytes(build_workbook_bytes([{'Meeting Title': 'CLI meeting'}]))

    result = app.test_cli_runner().invoke(args=['import-meetings', '--file', str(path)])

    assert result.exit_code == 0
    assert 'Import Completed: 1 meetings' in result.output
    assert [m.title for m in store.all()] == ['CLI meeting']


def test_import_meetings_command_rejects_bad_file(app, store, tmp_path):
    path = tmp_path / 'broken.xlsx'
    path.write_bytes(b'garbage')

    result = app.test_cli_runner().invoke(args=['import-meetings', '--file', str(path)])

    assert result.exit_code != 0
    assert 'Failed to parse Excel file' in result.output
    assert len(store) == 3


def test_export_meetings_command(app, tmp_path):
    path = tmp_path / 'out.xlsx'

    result = app.test_cli_runner().invoke(args=['export-meetings', '--file', str(path)])

    assert result.exit_code == 0
    ws = openpyxl.load_workbook(path).active
    assert ws.max_row == 4


def test_sample_template_command(app, tmp_path):
    path = os.path.join(tmp_path, 'template.xlsx')

    result = app.test_cli_runner().invoke(args=['sample-template', '--file', path])

    assert result.exit_code == 0
    assert openpyxl.load_workbook(path).active['B2'].value == 'Acme Corporation'

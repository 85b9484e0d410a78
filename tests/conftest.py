"""
Pytest configuration and fixtures.
"""
import sys
import os
import io
import pytest
import openpyxl

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from meeting_tracker.services.excel.columns import COLUMNS


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test_secret'
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024
    ALLOWED_IMPORT_EXTENSIONS = {'.xlsx', '.xls'}
    IMPORT_URL_TIMEOUT = 5
    SEED_SAMPLE_MEETINGS = True


@pytest.fixture(scope='function')
def app():
    """Create application for testing."""
    from meeting_tracker import create_app
    return create_app(TestConfig)


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def store(app):
    return app.extensions['meeting_store']


def build_workbook_bytes(rows, headers=COLUMNS, sheet_title='Meetings', extra_sheets=()):
    """Builds an in-memory .xlsx with a header row followed by ``rows``.

    ``rows`` are dicts keyed by header; missing keys become empty cells.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title
    ws.append(list(headers))
    for row in rows:
        ws.append([row.get(name) for name in headers])
    for title in extra_sheets:
        wb.create_sheet(title=title).append(['Other'])
    output = io.BytesIO()
    wb.save(output)
    return output.getvalue()


@pytest.fixture
def workbook_bytes():
    return build_workbook_bytes

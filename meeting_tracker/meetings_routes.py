# meeting_tracker/meetings_routes.py

import os

from flask import Blueprint, request, jsonify, send_file, current_app
from werkzeug.utils import secure_filename

from . import get_store
from .models import AgendaItem, Meeting, MeetingField, FieldTypeError, set_field
from .services.excel import (
    MeetingExcelService,
    SpreadsheetError,
    SAMPLE_FILENAME,
    fetch_workbook_bytes,
)

meetings_bp = Blueprint('meetings_bp', __name__)

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def _send_workbook(stream, filename):
    return send_file(
        stream,
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=filename
    )


def _not_found(meeting_id):
    return jsonify(success=False, message=f"Meeting {meeting_id} not found"), 404


def _json_body():
    data = request.get_json(silent=True)
    return {} if data is None else data


def _not_an_object():
    return jsonify(success=False, message='Request body must be a JSON object'), 400


def _export_download_name(requested):
    filename = secure_filename(requested or '') or MeetingExcelService.export_filename()
    if os.path.splitext(filename)[1].lower() != '.xlsx':
        filename += '.xlsx'
    return filename


def _apply_import(result, source):
    """Replaces the collection only when the whole workbook was read."""
    if not result.ok:
        current_app.logger.error(f"Import from {source} failed: {result.error}")
        return None
    get_store().replace_all(result.meetings)
    current_app.logger.info(f"Imported {len(result.meetings)} meetings from {source}")
    return result.meetings


# --- Collection ---

@meetings_bp.route('/meetings', methods=['GET'])
def list_meetings():
    meetings = get_store().search(request.args.get('q', ''), request.args.get('status'))
    return jsonify(meetings=[m.to_dict() for m in meetings], count=len(meetings))


@meetings_bp.route('/meetings/stats', methods=['GET'])
def meeting_stats():
    return jsonify(get_store().stats())


@meetings_bp.route('/meetings', methods=['POST'])
def create_meeting():
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()
    try:
        meeting = Meeting.from_dict(data, meeting_id='')
    except (TypeError, ValueError) as e:
        return jsonify(success=False, message=str(e)), 400
    meeting = get_store().add(meeting)
    return jsonify(success=True, meeting=meeting.to_dict()), 201


@meetings_bp.route('/meetings/<meeting_id>', methods=['GET'])
def get_meeting(meeting_id):
    meeting = get_store().get(meeting_id)
    if meeting is None:
        return _not_found(meeting_id)
    return jsonify(meeting.to_dict())


@meetings_bp.route('/meetings/<meeting_id>', methods=['PUT'])
def update_meeting(meeting_id):
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()
    try:
        meeting = Meeting.from_dict(data, meeting_id=meeting_id)
    except (TypeError, ValueError) as e:
        return jsonify(success=False, message=str(e)), 400
    try:
        meeting = get_store().update(meeting)
    except KeyError:
        return _not_found(meeting_id)
    return jsonify(success=True, meeting=meeting.to_dict())


@meetings_bp.route('/meetings/<meeting_id>', methods=['PATCH'])
def update_meeting_field(meeting_id):
    """Updates a single field, e.g. {"field": "duration", "value": 45}."""
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()
    meeting = get_store().get(meeting_id)
    if meeting is None:
        return _not_found(meeting_id)

    try:
        field = MeetingField(data.get('field'))
    except ValueError:
        return jsonify(success=False, message=f"Unknown field: {data.get('field')}"), 400

    value = data.get('value')
    try:
        if field is MeetingField.AGENDA and isinstance(value, list):
            value = [AgendaItem.from_dict(item) if isinstance(item, dict) else item for item in value]
        set_field(meeting, field, value)
    except FieldTypeError as e:
        return jsonify(success=False, message=str(e)), 400

    try:
        meeting = get_store().update(meeting)
    except KeyError:
        # deleted or replaced by an import since it was read
        return _not_found(meeting_id)
    return jsonify(success=True, meeting=meeting.to_dict())


@meetings_bp.route('/meetings/<meeting_id>', methods=['DELETE'])
def delete_meeting(meeting_id):
    try:
        get_store().delete(meeting_id)
    except KeyError:
        return _not_found(meeting_id)
    return jsonify(success=True)


# --- Excel import / export ---

@meetings_bp.route('/meetings/import', methods=['POST'])
def import_meetings():
    if 'file' not in request.files:
        return jsonify(success=False, message='No file part'), 400

    file = request.files['file']
    if file.filename == '':
        return jsonify(success=False, message='No selected file'), 400

    extension = os.path.splitext(file.filename)[1].lower()
    if extension not in current_app.config['ALLOWED_IMPORT_EXTENSIONS']:
        return jsonify(success=False, message='Invalid file type. Please upload a .xlsx or .xls file.'), 400

    result = MeetingExcelService.import_meetings(file.stream.read())
    meetings = _apply_import(result, file.filename)
    if meetings is None:
        return jsonify(success=False, message=f"Failed to parse Excel file: {result.error}"), 400

    return jsonify(
        success=True,
        message=f"Successfully imported {len(meetings)} meetings from Excel file.",
        meetings=[m.to_dict() for m in meetings]
    )


@meetings_bp.route('/meetings/import-url', methods=['POST'])
def import_meetings_from_url():
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()
    url = data.get('url')
    url = url.strip() if isinstance(url, str) else ''
    if not url:
        return jsonify(success=False, message='No URL provided'), 400

    try:
        content = fetch_workbook_bytes(url, timeout=current_app.config['IMPORT_URL_TIMEOUT'])
    except SpreadsheetError as e:
        current_app.logger.error(f"Error fetching {url}: {e}")
        return jsonify(success=False, message=f"Failed to import from URL: {e}"), 400

    result = MeetingExcelService.import_meetings(content)
    meetings = _apply_import(result, url)
    if meetings is None:
        return jsonify(success=False, message=f"Failed to import from URL: {result.error}"), 400

    return jsonify(
        success=True,
        message=f"Successfully imported {len(meetings)} meetings from URL.",
        meetings=[m.to_dict() for m in meetings]
    )


@meetings_bp.route('/meetings/export', methods=['GET'])
def export_meetings():
    filename = _export_download_name(request.args.get('filename'))
    meetings = get_store().all()
    try:
        stream = MeetingExcelService.generate_meetings_xlsx(meetings)
    except Exception as e:
        current_app.logger.error(f"Error exporting meetings: {e}")
        return jsonify(success=False, message=f"Failed to export meetings: {e}"), 500

    current_app.logger.info(f"Exported {len(meetings)} meetings to {filename}")
    return _send_workbook(stream, filename)


@meetings_bp.route('/meetings/template', methods=['GET'])
def download_sample_template():
    try:
        stream = MeetingExcelService.generate_sample_xlsx()
    except Exception as e:
        current_app.logger.error(f"Error creating template: {e}")
        return jsonify(success=False, message=f"Failed to create template: {e}"), 500
    return _send_workbook(stream, SAMPLE_FILENAME)

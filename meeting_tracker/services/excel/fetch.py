import requests

from .errors import AcquisitionError


def fetch_workbook_bytes(url, timeout=30):
    """Downloads a workbook from ``url``; any non-2xx status is an error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise AcquisitionError(f"Failed to fetch file: {e}") from e

    if not 200 <= response.status_code < 300:
        raise AcquisitionError(f"Failed to fetch file: {response.status_code}")
    return response.content

"""
Thin HTTP client for the reports API.
"""
import logging

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for transport failures and non-2xx responses.

    ``status_code`` is None when the server could not be reached.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ReportsAPI:
    def __init__(self, base_url, session=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_reports(self):
        return self._request('GET', '/api/reports', 'Failed to fetch reports')

    def get_report(self, report_id):
        return self._request('GET', f'/api/reports/{report_id}', 'Failed to fetch report')

    def create_report(self, fields, photo=None):
        """Submit a new report as a multipart form.

        ``photo`` is an optional ``(filename, fileobj)`` pair.
        """
        files = {'photo': photo} if photo else None
        return self._request('POST', '/api/reports', 'Failed to submit the report',
                             data=fields, files=files)

    def update_report(self, report_id, fields):
        return self._request('PUT', f'/api/reports/{report_id}', 'Failed to update report',
                             json=fields)

    def update_status(self, report_id, status):
        return self._request('PUT', f'/api/reports/{report_id}/status',
                             'Failed to update issue status', json={'status': status})

    def _request(self, method, path, failure_message, **kwargs):
        url = self.base_url + path
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {url} failed: {type(e).__name__}: {e}")
            raise ApiError(failure_message) from e

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = (body.get('error') if isinstance(body, dict) else None) or failure_message
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code)

        return response.json()

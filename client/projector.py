"""
Client-side view of the report collection.

The projector keeps a cached copy of the reports returned by the API and
derives the "my reports" and admin views plus the summary counts from it,
so filtering never goes back to the server.
"""
import logging
from collections import namedtuple

from client.api import ApiError

logger = logging.getLogger(__name__)

MY_REPORTS = 'mine'
ADMIN = 'admin'

ReportCounts = namedtuple('ReportCounts', ['total', 'resolved', 'pending', 'in_progress'])

Notice = namedtuple('Notice', ['message', 'level'])


class FilteredReports:
    """Lazy view over a cache snapshot; every iteration re-applies the predicates."""

    def __init__(self, reports, predicate):
        self._reports = reports
        self._predicate = predicate

    def __iter__(self):
        return (report for report in self._reports if self._predicate(report))


class ViewProjector:
    def __init__(self, api, current_user='user1'):
        self.api = api
        self.current_user = current_user
        self.reports = []
        self.notices = []

    def refresh(self):
        """Replace the cache with the server's collection. Returns True on success."""
        try:
            reports = self.api.list_reports()
        except ApiError as e:
            self._notify(str(e), 'error')
            return False
        self.reports = list(reports)
        return True

    def apply_update_result(self, updated):
        for index, report in enumerate(self.reports):
            if report['id'] == updated['id']:
                self.reports[index] = updated
                return True
        logger.warning(f"Updated report {updated['id']} is not in the cache")
        return False

    def filter(self, search='', status='', category='', view=MY_REPORTS):
        term = (search or '').lower()

        def matches(report):
            if term and not any(term in (report.get(name) or '').lower()
                                for name in ('title', 'description', 'location')):
                return False
            if status and report.get('status') != status:
                return False
            if category and report.get('category') != category:
                return False
            if view == MY_REPORTS:
                # Reports without an owner tag are visible to every viewer
                owner = report.get('user_id')
                if owner and owner != self.current_user:
                    return False
            return True

        return FilteredReports(tuple(self.reports), matches)

    def compute_counts(self):
        statuses = [report.get('status') for report in self.reports]
        return ReportCounts(
            total=len(statuses),
            resolved=statuses.count('Resolved'),
            pending=statuses.count('Submitted'),
            in_progress=statuses.count('In Progress'),
        )

    def submit_report(self, fields, photo=None):
        try:
            created = self.api.create_report(fields, photo=photo)
        except ApiError as e:
            self._notify(str(e), 'error')
            return None
        self._notify('Issue reported successfully!', 'success')
        self.refresh()
        return created

    def change_status(self, report_id, status):
        try:
            updated = self.api.update_status(report_id, status)
        except ApiError as e:
            self._notify(str(e), 'error')
            return None
        self.apply_update_result(updated)
        self._notify(f'Issue status updated to {status}', 'success')
        return updated

    def _notify(self, message, level):
        if level == 'error':
            logger.warning(message)
        self.notices.append(Notice(message, level))

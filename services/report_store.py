"""
Canonical report collection.

ReportStore is the only code allowed to write reports. Every record it hands
out is a plain dict produced by Report.to_dict().
"""
import logging
import threading
from datetime import timedelta

from models.Report import Report, REQUIRED_FIELDS, VALID_STATUSES, SUBMITTED, utcnow
from services.photos import has_photo, save_photo, remove_photo

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ['status'] + REQUIRED_FIELDS


class ReportStoreError(Exception):
    pass


class ValidationError(ReportStoreError):
    pass


class NotFoundError(ReportStoreError):
    pass


def _clean(name, value):
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValidationError(f"Field '{name}' must be text")
    return value.strip()


class ReportStore:
    def __init__(self, session, upload_folder):
        self.session = session
        self.upload_folder = upload_folder
        self._lock = threading.Lock()

    def create(self, fields, photo=None):
        values = {name: _clean(name, fields.get(name)) for name in REQUIRED_FIELDS}
        missing = [name for name in REQUIRED_FIELDS if not values[name]]
        if missing:
            logger.warning(f"Rejected report, missing fields: {', '.join(missing)}")
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        owner = _clean('user_id', fields.get('user_id')) or None

        with self._lock:
            # The photo must be on disk before the record becomes visible
            photo_ref = save_photo(photo, self.upload_folder) if has_photo(photo) else None
            now = utcnow()
            report = Report(photo=photo_ref, user_id=owner, status=SUBMITTED,
                            created_at=now, updated_at=now, **values)
            try:
                self.session.add(report)
                self.session.commit()
            except Exception:
                self.session.rollback()
                remove_photo(photo_ref, self.upload_folder)
                raise

        logger.info(f"Created report {report.id} ({report.category})")
        return report.to_dict()

    def list(self):
        return [r.to_dict() for r in Report.query.order_by(Report.id).all()]

    def get(self, report_id):
        return self._find(report_id).to_dict()

    def update(self, report_id, fields):
        with self._lock:
            report = self._find(report_id)

            # Absent and blank fields are left untouched
            changes = {}
            for name in UPDATABLE_FIELDS:
                value = _clean(name, fields.get(name))
                if value:
                    changes[name] = value

            if 'status' in changes and changes['status'] not in VALID_STATUSES:
                logger.warning(f"Rejected status {changes['status']!r} for report {report_id}")
                raise ValidationError(f"Invalid status. Allowed statuses: {', '.join(VALID_STATUSES)}")

            for name, value in changes.items():
                setattr(report, name, value)

            now = utcnow()
            if now <= report.updated_at:
                now = report.updated_at + timedelta(microseconds=1)
            report.updated_at = now

            try:
                self.session.commit()
            except Exception:
                self.session.rollback()
                raise

        logger.info(f"Updated report {report.id}: {', '.join(sorted(changes)) or 'no field changes'}")
        return report.to_dict()

    def update_status(self, report_id, status):
        if not _clean('status', status):
            raise ValidationError('Status is required')
        return self.update(report_id, {'status': status})

    def _find(self, report_id):
        report = self.session.get(Report, report_id)
        if report is None:
            raise NotFoundError('Report not found')
        return report

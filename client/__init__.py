from client.api import ReportsAPI, ApiError
from client.projector import ViewProjector, ReportCounts, MY_REPORTS, ADMIN

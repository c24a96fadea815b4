"""Example: use the service layer without Flask.

Generates a month of mock attendance for the JSON roster and prints the
status tally plus the first page of the dashboard table.
"""

from datetime import timedelta

from config import get_settings_module

from attendance_dashboard.attendance.service import AttendanceQuery, paginate
from attendance_dashboard.common.datetime_utils import today_local
from attendance_dashboard.container import build_container
from attendance_dashboard.main import load_settings
from attendance_dashboard.reports.service import summarize_statuses


def main():
    settings = load_settings(get_settings_module(), {"DATA_SOURCE": "mock", "EMPLOYEE_REGISTRY": "json"})
    container = build_container(settings)

    end = today_local()
    query = AttendanceQuery(start=end - timedelta(days=30), end=end)
    rows = container.attendance_service.get_detail_rows(query)

    print(summarize_statuses(rows).to_dict())
    for row in paginate(rows, page=1, limit=5).items:
        print(row.to_dict())


if __name__ == "__main__":
    main()

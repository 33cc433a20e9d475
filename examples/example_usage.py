"""Example: build last week's attendance report through the service layer (no Flask)."""

import importlib
from datetime import date

from dotenv import load_dotenv

from config import get_settings_module
from workforce_attendance.common.datetime_utils import previous_week_range
from workforce_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    start, end = previous_week_range(date.today())
    data = container.report_service.build_attendance_report(start=start, end=end, department="Security")
    for row in data.summary:
        print(row)


if __name__ == "__main__":
    main()

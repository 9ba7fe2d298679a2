"""Example: print an employee's hour balance through the service layer (no Flask)."""

import importlib

from config import get_settings_module

from src.hours_bank.hours_bank.common.datetime_utils import reference_tz
from src.hours_bank.hours_bank.common.formatting import format_signed_hours
from src.hours_bank.hours_bank.container import build_container
from src.hours_bank.hours_bank.core.enums import SeriesView


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, tz=reference_tz(settings.REFERENCE_TIMEZONE))
    dashboard = container.hours_service.get_dashboard(1, SeriesView.WEEK)
    print("Saldo:", format_signed_hours(dashboard.summary.total))
    for bucket in dashboard.series:
        print(bucket.label, bucket.positive, bucket.negative)


if __name__ == "__main__":
    main()

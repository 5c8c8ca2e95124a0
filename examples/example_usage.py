"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the attendance rules live in the services and
the pure derivation modules.
"""

import importlib

from config import get_settings_module

from src.student_attendance.student_attendance.container import build_container
from src.student_attendance.student_attendance.core.enums import SessionTab


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container()
    print(container.dashboard_service.build_summary_ui(settings.DEFAULT_STUDENT_ID, user_name=settings.DEFAULT_USER_NAME))
    for tab in SessionTab:
        print(tab.label, container.session_service.tab_view_ui(settings.DEFAULT_STUDENT_ID, tab))


if __name__ == "__main__":
    main()

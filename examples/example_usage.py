"""Example: drive the service layer directly (no HTTP).

Controllers are a thin layer; the business rules live in the services.
"""

from datetime import date, time

from plant_management.main import create_app


def main():
    app = create_app()
    container = app.extensions["plant_management"]

    with app.app_context():
        today = date.today()
        records = container.attendance_service.initialize_attendance_for_date(today)
        print(f"{len(records)} attendance rows ready for {today}")

        employees = container.employee_service.list_all()
        if employees:
            record = container.attendance_service.mark_attendance(employees[0].employee_id, today, time(8, 0), None)
            print(record.to_dict())


if __name__ == "__main__":
    main()

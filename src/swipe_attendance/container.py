from __future__ import annotations

from dataclasses import dataclass

from .access_events.mysql_access_event_repository import MySQLAccessEventRepository
from .attendance.aggregator import DailyAggregator
from .attendance.factory import DayStrategyFactory
from .attendance.service import AttendanceReportService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_department_repository import MySQLDepartmentRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .regularizations.mysql_regularization_repository import MySQLRegularizationRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    access_events_repo: MySQLAccessEventRepository
    employees_repo: MySQLEmployeeRepository
    departments_repo: MySQLDepartmentRepository
    regularizations_repo: MySQLRegularizationRepository
    leaves_repo: MySQLLeaveRepository

    attendance_report_service: AttendanceReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    access_events_repo = MySQLAccessEventRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    departments_repo = MySQLDepartmentRepository(conn)
    regularizations_repo = MySQLRegularizationRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)

    attendance_report_service = AttendanceReportService(
        access_events_repo,
        employees_repo,
        departments_repo,
        regularizations_repo,
        leaves_repo,
        aggregator=DailyAggregator(strategy_factory=DayStrategyFactory()),
    )

    return Container(
        conn=conn,
        access_events_repo=access_events_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        regularizations_repo=regularizations_repo,
        leaves_repo=leaves_repo,
        attendance_report_service=attendance_report_service,
    )

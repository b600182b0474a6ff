from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .advances.memory_advance_repository import InMemoryAdvanceRepository
from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .advances.service import AdvanceService
from .attendance.factory import AttendanceTransitionFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LOCKOUT_MINUTES, DEFAULT_MAX_LOGIN_ATTEMPTS, MAX_PHOTO_BYTES
from .core.enums import EditWindow, HalfDayPolicy, StorageBackend
from .database.connection import DBConfig, DatabaseConnection
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payments.memory_payment_repository import InMemorySalaryPaymentRepository
from .payments.mysql_payment_repository import MySQLSalaryPaymentRepository
from .payments.repository import SalaryPaymentRepository
from .payments.service import PaymentService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .reports.service import ReportService
from .users.memory_user_repository import InMemorySettingsRepository, InMemoryUserRepository
from .users.mysql_user_repository import MySQLSettingsRepository, MySQLUserRepository
from .users.repository import SettingsRepository, UserRepository
from .users.service import AuthService
from .vehicles.memory_vehicle_repository import InMemoryFuelRecordRepository, InMemoryVehicleRepository
from .vehicles.mysql_vehicle_repository import MySQLFuelRecordRepository, MySQLVehicleRepository
from .vehicles.repository import FuelRecordRepository, VehicleRepository
from .vehicles.service import VehicleService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    advances_repo: AdvanceRepository
    payments_repo: SalaryPaymentRepository
    vehicles_repo: VehicleRepository
    fuel_repo: FuelRecordRepository
    users_repo: UserRepository
    settings_repo: SettingsRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    advance_service: AdvanceService
    payment_service: PaymentService
    vehicle_service: VehicleService
    payroll_service: PayrollService
    report_service: ReportService


def build_container(
    *,
    backend: StorageBackend | str = StorageBackend.MYSQL,
    db_config: Optional[dict] = None,
    admin_email: Optional[str] = None,
    max_login_attempts: int = DEFAULT_MAX_LOGIN_ATTEMPTS,
    lockout_minutes: int = DEFAULT_LOCKOUT_MINUTES,
    max_photo_bytes: int = MAX_PHOTO_BYTES,
    edit_window: EditWindow | str = EditWindow.TODAY,
    half_day_policy: HalfDayPolicy | str = HalfDayPolicy.FULL,
) -> Container:
    backend = StorageBackend(backend)
    conn: Optional[DatabaseConnection] = None

    if backend == StorageBackend.MYSQL:
        if db_config is None:
            raise ValueError("db_config is required for the mysql backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        employees_repo = MySQLEmployeeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        advances_repo = MySQLAdvanceRepository(conn)
        payments_repo = MySQLSalaryPaymentRepository(conn)
        vehicles_repo = MySQLVehicleRepository(conn)
        fuel_repo = MySQLFuelRecordRepository(conn)
        users_repo = MySQLUserRepository(conn)
        settings_repo = MySQLSettingsRepository(conn)
    else:
        employees_repo = InMemoryEmployeeRepository()
        attendance_repo = InMemoryAttendanceRepository()
        advances_repo = InMemoryAdvanceRepository()
        payments_repo = InMemorySalaryPaymentRepository()
        vehicles_repo = InMemoryVehicleRepository()
        fuel_repo = InMemoryFuelRecordRepository()
        users_repo = InMemoryUserRepository()
        settings_repo = InMemorySettingsRepository()

    auth_service = AuthService(
        users_repo,
        settings_repo,
        admin_email=admin_email,
        max_attempts=max_login_attempts,
        lockout_minutes=lockout_minutes,
    )
    employee_service = EmployeeService(employees_repo, max_photo_bytes=max_photo_bytes)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        transition_factory=AttendanceTransitionFactory(),
        edit_window=EditWindow(edit_window),
    )
    advance_service = AdvanceService(advances_repo, employees_repo)
    payment_service = PaymentService(payments_repo, employees_repo)
    vehicle_service = VehicleService(vehicles_repo, fuel_repo)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        advances_repo,
        payments_repo,
        calculator=StandardPayrollCalculator(half_day_policy=HalfDayPolicy(half_day_policy)),
    )
    report_service = ReportService(payroll_service, employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        payments_repo=payments_repo,
        vehicles_repo=vehicles_repo,
        fuel_repo=fuel_repo,
        users_repo=users_repo,
        settings_repo=settings_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        advance_service=advance_service,
        payment_service=payment_service,
        vehicle_service=vehicle_service,
        payroll_service=payroll_service,
        report_service=report_service,
    )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.service import AbsenceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .capacity.service import CapacityMatrixService
from .certifications.mysql_certification_repository import MySQLCertificationRepository, MySQLCourseRepository
from .certifications.service import CertificationService
from .core.constants import DEFAULT_COMPANY_NAME
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .documents.mysql_document_repository import MySQLDocumentRepository
from .documents.service import DocumentService
from .employees.kiosk import KioskProvisioner
from .employees.mysql_employee_repository import MySQLEmployeeRepository, MySQLKioskCredentialRepository
from .employees.service import EmployeeService
from .materials.mysql_material_repository import MySQLMaterialRepository
from .materials.service import MaterialRequestService
from .org.service import OrgChartService
from .payroll.indicators import DEFAULT_INDICATORS_URL, EconomicIndicatorsClient
from .payroll.mysql_payroll_repository import MySQLPayrollParameterRepository
from .payroll.service import PayrollParameterService
from .reviews.mysql_evaluation_repository import MySQLEvaluationRepository
from .reviews.service import PerformanceReviewService
from .settings.model import LOOKUP_KINDS
from .settings.mysql_lookup_repository import MySQLLookupRepository
from .settings.service import LookupService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.service import ShiftService
from .storage.file_storage import LocalFileStorage
from .subcontractors.mysql_procurement_repository import MySQLProcurementRepository
from .subcontractors.service import SubcontractorService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    procurement_conn: Optional[DatabaseConnection]
    storage: LocalFileStorage

    employee_service: EmployeeService
    attendance_service: AttendanceService
    absence_service: AbsenceService
    certification_service: CertificationService
    document_service: DocumentService
    material_service: MaterialRequestService
    review_service: PerformanceReviewService
    payroll_service: PayrollParameterService
    lookup_service: LookupService
    shift_service: ShiftService
    subcontractor_service: Optional[SubcontractorService]
    dashboard_service: DashboardService
    capacity_service: CapacityMatrixService
    org_chart_service: OrgChartService


def build_container(
    *,
    db_config: dict,
    procurement_db_config: Optional[dict] = None,
    storage_root: str = "storage",
    indicators_url: str = DEFAULT_INDICATORS_URL,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config), name="rrhh")
    procurement_conn = (
        DatabaseConnection.get_instance(DBConfig.from_dict(procurement_db_config), name="procurement")
        if procurement_db_config
        else None
    )
    storage = LocalFileStorage(storage_root)

    employees_repo = MySQLEmployeeRepository(conn)
    kiosk = KioskProvisioner(MySQLKioskCredentialRepository(conn))
    attendance_repo = MySQLAttendanceRepository(conn)
    absences_repo = MySQLAbsenceRepository(conn)
    courses_repo = MySQLCourseRepository(conn)
    certifications_repo = MySQLCertificationRepository(conn)

    attendance_service = AttendanceService(attendance_repo, kiosk)
    absence_service = AbsenceService(absences_repo)

    return Container(
        conn=conn,
        procurement_conn=procurement_conn,
        storage=storage,
        employee_service=EmployeeService(employees_repo, kiosk, storage),
        attendance_service=attendance_service,
        absence_service=absence_service,
        certification_service=CertificationService(certifications_repo, courses_repo, storage),
        document_service=DocumentService(MySQLDocumentRepository(conn), storage),
        material_service=MaterialRequestService(MySQLMaterialRepository(conn)),
        review_service=PerformanceReviewService(MySQLEvaluationRepository(conn), employees_repo),
        payroll_service=PayrollParameterService(
            MySQLPayrollParameterRepository(conn),
            EconomicIndicatorsClient(indicators_url),
        ),
        lookup_service=LookupService({key: MySQLLookupRepository(conn, kind) for key, kind in LOOKUP_KINDS.items()}),
        shift_service=ShiftService(MySQLShiftRepository(conn)),
        subcontractor_service=(
            SubcontractorService(MySQLProcurementRepository(procurement_conn)) if procurement_conn else None
        ),
        dashboard_service=DashboardService(
            employees_repo,
            attendance_service,
            absence_service,
            certifications_repo,
            courses_repo,
        ),
        capacity_service=CapacityMatrixService(employees_repo, certifications_repo, courses_repo),
        org_chart_service=OrgChartService(employees_repo, company_name=company_name),
    )

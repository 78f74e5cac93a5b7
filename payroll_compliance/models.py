"""Data types for payroll compliance: jurisdictions, rules, reports and audit records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import ClassVar, Dict, List, Optional, Tuple

__all__ = [
    "ComplianceErrorCode",
    "ComplianceError",
    "Jurisdiction",
    "ComplianceRuleType",
    "ViolationSeverity",
    "ReportType",
    "ReportStatus",
    "ComplianceRule",
    "ComplianceViolation",
    "ComplianceValidation",
    "RegulatoryReport",
    "ComplianceMetrics",
    "AuditEntry",
    "JurisdictionConfig",
    "ComplianceSettings",
]

_U32_MASK = 0xFFFFFFFF


class ComplianceErrorCode(IntEnum):
    """Numeric codes of the compliance errors."""

    UNSUPPORTED_JURISDICTION = 1
    COMPLIANCE_RULE_VIOLATION = 2
    REPORTING_FAILED = 3
    AUDIT_TRAIL_ERROR = 4
    MONITORING_THRESHOLD_EXCEEDED = 5
    INVALID_COMPLIANCE_CONFIG = 6
    UNAUTHORIZED_COMPLIANCE_OP = 7
    COMPLIANCE_UPGRADE_FAILED = 8


_ERROR_MESSAGES = {
    ComplianceErrorCode.UNSUPPORTED_JURISDICTION: "Jurisdiction not supported",
    ComplianceErrorCode.COMPLIANCE_RULE_VIOLATION: "Compliance rule validation failed",
    ComplianceErrorCode.REPORTING_FAILED: "Regulatory reporting failed",
    ComplianceErrorCode.AUDIT_TRAIL_ERROR: "Audit trail operation failed",
    ComplianceErrorCode.MONITORING_THRESHOLD_EXCEEDED: "Compliance monitoring threshold exceeded",
    ComplianceErrorCode.INVALID_COMPLIANCE_CONFIG: "Invalid compliance configuration",
    ComplianceErrorCode.UNAUTHORIZED_COMPLIANCE_OP: "Unauthorized compliance operation",
    ComplianceErrorCode.COMPLIANCE_UPGRADE_FAILED: "Compliance upgrade failed",
}


class ComplianceError(Exception):
    """Raised when a compliance operation fails; carries a ComplianceErrorCode."""

    def __init__(self, code: ComplianceErrorCode, message: Optional[str] = None) -> None:
        self.code = ComplianceErrorCode(code)
        self.message = message or _ERROR_MESSAGES[self.code]
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} (code {int(self.code)})"


@dataclass(frozen=True)
class _Variant:
    """A named value from a fixed set, or a custom name outside it."""

    name: str
    is_custom: bool = False

    _KNOWN: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        if not self.is_custom and self.name not in self._KNOWN:
            raise ValueError(
                f"unknown {type(self).__name__} {self.name!r}; "
                f"use is_custom=True for names outside {', '.join(self._KNOWN)}"
            )

    def __str__(self) -> str:
        if self.is_custom:
            return f'Custom("{self.name}")'
        return self.name


class Jurisdiction(_Variant):
    """A supported jurisdiction, or a custom one with its own rules."""

    _KNOWN: ClassVar[Tuple[str, ...]] = (
        "US", "EU", "UK", "CA", "AU", "SG", "JP", "IN", "BR", "MX",
    )


class ComplianceRuleType(_Variant):
    """Kind of compliance rule."""

    _KNOWN: ClassVar[Tuple[str, ...]] = (
        "MinimumWage",
        "MaximumHours",
        "OvertimeRate",
        "TaxWithholding",
        "SocialSecurity",
        "UnemploymentInsurance",
        "WorkersCompensation",
        "HealthInsurance",
        "PensionContribution",
        "LeaveEntitlement",
    )


class ReportType(_Variant):
    """Kind of regulatory report."""

    _KNOWN: ClassVar[Tuple[str, ...]] = (
        "PayrollTax",
        "EmploymentTax",
        "SocialSecurity",
        "Unemployment",
        "WorkersComp",
        "HealthInsurance",
        "Pension",
    )


for _cls in (Jurisdiction, ComplianceRuleType, ReportType):
    for _name in _cls._KNOWN:
        setattr(_cls, _name, _cls(_name))
del _cls, _name


class ViolationSeverity(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ReportStatus(Enum):
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    AMENDED = "Amended"


@dataclass(frozen=True)
class ComplianceViolation:
    """Details of one failed compliance rule."""

    rule_type: ComplianceRuleType
    jurisdiction: Jurisdiction
    violation_type: str
    severity: ViolationSeverity
    description: str
    timestamp: int


@dataclass(frozen=True)
class ComplianceRule:
    """A rule of a jurisdiction, in force from effective_date until expiry_date."""

    rule_type: ComplianceRuleType
    jurisdiction: Jurisdiction
    min_value: int
    required: bool
    description: str
    effective_date: int
    max_value: Optional[int] = None
    expiry_date: Optional[int] = None

    def is_active(self, now: int) -> bool:
        """True if the rule is in force at time ``now``."""
        if self.effective_date > now:
            return False
        return self.expiry_date is None or self.expiry_date > now

    def check(
        self, payroll_amount: int, hours_worked: Optional[int], now: int
    ) -> Optional[ComplianceViolation]:
        """Return the violation this payroll causes, or None if it passes."""
        if self.rule_type == ComplianceRuleType.MinimumWage:
            if payroll_amount < self.min_value:
                return ComplianceViolation(
                    rule_type=self.rule_type,
                    jurisdiction=self.jurisdiction,
                    violation_type="below_minimum_wage",
                    severity=ViolationSeverity.HIGH,
                    description="Payroll amount below minimum wage requirement",
                    timestamp=now,
                )
        elif self.rule_type == ComplianceRuleType.MaximumHours:
            if hours_worked is not None and self.max_value is not None:
                # The limit is compared as an unsigned 32-bit value.
                if hours_worked > (self.max_value & _U32_MASK):
                    return ComplianceViolation(
                        rule_type=self.rule_type,
                        jurisdiction=self.jurisdiction,
                        violation_type="exceeds_maximum_hours",
                        severity=ViolationSeverity.MEDIUM,
                        description="Hours worked exceed maximum allowed",
                        timestamp=now,
                    )
        return None


@dataclass
class ComplianceValidation:
    """Outcome of validating a payroll against a jurisdiction's rules."""

    is_compliant: bool
    timestamp: int
    violations: List[ComplianceViolation] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class RegulatoryReport:
    report_id: str
    jurisdiction: Jurisdiction
    report_type: ReportType
    period_start: int
    period_end: int
    submitted_at: int
    status: ReportStatus = ReportStatus.DRAFT
    data: Dict[str, str] = field(default_factory=dict)


@dataclass
class ComplianceMetrics:
    jurisdiction: Jurisdiction
    total_employees: int
    total_payroll_amount: int
    compliance_score: int
    violations_count: int
    last_audit_date: int
    next_audit_date: int


@dataclass
class AuditEntry:
    entry_id: str
    action: str
    actor: str
    timestamp: int
    block_number: int
    transaction_hash: str
    target: Optional[str] = None
    details: Dict[str, str] = field(default_factory=dict)


@dataclass
class JurisdictionConfig:
    """Rules and schedules for one jurisdiction; frequencies are in seconds."""

    jurisdiction: Jurisdiction
    reporting_frequency: int
    audit_frequency: int
    enabled: bool
    last_updated: int
    rules: List[ComplianceRule] = field(default_factory=list)


@dataclass
class ComplianceSettings:
    last_updated: int
    enabled_jurisdictions: List[Jurisdiction] = field(default_factory=list)
    audit_trail_enabled: bool = True
    monitoring_enabled: bool = True
    reporting_enabled: bool = True
    compliance_officer: Optional[str] = None
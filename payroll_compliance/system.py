"""Compliance bookkeeping: jurisdiction configs, validation, reports, metrics and audit trail."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .models import (
    AuditEntry,
    ComplianceError,
    ComplianceErrorCode,
    ComplianceMetrics,
    ComplianceRule,
    ComplianceSettings,
    ComplianceValidation,
    Jurisdiction,
    JurisdictionConfig,
    RegulatoryReport,
    ReportStatus,
    ReportType,
)

__all__ = ["Ledger", "Event", "ComplianceSystem"]

_LOW_COMPLIANCE_THRESHOLD = 70
_HIGH_VIOLATION_THRESHOLD = 10
_AUDIT_INTERVAL = 86400 * 30
_TRANSACTION_HASH = "tx_hash_placeholder"
_NOT_CONFIGURED = "Jurisdiction not configured or disabled"


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class Ledger:
    """Current time (seconds) and block sequence number seen by the system."""

    timestamp: int = 0
    sequence: int = 0

    def advance(self, seconds: int = 0, blocks: int = 1) -> None:
        """Move time forward by ``seconds`` and the sequence by ``blocks``."""
        if seconds < 0 or blocks < 0:
            raise ValueError("the ledger cannot move backwards")
        self.timestamp += seconds
        self.sequence += blocks


@dataclass(frozen=True)
class Event:
    """A published notification: a topic and its payload."""

    topic: str
    data: Tuple[Any, ...]


@dataclass
class ComplianceSystem:
    """Holds compliance state and enforces who may change it."""

    owner: Optional[str] = None
    ledger: Ledger = field(default_factory=Ledger)
    events: List[Event] = field(default_factory=list, init=False)
    _configs: Dict[Jurisdiction, JurisdictionConfig] = field(
        default_factory=dict, init=False, repr=False
    )
    _reports: Dict[str, RegulatoryReport] = field(default_factory=dict, init=False, repr=False)
    _metrics: Dict[Jurisdiction, ComplianceMetrics] = field(
        default_factory=dict, init=False, repr=False
    )
    _audit_entries: Dict[str, AuditEntry] = field(default_factory=dict, init=False, repr=False)
    _audit_index: Dict[str, List[str]] = field(default_factory=dict, init=False, repr=False)
    _settings: Optional[ComplianceSettings] = field(default=None, init=False, repr=False)
    _monitoring_schedule: Dict[Jurisdiction, int] = field(
        default_factory=dict, init=False, repr=False
    )

    # -- authorisation -------------------------------------------------------

    def _require_authorized(self, caller: str) -> None:
        if self.owner is not None and caller == self.owner:
            return
        if self._settings is not None and self._settings.compliance_officer == caller:
            return
        raise ComplianceError(ComplianceErrorCode.UNAUTHORIZED_COMPLIANCE_OP)

    # -- jurisdictions -------------------------------------------------------

    def set_jurisdiction_config(self, caller: str, config: JurisdictionConfig) -> None:
        """Add or replace the configuration of a jurisdiction."""
        self._require_authorized(caller)
        self._configs[config.jurisdiction] = config
        self.add_audit_entry("jurisdiction_config_updated", caller)

    def get_jurisdiction_config(self, jurisdiction: Jurisdiction) -> Optional[JurisdictionConfig]:
        return self._configs.get(jurisdiction)

    def toggle_jurisdiction(self, caller: str, jurisdiction: Jurisdiction, enabled: bool) -> None:
        """Enable or disable a configured jurisdiction; unknown ones are left alone."""
        self._require_authorized(caller)
        config = self._configs.get(jurisdiction)
        if config is None:
            return
        config.enabled = enabled
        config.last_updated = self.ledger.timestamp
        self.add_audit_entry("jurisdiction_toggled", caller, details={"enabled": _flag(enabled)})

    # -- validation ----------------------------------------------------------

    def validate_payroll_compliance(
        self,
        employer: str,
        employee: str,
        jurisdiction: Jurisdiction,
        payroll_amount: int,
        hours_worked: Optional[int] = None,
    ) -> ComplianceValidation:
        """Check a payroll against the active rules of a jurisdiction."""
        now = self.ledger.timestamp
        config = self._configs.get(jurisdiction)
        if config is None or not config.enabled:
            return ComplianceValidation(
                is_compliant=False, timestamp=now, warnings=[_NOT_CONFIGURED]
            )

        violations = []
        warnings = []
        for rule in config.rules:
            if not rule.is_active(now):
                continue
            violation = rule.check(payroll_amount, hours_worked, now)
            if violation is None:
                continue
            if rule.required:
                violations.append(violation)
            else:
                warnings.append(violation.description)

        return ComplianceValidation(
            is_compliant=not violations,
            timestamp=now,
            violations=violations,
            warnings=warnings,
        )

    # -- regulatory reports --------------------------------------------------

    def _report_id(self, period_start: int) -> str:
        return f'report_"compliance"_{period_start}_{self.ledger.timestamp}'

    def _collect_report_data(self, period_start: int, period_end: int) -> Dict[str, str]:
        return {
            "period_start": str(period_start),
            "period_end": str(period_end),
            "jurisdiction": "US",
            "report_type": "compliance",
            "generated_at": str(self.ledger.timestamp),
        }

    def generate_regulatory_report(
        self,
        caller: str,
        jurisdiction: Jurisdiction,
        report_type: ReportType,
        period_start: int,
        period_end: int,
    ) -> RegulatoryReport:
        """Create and store a draft report for the given period."""
        self._require_authorized(caller)
        report_id = self._report_id(period_start)
        report = RegulatoryReport(
            report_id=report_id,
            jurisdiction=jurisdiction,
            report_type=report_type,
            period_start=period_start,
            period_end=period_end,
            submitted_at=self.ledger.timestamp,
            status=ReportStatus.DRAFT,
            data=self._collect_report_data(period_start, period_end),
        )
        self._reports[report_id] = report
        self.add_audit_entry(
            "regulatory_report_generated",
            caller,
            details={"report_id": report_id, "report_type": str(report_type)},
        )
        return report

    def submit_regulatory_report(self, caller: str, report_id: str) -> None:
        """Mark a stored report as submitted; unknown ids are ignored."""
        self._require_authorized(caller)
        report = self._reports.get(report_id)
        if report is None:
            return
        report.status = ReportStatus.SUBMITTED
        self.add_audit_entry(
            "regulatory_report_submitted", caller, details={"report_id": report_id}
        )

    def get_regulatory_report(self, report_id: str) -> Optional[RegulatoryReport]:
        return self._reports.get(report_id)

    # -- monitoring ----------------------------------------------------------

    def update_compliance_metrics(
        self,
        jurisdiction: Jurisdiction,
        total_employees: int,
        total_payroll_amount: int,
        violations_count: int,
    ) -> ComplianceMetrics:
        """Record metrics, scoring 0-100, and publish alerts past the thresholds."""
        now = self.ledger.timestamp
        if total_employees > 0:
            score = (1.0 - violations_count / total_employees) * 100.0
            compliance_score = max(0, int(score))
        else:
            compliance_score = 100

        metrics = ComplianceMetrics(
            jurisdiction=jurisdiction,
            total_employees=total_employees,
            total_payroll_amount=total_payroll_amount,
            compliance_score=compliance_score,
            violations_count=violations_count,
            last_audit_date=now,
            next_audit_date=now + _AUDIT_INTERVAL,
        )
        self._metrics[jurisdiction] = metrics
        self._check_thresholds(metrics)
        return metrics

    def _check_thresholds(self, metrics: ComplianceMetrics) -> None:
        if metrics.compliance_score < _LOW_COMPLIANCE_THRESHOLD:
            self.events.append(
                Event("low_compliance", (metrics.jurisdiction, metrics.compliance_score))
            )
        if metrics.violations_count > _HIGH_VIOLATION_THRESHOLD:
            self.events.append(
                Event("high_violations", (metrics.jurisdiction, metrics.violations_count))
            )

    def get_compliance_metrics(self, jurisdiction: Jurisdiction) -> Optional[ComplianceMetrics]:
        return self._metrics.get(jurisdiction)

    # -- audit trail ---------------------------------------------------------

    def add_audit_entry(
        self,
        action: str,
        actor: str,
        target: Optional[str] = None,
        details: Optional[Dict[str, str]] = None,
    ) -> AuditEntry:
        """Record an action; entries share an id within one timestamp and block."""
        now = self.ledger.timestamp
        entry_id = f"audit_{now}_{self.ledger.sequence}"
        entry = AuditEntry(
            entry_id=entry_id,
            action=action,
            actor=actor,
            timestamp=now,
            block_number=self.ledger.sequence,
            transaction_hash=_TRANSACTION_HASH,
            target=target,
            details=dict(details or {}),
        )
        self._audit_entries[entry_id] = entry
        self._audit_index.setdefault(actor, []).append(entry_id)
        return entry

    def get_audit_entries(self, address: str) -> List[AuditEntry]:
        """Entries recorded for an actor, in the order they were indexed."""
        return [
            self._audit_entries[entry_id]
            for entry_id in self._audit_index.get(address, [])
            if entry_id in self._audit_entries
        ]

    def get_audit_entry(self, entry_id: str) -> Optional[AuditEntry]:
        return self._audit_entries.get(entry_id)

    # -- settings ------------------------------------------------------------

    def set_compliance_settings(self, caller: str, settings: ComplianceSettings) -> None:
        self._require_authorized(caller)
        self._settings = settings
        self.add_audit_entry(
            "compliance_settings_updated",
            caller,
            details={
                "audit_trail_enabled": _flag(settings.audit_trail_enabled),
                "monitoring_enabled": _flag(settings.monitoring_enabled),
            },
        )

    def get_compliance_settings(self) -> Optional[ComplianceSettings]:
        return self._settings

    def set_compliance_officer(self, caller: str, officer: str) -> None:
        """Assign the compliance officer; only the owner may do this."""
        if self.owner is None or caller != self.owner:
            raise ComplianceError(ComplianceErrorCode.UNAUTHORIZED_COMPLIANCE_OP)
        now = self.ledger.timestamp
        if self._settings is None:
            self._settings = ComplianceSettings(last_updated=now)
        self._settings.compliance_officer = officer
        self._settings.last_updated = now
        self.add_audit_entry(
            "compliance_officer_updated",
            caller,
            target=officer,
            details={"action": "set_officer"},
        )

    def list_enabled_jurisdictions(self) -> List[Jurisdiction]:
        if self._settings is None:
            return []
        return list(self._settings.enabled_jurisdictions)

    def get_compliance_summary(self, jurisdiction: Jurisdiction) -> Dict[str, str]:
        """Stored metrics of a jurisdiction as strings; empty if none."""
        metrics = self._metrics.get(jurisdiction)
        if metrics is None:
            return {}
        return {
            "compliance_score": str(metrics.compliance_score),
            "violations_count": str(metrics.violations_count),
            "total_employees": str(metrics.total_employees),
            "last_audit_date": str(metrics.last_audit_date),
            "next_audit_date": str(metrics.next_audit_date),
        }

    # -- upgrades and scheduling ---------------------------------------------

    def upgrade_compliance_rules(
        self, caller: str, jurisdiction: Jurisdiction, new_rules: List[ComplianceRule]
    ) -> None:
        """Replace the rules of a configured jurisdiction."""
        self._require_authorized(caller)
        config = self._configs.get(jurisdiction)
        if config is None:
            raise ComplianceError(ComplianceErrorCode.COMPLIANCE_UPGRADE_FAILED)
        config.rules = list(new_rules)
        config.last_updated = self.ledger.timestamp
        self.add_audit_entry(
            "compliance_rules_upgraded", caller, details={"jurisdiction": str(jurisdiction)}
        )

    def get_supported_jurisdictions(self) -> List[Jurisdiction]:
        return [Jurisdiction.US, Jurisdiction.EU, Jurisdiction.UK]

    def schedule_compliance_monitoring(
        self, caller: str, jurisdiction: Jurisdiction, frequency_hours: int
    ) -> int:
        """Record the next monitoring time for a jurisdiction and return it."""
        self._require_authorized(caller)
        next_check = self.ledger.timestamp + frequency_hours * 3600
        self._monitoring_schedule[jurisdiction] = next_check
        self.add_audit_entry(
            "compliance_monitoring_scheduled",
            caller,
            details={"frequency_hours": str(frequency_hours), "next_check": str(next_check)},
        )
        return next_check
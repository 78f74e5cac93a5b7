# payroll-compliance

Keep payroll runs in line with the rules of each jurisdiction you pay people
in. The package holds rule sets per jurisdiction, checks payroll amounts and
hours against them, produces draft regulatory reports, scores compliance,
publishes alerts and keeps an audit trail of administrative changes. All
state lives in memory and runs on a small ledger clock (a timestamp and a
block number), so it is easy to embed in a service or drive from tests.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from payroll_compliance.models import (
    ComplianceRule,
    ComplianceRuleType,
    Jurisdiction,
    JurisdictionConfig,
)
from payroll_compliance.system import ComplianceSystem, Ledger

ledger = Ledger(timestamp=1_700_000_000, sequence=1)
system = ComplianceSystem(owner="owner-address", ledger=ledger)

minimum_wage = ComplianceRule(
    rule_type=ComplianceRuleType.MinimumWage,
    jurisdiction=Jurisdiction.US,
    min_value=1000,
    required=True,
    description="Minimum wage",
    effective_date=0,
)
system.set_jurisdiction_config(
    "owner-address",
    JurisdictionConfig(
        jurisdiction=Jurisdiction.US,
        reporting_frequency=2_592_000,
        audit_frequency=2_592_000,
        enabled=True,
        last_updated=ledger.timestamp,
        rules=[minimum_wage],
    ),
)

result = system.validate_payroll_compliance("employer", "employee", Jurisdiction.US, 800)
result.is_compliant                   # False
result.violations[0].violation_type   # "below_minimum_wage"
```

## `payroll_compliance.models`

- `Jurisdiction`: `Jurisdiction.US`, `EU`, `UK`, `CA`, `AU`, `SG`, `JP`,
  `IN`, `BR`, `MX`, or a custom one with `Jurisdiction("Ontario",
  is_custom=True)`. An unknown name without `is_custom=True` raises
  `ValueError`. `str()` gives the name, or `Custom("...")` for custom ones.
- `ComplianceRuleType` (`MinimumWage`, `MaximumHours`, `OvertimeRate`,
  `TaxWithholding`, `SocialSecurity`, `UnemploymentInsurance`,
  `WorkersCompensation`, `HealthInsurance`, `PensionContribution`,
  `LeaveEntitlement`, or custom) and `ReportType` (`PayrollTax`,
  `EmploymentTax`, `SocialSecurity`, `Unemployment`, `WorkersComp`,
  `HealthInsurance`, `Pension`, or custom) work the same way.
- `ViolationSeverity` (`LOW`, `MEDIUM`, `HIGH`, `CRITICAL`) and
  `ReportStatus` (`DRAFT`, `SUBMITTED`, `ACCEPTED`, `REJECTED`, `AMENDED`)
  are enums.
- `ComplianceRule`: `is_active(now)` is true when `effective_date <= now`
  and the rule has no `expiry_date` or it lies after `now`.
  `check(payroll_amount, hours_worked, now)` returns a
  `ComplianceViolation` or `None`:
  - a `MinimumWage` rule flags `payroll_amount < min_value`
    (`"below_minimum_wage"`, severity `HIGH`);
  - a `MaximumHours` rule flags hours above `max_value` when both are given
    (`"exceeds_maximum_hours"`, severity `MEDIUM`); the limit is taken as an
    unsigned 32-bit value;
  - every other rule type passes.
- `ComplianceValidation`, `RegulatoryReport`, `ComplianceMetrics`,
  `AuditEntry`, `JurisdictionConfig` and `ComplianceSettings` are the
  records the system returns and stores.
- `ComplianceError` is raised when an operation is refused; its `code` is a
  `ComplianceErrorCode` (for example `UNAUTHORIZED_COMPLIANCE_OP` = 7,
  `COMPLIANCE_UPGRADE_FAILED` = 8).

## `payroll_compliance.system`

- `Ledger(timestamp=0, sequence=0)`: the clock. `advance(seconds=0,
  blocks=1)` moves it forward and raises `ValueError` for negative values.
- `Event(topic, data)`: an alert the system has published; all of them
  collect in `ComplianceSystem.events`.
- `ComplianceSystem(owner=None, ledger=Ledger())`.

### Who may do what

Operations that take a `caller` succeed for the owner or for the
compliance officer named in the current settings; anyone else gets
`ComplianceError(UNAUTHORIZED_COMPLIANCE_OP)`. `set_compliance_officer` is
for the owner alone; if no settings exist yet it creates them with every
flag on. Read operations and `update_compliance_metrics` need no caller.

### Operations

- Jurisdictions: `set_jurisdiction_config(caller, config)`,
  `get_jurisdiction_config(jurisdiction)`,
  `toggle_jurisdiction(caller, jurisdiction, enabled)` (does nothing for an
  unconfigured jurisdiction), `upgrade_compliance_rules(caller,
  jurisdiction, new_rules)` (raises `COMPLIANCE_UPGRADE_FAILED` for an
  unconfigured one), `get_supported_jurisdictions()` (always US, EU, UK)
  and `list_enabled_jurisdictions()` (from the settings).
- Validation: `validate_payroll_compliance(employer, employee,
  jurisdiction, payroll_amount, hours_worked=None)` runs every active rule.
  Failures of required rules become violations, failures of optional rules
  become warnings, and the payroll is compliant when there are no
  violations. An unconfigured or disabled jurisdiction gives a
  non-compliant result with the warning "Jurisdiction not configured or
  disabled".
- Reports: `generate_regulatory_report(caller, jurisdiction, report_type,
  period_start, period_end)` stores and returns a `DRAFT` report whose id
  is built from `period_start` and the current timestamp, so a second
  report for the same start at the same time replaces the first. Its
  `data` holds the period, the generation time and fixed `jurisdiction` /
  `report_type` entries (`"US"`, `"compliance"`). `submit_regulatory_report
  (caller, report_id)` marks it `SUBMITTED` (unknown ids are ignored);
  `get_regulatory_report(report_id)` reads it.
- Monitoring: `update_compliance_metrics(jurisdiction, total_employees,
  total_payroll_amount, violations_count)` scores `(1 - violations /
  employees) * 100`, truncated and never below 0 (100 with no employees),
  sets the next audit 30 days ahead, and publishes `"low_compliance"` when
  the score is below 70 and `"high_violations"` when violations exceed 10.
  `get_compliance_metrics(jurisdiction)` and
  `get_compliance_summary(jurisdiction)` (the metrics as strings, or an
  empty dict) read them. `schedule_compliance_monitoring(caller,
  jurisdiction, frequency_hours)` records and returns the next check time.
- Settings: `set_compliance_settings(caller, settings)`,
  `get_compliance_settings()`, `set_compliance_officer(caller, officer)`.
- Audit trail: every successful change above calls
  `add_audit_entry(action, actor, target=None, details=None)`, which also
  may be called directly and returns the entry. Read back with
  `get_audit_entries(address)` (by actor, in order) or
  `get_audit_entry(entry_id)`. Entry ids are `audit_<timestamp>_<block>`,
  so entries written within the same timestamp and block share an id and
  the later one replaces the earlier; call `ledger.advance()` between
  actions to keep them apart.

## What this package does not do

- It keeps nothing on disk: all configurations, reports, metrics and audit
  entries are lost when the `ComplianceSystem` object goes away.
- It does not authenticate callers. Addresses are plain strings and the
  caller passed in is trusted.
- It does not run scheduled checks; `schedule_compliance_monitoring` only
  records when the next one is due.
- It has no command-line interface or server.
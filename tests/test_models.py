import pytest

from payroll_compliance.models import (
    ComplianceError,
    ComplianceErrorCode,
    ComplianceRule,
    ComplianceRuleType,
    ComplianceSettings,
    ComplianceValidation,
    Jurisdiction,
    JurisdictionConfig,
    ReportStatus,
    ReportType,
    ViolationSeverity,
)


def _rule(rule_type, min_value=0, max_value=None, effective=0, expiry=None):
    return ComplianceRule(
        rule_type=rule_type,
        jurisdiction=Jurisdiction.US,
        min_value=min_value,
        required=True,
        description="rule",
        effective_date=effective,
        max_value=max_value,
        expiry_date=expiry,
    )


@pytest.mark.parametrize(
    "number,expected",
    [
        (1, ComplianceErrorCode.UNSUPPORTED_JURISDICTION),
        (7, ComplianceErrorCode.UNAUTHORIZED_COMPLIANCE_OP),
        (8, ComplianceErrorCode.COMPLIANCE_UPGRADE_FAILED),
    ],
)
def test_error_codes_match_source_numbers(number, expected):
    err = ComplianceError(number)
    assert err.code is expected
    assert int(err.code) == number


def test_compliance_error_carries_code_and_message():
    err = ComplianceError(ComplianceErrorCode.UNAUTHORIZED_COMPLIANCE_OP)
    assert err.code is ComplianceErrorCode.UNAUTHORIZED_COMPLIANCE_OP
    assert err.message == "Unauthorized compliance operation"
    with pytest.raises(ComplianceError) as info:
        raise err
    assert info.value.code == 7


def test_compliance_error_accepts_int_code():
    err = ComplianceError(8, "custom text")
    assert err.code is ComplianceErrorCode.COMPLIANCE_UPGRADE_FAILED
    assert err.message == "custom text"


def test_known_jurisdictions_are_equal_and_hashable():
    assert Jurisdiction("US") == Jurisdiction.US
    assert {Jurisdiction.US: 1}[Jurisdiction("US")] == 1
    assert str(Jurisdiction.EU) == "EU"


def test_custom_jurisdiction_differs_from_known():
    custom = Jurisdiction("US", is_custom=True)
    assert custom != Jurisdiction.US
    assert str(custom) == 'Custom("US")'


def test_unknown_name_without_custom_flag_is_rejected():
    with pytest.raises(ValueError):
        Jurisdiction("XX")
    with pytest.raises(ValueError):
        ReportType("Weekly")
    with pytest.raises(ValueError):
        ComplianceRuleType("Bonus")


def test_enum_values():
    assert ViolationSeverity("High") is ViolationSeverity.HIGH
    assert ReportStatus("Draft") is ReportStatus.DRAFT
    assert ReportType("PayrollTax") == ReportType.PayrollTax
    violation = _rule(ComplianceRuleType.MinimumWage, min_value=10).check(1, None, 0)
    assert violation.severity.value == "High"


@pytest.mark.parametrize(
    "effective,expiry,now,expected",
    [
        (100, None, 100, True),
        (100, None, 99, False),
        (100, 200, 199, True),
        (100, 200, 200, False),
    ],
)
def test_is_active_bounds(effective, expiry, now, expected):
    rule = _rule(ComplianceRuleType.MinimumWage, effective=effective, expiry=expiry)
    assert rule.is_active(now) is expected


def test_minimum_wage_violation():
    rule = _rule(ComplianceRuleType.MinimumWage, min_value=1000)
    violation = rule.check(999, None, now=50)
    assert violation.violation_type == "below_minimum_wage"
    assert violation.severity is ViolationSeverity.HIGH
    assert violation.timestamp == 50
    assert violation.jurisdiction == Jurisdiction.US
    assert rule.check(1000, None, now=50) is None


def test_maximum_hours_violation():
    rule = _rule(ComplianceRuleType.MaximumHours, max_value=40)
    violation = rule.check(0, 41, now=7)
    assert violation.violation_type == "exceeds_maximum_hours"
    assert violation.severity is ViolationSeverity.MEDIUM
    assert violation.description == "Hours worked exceed maximum allowed"
    assert rule.check(0, 40, now=7) is None


def test_maximum_hours_needs_hours_and_limit():
    assert _rule(ComplianceRuleType.MaximumHours, max_value=40).check(0, None, 1) is None
    assert _rule(ComplianceRuleType.MaximumHours).check(0, 1000, 1) is None


def test_other_rule_types_always_pass():
    assert _rule(ComplianceRuleType.OvertimeRate, min_value=10**9).check(0, 10**6, 1) is None
    custom = ComplianceRuleType("Bonus", is_custom=True)
    assert _rule(custom, min_value=10**9).check(0, 1, 1) is None


def test_collections_default_to_independent_lists():
    first = ComplianceSettings(last_updated=0)
    second = ComplianceSettings(last_updated=0)
    first.enabled_jurisdictions.append(Jurisdiction.UK)
    assert second.enabled_jurisdictions == []
    assert first.compliance_officer is None
    assert first.audit_trail_enabled and first.monitoring_enabled and first.reporting_enabled

    config = JurisdictionConfig(Jurisdiction.CA, 3600, 7200, True, 0)
    assert config.rules == []
    validation = ComplianceValidation(is_compliant=True, timestamp=5)
    assert validation.violations == [] and validation.warnings == []
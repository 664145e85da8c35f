"""Domain Types — verifies enum values used on the wire and in storage."""

from apm.core.domain_types import MergePolicy, RecordId, SoftwareType, UserRole


def test_record_id_wraps_str():
    assert RecordId("abc") == "abc"


def test_software_types():
    assert {t.value for t in SoftwareType} == {
        "api", "web", "mobile", "desktop", "embedded", "middleware", "library",
    }


def test_user_roles():
    assert {r.value for r in UserRole} == {
        "organization_admin", "application_portfolio_manager", "stakeholder",
    }


def test_merge_policy_parses_from_string():
    assert MergePolicy("explicit") is MergePolicy.EXPLICIT
    assert MergePolicy("non_empty") is MergePolicy.NON_EMPTY

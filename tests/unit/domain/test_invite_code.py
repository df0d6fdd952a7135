"""
Unit tests for invite code alias resolution.
"""

from src.domain.entities import Member
from src.domain.invite_code import (
    OWN_INVITE_CODE_ALIASES,
    collect_invite_codes,
    normalize_code,
    resolve_own_invite_code,
)


def test_primary_alias_is_returned():
    row = {"invite_code_self": "X1", "invitecodeself": "OLD"}

    assert resolve_own_invite_code(row) == "X1"


def test_legacy_alias_used_when_primary_absent():
    """Only the legacy field is set: its value is still the member's code"""
    row = {"invitecodeself": "LEGACY-7"}

    assert resolve_own_invite_code(row) == "LEGACY-7"


def test_legacy_alias_used_when_primary_blank():
    row = {"invite_code_self": "   ", "inviteCodeSelf": "Z9"}

    assert resolve_own_invite_code(row) == "Z9"


def test_aliases_probed_in_priority_order():
    row = {alias: f"code-{i}" for i, alias in enumerate(OWN_INVITE_CODE_ALIASES)}
    del row["invite_code_self"]

    assert resolve_own_invite_code(row) == "code-1"


def test_no_alias_set_is_absent():
    assert resolve_own_invite_code({"invite_code": "X1", "full_name": "Sara"}) is None
    assert resolve_own_invite_code({}) is None


def test_numeric_code_rendered_as_string():
    assert resolve_own_invite_code({"invite_code_self": 4521}) == "4521"


def test_boolean_values_are_not_codes():
    assert normalize_code(True) is None
    assert resolve_own_invite_code({"invite_code_self": False, "self_invite_code": "S1"}) == "S1"


def test_surrounding_whitespace_trimmed():
    assert normalize_code("  AB12 ") == "AB12"


def test_collect_invite_codes_dedupes_in_order():
    rows = [
        {"invite_code_self": "B"},
        {"invite_code_self": None},
        {"invitecodeself": "A"},
        {"invite_code_self": "B"},
    ]

    assert collect_invite_codes(rows) == ["B", "A"]


def test_member_row_exposes_legacy_alias_from_extra():
    member = Member(id="m1", extra={"invitecodeself": "OLD1", "nickname": "abu"})

    row = member.as_row()

    assert row["nickname"] == "abu"
    assert resolve_own_invite_code(row) == "OLD1"


def test_member_column_wins_over_extra():
    member = Member(id="m1", invite_code_self="NEW", extra={"invite_code_self": "STALE"})

    assert resolve_own_invite_code(member.as_row()) == "NEW"


def test_integral_float_code_rendered_without_fraction():
    """Spreadsheet imports stored some codes as floats"""
    assert normalize_code(12.0) == "12"
    assert normalize_code(12.5) == "12.5"

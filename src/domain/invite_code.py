"""
Invite code field normalization.

The member table grew several column names for "the code this member hands
out" as the schema evolved. Rows are probed alias by alias in priority order
and the first present, non-empty value wins.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence

OWN_INVITE_CODE_ALIASES: Sequence[str] = (
    "invite_code_self",
    "invitecodeself",
    "inviteCodeSelf",
    "self_invite_code",
)


def normalize_code(value: Any) -> Optional[str]:
    """Render a raw code value as a trimmed string, or None when it is unset."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def resolve_own_invite_code(
    row: Mapping[str, Any], aliases: Sequence[str] = OWN_INVITE_CODE_ALIASES
) -> Optional[str]:
    """
    Return the member's own invite code from an open attribute mapping.

    Args:
        row: Member attributes keyed by field name
        aliases: Candidate field names, highest priority first

    Returns:
        The first present non-empty code, or None when no alias is set
    """
    for alias in aliases:
        code = normalize_code(row.get(alias))
        if code is not None:
            return code
    return None


def collect_invite_codes(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    """Own invite codes of the given rows, de-duplicated in first-seen order."""
    codes = {}
    for row in rows:
        code = resolve_own_invite_code(row)
        if code is not None:
            codes.setdefault(code, None)
    return list(codes)

"""
Contribution tracking and attribution.

Every tracked activity (document edit, chat message, completed task) updates two
things for the (project, user) pair:
 - the running totals on the member's project_members row
 - that day's contribution snapshot

Only edits move the cumulative edit/character counters; chat and task activity
refresh last_active and feed the daily snapshot only.
"""

import logging
import sqlite3
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Literal, Optional, TypedDict

from collabhub.db.contributions import (
    get_member_contributions,
    get_snapshots_since,
    upsert_daily_snapshot,
    upsert_member_contribution,
)

logger = logging.getLogger(__name__)

ActivityType = Literal["edit", "chat", "task"]
ACTIVITY_TYPES = ("edit", "chat", "task")


class ContributionData(TypedDict, total=False):
    chars_added: int
    chars_removed: int


def _today() -> date:
    """Current server-local calendar day."""
    return date.today()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _non_negative(value: Optional[int]) -> int:
    if not value or value < 0:
        return 0
    return int(value)


def _percentage(part: int, total: int) -> int:
    """part/total as a whole percentage, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    return (part * 200 + total) // (2 * total)


def track_contribution(
    conn: sqlite3.Connection,
    user_id: int,
    project_id: int,
    activity_type: ActivityType,
    data: Optional[ContributionData] = None,
) -> None:
    """
    Record one activity for a member.

    Creates the membership row (role MEMBER) on first activity if the user has
    none yet. Negative character deltas are treated as zero. Both writes share a
    single transaction; sqlite3 errors propagate to the caller untouched.
    """
    if activity_type not in ACTIVITY_TYPES:
        raise ValueError(f"Invalid activity type: {activity_type}")

    data = data or {}
    is_edit = activity_type == "edit"
    chars_added = _non_negative(data.get("chars_added")) if is_edit else 0
    chars_removed = _non_negative(data.get("chars_removed")) if is_edit else 0

    with conn:
        upsert_member_contribution(
            conn,
            project_id,
            user_id,
            edits=1 if is_edit else 0,
            chars_added=chars_added,
            chars_removed=chars_removed,
            now=_now_iso(),
        )
        upsert_daily_snapshot(
            conn,
            project_id,
            user_id,
            _today().isoformat(),
            documents_edited=1 if is_edit else 0,
            characters_added=chars_added,
            chat_messages=1 if activity_type == "chat" else 0,
            tasks_completed=1 if activity_type == "task" else 0,
        )

    logger.debug(
        "Tracked %s contribution for user %s in project %s (+%d/-%d chars)",
        activity_type, user_id, project_id, chars_added, chars_removed,
    )


def get_contribution_breakdown(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    """
    Per-member totals with each member's share of all edits and of all added
    characters. Shares are rounded independently, so they may not sum to 100.
    """
    members = get_member_contributions(conn, project_id)

    total_edits = sum(m["edits_count"] for m in members)
    total_chars = sum(m["characters_added"] for m in members)

    return [
        {
            "user": m["user"],
            "edits_count": m["edits_count"],
            "characters_added": m["characters_added"],
            "characters_removed": m["characters_removed"],
            "contribution_percentage": _percentage(m["edits_count"], total_edits),
            "character_percentage": _percentage(m["characters_added"], total_chars),
        }
        for m in members
    ]


def get_contribution_history(
    conn: sqlite3.Connection,
    project_id: int,
    user_id: int,
    days: int = 7,
) -> List[Dict[str, Any]]:
    """Daily snapshots from `days` days before today onward, oldest first."""
    start_day = _today() - timedelta(days=days)
    return get_snapshots_since(conn, project_id, user_id, start_day.isoformat())

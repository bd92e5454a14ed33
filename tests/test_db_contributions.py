import threading

import collabhub.db as db
from collabhub.db.contributions import (
    get_member_contributions,
    get_snapshots_since,
    upsert_daily_snapshot,
    upsert_member_contribution,
)

NOW = "2025-03-15T12:00:00+00:00"


def test_member_upsert_seeds_then_increments(conn, project, make_user):
    pid = project["project_id"]
    uid = make_user("dev")

    with conn:
        upsert_member_contribution(conn, pid, uid, edits=1, chars_added=10, chars_removed=1, now=NOW)
    with conn:
        upsert_member_contribution(conn, pid, uid, edits=1, chars_added=5, chars_removed=0, now="2025-03-16T08:00:00+00:00")

    rows = {r["user"]["user_id"]: r for r in get_member_contributions(conn, pid)}
    assert rows[uid]["role"] == "MEMBER"
    assert rows[uid]["edits_count"] == 2
    assert rows[uid]["characters_added"] == 15
    assert rows[uid]["characters_removed"] == 1
    assert rows[uid]["joined_at"] == NOW
    assert rows[uid]["last_active"] == "2025-03-16T08:00:00+00:00"


def test_snapshot_upsert_is_unique_per_day(conn, project):
    pid, uid = project["project_id"], project["owner_id"]

    with conn:
        upsert_daily_snapshot(conn, pid, uid, "2025-03-15", documents_edited=1, characters_added=4)
        upsert_daily_snapshot(conn, pid, uid, "2025-03-15", chat_messages=1)
        upsert_daily_snapshot(conn, pid, uid, "2025-03-16", tasks_completed=1)

    snaps = get_snapshots_since(conn, pid, uid, "2025-03-01")
    assert [s["date"] for s in snaps] == ["2025-03-15", "2025-03-16"]
    assert snaps[0]["documents_edited"] == 1
    assert snaps[0]["characters_added"] == 4
    assert snaps[0]["chat_messages"] == 1
    assert snaps[1]["tasks_completed"] == 1


def test_uncommitted_upserts_can_be_rolled_back(conn, project):
    pid, uid = project["project_id"], project["owner_id"]

    upsert_member_contribution(conn, pid, uid, edits=3, chars_added=3, chars_removed=0, now=NOW)
    conn.rollback()

    (owner,) = get_member_contributions(conn, pid)
    assert owner["edits_count"] == 0


def test_concurrent_writers_do_not_lose_increments(tmp_path, conn, project):
    pid, uid = project["project_id"], project["owner_id"]
    db_path = tmp_path / "test.db"
    per_thread = 25

    def writer(own):
        for _ in range(per_thread):
            with own:
                upsert_member_contribution(own, pid, uid, edits=1, chars_added=2, chars_removed=0, now=NOW)
                upsert_daily_snapshot(own, pid, uid, "2025-03-15", documents_edited=1, characters_added=2)

    connections = [db.connect(db_path) for _ in range(4)]
    threads = [threading.Thread(target=writer, args=(c,)) for c in connections]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    for c in connections:
        c.close()

    (owner,) = get_member_contributions(conn, pid)
    assert owner["edits_count"] == 4 * per_thread
    assert owner["characters_added"] == 8 * per_thread

    (snap,) = get_snapshots_since(conn, pid, uid, "2025-03-15")
    assert snap["documents_edited"] == 4 * per_thread

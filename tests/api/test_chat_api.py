def test_post_message_tracks_chat_contribution(client, team_project, alice, seed_conn):
    alice_id, headers = alice
    pid = team_project["project_id"]

    res = client.post(f"/chat/{pid}", json={"content": "  standup at 10  "}, headers=headers)

    assert res.status_code == 201
    body = res.json()
    assert body["content"] == "standup at 10"
    assert body["user_id"] == alice_id
    assert body["username"] == "alice"

    snap = seed_conn.execute(
        "SELECT chat_messages, documents_edited FROM contribution_snapshots WHERE project_id = ? AND user_id = ?",
        (pid, alice_id),
    ).fetchone()
    assert snap["chat_messages"] == 1
    assert snap["documents_edited"] == 0

    member = seed_conn.execute(
        "SELECT edits_count FROM project_members WHERE project_id = ? AND user_id = ?",
        (pid, alice_id),
    ).fetchone()
    assert member["edits_count"] == 0


def test_blank_message_is_rejected(client, team_project, alice):
    _, headers = alice
    res = client.post(f"/chat/{team_project['project_id']}", json={"content": "   "}, headers=headers)
    assert res.status_code == 400
    assert res.json() == {"error": "Message content is required"}


def test_messages_are_listed_oldest_first(client, team_project, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    pid = team_project["project_id"]
    client.post(f"/chat/{pid}", json={"content": "first"}, headers=alice_headers)
    client.post(f"/chat/{pid}", json={"content": "second"}, headers=bob_headers)

    res = client.get(f"/chat/{pid}", headers=bob_headers)

    assert res.status_code == 200
    assert [m["content"] for m in res.json()] == ["first", "second"]
    assert [m["username"] for m in res.json()] == ["alice", "bob"]


def test_history_keeps_only_latest_hundred(client, team_project, alice, seed_conn):
    alice_id, headers = alice
    pid = team_project["project_id"]
    for n in range(105):
        seed_conn.execute(
            "INSERT INTO chat_messages (project_id, user_id, content, created_at) VALUES (?, ?, ?, ?)",
            (pid, alice_id, f"msg {n}", f"2025-01-01T00:00:{n:03d}"),
        )
    seed_conn.commit()

    messages = client.get(f"/chat/{pid}", headers=headers).json()

    assert len(messages) == 100
    assert messages[0]["content"] == "msg 5"
    assert messages[-1]["content"] == "msg 104"


def test_outsider_cannot_chat(client, team_project, outsider):
    _, headers = outsider
    pid = team_project["project_id"]
    assert client.post(f"/chat/{pid}", json={"content": "hi"}, headers=headers).status_code == 403
    assert client.get(f"/chat/{pid}", headers=headers).status_code == 403

"""
collabhub/db/__init__.py

Database module exports.

All database operations are organized by domain:
- users.py: User operations (read and write)
- projects.py: Project and membership operations (read and write)
- contributions.py: Member contribution counters and daily snapshots
- chat.py: Project chat messages
- tasks.py: Project tasks
- documents.py: Shared documents
- connection.py: Connection and schema management
"""

# Connection and schema
from .connection import connect, init_schema

# User operations
from .users import (
    get_user_by_username,
    get_user_by_id,
    get_user_auth_by_username,
    create_user_with_password,
    get_or_create_user,
)

# Project operations
from .projects import (
    create_project,
    get_project_by_id,
    get_project_by_invite_code,
    get_membership,
    add_member,
    list_member_ids,
    list_members,
    remove_member,
)

# Contribution operations
from .contributions import (
    upsert_member_contribution,
    upsert_daily_snapshot,
    get_member_contributions,
    get_snapshots_since,
)

# chat
from .chat import insert_chat_message, list_chat_messages

# tasks
from .tasks import create_task, get_task, update_task

# documents
from .documents import create_document, get_document

__all__ = [
    "connect",
    "init_schema",
    "get_user_by_username",
    "get_user_by_id",
    "get_user_auth_by_username",
    "create_user_with_password",
    "get_or_create_user",
    "create_project",
    "get_project_by_id",
    "get_project_by_invite_code",
    "get_membership",
    "add_member",
    "list_member_ids",
    "list_members",
    "remove_member",
    "upsert_member_contribution",
    "upsert_daily_snapshot",
    "get_member_contributions",
    "get_snapshots_since",
    "insert_chat_message",
    "list_chat_messages",
    "create_task",
    "get_task",
    "update_task",
    "create_document",
    "get_document",
]

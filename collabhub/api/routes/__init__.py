"""
collabhub/api/routes/__init__.py

Convenience exports for FastAPI routers.
This keeps `collabhub/api/main.py` imports clean and centralized.
"""

from collabhub.api.routes.projects import router as projects_router
from collabhub.api.routes.chat import router as chat_router
from collabhub.api.routes.tasks import router as tasks_router
from collabhub.api.routes.documents import router as documents_router

__all__ = [
    "projects_router",
    "chat_router",
    "tasks_router",
    "documents_router",
]

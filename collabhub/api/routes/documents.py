from fastapi import APIRouter, Depends
from sqlite3 import Connection

from collabhub.api.dependencies import get_db, get_current_user_id
from collabhub.api.schemas.common import SuccessDTO
from collabhub.api.schemas.documents import DocumentContributionDTO, DocumentCreateDTO, DocumentDTO
from collabhub.services.documents_service import create_document, get_document, record_document_edit

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=DocumentDTO, status_code=201)
def post_document(
    body: DocumentCreateDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return create_document(conn, user_id, body.project_id, body.title, body.content)


@router.get("/{document_id}", response_model=DocumentDTO)
def get_document_by_id(
    document_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    return get_document(conn, user_id, document_id)


@router.post("/{document_id}/contribute", response_model=SuccessDTO)
def post_document_contribution(
    document_id: int,
    body: DocumentContributionDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    record_document_edit(conn, user_id, document_id, body.changes)
    return SuccessDTO()

"""Uploaded document routes"""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from typing import List, Optional

from api.dependencies import CurrentUserId, DbSession, get_current_user_id
from domain.schemas import DocumentResponse, MessageResponse
from services.document_service import DocumentService

router = APIRouter(
    prefix="/documents", tags=["Documents"], dependencies=[Depends(get_current_user_id)]
)


@router.get("", response_model=List[DocumentResponse])
def list_documents(
    user_id: CurrentUserId,
    db: DbSession,
    doc_type: Optional[str] = Query(None, alias="type"),
):
    documents = DocumentService.list_documents(db, user_id, doc_type)
    return [DocumentResponse.model_validate(d) for d in documents]


@router.post("/upload", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
def upload_document(
    user_id: CurrentUserId,
    db: DbSession,
    file: Optional[UploadFile] = File(None),
    doc_type: Optional[str] = Form(None, alias="type"),
):
    """Multipart upload with fields ``file`` and ``type`` (diet-plan | consultation)."""
    document = DocumentService.upload_document(
        db,
        user_id,
        file.file if file is not None else None,
        file.filename if file is not None else None,
        doc_type,
    )
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", response_model=MessageResponse)
def delete_document(document_id: str, user_id: CurrentUserId, db: DbSession):
    DocumentService.delete_document(db, user_id, document_id)
    return MessageResponse(message="Document deleted successfully")

from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.db.storage import Storage, get_storage
from app.domains.notes.schemas import NoteCreate, NoteResponse
from app.domains.notes.services import NoteService

router = APIRouter(prefix="/api", tags=["notes"])


@router.get("/posts/{post_id}/notes", response_model=List[NoteResponse])
async def get_post_notes(
    post_id: str,
    storage: Storage = Depends(get_storage)
):
    """Заметки поста"""
    note_service = NoteService(storage.notes)
    return [NoteResponse.model_validate(note) for note in note_service.get_post_notes(post_id)]


@router.post("/posts/{post_id}/notes", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    post_id: str,
    note_data: NoteCreate,
    storage: Storage = Depends(get_storage)
):
    """Создание заметки к фрагменту поста"""
    note_service = NoteService(storage.notes)
    note = note_service.create_note(post_id, note_data)
    return NoteResponse.model_validate(note)


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    storage: Storage = Depends(get_storage)
):
    """Удаление заметки"""
    note_service = NoteService(storage.notes)
    note_service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

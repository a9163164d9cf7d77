import logging
from typing import List

from app.db.repositories.note_repository import NoteRepository
from app.domains.notes.entities import Note
from app.domains.notes.schemas import NoteCreate

logger = logging.getLogger(__name__)


class NoteService:
    """Сервис для работы с заметками"""

    def __init__(self, note_repository: NoteRepository):
        self.note_repository = note_repository

    def get_post_notes(self, post_id: str) -> List[Note]:
        """Заметки поста в порядке создания"""
        return self.note_repository.get_by_post(post_id)

    def create_note(self, post_id: str, note_data: NoteCreate) -> Note:
        """Создание заметки (существование поста не проверяется)"""
        note = Note.create_note(
            post_id=post_id,
            selected_text=note_data.selected_text,
            note_content=note_data.note_content,
            start_offset=note_data.start_offset,
            end_offset=note_data.end_offset
        )
        self.note_repository.create(note)
        logger.info(f"Created note {note.id} for post {post_id}")
        return note

    def delete_note(self, note_id: str) -> None:
        """Удаление заметки, повторное удаление не ошибка"""
        if self.note_repository.delete(note_id):
            logger.info(f"Deleted note {note_id}")

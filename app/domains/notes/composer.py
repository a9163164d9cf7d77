"""
Состояние создания заметки для одного поста.

Idle -> TextSelected -> Composing -> Idle (после сохранения). Выделение и текст
заметки проверяются до обращения к сервису.
"""
import enum
from typing import List, Optional

from app.core.errors import ValidationFailed
from app.domains.notes.entities import Note
from app.domains.notes.schemas import NoteCreate
from app.domains.notes.services import NoteService


class ComposerState(str, enum.Enum):
    IDLE = "idle"
    TEXT_SELECTED = "text_selected"
    COMPOSING = "composing"


class NoteComposer:
    """Создание заметок по выделенному фрагменту поста"""

    def __init__(self, post_id: str, note_service: NoteService):
        self.post_id = post_id
        self.note_service = note_service
        self.state = ComposerState.IDLE
        self.selected_text = ""
        self.note_content = ""
        self.last_saved: Optional[Note] = None

    def select_text(self, text: str) -> None:
        """Фиксация выделенного текста; пустое выделение игнорируется"""
        text = text.strip()
        if not text:
            return
        self.selected_text = text
        if self.state != ComposerState.COMPOSING:
            self.state = ComposerState.TEXT_SELECTED

    def compose(self, content: str) -> None:
        """Ввод текста заметки"""
        self.note_content = content
        self.state = ComposerState.COMPOSING

    def submit(self) -> Note:
        """Сохранение заметки и возврат в Idle"""
        errors = []
        if not self.note_content.strip():
            errors.append({"field": "noteContent", "message": "Please enter note content."})
        if not self.selected_text:
            errors.append({"field": "selectedText", "message": "Please select text first to create a note."})
        if errors:
            raise ValidationFailed(errors[0]["message"], errors)

        # TODO: передавать реальные смещения выделения вместо "0"
        note_data = NoteCreate(
            selected_text=self.selected_text,
            note_content=self.note_content,
            start_offset="0",
            end_offset="0"
        )
        note = self.note_service.create_note(self.post_id, note_data)

        self.last_saved = note
        self.reset()
        return note

    def reset(self) -> None:
        """Сброс выделения и черновика"""
        self.selected_text = ""
        self.note_content = ""
        self.state = ComposerState.IDLE

    def notes(self) -> List[Note]:
        return self.note_service.get_post_notes(self.post_id)

    def delete(self, note_id: str) -> None:
        """Удаление заметки без подтверждения"""
        self.note_service.delete_note(note_id)

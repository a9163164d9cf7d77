import uuid
from datetime import datetime, timezone
from typing import Optional


class Note:
    """Заметка на полях, привязанная к фрагменту поста"""

    def __init__(
        self,
        id: str,
        post_id: str,
        selected_text: str,
        note_content: str,
        start_offset: str = "0",
        end_offset: str = "0",
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.post_id = post_id
        self.selected_text = selected_text
        self.note_content = note_content
        # Смещения в тексте поста хранятся строками
        self.start_offset = start_offset
        self.end_offset = end_offset
        self.created_at = created_at or datetime.now(timezone.utc)

    @classmethod
    def create_note(
        cls,
        post_id: str,
        selected_text: str,
        note_content: str,
        start_offset: str = "0",
        end_offset: str = "0"
    ) -> "Note":
        """Создание новой заметки"""
        return cls(
            id=str(uuid.uuid4()),
            post_id=post_id,
            selected_text=selected_text,
            note_content=note_content,
            start_offset=start_offset,
            end_offset=end_offset
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Note):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Note(id={self.id}, post_id={self.post_id})"

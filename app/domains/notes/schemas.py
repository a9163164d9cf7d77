from datetime import datetime

from pydantic import Field, field_validator

from app.domains.content.schemas import CamelModel


class NoteCreate(CamelModel):
    """Схема для создания заметки (post_id берется из пути)"""
    selected_text: str = Field(..., min_length=1)
    note_content: str = Field(..., min_length=1)
    start_offset: str = "0"
    end_offset: str = "0"

    @field_validator('selected_text')
    @classmethod
    def validate_selected_text(cls, v):
        if not v.strip():
            raise ValueError('Selected text cannot be empty')
        return v

    @field_validator('note_content')
    @classmethod
    def validate_note_content(cls, v):
        if not v.strip():
            raise ValueError('Note content cannot be empty')
        return v

    @field_validator('start_offset', 'end_offset', mode='before')
    @classmethod
    def offset_as_string(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class NoteResponse(CamelModel):
    """Схема для ответа с данными заметки"""
    id: str
    post_id: str
    selected_text: str
    note_content: str
    start_offset: str
    end_offset: str
    created_at: datetime

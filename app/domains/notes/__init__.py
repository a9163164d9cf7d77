from app.domains.notes.entities import Note
from app.domains.notes.schemas import NoteCreate, NoteResponse
from app.domains.notes.services import NoteService
from app.domains.notes.composer import ComposerState, NoteComposer

__all__ = [
    "Note",
    "NoteCreate", "NoteResponse",
    "NoteService",
    "ComposerState", "NoteComposer"
]

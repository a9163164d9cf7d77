from typing import List, TYPE_CHECKING

from app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from app.domains.notes.entities import Note


class NoteRepository(InMemoryRepository["Note"]):
    """Репозиторий заметок"""

    def create(self, note: "Note") -> "Note":
        """Сохранение новой заметки"""
        return self.add(note)

    def get_by_post(self, post_id: str) -> List["Note"]:
        """Заметки поста в порядке создания"""
        return self.filter(lambda note: note.post_id == post_id)

    def delete(self, note_id: str) -> bool:
        """Удаление заметки; отсутствие заметки ошибкой не считается"""
        return self.remove(note_id)

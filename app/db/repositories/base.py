import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Коллекция сущностей в памяти процесса, ключ - id"""

    def __init__(self):
        self._items: Dict[str, T] = {}
        # Запись и чтение под одной блокировкой: читатель не видит
        # коллекцию в середине изменения
        self._lock = threading.RLock()

    def add(self, item: T) -> T:
        with self._lock:
            self._items[item.id] = item
        return item

    def get(self, item_id: str) -> Optional[T]:
        with self._lock:
            return self._items.get(item_id)

    def remove(self, item_id: str) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def all(self) -> List[T]:
        """Снимок коллекции в порядке вставки"""
        with self._lock:
            return list(self._items.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self.all() if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self.all() if predicate(item)]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

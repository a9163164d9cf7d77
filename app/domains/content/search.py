"""
Поиск по постам.

Два уровня точности:
- ``matches`` / ``filter_posts``: точное вхождение подстроки без учета
  регистра, используется API поиска;
- ``FuzzyIndex``: приблизительный поиск с допуском опечаток по уже
  загруженному списку постов, к API не подключен.
"""
from difflib import SequenceMatcher
from typing import Iterable, List, Optional, Tuple

from app.domains.content.entities import Post

SEARCH_FIELDS = ("title", "description", "content", "tags")
DEFAULT_FUZZY_THRESHOLD = 0.3


def _field_values(post: Post, field: str) -> List[str]:
    value = getattr(post, field)
    if isinstance(value, list):
        return value
    return [value] if value else []


def matches(post: Post, query: str) -> bool:
    """Вхождение запроса в заголовок, описание, текст или любой тег"""
    term = query.lower()
    return any(
        term in value.lower()
        for field in SEARCH_FIELDS
        for value in _field_values(post, field)
    )


def filter_posts(posts: Iterable[Post], query: str) -> List[Post]:
    """Посты, подходящие под запрос, в исходном порядке"""
    return [post for post in posts if matches(post, query)]


class FuzzyIndex:
    """Приблизительный поиск с порогом расстояния (0 - точное совпадение)"""

    def __init__(
        self,
        posts: Iterable[Post],
        threshold: float = DEFAULT_FUZZY_THRESHOLD,
        keys: Tuple[str, ...] = SEARCH_FIELDS
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("threshold must be between 0 and 1")
        self.threshold = threshold
        self.keys = keys
        self._entries = [
            (post, [value.lower() for key in keys for value in _field_values(post, key)])
            for post in posts
        ]

    def search(self, query: str, limit: Optional[int] = None) -> List[Post]:
        """Посты по возрастанию расстояния до запроса"""
        return [post for post, _ in self.search_with_scores(query, limit)]

    def search_with_scores(self, query: str, limit: Optional[int] = None) -> List[Tuple[Post, float]]:
        term = query.strip().lower()
        if not term:
            return []

        matcher = SequenceMatcher(None, b=term)
        cutoff = 1.0 - self.threshold
        results = []
        for post, values in self._entries:
            best = 0.0
            for value in values:
                best = max(best, self._best_ratio(matcher, term, value, cutoff))
                if best == 1.0:
                    break
            score = 1.0 - best
            if score <= self.threshold:
                results.append((post, score))

        # sorted стабилен: при равном расстоянии сохраняется исходный порядок
        results.sort(key=lambda item: item[1])
        return results[:limit] if limit is not None else results

    @staticmethod
    def _best_ratio(matcher: SequenceMatcher, term: str, text: str, cutoff: float) -> float:
        if term in text:
            return 1.0

        words = text.split()
        width = len(term.split())
        best = 0.0
        for start in range(max(1, len(words) - width + 1)):
            candidate = " ".join(words[start:start + width])
            matcher.set_seq1(candidate)
            if (matcher.real_quick_ratio() >= cutoff
                    and matcher.quick_ratio() >= cutoff):
                best = max(best, matcher.ratio())
        return best

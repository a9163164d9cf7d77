import math
import re
import uuid
from datetime import datetime, timezone
from typing import Optional, List

DEFAULT_READ_TIME = "5 min read"
WORDS_PER_MINUTE = 200

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """URL-безопасный slug: нижний регистр, дефисы вместо прочих символов"""
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


def calculate_read_time(content: str) -> str:
    """Оценка времени чтения (200 слов в минуту)"""
    # Пустые части по краям тоже считаются словами
    words = len(re.split(r"\s+", content))
    minutes = math.ceil(words / WORDS_PER_MINUTE)
    return f"{minutes} min read"


class Post:
    """Сущность поста блога"""

    def __init__(
        self,
        id: str,
        slug: str,
        title: str,
        description: str,
        content: str,
        category: str,
        tags: Optional[List[str]] = None,
        read_time: str = DEFAULT_READ_TIME,
        featured_image: Optional[str] = None,
        published_at: Optional[datetime] = None
    ):
        self.id = id
        self.slug = slug
        self.title = title
        self.description = description
        self.content = content
        self.category = category
        self.tags = list(tags) if tags else []
        self.read_time = read_time
        self.featured_image = featured_image
        self.published_at = published_at or datetime.now(timezone.utc)

    def in_category(self, name: str) -> bool:
        """Принадлежность категории без учета регистра"""
        return self.category.lower() == name.lower()

    @classmethod
    def create_post(
        cls,
        title: str,
        description: str,
        content: str,
        category: str,
        tags: Optional[List[str]] = None,
        read_time: Optional[str] = None,
        featured_image: Optional[str] = None,
        slug: Optional[str] = None,
        published_at: Optional[datetime] = None
    ) -> "Post":
        """Создание нового поста; slug по умолчанию строится из заголовка"""
        return cls(
            id=str(uuid.uuid4()),
            slug=slug if slug is not None else slugify(title),
            title=title,
            description=description,
            content=content,
            category=category,
            tags=tags,
            read_time=read_time or calculate_read_time(content),
            featured_image=featured_image,
            published_at=published_at
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Post):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Post(id={self.id}, slug={self.slug}, category={self.category})"


class Category:
    """Сущность категории"""

    def __init__(
        self,
        id: str,
        name: str,
        slug: str,
        description: str,
        color: str,
        post_count: str = "0"
    ):
        self.id = id
        self.name = name
        self.slug = slug
        self.description = description
        self.color = color
        # Статическое значение из сида, при создании постов не пересчитывается
        self.post_count = post_count

    @classmethod
    def create_category(
        cls,
        name: str,
        slug: str,
        description: str,
        color: str,
        post_count: Optional[str] = None
    ) -> "Category":
        """Создание новой категории"""
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            slug=slug,
            description=description,
            color=color,
            post_count=post_count or "0"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Category(id={self.id}, slug={self.slug})"


DEFAULT_CATEGORIES = [
    {
        "name": "System Design",
        "slug": "system-design",
        "description": "Architecture patterns, scalability, and distributed systems",
        "color": "blue",
        "post_count": "1",
    },
    {
        "name": "Databases",
        "slug": "databases",
        "description": "SQL, NoSQL, optimization, and data modeling",
        "color": "green",
        "post_count": "1",
    },
    {
        "name": "Languages",
        "slug": "languages",
        "description": "TypeScript, JavaScript, Python, and language comparisons",
        "color": "purple",
        "post_count": "1",
    },
    {
        "name": "Frontend",
        "slug": "frontend",
        "description": "React, Next.js, UI/UX, and frontend best practices",
        "color": "yellow",
        "post_count": "0",
    },
    {
        "name": "Backend",
        "slug": "backend",
        "description": "APIs, microservices, performance, and server-side development",
        "color": "red",
        "post_count": "0",
    },
    {
        "name": "DevOps",
        "slug": "devops",
        "description": "CI/CD, containerization, monitoring, and deployment strategies",
        "color": "indigo",
        "post_count": "0",
    },
]

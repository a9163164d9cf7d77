"""
Загрузка постов из каталога файлов с YAML front matter.

Файл поста::

    ---
    title: "Hello"
    category: "Languages"
    tags: [intro]
    ---
    Текст поста...

Slug берется из имени файла без расширения. Битый файл пропускается с
предупреждением в лог, остальные загружаются.
"""
import logging
import math
import re
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from app.core.errors import DocumentLoadError
from app.domains.content.entities import Post
from app.domains.content.schemas import PostFrontMatter

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"

# Разделитель - отдельная строка из трех дефисов
_FRONT_MATTER = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.S | re.M)


def split_front_matter(text: str) -> Tuple[dict, str]:
    """Разделение текста на метаданные и тело"""
    if not text.startswith(FRONT_MATTER_DELIMITER):
        return {}, text

    match = _FRONT_MATTER.match(text)
    if match is None:
        raise ValueError("unterminated front matter block")

    metadata = yaml.safe_load(match.group(1))
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValueError("front matter must be a mapping")

    return metadata, text[match.end():].lstrip("\r\n")


def parse_published_at(value: Any) -> Optional[datetime]:
    """Приведение даты публикации к datetime в UTC"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, bool):
        raise ValueError(f"unsupported publishedAt value: {value!r}")
    elif isinstance(value, (int, float)):
        # JS-совместимые метки в миллисекундах
        try:
            if not math.isfinite(value):
                raise ValueError(f"publishedAt is not a finite number: {value!r}")
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"publishedAt out of range: {value!r}") from e
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"unsupported publishedAt value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def load_post(path: Path) -> Post:
    """Разбор одного файла в Post"""
    try:
        text = path.read_text(encoding="utf-8")
        metadata, body = split_front_matter(text)
        front_matter = PostFrontMatter.model_validate(metadata)
        published_at = parse_published_at(front_matter.published_at)
    except (OSError, OverflowError, yaml.YAMLError, ValidationError, ValueError) as e:
        raise DocumentLoadError(str(path), str(e)) from e

    return Post.create_post(
        slug=path.stem,
        title=front_matter.title,
        description=front_matter.description,
        content=body,
        category=front_matter.category,
        tags=front_matter.tags,
        read_time=front_matter.read_time,
        featured_image=front_matter.featured_image,
        published_at=published_at
    )


def load_posts(directory: Path, extension: str = ".mdx") -> List[Post]:
    """Загрузка всех постов каталога; отсутствующий каталог дает пустой список"""
    directory = Path(directory)
    if not directory.is_dir():
        logger.info(f"Posts directory {directory} not found, starting with no posts")
        return []

    posts = []
    for path in sorted(directory.iterdir()):
        if not path.is_file() or path.suffix != extension:
            continue
        try:
            posts.append(load_post(path))
        except DocumentLoadError as e:
            logger.warning(f"Skipping post {path.name}: {e.reason}")

    logger.info(f"Loaded {len(posts)} posts from {directory}")
    return posts

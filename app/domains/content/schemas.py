from datetime import datetime
from typing import Any, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Базовая схема: camelCase на проводе, snake_case в коде"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PostCreate(CamelModel):
    """Схема для создания поста"""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    read_time: Optional[str] = None
    featured_image: Optional[str] = None

    @field_validator('title', 'description', 'content', 'category')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Field cannot be empty')
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def split_tags(cls, v):
        # Форма создания присылает теги строкой через запятую
        if v is None:
            return []
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v

    @field_validator('read_time')
    @classmethod
    def validate_read_time(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @field_validator('featured_image')
    @classmethod
    def validate_featured_image(cls, v):
        if v is None or v == "":
            return None
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError('Featured image must be an http(s) URL')
        return v


class PostResponse(CamelModel):
    """Схема для ответа с данными поста"""
    id: str
    slug: str
    title: str
    description: str
    content: str
    category: str
    tags: List[str]
    read_time: str
    featured_image: Optional[str] = None
    published_at: datetime


class PostFrontMatter(CamelModel):
    """Метаданные поста из заголовка файла"""
    title: str = ""
    description: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    read_time: str = "5 min read"
    featured_image: Optional[str] = None
    published_at: Optional[Any] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator('title', 'description', 'category', 'read_time', mode='before')
    @classmethod
    def none_as_default(cls, v, info):
        # Пустой ключ в YAML дает None
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v if isinstance(v, str) else str(v)

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        if not isinstance(v, (list, tuple)):
            raise ValueError("tags must be a list")
        return [str(tag) for tag in v]

    @field_validator('featured_image', mode='before')
    @classmethod
    def empty_image_as_none(cls, v):
        return v or None


class CategoryCreate(CamelModel):
    """Схема для создания категории"""
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str = ""
    color: str = "gray"
    post_count: Optional[str] = None


class CategoryResponse(CamelModel):
    """Схема для ответа с данными категории"""
    id: str
    name: str
    slug: str
    description: str
    color: str
    post_count: str

from app.domains.content.entities import (
    Post, Category, DEFAULT_CATEGORIES, slugify, calculate_read_time
)
from app.domains.content.schemas import (
    PostCreate, PostResponse, PostFrontMatter, CategoryCreate, CategoryResponse
)
from app.domains.content.search import matches, filter_posts, FuzzyIndex
from app.domains.content.loader import load_post, load_posts
from app.domains.content.services import PostService, CategoryService

__all__ = [
    "Post", "Category", "DEFAULT_CATEGORIES", "slugify", "calculate_read_time",
    "PostCreate", "PostResponse", "PostFrontMatter", "CategoryCreate", "CategoryResponse",
    "matches", "filter_posts", "FuzzyIndex",
    "load_post", "load_posts",
    "PostService", "CategoryService"
]

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.core.config import Settings
from app.db.storage import Storage
from app.domains.content.entities import Post
from app.main import create_app

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

HELLO_WORLD = """---
title: "Hello"
category: "Languages"
---
Hello, world!
"""

BROKEN = """---
title: "Broken
tags: [unclosed
---
This file never loads.
"""


def make_post(title, category="Backend", days=0, **kwargs) -> Post:
    """Пост с датой публикации BASE_TIME + days"""
    kwargs.setdefault("description", f"About {title}")
    kwargs.setdefault("content", f"Body of {title}")
    return Post.create_post(
        title=title,
        category=category,
        published_at=BASE_TIME + timedelta(days=days),
        **kwargs
    )


@pytest.fixture
def storage() -> Storage:
    """Свежее хранилище со стандартными категориями и без постов"""
    return Storage.initialize()


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    (directory / "hello-world.mdx").write_text(HELLO_WORLD, encoding="utf-8")
    return directory


@pytest.fixture
def app(storage):
    settings = Settings(posts_dir="does-not-exist", log_level="DEBUG")
    return create_app(settings=settings, storage=storage)


@pytest_asyncio.fixture
async def client(app) -> AsyncClient:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

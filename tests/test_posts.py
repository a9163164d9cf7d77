import pytest

from app.domains.content.entities import Post, calculate_read_time, slugify
from app.domains.content.schemas import PostCreate
from app.domains.content.services import PostService

from conftest import BASE_TIME, make_post


@pytest.fixture
def post_service(storage):
    return PostService(storage.posts)


def test_create_derives_slug_from_title(post_service):
    post = post_service.create_post(PostCreate(
        title="My Post!", description="d", content="c", category="Backend"
    ))

    assert post.slug == "my-post"
    assert post.tags == []
    assert post_service.get_post("my-post") is post


def test_create_assigns_id_and_published_at(post_service):
    first = post_service.create_post(PostCreate(title="A", description="d", content="c", category="Backend"))
    second = post_service.create_post(PostCreate(title="B", description="d", content="c", category="Backend"))

    assert first.id != second.id
    assert second.published_at >= first.published_at


def test_every_created_post_is_found_by_slug(post_service):
    titles = ["One", "Two words", "  Spaces & symbols!  ", "Ünïcode title 3"]
    created = [
        post_service.create_post(PostCreate(title=t, description="d", content="c", category="Backend"))
        for t in titles
    ]

    for post in created:
        assert post_service.get_post(post.slug) is post


def test_get_unknown_slug_returns_none(post_service):
    assert post_service.get_post("nope") is None


def test_list_all_newest_first(storage, post_service):
    storage.add_posts([
        make_post("Old", days=0),
        make_post("Newest", days=10),
        make_post("Middle", days=5),
    ])

    assert [p.title for p in post_service.get_all_posts()] == ["Newest", "Middle", "Old"]


def test_list_all_ties_keep_insertion_order(storage, post_service):
    storage.add_posts([
        make_post("First", days=1),
        make_post("Second", days=1),
        make_post("Later", days=2),
        make_post("Third", days=1),
    ])

    assert [p.title for p in post_service.get_all_posts()] == ["Later", "First", "Second", "Third"]


def test_category_is_case_insensitive(storage, post_service):
    storage.add_posts([
        make_post("Indexes", category="Databases", days=1),
        make_post("Joins", category="databases", days=3),
        make_post("Caching", category="Backend", days=2),
    ])

    upper = post_service.get_posts_by_category("Databases")
    lower = post_service.get_posts_by_category("databases")

    assert [p.title for p in upper] == ["Joins", "Indexes"]
    assert upper == lower


def test_search_matches_every_field_case_insensitively(storage, post_service):
    storage.add_posts([
        make_post("Kafka Streams", days=1),
        make_post("Other", description="all about KAFKA", days=2),
        make_post("Third", content="we use kafka here", days=3),
        make_post("Fourth", tags=["Kafka"], days=4),
        make_post("Unrelated", days=5),
    ])

    results = post_service.search_posts("kafka")

    assert [p.title for p in results] == ["Fourth", "Third", "Other", "Kafka Streams"]


def test_search_tag_substring(storage, post_service):
    storage.add_posts([make_post("Tagged", tags=["postgresql"])])

    assert [p.title for p in post_service.search_posts("gres")] == ["Tagged"]


def test_search_no_match_returns_empty_list(storage, post_service):
    storage.add_posts([make_post("Something")])

    assert post_service.search_posts("zzz") == []


def test_search_is_repeatable(storage, post_service):
    storage.add_posts([make_post("Repeat", days=1), make_post("Again repeat", days=2)])

    assert post_service.search_posts("repeat") == post_service.search_posts("REPEAT")


def test_duplicate_slug_is_accepted(post_service):
    first = post_service.create_post(PostCreate(title="Same", description="d", content="c", category="Backend"))
    post_service.create_post(PostCreate(title="Same", description="d", content="c", category="Backend"))

    assert post_service.get_post("same") is first
    assert len(post_service.get_all_posts()) == 2


def test_related_posts(storage, post_service):
    current = make_post("Current", category="Databases", days=1)
    storage.add_posts([
        current,
        make_post("Sibling old", category="Databases", days=0),
        make_post("Sibling new", category="Databases", days=5),
        make_post("Sibling mid", category="Databases", days=3),
        make_post("Other", category="Backend", days=9),
    ])

    related = post_service.get_related_posts(current)

    assert [p.title for p in related] == ["Sibling new", "Sibling mid"]


def test_create_payload_defaults():
    data = PostCreate.model_validate({
        "title": "T", "description": "d", "content": "word " * 450, "category": "Backend",
        "tags": "a, b,, c ", "featuredImage": "",
    })

    assert data.tags == ["a", "b", "c"]
    assert data.featured_image is None
    assert data.read_time is None


def test_create_uses_calculated_read_time(post_service):
    post = post_service.create_post(PostCreate(
        title="Long", description="d", content="word " * 450, category="Backend"
    ))

    assert post.read_time == "3 min read"


def test_create_keeps_explicit_read_time(post_service):
    post = post_service.create_post(PostCreate(
        title="Short", description="d", content="c", category="Backend", read_time="1 min read"
    ))

    assert post.read_time == "1 min read"


@pytest.mark.parametrize("value, expected", [
    ("My Post!", "my-post"),
    ("  Hello,   World  ", "hello-world"),
    ("C++ & Rust: 2024", "c-rust-2024"),
    ("---", ""),
])
def test_slugify(value, expected):
    assert slugify(value) == expected


def test_calculate_read_time():
    assert calculate_read_time("") == "1 min read"
    assert calculate_read_time("word " * 199) == "1 min read"
    # Хвостовой пробел дает лишнюю пустую часть
    assert calculate_read_time("word " * 200) == "2 min read"
    assert calculate_read_time(" ".join(["word"] * 200)) == "1 min read"


def test_post_equality_by_id():
    post = make_post("Same")
    clone = Post(
        id=post.id, slug="other", title="x", description="x", content="x", category="x",
        published_at=BASE_TIME
    )

    assert post == clone

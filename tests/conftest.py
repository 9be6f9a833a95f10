"""
Pytest configuration and fixtures

The test database is selected through the environment, so it has to be set
up before anything under apps/ is imported.
"""
import atexit
import os
import shutil
import tempfile

import pytest

_db_dir = tempfile.mkdtemp(prefix="bloglist-tests-")
atexit.register(shutil.rmtree, _db_dir, ignore_errors=True)
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault(
    "TEST_DATABASE_URL", f"sqlite:///{os.path.join(_db_dir, 'bloglist.db')}"
)

from fastapi.testclient import TestClient  # noqa: E402

from apps.shared.database import SessionLocal  # noqa: E402
from apps.blog.main import app  # noqa: E402
from apps.blog.store import BlogStore  # noqa: E402


INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@pytest.fixture
def initial_blogs():
    return [dict(blog) for blog in INITIAL_BLOGS]


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db, initial_blogs):
    """Reset the blogs table and seed the fixture posts."""
    blog_store = BlogStore(db)
    blog_store.delete_all()
    for blog in initial_blogs:
        blog_store.insert(blog)
    yield blog_store
    blog_store.delete_all()


@pytest.fixture
def client(store):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def blogs_in_db(store):
    """Current rows as the API would render them, read straight from the store."""
    def _blogs_in_db():
        store.db.expire_all()
        return [blog.to_dict() for blog in store.find_all()]
    return _blogs_in_db

"""
Blog record store

Thin persistence layer over the blogs table. Ids come in as the public
string form; anything that cannot be a primary key resolves to "not found".
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from apps.blog.models import BlogPost, MAX_INTEGER

logger = logging.getLogger(__name__)

# Keys share the 32-bit INTEGER range
MAX_KEY = MAX_INTEGER


def parse_blog_id(blog_id: Any) -> Optional[int]:
    """Convert a public id to a primary key, or None if it cannot be one."""
    if isinstance(blog_id, bool):
        return None
    if isinstance(blog_id, int):
        key = blog_id
    else:
        text = str(blog_id)
        if not (text.isascii() and text.isdigit()):
            return None
        key = int(text)
        # One canonical spelling per post: no leading zeros
        if str(key) != text:
            return None
    if key < 1 or key > MAX_KEY:
        return None
    return key


class BlogStore:
    """CRUD operations on blog posts. Every mutation commits immediately."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, fields: Dict[str, Any]) -> BlogPost:
        blog = BlogPost(**fields)
        if blog.likes is None:
            blog.likes = 0
        self.db.add(blog)
        self.db.commit()
        self.db.refresh(blog)
        logger.info(f"Created blog {blog.id}: {blog.title}")
        return blog

    def find_all(self) -> list[BlogPost]:
        return self.db.query(BlogPost).order_by(BlogPost.id.asc()).all()

    def find_by_id(self, blog_id: Any) -> Optional[BlogPost]:
        key = parse_blog_id(blog_id)
        if key is None:
            return None
        return self.db.get(BlogPost, key)

    def update_by_id(self, blog_id: Any, fields: Dict[str, Any]) -> Optional[BlogPost]:
        """Apply only the supplied fields. Returns None for an unknown id."""
        blog = self.find_by_id(blog_id)
        if blog is None:
            return None

        for key, value in fields.items():
            if key == "id":
                continue
            setattr(blog, key, value)

        self.db.commit()
        self.db.refresh(blog)
        logger.info(f"Updated blog {blog.id}: {sorted(fields)}")
        return blog

    def delete_by_id(self, blog_id: Any) -> bool:
        """Remove the post if present. Returns whether anything was deleted."""
        key = parse_blog_id(blog_id)
        if key is None:
            return False

        deleted = self.db.query(BlogPost).filter(BlogPost.id == key).delete()
        self.db.commit()
        if deleted:
            logger.info(f"Deleted blog {key}")
        return bool(deleted)

    def delete_all(self) -> int:
        """Wipe the table. Used to reset state between tests."""
        deleted = self.db.query(BlogPost).delete()
        self.db.commit()
        return deleted

"""
Blog database models.
"""
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint, func

from apps.shared.database import Base

# Upper bound of a PostgreSQL INTEGER column
MAX_INTEGER = 2**31 - 1

TITLE_MAX_LENGTH = 500
AUTHOR_MAX_LENGTH = 200
URL_MAX_LENGTH = 2000


class BlogPost(Base):
    """
    A blog post in the list.

    The integer primary key never leaves the service as an int; the API
    renders it as a string `id` (see BlogResponse).
    """
    __tablename__ = "blogs"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
    )

    id = Column(Integer, primary_key=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    author = Column(String(AUTHOR_MAX_LENGTH))
    url = Column(String(URL_MAX_LENGTH), nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def to_dict(self) -> dict:
        """Public representation of the post."""
        return {
            "id": str(self.id),
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
        }

    def __repr__(self) -> str:
        return f"<BlogPost id={self.id} title={self.title!r}>"

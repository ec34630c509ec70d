"""Re-export all models so Base.metadata sees them."""

from app.db.models.chat_question import ChatQuestion
from app.db.models.comment import Comment
from app.db.models.news import News, NewsComment
from app.db.models.post import Post
from app.db.models.profile import Profile

__all__ = [
    "ChatQuestion",
    "Comment",
    "News",
    "NewsComment",
    "Post",
    "Profile",
]

"""Post data model."""

from instalens.models.base import CamelModel


class Post(CamelModel):
    """Represents a normalized recent post."""

    caption: str = ""
    likes: int = 0
    comments: int = 0
    image: str = ""
    hashtags: list[str] = []

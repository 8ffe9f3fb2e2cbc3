"""Profile data model."""

from instalens.models.base import CamelModel


class Profile(CamelModel):
    """Normalized Instagram profile view."""

    name: str
    username: str
    followers: int = 0
    following: int = 0
    posts: int = 0
    profile_pic: str = ""
    summary: str = ""

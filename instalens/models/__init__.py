"""Pydantic models for instalens."""

from instalens.models.profile import Profile
from instalens.models.post import Post
from instalens.models.engagement import Engagement
from instalens.models.result import LookupResult

__all__ = [
    "Profile",
    "Post",
    "Engagement",
    "LookupResult",
]

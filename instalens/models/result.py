"""Lookup result wrapper model."""

from instalens.models.base import CamelModel
from instalens.models.engagement import Engagement
from instalens.models.post import Post
from instalens.models.profile import Profile


class LookupResult(CamelModel):
    """Aggregated payload returned for a single username."""

    profile: Profile
    engagement: Engagement
    posts: list[Post] = []

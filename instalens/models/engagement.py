"""Engagement metrics model."""

from instalens.models.base import CamelModel


class Engagement(CamelModel):
    """Average interactions per post and engagement rate in percent."""

    avg_likes: float = 0.0
    avg_comments: float = 0.0
    engagement_rate: float = 0.0

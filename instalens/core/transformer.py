"""Data transformation and normalization for scraped records."""

import math
import re

from instalens.models.engagement import Engagement
from instalens.models.post import Post
from instalens.models.profile import Profile


HASHTAG_PATTERN = re.compile(r"#[A-Za-z0-9_]+")


def normalize_count(value: int | float | str | None) -> int:
    """
    Convert provider counts to non-negative integers.

    Examples:
        1234 -> 1234
        None -> 0
        "1,234" -> 1234
        -1 -> 0 (hidden like counts)
        float("nan") -> 0
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0
        try:
            value = float(value)
        except ValueError:
            return 0

    if isinstance(value, float) and not math.isfinite(value):
        return 0

    return max(int(value), 0)


def extract_hashtags(caption: str | None) -> list[str]:
    """
    Extract hashtags from a caption in order of appearance.

    Examples:
        "Great day! #sunny #fun2023 #" -> ["#sunny", "#fun2023"]
    """
    if not caption:
        return []
    return HASHTAG_PATTERN.findall(caption)


def _first_url(candidates) -> str:
    """Return the first entry of an image list as a URL string."""
    if not candidates or not isinstance(candidates, list):
        return ""
    first = candidates[0]
    if isinstance(first, dict):
        return first.get("displayUrl") or ""
    return first or ""


def pick_image(raw: dict) -> str:
    """Primary display image, falling back to the first carousel image."""
    return (
        raw.get("displayUrl")
        or _first_url(raw.get("images"))
        or _first_url(raw.get("carouselImages"))
        or ""
    )


def transform_profile(raw: dict, username: str) -> Profile:
    """
    Transform a raw profile record to the normalized Profile model.

    Args:
        raw: First record of the profile job's result set
        username: Requested username, used when the record has none

    Returns:
        Profile without a summary
    """
    handle = raw.get("username") or username
    return Profile(
        name=raw.get("fullName") or handle,
        username=handle,
        followers=normalize_count(raw.get("followersCount")),
        following=normalize_count(raw.get("followsCount")),
        posts=normalize_count(raw.get("postsCount")),
        profile_pic=raw.get("profilePicUrlHD") or raw.get("profilePicUrl") or "",
    )


def transform_post(raw: dict) -> Post:
    """Transform a raw post record to the normalized Post model."""
    caption = raw.get("caption") or ""
    return Post(
        caption=caption,
        likes=normalize_count(raw.get("likesCount")),
        comments=normalize_count(raw.get("commentsCount")),
        image=pick_image(raw),
        hashtags=extract_hashtags(caption),
    )


def transform_posts(raw_posts: list[dict], limit: int | None = None) -> list[Post]:
    """
    Transform raw post records, keeping provider order.

    Args:
        raw_posts: Result set of the posts job
        limit: Maximum number of posts to keep

    Returns:
        List of normalized Post models
    """
    if limit is not None:
        raw_posts = raw_posts[:limit]
    return [transform_post(raw) for raw in raw_posts]


def compute_engagement(posts: list[Post], followers: int) -> Engagement:
    """
    Compute average likes, average comments and engagement rate.

    The rate is (avg_likes + avg_comments) / followers * 100 and stays 0
    when there are no posts or no followers.
    """
    if not posts:
        return Engagement()

    count = len(posts)
    avg_likes = sum(p.likes for p in posts) / count
    avg_comments = sum(p.comments for p in posts) / count

    engagement_rate = 0.0
    if followers > 0:
        engagement_rate = (avg_likes + avg_comments) / followers * 100

    return Engagement(
        avg_likes=avg_likes,
        avg_comments=avg_comments,
        engagement_rate=engagement_rate,
    )

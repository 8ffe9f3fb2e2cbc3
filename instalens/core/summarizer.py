"""Best-effort profile summary generation."""

from instalens.exceptions import EnrichmentError
from instalens.logging import get_logger
from instalens.models.profile import Profile
from instalens.providers.base import TextGenerator


SUMMARY_FALLBACK = "Summary not available."

SYSTEM_INSTRUCTION = "You are an assistant that summarizes social media profiles."

PROMPT_TEMPLATE = """Write a short 6-7 sentence professional summary + latest news(if applicable) about an Instagram profile with the following details:
  Name: {name}
  Username: {username}
  Followers: {followers}
  Following: {following}
  Posts: {posts}"""


def build_prompt(profile: Profile) -> str:
    """Fill the summary prompt template with profile details."""
    return PROMPT_TEMPLATE.format(
        name=profile.name,
        username=profile.username,
        followers=profile.followers,
        following=profile.following,
        posts=profile.posts,
    )


async def generate_summary(generator: TextGenerator, profile: Profile) -> str:
    """
    Request a summary once and return the generated text.

    Raises:
        EnrichmentError: If the provider fails or returns no text
    """
    try:
        text = await generator.generate(build_prompt(profile), SYSTEM_INSTRUCTION)
    except Exception as e:
        raise EnrichmentError(str(e) or type(e).__name__) from e

    if not text or not text.strip():
        raise EnrichmentError("Empty summary response")
    return text


async def summarize(generator: TextGenerator | None, profile: Profile) -> str:
    """
    Return a generated summary, or SUMMARY_FALLBACK on any failure.

    Args:
        generator: Text backend, None when summaries are disabled
        profile: Normalized profile to describe

    Returns:
        Summary text, never raises
    """
    if generator is None:
        return SUMMARY_FALLBACK

    try:
        return await generate_summary(generator, profile)
    except EnrichmentError as e:
        get_logger("summarizer").warning("summary_failed", error=str(e))
        return SUMMARY_FALLBACK

"""Live validation script - run real lookups and save raw provider records."""

import asyncio
import json
from datetime import datetime
from pathlib import Path

from instalens import AggregatorConfig
from instalens.core.transformer import compute_engagement, transform_posts, transform_profile
from instalens.providers.apify_provider import ApifyScrapingProvider

# Test accounts
USERNAMES = [
    "natgeo",
    "nasa",
    "instagram",
]

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


async def validate_account(
    provider: ApifyScrapingProvider,
    config: AggregatorConfig,
    username: str,
    save_fixture: bool = True,
) -> dict:
    """Run both scraping jobs for one account and report normalized output."""
    print(f"\n{'='*60}")
    print(f"Looking up @{username}...")
    print(f"{'='*60}")

    start = datetime.now()

    try:
        job = await provider.submit_job(config.profile_actor_id, {"usernames": [username]})
        profile_items = await provider.list_results(job)
        job = await provider.submit_job(
            config.posts_actor_id,
            {"username": [username], "resultsLimit": config.posts_limit},
        )
        post_items = await provider.list_results(job)
    except Exception as e:
        print(f"❌ Provider error: {e}")
        return {"username": username, "success": False, "error": str(e)}

    duration_ms = (datetime.now() - start).total_seconds() * 1000
    print(f"✓ Fetched in {duration_ms:.0f}ms ({len(profile_items)} profile, {len(post_items)} post records)")

    if save_fixture:
        FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
        fixture_path = FIXTURES_DIR / f"{username}.json"
        fixture_path.write_text(
            json.dumps({"profile": profile_items, "posts": post_items}, indent=2),
            encoding="utf-8",
        )
        print(f"✓ Saved fixture: {fixture_path}")

    if not profile_items:
        print("  ❌ No profile record returned!")
        return {"username": username, "success": False, "error": "Profile not found"}

    profile = transform_profile(profile_items[0], username)
    posts = transform_posts(post_items, limit=config.posts_limit)
    engagement = compute_engagement(posts, profile.followers)

    print("\n--- Profile ---")
    print(f"  Name: {profile.name}")
    print(f"  Followers: {profile.followers:,}")
    print(f"  Following: {profile.following:,}")
    print(f"  Posts: {profile.posts:,}")

    print(f"\n--- Posts ({len(posts)} found) ---")
    for i, post in enumerate(posts):
        caption = post.caption[:60] + "..." if len(post.caption) > 60 else post.caption
        print(f"  [{i+1}] Likes: {post.likes:,} | Comments: {post.comments:,} | Tags: {len(post.hashtags)}")
        print(f"      {caption}")
        if not post.image:
            print("      ⚠️  No image URL")

    print(f"\n  Engagement rate: {engagement.engagement_rate:.2f}%")

    return {
        "username": username,
        "success": True,
        "posts_count": len(posts),
        "engagement_rate": engagement.engagement_rate,
        "duration_ms": duration_ms,
    }


async def main():
    """Run validation on all test accounts."""
    config = AggregatorConfig()
    if not config.apify_token:
        print("INSTALENS_APIFY_TOKEN is not set")
        return

    provider = ApifyScrapingProvider(config.apify_token)
    print(f"Testing {len(USERNAMES)} accounts: {', '.join('@' + u for u in USERNAMES)}")

    results = []
    for username in USERNAMES:
        results.append(await validate_account(provider, config, username))

    print("\n" + "=" * 60)
    print("VALIDATION SUMMARY")
    print("=" * 60)

    success_count = sum(1 for r in results if r.get("success"))
    print(f"\nSuccess: {success_count}/{len(results)}")

    print("\n| Username | Posts | Rate | Duration |")
    print("|----------|-------|------|----------|")
    for r in results:
        rate = f"{r.get('engagement_rate', 0):.2f}%"
        duration = f"{r.get('duration_ms', 0):.0f}ms"
        print(f"| @{r['username']:<8} | {r.get('posts_count', 0):<5} | {rate:<4} | {duration:<8} |")


if __name__ == "__main__":
    asyncio.run(main())

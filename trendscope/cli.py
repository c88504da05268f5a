#!/usr/bin/env python3
"""
CLI for topic research and content-strategy generation

Usage:
    python -m trendscope.cli analyze "AI tools for small business"
    python -m trendscope.cli --json analyze "home espresso" --audience "beginners" --style "playful"
    python -m trendscope.cli analyze "home espresso" --snapshot results.json
    python -m trendscope.cli search "home espresso trending"
"""
import argparse
import asyncio
import json
import logging
import sys

from .strategy.errors import ProviderError
from .strategy.scoring import format_views
from .strategy.service import analyze_topic
from .strategy.youtube_search import SnapshotSearchProvider, YouTubeSearchProvider

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Video topic research and content-strategy CLI"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="YouTube Data API key (default: $YOUTUBE_API_KEY)"
    )
    parser.add_argument(
        "--snapshot",
        default=None,
        help="Serve searches from a recorded JSON snapshot instead of YouTube"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Research a topic and generate a content strategy"
    )
    analyze_parser.add_argument("topic", help="Topic to research")
    analyze_parser.add_argument("--description", help="Extra context for relevance scoring")
    analyze_parser.add_argument("--audience", help="Target audience")
    analyze_parser.add_argument("--style", help="Tone of voice (e.g. playful)")
    analyze_parser.add_argument("--duration", help="Target video length hint")
    analyze_parser.add_argument("--language", help="Output language hint")

    # Search command
    search_parser = subparsers.add_parser(
        "search",
        help="Run a single raw provider search"
    )
    search_parser.add_argument("query", help="Search query")
    search_parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Result pages to fetch (default: 1)"
    )

    return parser.parse_args(argv)


def make_provider(args):
    """Build the search provider selected by the arguments."""
    if args.snapshot:
        return SnapshotSearchProvider(args.snapshot)
    return YouTubeSearchProvider(api_key=args.api_key)


async def cmd_analyze(provider, args) -> dict:
    """Execute the analyze command."""
    payload = {
        key: value
        for key, value in {
            "topic": args.topic,
            "description": args.description,
            "audience": args.audience,
            "style": args.style,
            "duration": args.duration,
            "language": args.language,
        }.items()
        if value is not None
    }
    status, body = await analyze_topic(payload, provider)
    return {"command": "analyze", "status": status, **body}


async def cmd_search(provider, args) -> dict:
    """Execute the search command."""
    try:
        result = await provider.search(args.query, pages=args.pages)
    except ProviderError as e:
        logger.error("Search failed: %s", e)
        return {"command": "search", "status": e.status_code, "error": str(e)}
    videos = result.get("videos", [])
    return {
        "command": "search",
        "status": 200,
        "query": args.query,
        "count": len(videos),
        "videos": videos,
    }


def print_analysis(result: dict):
    print(f"Topic: {result['query']}")
    print(f"\nSummary:\n  {result['summary']}")
    print(f"\nKey themes: {', '.join(result['keyThemes']) or 'n/a'}")
    print(f"\nNarrative angle:\n  {result['narrativeAngle']}")

    print("\nHook ideas:")
    for hook in result["hookIdeas"]:
        print(f"  - {hook}")

    print("\nOutline:")
    for segment in result["outline"]:
        print(f"  [{segment['durationHint']}] {segment['title']}")
        for point in segment["talkingPoints"]:
            print(f"      * {point}")

    print("\nScript:")
    for section in result["script"]:
        print(f"  {section['heading']}")
        for paragraph in section["paragraphs"]:
            print(f"      {paragraph}")
        if section.get("callout"):
            print(f"      >> {section['callout']}")

    seo = result["seo"]
    print("\nSEO titles:")
    for title in seo["titleIdeas"]:
        print(f"  - {title}")
    print(f"Tags: {', '.join(seo['tags'])}")

    print("\nAction items:")
    for i, item in enumerate(result["actionItems"], 1):
        print(f"  {i}. {item}")

    print("\nInspiration:")
    for i, video in enumerate(result["inspiration"], 1):
        print(f"  #{i:>2} [{video['score']:.4f}] {video['title'][:60]}")
        print(f"      {video['channel']} | {format_views(video['views'])} views | "
              f"{video['ago']} | relevance {video['relevance']:.2f}")


async def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        provider = make_provider(args)
    except (OSError, ValueError) as e:
        logger.error("Could not set up search provider: %s", e)
        return 1

    if args.command == "analyze":
        result = await cmd_analyze(provider, args)
    elif args.command == "search":
        result = await cmd_search(provider, args)
    else:
        logger.error(f"Unknown command: {args.command}")
        return 1

    # Output results
    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(f"\n{'=' * 50}")
        print(f"Command: {result['command']}")
        print(f"{'=' * 50}")

        if "error" in result:
            print(f"Error ({result['status']}): {result['error']}")
        elif args.command == "analyze":
            print_analysis(result)
        elif args.command == "search":
            print(f"Query: {result['query']} ({result['count']} videos)")
            for video in result["videos"]:
                views = format_views(video.get("views") or 0)
                print(f"  {video.get('videoId', '?'):<12} | {views:>6} | "
                      f"{video.get('title', '')[:60]}")

        print(f"{'=' * 50}\n")

    return 0 if result["status"] == 200 else 1


def run():
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

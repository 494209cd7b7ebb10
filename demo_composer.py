"""
Demo script: request travel recommendations from the console.

Usage:
    python -m travel_recommender.server          # in one terminal
    python demo_composer.py --city Lisbon --profile "Loves surfing" \
        --image beach.jpg --image board.png

Walks through:
  1. Attach the images
  2. Show the request summary
  3. Submit and print the recommendation cards
"""

import argparse
import asyncio
import sys

from travel_recommender.composer import Composer, Failed, SelectedFile
from travel_recommender.config import load_config
from travel_recommender.utils.error_handling import AttachmentLimitError
from travel_recommender.utils.logging import setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Personalized travel recommendations")
    parser.add_argument("--profile", default="", help="Free-text profile description")
    parser.add_argument("--city", help="Destination city")
    parser.add_argument(
        "--image", action="append", default=[], help="Image file (repeatable, max 5)"
    )
    parser.add_argument("--gateway-url", help="Recommendations endpoint URL")
    parser.add_argument("--env-file", help="Custom .env file to load")
    return parser.parse_args()


async def run(args: argparse.Namespace) -> int:
    config = load_config(args.env_file)
    setup_logging(config.system)
    if args.gateway_url:
        config.composer.gateway_url = args.gateway_url

    composer = Composer(config.composer)
    composer.profile = args.profile
    if args.city is not None:
        composer.city = args.city

    print("=" * 60)
    print("STEP 1: Attaching images")
    print("=" * 60)
    try:
        selected = [SelectedFile.from_path(path) for path in args.image]
        result = await composer.add_files(selected)
    except AttachmentLimitError as e:
        print(f"\n{e}")
        return 1
    except OSError as e:
        print(f"\nError: {e}")
        return 1

    print(f"\nAttached: {len(result.added)}")
    for name in result.skipped:
        print(f"  skipped {name}")

    print("\n" + "=" * 60)
    print("STEP 2: Request")
    print("=" * 60)
    print(f"\nCity:    {composer.city}")
    print(f"Profile: {composer.profile or '(none)'}")
    print(f"Images:  {len(composer.images)}")

    print("\n" + "=" * 60)
    print("STEP 3: Recommendations")
    print("=" * 60)
    state = await composer.submit()
    print(f"\n{composer.render()}")

    return 1 if isinstance(state, Failed) else 0


def main():
    sys.exit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()

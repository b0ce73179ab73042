"""
CLI entrypoint. After `pip install -e .`:
  bufficast 'create me a speech "eth denver is awesome", "bufficast project is the best"'
  python -m bufficast --debug '"gm"'
"""

import argparse
import sys

from bufficast.action import GeneratePodcastAction
from bufficast.config import Settings
from bufficast.logging_utils import setup_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a VRF-randomized podcast from quoted messages and mint it on Story"
    )
    parser.add_argument(
        "text",
        help='Request text containing quoted messages, e.g. \'"eth denver is awesome", "gm"\'',
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(debug=args.debug or settings.debug)

    action = GeneratePodcastAction(settings)
    message = {"content": {"text": args.text}}
    state = {}

    if not action.validate(message, state):
        print("No quoted messages found. Wrap each message in double quotes.", file=sys.stderr)
        return 2

    print(f"Creating podcast from {len(state['daily_messages'])} message(s)...")
    ok = action.handler(message, state, callback=lambda content: print(content["text"]))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())

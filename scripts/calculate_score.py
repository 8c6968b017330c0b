"""
Calculate the score of a guess

USAGE:
    python scripts/calculate_score.py --session RACE --actual 1,44,16 --guess 44,1,16
    python scripts/calculate_score.py --request payload.json --json

Competitor ids that look like integers are passed as integers.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from guess_scoring.calculator import calculate_score_response
from guess_scoring.utils import config_loader
from guess_scoring.utils.validation import ScoreRequestError

logger = logging.getLogger(__name__)


def parse_ids(raw: str) -> list[int | str]:
    """Split a comma separated id list."""
    ids: list[int | str] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        ids.append(int(item) if item.lstrip("-").isdigit() else item)
    return ids


def build_payload(args: argparse.Namespace) -> dict:
    if args.request:
        with open(args.request) as f:
            return json.load(f)
    return {
        "sessionType": args.session,
        "actualOrder": parse_ids(args.actual) if args.actual is not None else None,
        "guessOrder": parse_ids(args.guess) if args.guess is not None else None,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a race or qualifying guess")
    parser.add_argument("--session", default="RACE", help="RACE or QUALIFYING")
    parser.add_argument("--actual", help="Actual order, comma separated ids")
    parser.add_argument("--guess", help="Guessed order, comma separated ids")
    parser.add_argument("--request", help="JSON file with the request payload")
    parser.add_argument("--breakdown", action="store_true", help="Show points per position")
    parser.add_argument("--json", action="store_true", help="Print the full JSON response")
    args = parser.parse_args(argv)

    log_config = config_loader.get_section("logging")
    logging.basicConfig(
        level=log_config.get("level", "INFO"),
        format=log_config.get("format", "%(levelname)s: %(message)s"),
    )

    try:
        response = calculate_score_response(build_payload(args))
    except ScoreRequestError as e:
        logger.error(f"Invalid request: {e}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read request file: {e}")
        return 1

    if args.json:
        print(json.dumps(response, indent=2))
        return 0

    print(f"{response['sessionType']}: {response['totalScore']} / {response['maxPossibleScore']}")
    if args.breakdown:
        for entry in response["perPositionBreakdown"]:
            guessed = entry["guessedPosition"] if entry["guessedPosition"] is not None else "-"
            print(
                f"  P{entry['actualPosition']:<3} {str(entry['competitor']):<10} "
                f"guessed {guessed!s:<3} {entry['points']}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import json
import logging
import sys

from alexa_skill.handler import lambda_handler
from pickup_schedule.config import get_street_address
from pickup_schedule.exceptions import PickupScheduleError

from .app_factory import create_dispatcher, initialize_app

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Curbside pick up schedule runner.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("next", help="Show every service on the next pick up day.")
    get_parser = subparsers.add_parser("get", help="Show the next pick up for a collection type.")
    get_parser.add_argument("collection_type", help="e.g. garbage, recycling, yard waste")
    invoke_parser = subparsers.add_parser("invoke", help="Run an Alexa request JSON file through the skill.")
    invoke_parser.add_argument("request_file", type=argparse.FileType("r"))
    args = parser.parse_args(argv)

    initialize_app()

    try:
        if args.command == "invoke":
            event = json.load(args.request_file)
            print(json.dumps(lambda_handler(event), indent=2))
            return 0

        dispatcher = create_dispatcher(get_street_address())
        if args.command == "next":
            answer = dispatcher.dispatch("WhatIsNext")
        else:
            answer = dispatcher.dispatch("GetSchedule", {"collectionType": args.collection_type})
    except PickupScheduleError as e:
        logger.error(f"The query failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(answer.title)
    print(answer.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import requests
from pydantic import BaseModel, ValidationError

from .call import CallRequest
from .client import NexmoClient, new_text2speech
from .config import get_settings
from .errors import NexmoError
from .sms import SmsRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="nexmo-rest", description="Nexmo REST API client.")
    parser.add_argument("--api-key", default=settings.nexmo_api_key, help="Nexmo API KEY.")
    parser.add_argument(
        "--api-secret", default=settings.nexmo_api_secret, help="Nexmo API SECRET."
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.nexmo_timeout_s,
        help="Request timeout in seconds.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sms = sub.add_parser("sms", help="Send an SMS.")
    p_sms.add_argument("--to", required=True, help="Nexmo phone destination.")
    p_sms.add_argument("--from", dest="from_", required=True, help="Your Nexmo phone number.")
    p_sms.add_argument("--text", required=True, help="SMS message content.")
    p_sms.add_argument("--type", default=None, help="text, binary, wappush, unicode, vcal or vcard.")
    p_sms.add_argument("--client-ref", default=None)
    p_sms.add_argument("--status-report-req", default=None)
    p_sms.add_argument("--callback", default=None, help="Delivery receipt URL.")

    p_call = sub.add_parser("call", help="Place a voice call.")
    p_call.add_argument("--to", required=True, help="Nexmo phone destination.")
    p_call.add_argument("--answer", required=True, help="Answer URL.")
    p_call.add_argument("--from", dest="from_", default=None)

    p_tts = sub.add_parser("text2speech", help="Call a number and read a text aloud.")
    p_tts.add_argument("--to", required=True, help="Nexmo phone destination.")
    p_tts.add_argument("--from", dest="from_", default="", help="Your Nexmo phone number.")
    p_tts.add_argument("--text", required=True, help="Text to read.")
    p_tts.add_argument("--lang", default="", help="Language, e.g. en-us.")
    p_tts.add_argument("--voice", default="", help="Voice: male or female.")
    p_tts.add_argument("--repeat", type=int, default=None)

    return parser


def _run(client: NexmoClient, args: argparse.Namespace) -> BaseModel:
    if args.command == "sms":
        return client.send_message(
            SmsRequest(
                to=args.to,
                from_=args.from_,
                text=args.text,
                type=args.type,
                client_ref=args.client_ref,
                status_report_req=args.status_report_req,
                callback=args.callback,
            )
        )
    if args.command == "call":
        return client.place_call(CallRequest(to=args.to, answer_url=args.answer, from_=args.from_))

    req = new_text2speech(args.to, args.from_, args.text, args.lang, args.voice)
    if args.repeat is not None:
        req = req.model_copy(update={"repeat": args.repeat})
    return client.synthesize(req)


def resolve_log_level(name: str) -> str:
    """Upper-cased level name, or INFO when ``name`` is not a logging level."""
    level = name.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return "INFO"
    return level


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    args = build_parser().parse_args(argv)

    try:
        with NexmoClient(args.api_key, args.api_secret, args.timeout) as client:
            resp = _run(client, args)
    except NexmoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (requests.RequestException, ValidationError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1

    print(resp.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

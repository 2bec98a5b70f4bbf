#!/usr/bin/env python3
# ================================================================
# cli.py
# ----------------------------------------------------------------
# Terminal chat front end for the conversation controller.
#
# Flags:
#   --remote   <gateway base url>   (use the provider gateway instead of the local responder)
#   --provider openai|gemini        (passed through to the gateway; default: openai)
#   --no-delay                      (skip simulated thinking time for the local responder)
#
# Type /quit (or send EOF) to leave.
# ================================================================

from __future__ import annotations
import argparse
import asyncio
import locale
import logging
from typing import List, Optional

from chatbot.conversation import (
    ConversationController,
    LocalReplySource,
    Message,
    RemoteReplySource,
    Role,
    thinking_delay,
)
from chatbot.log import setup_logging

logger = logging.getLogger(__name__)


def use_user_locale() -> bool:
    """Format times/dates (%X, %x) in the user's locale; stay on C if it is unavailable."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("locale not available, using C: %s", e)
        return False
    return True


def render(msg: Message) -> None:
    # user turns are already on screen from input()
    if msg.role == Role.BOT:
        print(f"bot> {msg.text}", flush=True)


def build_controller(args: argparse.Namespace) -> ConversationController:
    if args.remote:
        return ConversationController(RemoteReplySource(args.remote, provider=args.provider))
    delay = None if args.no_delay else thinking_delay
    return ConversationController(LocalReplySource(), delay=delay)


async def repl(controller: ConversationController) -> None:
    for msg in controller.conversation:
        render(msg)
    controller.subscribe(render)
    while True:
        try:
            line = await asyncio.to_thread(input, "you> ")
        except EOFError:
            break
        if line.strip() == "/quit":
            break
        if controller.submit(line):
            await controller.drain()
    controller.cancel()
    await controller.drain()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Chat with the local responder or an LLM gateway.")
    ap.add_argument("--remote", default=None, help="Gateway base URL, e.g. http://localhost:3001")
    ap.add_argument("--provider", default="openai", help="Provider name forwarded to the gateway")
    ap.add_argument("--no-delay", action="store_true", help="Disable simulated thinking time")
    args = ap.parse_args(argv)

    setup_logging()
    use_user_locale()
    asyncio.run(repl(build_controller(args)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""aiogram message handlers.

Hard contract: every incoming message produces exactly one reply. Commands map to the core
operations; any other text is treated as a natural-language listing query. Unexpected internal
errors reply with an `internal_error` payload and are logged internally.
"""

from __future__ import annotations

import logging
import re
import shlex
from dataclasses import dataclass
from time import monotonic

from aiogram.types import Message

from src.analysis.service import AnalysisService, ErrorKind, Failure
from src.app import App
from src.bot.render import render_error, render_failure, render_outcome

logger = logging.getLogger(__name__)

_COMMAND_RE = re.compile(r"^/(?P<name>\w+)(?:@\w+)?(?:\s(?P<args>.*))?$", flags=re.DOTALL)

HELP_TEXT = (
    "String analyzer bot.\n"
    "/analyze <text> - analyze and store a string\n"
    "/get <text> - show a stored analysis\n"
    "/delete <text> - delete a stored analysis\n"
    "/list [key=value ...] - list analyses; keys: is_palindrome, min_length, max_length, "
    "word_count, contains_character\n"
    "Any other message is a natural-language query, e.g. "
    '"single word palindromic strings" or "strings longer than 5".'
)


@dataclass(frozen=True)
class ParsedCommand:
    """A slash command and its raw argument text (`None` when no argument was given)."""

    name: str
    args: str | None


def parse_command(text: str) -> ParsedCommand | None:
    """Split `/name[@bot] args` into its parts; `None` if the text is not a command.

    The argument is everything after the first whitespace character, kept verbatim.
    """

    match = _COMMAND_RE.match(text)
    if not match:
        return None
    return ParsedCommand(name=match.group("name").lower(), args=match.group("args"))


def parse_list_args(args: str | None) -> dict[str, str]:
    """Parse shell-quoted `key=value` tokens.

    Raises:
        ValueError: On unbalanced quotes or a token without `=`.
    """

    params: dict[str, str] = {}
    for token in shlex.split(args or ""):
        key, sep, value = token.partition("=")
        if not sep or not key:
            raise ValueError(f"expected key=value, got {token!r}")
        params[key] = value
    return params


def _dispatch(text: str, service: AnalysisService, *, max_chars: int) -> tuple[str, str]:
    """Route text to a core operation; returns `(command, reply)`."""

    command = parse_command(text)
    if command is None:
        outcome = service.list_analyses_by_natural_language(text)
        return "nlq", render_outcome(outcome, max_chars=max_chars)

    name = command.name
    if name in {"start", "help"}:
        return name, HELP_TEXT
    if name == "analyze":
        return name, render_outcome(service.create_analysis(command.args), max_chars=max_chars)
    if name == "get":
        return name, render_outcome(service.get_analysis(command.args), max_chars=max_chars)
    if name == "delete":
        return name, render_outcome(service.delete_analysis(command.args), max_chars=max_chars)
    if name == "list":
        try:
            params = parse_list_args(command.args)
        except ValueError as exc:
            return name, render_failure(Failure(ErrorKind.invalid_input, str(exc)))
        return name, render_outcome(service.list_analyses(params), max_chars=max_chars)

    return "unknown", render_failure(Failure(ErrorKind.invalid_input, f"unknown command /{name}"))


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply exactly once."""

    started = monotonic()

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        command, reply = _dispatch(
            raw_text,
            app.service,
            max_chars=app.settings.reply_max_chars,
        )

        latency_ms = int((monotonic() - started) * 1000)
        logger.info("handled command=%s latency_ms=%d", command, latency_ms)
    except Exception:
        # Handler boundary: any internal error must still produce one reply, without details.
        logger.exception("handler failed")
        reply = render_error("internal_error", "internal error")

    await message.answer(reply)

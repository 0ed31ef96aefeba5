"""Bot router composition.

A single catch-all handler dispatches commands itself so that every message gets exactly one reply.
"""

from __future__ import annotations

from aiogram import Router

from src.bot.handlers import handle_message

router = Router(name="strings")
router.message.register(handle_message)

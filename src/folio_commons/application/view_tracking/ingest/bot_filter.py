"""View ingest – user-agent bot detection."""
from __future__ import annotations

import re

__all__ = ["BOT_USER_AGENT_RE", "is_bot_user_agent"]

BOT_USER_AGENT_RE = re.compile(
    r"(bot|spider|crawler|bingpreview|headless|monitor|uptime|pingdom|curl|wget|python-requests|postmanruntime)",
    re.IGNORECASE,
)


def is_bot_user_agent(user_agent: str | None) -> bool:
    if not user_agent:
        return False
    return BOT_USER_AGENT_RE.search(user_agent) is not None

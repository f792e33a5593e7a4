"""Configuration and constants."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DISCORD_API_BASE = "https://discord.com/api/v10"
DISCORD_CDN_BASE = "https://cdn.discordapp.com"

# The single message-context command this app registers and answers
COMMAND_NAME = "Bookmark message"


def _parse_application_id(raw: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Failed to parse DISCORD_APPLICATION_ID={raw!r}, ignoring")
        return None


CONFIG = {
    "port": int(os.getenv("PORT", "8787")),
    "discord_application_id": _parse_application_id(os.getenv("DISCORD_APPLICATION_ID", "")),
    "discord_token": os.getenv("DISCORD_TOKEN", ""),
    "discord_public_key": os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class DiscordConfig:
    application_id: Optional[int] = None
    token: str = ""
    public_key: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.application_id and self.token)


@dataclass
class AppConfig:
    """Typed view over CONFIG."""

    port: int = 8787
    discord: DiscordConfig = field(default_factory=DiscordConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            discord=DiscordConfig(
                application_id=CONFIG["discord_application_id"],
                token=CONFIG["discord_token"],
                public_key=CONFIG["discord_public_key"],
            ),
        )

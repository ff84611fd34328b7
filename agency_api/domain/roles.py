"""Fixed set of account roles."""
from __future__ import annotations

ADMIN = "Admin"
AGENT = "Agent"
PLAYER = "Player"
CLUB_MANAGER = "ClubManager"

# Seed order determines the ids assigned on a fresh store.
ROLE_NAMES: tuple[str, ...] = (ADMIN, AGENT, PLAYER, CLUB_MANAGER)

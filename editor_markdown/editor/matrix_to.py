"""Matrix deep links (matrix.to).

Builds and recognizes the three matrix.to link forms the editor turns into
mentions: a user, a room (by id or alias) and an event inside a room.
Room links may carry ``via`` query parameters naming routing servers.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Union
from urllib.parse import parse_qs

MATRIX_TO_BASE = "https://matrix.to"

MATRIX_TO = re.compile(r"^https?://matrix\.to\S*$")
MATRIX_TO_USER = re.compile(r"^https?://matrix\.to/#/(@[^:\s]+:[^?/\s]+)/?$")
MATRIX_TO_ROOM = re.compile(r"^https?://matrix\.to/#/([#!][^?/\s]+)/?(\?\S*)?$")
MATRIX_TO_ROOM_EVENT = re.compile(
    r"^https?://matrix\.to/#/([#!][^?/\s]+)/(\$[^?/\s]+)/?(\?\S*)?$"
)


@dataclass(frozen=True)
class UserMention:
    user_id: str


@dataclass(frozen=True)
class RoomMention:
    room_id_or_alias: str
    via_servers: Optional[List[str]] = field(default=None, hash=False)


@dataclass(frozen=True)
class RoomEventMention:
    room_id_or_alias: str
    event_id: str
    via_servers: Optional[List[str]] = field(default=None, hash=False)


MatrixToLink = Union[UserMention, RoomMention, RoomEventMention]


def _with_via_servers(fragment: str, via_servers: Optional[List[str]]) -> str:
    if not via_servers:
        return fragment
    query = "&".join(f"via={server}" for server in via_servers)
    return f"{fragment}?{query}"


def _via_servers(query: Optional[str]) -> Optional[List[str]]:
    if not query:
        return None
    servers = parse_qs(query.lstrip("?")).get("via")
    return servers or None


def get_matrix_to_user(user_id: str) -> str:
    return f"{MATRIX_TO_BASE}/#/{user_id}"


def get_matrix_to_room(room_id_or_alias: str, via_servers: Optional[List[str]] = None) -> str:
    return _with_via_servers(f"{MATRIX_TO_BASE}/#/{room_id_or_alias}", via_servers)


def get_matrix_to_room_event(
    room_id_or_alias: str, event_id: str, via_servers: Optional[List[str]] = None
) -> str:
    return _with_via_servers(
        f"{MATRIX_TO_BASE}/#/{room_id_or_alias}/{event_id}", via_servers
    )


def test_matrix_to(href: str) -> bool:
    """Check whether ``href`` is a matrix.to link at all."""
    return MATRIX_TO.match(href) is not None


def parse_matrix_to_user(href: str) -> Optional[str]:
    match = MATRIX_TO_USER.match(href)
    return match.group(1) if match else None


def parse_matrix_to_room(href: str) -> Optional[RoomMention]:
    match = MATRIX_TO_ROOM.match(href)
    if not match:
        return None
    return RoomMention(
        room_id_or_alias=match.group(1),
        via_servers=_via_servers(match.group(2)),
    )


def parse_matrix_to_room_event(href: str) -> Optional[RoomEventMention]:
    match = MATRIX_TO_ROOM_EVENT.match(href)
    if not match:
        return None
    return RoomEventMention(
        room_id_or_alias=match.group(1),
        event_id=match.group(2),
        via_servers=_via_servers(match.group(3)),
    )


def resolve_matrix_to(href: str) -> Optional[MatrixToLink]:
    """Resolve a link to the entity it points at.

    Args:
        href: Already URI-decoded link target

    Returns:
        UserMention, RoomMention or RoomEventMention, or None if the link is
        not a recognized matrix.to link
    """
    if not test_matrix_to(href):
        return None

    user_id = parse_matrix_to_user(href)
    if user_id:
        return UserMention(user_id=user_id)

    room = parse_matrix_to_room(href)
    if room:
        return room

    return parse_matrix_to_room_event(href)

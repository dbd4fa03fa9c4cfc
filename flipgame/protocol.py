"""Shared protocol pieces: message types, address handling and game rules."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from enum import IntEnum

MSG_SIZE = 256

ATTACK_TYPES = (
    "Nuclear Attack",
    "Intercept Attack",
    "Cyber Attack",
    "Drone Attack",
    "Bio Attack",
)

# For each client choice: the server choices it beats, and those it loses to.
_OUTCOMES: dict[int, tuple[frozenset[int], frozenset[int]]] = {
    0: (frozenset({2, 3}), frozenset({1, 4})),
    1: (frozenset({4, 0}), frozenset({2, 3})),
    2: (frozenset({1, 3}), frozenset({0, 4})),
    3: (frozenset({1, 4}), frozenset({0, 2})),
    4: (frozenset({0, 2}), frozenset({1, 3})),
}


class MessageType(IntEnum):
    """Kinds of message exchanged during a game."""

    REQUEST = 0
    RESPONSE = 1
    RESULT = 2
    PLAY_AGAIN_REQUEST = 3
    PLAY_AGAIN_RESPONSE = 4
    ERROR = 5
    END = 6


@dataclass
class GameMessage:
    """State carried through one game session."""

    type: MessageType = MessageType.REQUEST
    client_action: int = 0
    server_action: int = 0
    result: int = 0
    client_wins: int = 0
    server_wins: int = 0
    message: str = ""


class AddressError(ValueError):
    """Raised when an address, port or protocol cannot be used."""


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: junk after the digits is ignored."""
    s = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if s[:1] in ("+", "-"):
        if s[0] == "-":
            sign = -1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _parse_port(port: str | None) -> int:
    if port is None:
        raise AddressError("port is missing")
    value = _atoi(str(port)) % 65536
    if value == 0:
        raise AddressError(f"invalid port: {port!r}")
    return value


def parse_address(address: str | None, port: str | None) -> tuple[int, tuple]:
    """Turn an address and port string into ``(family, sockaddr)``.

    IPv4 is tried first, then IPv6.
    """
    if address is None or port is None:
        raise AddressError("address and port are required")
    port_number = _parse_port(port)
    try:
        socket.inet_pton(socket.AF_INET, address)
    except OSError:
        pass
    else:
        return socket.AF_INET, (address, port_number)
    try:
        socket.inet_pton(socket.AF_INET6, address)
    except OSError:
        pass
    else:
        return socket.AF_INET6, (address, port_number, 0, 0)
    raise AddressError(f"invalid address: {address!r}")


def format_address(sockaddr: tuple[int, tuple]) -> str:
    """Render ``(family, sockaddr)`` as ``"IPv<n> <address> <port>"``."""
    family, addr = sockaddr
    if family == socket.AF_INET:
        version = 4
    elif family == socket.AF_INET6:
        version = 6
    else:
        raise AddressError("Unknown Protocol Family")
    host, port = addr[0], addr[1]
    try:
        host = socket.inet_ntop(family, socket.inet_pton(family, host))
    except OSError as exc:
        raise AddressError(f"cannot format address {host!r}") from exc
    return f"IPv{version} {host} {port}"


def server_address(proto: str, port: str) -> tuple[int, tuple]:
    """Build the wildcard listening address for ``"v4"`` or ``"v6"``."""
    port_number = _parse_port(port)
    if proto == "v4":
        return socket.AF_INET, ("0.0.0.0", port_number)
    if proto == "v6":
        return socket.AF_INET6, ("::", port_number, 0, 0)
    raise AddressError(f"unknown protocol: {proto!r}")


def play_processor(client_choice: int, server_choice: int) -> int:
    """Decide a round: 1 if the client wins, 0 if not, -1 if undecidable.

    Equal choices give 0.
    """
    if client_choice == server_choice:
        return 0
    outcome = _OUTCOMES.get(client_choice)
    if outcome is None:
        return -1
    beats, loses_to = outcome
    if server_choice in beats:
        return 1
    if server_choice in loses_to:
        return 0
    return -1
"""Interactive game client: relays server prompts and the player's answers."""

from __future__ import annotations

import socket
import sys

from flipgame.protocol import AddressError, parse_address

BUFFER_SIZE = 1024
END_MARKER = "\nFim de jogo!\n"


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def run_client(address, port, stdin=None, stdout=None) -> str:
    """Connect to the server and play until it announces the end.

    Returns the last message received.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    family, sockaddr = parse_address(address, port)

    with socket.socket(family, socket.SOCK_STREAM) as sock:
        sock.connect(sockaddr)
        print("Conectado ao servidor.", file=stdout)
        while True:
            data = sock.recv(BUFFER_SIZE - 1)
            if not data:
                raise ConnectionError("server closed the connection")
            message = _decode(data)
            if message.startswith(END_MARKER):
                break
            print(message, file=stdout)
            line = stdin.readline()
            if not line:
                return message
            sock.sendall(line.encode("utf-8") + b"\0")
        print(message, file=stdout)
        return message


def _usage(prog: str) -> int:
    print(f"Usage: {prog} <Server IP> <Server PORT>")
    print(f"Example: {prog} 127.0.0.1 51511")
    return 1


def main(argv=None) -> int:
    """Command entry point: ``client <address> <port>``."""
    argv = list(sys.argv if argv is None else argv)
    prog = argv[0] if argv else "client"
    if len(argv) < 3:
        return _usage(prog)
    try:
        run_client(argv[1], argv[2])
    except AddressError:
        return _usage(prog)
    except OSError as exc:
        print(f"Connect: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
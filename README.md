# flipgame

A small two-player game over TCP. A server waits for a client, offers five
attacks, picks one of its own at random and reports the outcome. After each
decided round the client may play again; when it stops, the server sends the
final score and closes the connection. The server then waits for the next
client.

The attacks are:

| Number | Attack             |
|--------|--------------------|
| 0      | Nuclear Attack     |
| 1      | Intercept Attack   |
| 2      | Cyber Attack       |
| 3      | Drone Attack       |
| 4      | Bio Attack         |

The server only ever picks one of attacks 0 to 3. When both sides pick the
same attack the round is scored for the server.

## Installing

```
pip install .
```

## Running the server

```
flipgame-server v4 51511
```

The first argument picks the address family (`v4` for IPv4, `v6` for IPv6);
the second is the port to listen on. The server listens on every interface
and serves one client after another until it is interrupted. With missing or
invalid arguments it prints a usage message and exits with status 1.

## Running the client

```
flipgame-client 127.0.0.1 51511
```

Give the server's IPv4 or IPv6 address and its port. The client prints each
prompt from the server and sends back the line you type. Answer with a number
from 0 to 4 to attack, then 1 to play again or 0 to stop. Any other answer
makes the server ask again. The client stops once the server sends the final
score, or when its input runs out.

## Using it from Python

The game rules are available without any networking:

```python
from flipgame.protocol import play_processor

play_processor(0, 2)  # 1: the client wins
play_processor(0, 1)  # 0: the client does not win
play_processor(0, 0)  # 0: same choice
```

`play_processor` returns -1 for choices outside 0 to 4.

Other pieces in `flipgame.protocol`:

- `parse_address(address, port)` returns `(family, sockaddr)`, trying IPv4
  before IPv6, and raises `AddressError` for a bad address or port.
- `server_address(proto, port)` builds the wildcard listening address for
  `"v4"` or `"v6"`.
- `format_address((family, sockaddr))` renders `"IPv4 127.0.0.1 51511"`.
- `MessageType` and `GameMessage` describe the steps and state of a session.

`flipgame.server.GameSession(rng)` plays one game over an already connected
socket and returns the final `GameMessage`; `flipgame.server.serve(proto,
port, rng)` runs the listening loop. `flipgame.client.run_client(address,
port, stdin, stdout)` drives a session from any text streams and returns the
last message received.

## Tests

```
pip install .[test]
pytest
```
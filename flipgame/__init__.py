"""A five-way attack game played between a TCP server and a terminal client."""

__version__ = "0.1.0"
__all__ = ["protocol", "server", "client"]
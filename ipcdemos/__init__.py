"""Small IPC demos: a pub/sub broker, a FIFO echo server and client, and a two-client pipe relay."""

__version__ = "0.1.0"
"""
SocksWork client: a line-based TCP connection to a SocksWork server.
"""

import logging
import socket
from typing import Optional

logger = logging.getLogger(__name__)


class Connection:
    """Connection to a SocksWork server."""

    def __init__(self, server: str = "127.0.0.1", port: int = 1207, timeout: int = 100):
        """
        Initialize the connection. Nothing is opened until `connect`.

        Args:
            server: Server IP or host
            port: Server port
            timeout: Connection timeout in milliseconds
        """
        self.server = server
        self.port = int(port)
        self.timeout = timeout
        self.socket: Optional[socket.socket] = None

    @property
    def is_connected(self) -> bool:
        return self.socket is not None

    def connect(self) -> bool:
        """
        Open the connection to the server.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            self.socket = socket.create_connection((self.server, self.port), timeout=self.timeout / 1000)
            logger.info(f"Connected to SocksWork server {self.server}:{self.port}")
            return True
        except OSError as e:
            logger.error(f"SocksWork connection to {self.server}:{self.port} failed: {e}")
            self.socket = None
            return False

    def send(self, message: str) -> None:
        """
        Send a message, terminated by a newline.

        Raises:
            ConnectionError: If the connection is not open
        """
        if self.socket is None:
            raise ConnectionError("SocksWork connection is not open")
        self.socket.sendall(message.encode("utf-8") + b"\n")

    def receive(self, buffer_size: int = 4096) -> str:
        """
        Read one response from the server.

        Raises:
            ConnectionError: If the connection is not open
        """
        if self.socket is None:
            raise ConnectionError("SocksWork connection is not open")
        return self.socket.recv(buffer_size).decode("utf-8").rstrip("\n")

    def close(self) -> None:
        """Close the connection."""
        if self.socket is not None:
            self.socket.close()
            self.socket = None
            logger.info(f"Disconnected from SocksWork server {self.server}:{self.port}")

    def __enter__(self) -> "Connection":
        if not self.is_connected and not self.connect():
            raise ConnectionError(f"Could not connect to SocksWork server {self.server}:{self.port}")
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

"""
Listener and process lifecycle for EC2 Hello Service
"""

import contextlib
import os
import signal
import socket
from typing import Optional

import uvicorn

from hello_service.utils.config_manager import config
from hello_service.utils.logger import get_logger


HOST = "0.0.0.0"
PORT = 8080
BACKLOG = 2048
HANDLED_SIGNALS = (signal.SIGTERM, signal.SIGINT)


class _UnmanagedSignalsServer(uvicorn.Server):
    """uvicorn server that leaves signal handling to its owner"""

    @contextlib.contextmanager
    def capture_signals(self):
        yield

    def install_signal_handlers(self) -> None:
        return


class ServiceServer:
    """Owns the listening socket and the uvicorn server running on it"""
    
    def __init__(self, app, host: str = HOST, port: int = PORT):
        self.app = app
        self.host = host
        self.port = port
        self.logger = get_logger('http_service')
        self.sock: Optional[socket.socket] = None
        self.server: Optional[uvicorn.Server] = None
    
    def bind(self) -> socket.socket:
        """Bind and listen; raises OSError when the address is taken"""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
            sock.listen(BACKLOG)
        except OSError:
            sock.close()
            raise
        
        self.sock = sock
        self.logger.info(f"Server running on port {self.port}")
        self.logger.info(f"Health check: http://localhost:{self.port}/health")
        return sock
    
    def install_signal_handlers(self) -> None:
        for sig in HANDLED_SIGNALS:
            signal.signal(sig, self._signal_handler)
    
    def _signal_handler(self, signum, frame):
        """Handle shutdown signals"""
        # In-flight requests are not drained; os._exit skips event loop teardown.
        self.logger.info(f"{signal.Signals(signum).name} received, shutting down gracefully")
        for handler in self.logger.logger.handlers:
            handler.flush()
        os._exit(0)
    
    def serve(self) -> None:
        """Serve on the bound socket until a termination signal arrives"""
        if self.sock is None:
            self.bind()
        
        self.install_signal_handlers()
        server_config = uvicorn.Config(
            self.app,
            log_level=config.get_server_log_level(),
            access_log=False,
            loop="asyncio",
            http="httptools",
            lifespan="off"
        )
        self.server = _UnmanagedSignalsServer(server_config)
        self.server.run(sockets=[self.sock])

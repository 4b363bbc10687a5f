"""
FastAPI application for EC2 Hello Service
Logs every request, then dispatches by exact path to the route table
"""

import sys
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_service import __version__
from hello_service.models import IncomingRequest
from hello_service.routes import ROUTES, Route
from hello_service.server import HOST, PORT, ServiceServer
from hello_service.utils.logger import get_logger


def raw_request_path(request: Request) -> str:
    """Path as sent on the request line, still percent-encoded and without the query"""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


class HelloWebApp:
    """Main web application"""
    
    def __init__(self, routes: Iterable[Route] = ROUTES):
        self.logger = get_logger('request_log')
        self.app = FastAPI(
            title="EC2 Hello Service",
            description="Greeting and health check endpoint",
            version=__version__,
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
            redirect_slashes=False
        )
        
        self._setup_middleware()
        self._setup_exception_handlers()
        self._setup_routes(routes)
    
    def _setup_middleware(self):
        """Log one line per request before dispatch"""
        
        @self.app.middleware("http")
        async def log_requests(request: Request, call_next):
            incoming = IncomingRequest(method=request.method, path=raw_request_path(request))
            self.logger.info(incoming.log_line())
            return await call_next(request)
    
    def _setup_exception_handlers(self):
        """Report unmatched method+path pairs as not found"""
        
        @self.app.exception_handler(StarletteHTTPException)
        async def not_found_fallback(request: Request, exc: StarletteHTTPException):
            if exc.status_code == 405:
                exc = StarletteHTTPException(status_code=404)
            return await http_exception_handler(request, exc)
    
    def _setup_routes(self, routes: Iterable[Route]):
        """Register the route table"""
        for route in routes:
            self.app.add_api_route(
                route.path,
                route.handler,
                methods=list(route.methods),
                status_code=route.status_code,
                response_class=PlainTextResponse
            )
    
    def run(self, host: str = HOST, port: int = PORT):
        """Bind the listener and serve until a termination signal arrives"""
        server = ServiceServer(self.app, host=host, port=port)
        server.bind()
        server.serve()


def main(host: str = HOST, port: int = PORT):
    """Main entry point"""
    logger = get_logger('hello_service_main')
    web_app = HelloWebApp()
    try:
        web_app.run(host=host, port=port)
    except OSError as e:
        logger.error(f"Failed to start server on {host}:{port}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

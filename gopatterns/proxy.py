"""Proxy: a rate-limiting server in front of an application."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter


class Server(ABC):
    """Handles a request and returns a status code and body."""

    @abstractmethod
    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        """Return ``(status, body)`` for the request."""


class Application(Server):
    """The real application behind the proxy."""

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if url == "/app/status" and method == "GET":
            return 200, "Ok"
        if url == "/create/user" and method == "POST":
            return 201, "User Created"
        return 404, "Not Ok"


class Nginx(Server):
    """Forwards requests to the application, limiting requests per URL."""

    def __init__(self, application: Application | None = None, max_allowed_request: int = 2) -> None:
        self.application = application if application is not None else Application()
        self.max_allowed_request = max_allowed_request
        self.rate_limiter: Counter[str] = Counter()

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if not self.check_rate_limiting(url):
            return 403, "Not Allowed"
        return self.application.handle_request(url, method)

    def check_rate_limiting(self, url: str) -> bool:
        """Count a request to ``url``; return False once the limit is used up."""
        if self.rate_limiter[url] == 0:
            self.rate_limiter[url] = 1
        if self.rate_limiter[url] > self.max_allowed_request:
            return False
        self.rate_limiter[url] += 1
        return True


def main(argv: list[str] | None = None) -> None:
    server = Nginx()
    app_status_url = "/app/status"
    create_user_url = "/create/user"
    requests = [
        (app_status_url, "GET"),
        (app_status_url, "GET"),
        (app_status_url, "GET"),
        (create_user_url, "POST"),
        (create_user_url, "GET"),
    ]
    for url, method in requests:
        code, body = server.handle_request(url, method)
        print(f"\nUrl: {app_status_url}\nHttpCode: {code}\nBody: {body}")


if __name__ == "__main__":
    main()
"""Webhook configuration and an HTTP listener that receives updates."""

from __future__ import annotations

import json
import queue
import ssl
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from telekit.constants import TelebotError
from telekit.poller import Poller

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def _debug(bot: Any, err: Exception) -> None:
    debug = getattr(bot, "debug", None)
    if callable(debug):
        debug(err)


@dataclass
class WebhookTLS:
    """Paths to a key and a certificate for a TLS listener."""

    key: str = ""
    cert: str = ""


@dataclass
class WebhookEndpoint:
    """Public endpoint to which updates are sent, with an optional certificate."""

    public_url: str = ""
    cert: str = ""


@dataclass
class Webhook(Poller):
    """Webhook poller; also carries the webhook status fields."""

    listen: str = ""
    max_connections: int = 0
    allowed_updates: list[str] = field(default_factory=list)
    ip: str = ""
    drop_updates: bool = False
    secret_token: str = ""

    has_custom_cert: bool = False
    pending_updates: int = 0
    error_unixtime: int = 0
    error_message: str = ""
    sync_error_unixtime: int = 0

    tls: WebhookTLS | None = None
    endpoint: WebhookEndpoint | None = None

    def files(self) -> dict[str, str]:
        """Files to upload when registering: the certificate path, if any."""
        result: dict[str, str] = {}
        if self.tls is not None:
            result["certificate"] = self.tls.cert
        if self.endpoint is not None:
            if self.endpoint.cert:
                result["certificate"] = self.endpoint.cert
            else:
                # A proxy in front holds a public certificate; nothing to upload.
                result.pop("certificate", None)
        return result

    def params(self) -> dict[str, str]:
        """Request parameters for registering the webhook."""
        result: dict[str, str] = {}
        if self.max_connections:
            result["max_connections"] = str(self.max_connections)
        if self.allowed_updates:
            result["allowed_updates"] = json.dumps(
                self.allowed_updates, ensure_ascii=False, separators=(",", ":")
            )
        if self.ip:
            result["ip_address"] = self.ip
        if self.drop_updates:
            result["drop_pending_updates"] = "true"
        if self.secret_token:
            result["secret_token"] = self.secret_token

        scheme = "https://" if self.tls is not None else "http://"
        result["url"] = scheme + self.listen
        if self.endpoint is not None:
            result["url"] = self.endpoint.public_url
        return result

    def accepts_token(self, token: str | None) -> bool:
        """Whether a request carrying this secret token header is accepted."""
        return not self.secret_token or token == self.secret_token

    def decode_update(self, body: str | bytes) -> dict:
        """Decode a request body into an update object."""
        try:
            update = json.loads(body)
        except (ValueError, UnicodeDecodeError) as err:
            raise ValueError(f"cannot decode update: {err}") from err
        if not isinstance(update, dict):
            raise ValueError("cannot decode update: not a JSON object")
        return update

    def _handler_class(self, bot: Any, dest: queue.Queue) -> type:
        webhook = self

        class _Handler(BaseHTTPRequestHandler):
            def do_POST(self) -> None:
                try:
                    length = int(self.headers.get("Content-Length") or 0)
                    body = self.rfile.read(length)
                    if not webhook.accepts_token(self.headers.get(SECRET_TOKEN_HEADER)):
                        _debug(bot, TelebotError("invalid secret token in request"))
                        return
                    try:
                        update = webhook.decode_update(body)
                    except ValueError as err:
                        _debug(bot, err)
                        return
                    dest.put(update)
                finally:
                    self.send_response(200)
                    self.send_header("Content-Length", "0")
                    self.end_headers()

            def log_message(self, format: str, *args: Any) -> None:
                pass

        return _Handler

    def poll(self, bot: Any, dest: queue.Queue, stop: threading.Event) -> None:
        """Register the webhook, then serve updates until stop is set."""
        try:
            bot.set_webhook(self)
        except Exception as err:
            bot.on_error(err, None)
            stop.set()
            return

        if not self.listen:
            stop.wait()
            return

        host, _, port = self.listen.rpartition(":")
        server = ThreadingHTTPServer((host, int(port)), self._handler_class(bot, dest))
        if self.tls is not None:
            context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
            context.load_cert_chain(self.tls.cert, self.tls.key)
            server.socket = context.wrap_socket(server.socket, server_side=True)

        def shut_down_on_stop() -> None:
            stop.wait()
            server.shutdown()

        threading.Thread(target=shut_down_on_stop, daemon=True).start()
        try:
            server.serve_forever(poll_interval=0.1)
        finally:
            server.server_close()
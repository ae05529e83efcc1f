"""A small HTTP client for the Ollama API."""

from __future__ import annotations

import os
import urllib.parse
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 11434
DEFAULT_BASE_URL = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"


class OllamaError(Exception):
    """Raised when the Ollama server cannot be reached or reports an error."""


def _split_host_port(hostport: str, default_port: int) -> tuple[str, int]:
    if not hostport:
        return DEFAULT_HOST, default_port
    try:
        parsed = urllib.parse.urlsplit("//" + hostport)
        port = parsed.port
        host = parsed.hostname
    except ValueError:
        return DEFAULT_HOST, default_port
    return host or DEFAULT_HOST, default_port if port is None else port


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        detail = str(data["error"])
    else:
        detail = response.text.strip() or response.reason_phrase
    return f"{response.status_code}: {detail}"


class OllamaClient:
    """Talks to an Ollama server over HTTP."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, *, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout)

    @classmethod
    def from_environment(cls) -> OllamaClient:
        """Build a client for the server named by ``OLLAMA_HOST``."""
        raw = os.environ.get("OLLAMA_HOST", "").strip().strip("\"'").strip()
        scheme, separator, rest = raw.partition("://")
        if separator:
            default_port = {"http": 80, "https": 443}.get(scheme, DEFAULT_PORT)
        else:
            scheme, rest, default_port = "http", raw, DEFAULT_PORT
        hostport, _, path = rest.partition("/")
        host, port = _split_host_port(hostport, default_port)
        netloc = f"[{host}]:{port}" if ":" in host else f"{host}:{port}"
        base_url = f"{scheme}://{netloc}"
        if path:
            base_url += "/" + path
        return cls(base_url)

    def _request(self, method: str, path: str, payload: Any = None) -> Any:
        try:
            response = self._http.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            raise OllamaError(str(exc) or type(exc).__name__) from exc
        if response.is_error:
            raise OllamaError(_error_message(response))
        try:
            return response.json()
        except ValueError as exc:
            raise OllamaError(f"invalid response from server: {exc}") from exc

    def list_models(self) -> list[str]:
        """Return the names of the locally available models."""
        data = self._request("GET", "/api/tags")
        return [model.get("name", "") for model in data.get("models") or []]

    def chat(
        self,
        model: str,
        messages: Sequence[Mapping[str, str]],
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Send a non-streaming chat request and return the reply text."""
        payload: dict[str, Any] = {
            "model": model,
            "messages": [dict(message) for message in messages],
            "stream": False,
        }
        if options:
            payload["options"] = dict(options)
        data = self._request("POST", "/api/chat", payload)
        message = data.get("message") or {}
        return message.get("content", "")

    def close(self) -> None:
        """Release the underlying connections."""
        self._http.close()

    def __enter__(self) -> OllamaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
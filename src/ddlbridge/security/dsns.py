"""DSN parsing and redaction utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, unquote, urlencode, urlparse

from .redaction import redact_query_params


@dataclass
class DSNConfig:
    scheme: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    database: Optional[str]
    path: str
    query: dict[str, str]

    @property
    def engine(self) -> str:
        """
        Engine part of the scheme, without any ``+driver`` suffix.
        """

        return self.scheme.split("+", 1)[0].lower()

    def redacted(self) -> str:
        """
        Return the DSN with credentials redacted but structure preserved.
        """

        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += ":***"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        query = redact_query_params(self.query)
        query_string = urlencode(query) if query else ""

        # Keep the double slash prefix even when netloc is empty (sqlite:///file.db)
        result = f"{self.scheme}://"
        if netloc:
            result += netloc
        result += self.path or ""
        if query_string:
            result += f"?{query_string}"
        return result


def parse_dsn(dsn: str) -> DSNConfig:
    parsed = urlparse(dsn)
    if not parsed.scheme:
        raise ValueError(f"DSN is missing a scheme: {dsn!r}")
    query = {k: v[0] for k, v in parse_qs(parsed.query).items()}
    password = unquote(parsed.password) if parsed.password else None
    return DSNConfig(
        scheme=parsed.scheme,
        username=unquote(parsed.username) if parsed.username else None,
        password=password,
        host=parsed.hostname,
        port=parsed.port,
        database=parsed.path.lstrip("/") or None,
        path=parsed.path or "",
        query=query,
    )

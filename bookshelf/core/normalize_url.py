"""URL Normalizer: canonical and redirection rewrites for a parsed URL.

Invariants:
    - ParsedURL is frozen; every rewrite returns a new value (caller's copy untouched)
    - canonical: no query, no fragment, no trailing "/" (empty path becomes "/")
    - redirection: host forced to CANONICAL_HOST, then scheme/host/path/query/fragment lower-cased
    - all: canonical, then redirection
    - Output path is percent-escaped; existing escapes are left as they are
    - Hosts with spaces or other disallowed characters, or a non-numeric port, do not parse
    - Unknown operation raises UnsupportedOperationError, never passes through

Design Decisions:
    - urllib.parse.urlsplit for decomposition: handles scheme/netloc/path/query/fragment
      the same way for every operation
    - Query string lower-cased on redirection even though values may be case-sensitive
      (ADR: existing clients depend on this exact output)
"""

import string
from dataclasses import dataclass, replace
from urllib.parse import quote, urlsplit, urlunsplit

from bookshelf.core.domain_types import UrlOperation
from bookshelf.core.errors import UnsupportedOperationError


CANONICAL_HOST = "www.byfood.com"

_HOST_CHARS = frozenset(string.ascii_letters + string.digits + "-._~!$&'()*+,;=:[]<>\"%")
_PATH_SAFE = "/!$&'()*+,;=:@[]%"


@dataclass(frozen=True)
class ParsedURL:
    """URL split into the parts the normalizer rewrites.

    ``host`` includes the port when one is present. ``userinfo`` is carried
    through untouched by every operation.
    """
    scheme: str
    host: str
    path: str = ""
    query: str = ""
    fragment: str = ""
    userinfo: str = ""

    @property
    def netloc(self) -> str:
        if self.userinfo:
            return f"{self.userinfo}@{self.host}"
        return self.host

    def geturl(self) -> str:
        return urlunsplit(
            (
                self.scheme,
                self.netloc,
                quote(self.path, safe=_PATH_SAFE),
                self.query,
                self.fragment,
            ),
        )


def parse_url(raw: str) -> ParsedURL | None:
    """Decompose raw into a ParsedURL. None when unparseable or scheme/host missing."""
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        return None
    try:
        parts = urlsplit(raw)
    except ValueError:
        return None

    userinfo, _, host = parts.netloc.rpartition("@")
    if not parts.scheme or not host:
        return None
    if not _valid_host(host):
        return None

    # urlsplit lower-cases the scheme; keep what the caller sent.
    scheme = raw[: len(parts.scheme)]
    if scheme.lower() != parts.scheme:
        scheme = parts.scheme

    return ParsedURL(
        scheme=scheme,
        host=host,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        userinfo=userinfo,
    )


def _valid_host(host: str) -> bool:
    """Host characters are restricted and any port must be all digits."""
    if not all(c in _HOST_CHARS or ord(c) >= 0x80 for c in host):
        return False
    tail = host[host.rfind("]") + 1:] if host.startswith("[") else host
    _, sep, port = tail.rpartition(":")
    return not sep or port == "" or (port.isascii() and port.isdigit())


def apply_canonical(url: ParsedURL) -> ParsedURL:
    """Strip query and fragment, trim trailing slashes. Case untouched."""
    path = url.path.rstrip("/") or "/"
    return replace(url, path=path, query="", fragment="")


def apply_redirection(url: ParsedURL) -> ParsedURL:
    """Force the canonical host and lower-case every rewritten part."""
    forced = replace(url, host=CANONICAL_HOST)
    return replace(
        forced,
        scheme=forced.scheme.lower(),
        host=forced.host.lower(),
        path=forced.path.lower(),
        query=forced.query.lower(),
        fragment=forced.fragment.lower(),
    )


def normalize_url(url: ParsedURL, operation: UrlOperation | str) -> str:
    """Apply the named operation and return the rewritten URL string."""
    try:
        op = UrlOperation(operation)
    except ValueError:
        raise UnsupportedOperationError(str(operation))

    if op is UrlOperation.CANONICAL:
        return apply_canonical(url).geturl()
    if op is UrlOperation.REDIRECTION:
        return apply_redirection(url).geturl()
    return apply_redirection(apply_canonical(url)).geturl()

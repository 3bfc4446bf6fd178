import json
import logging
import time
from typing import List
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError
from urllib3.exceptions import HTTPError as TransportError

from country_lookup.errors import UpstreamInvalidResponse, UpstreamUnavailable
from country_lookup.models import RawCountry
from country_lookup.settings import UPSTREAM_BASE_URL, UPSTREAM_TIMEOUT_SECONDS

log = logging.getLogger(__name__)

_CANDIDATES = TypeAdapter(List[RawCountry])
_READ_CHUNK = 8192


class RestCountriesClient:
    """
    Thin client for the REST Countries directory.
    One GET per call, no retries. A single Session is shared across
    request threads for connection pooling.

    `timeout` is a deadline for the whole fetch (connect, headers and body),
    not just for each socket operation.
    """
    def __init__(
        self,
        base_url: str = UPSTREAM_BASE_URL,
        timeout: float = UPSTREAM_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/v3.1/name/{quote(name, safe='')}"

    def fetch_by_name(self, name: str) -> List[RawCountry]:
        """
        Search the directory by country name.

        Returns:
          the decoded candidate list, possibly empty. The directory answers
          404 when nothing matches; that is reported as [] too, and so is a
          JSON `null` body.

        Raises:
          UpstreamUnavailable      network error, deadline passed, unexpected status
          UpstreamInvalidResponse  body is not a JSON array of countries
        """
        url = self.url_for(name)
        deadline = time.monotonic() + self.timeout
        try:
            r = self.session.get(url, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            log.warning("upstream request failed: name=%s error=%s", name, e)
            raise UpstreamUnavailable(f"upstream request failed: {e}") from e

        with r:
            if r.status_code == 404:
                return []
            if r.status_code != 200:
                log.warning("upstream returned HTTP %s: name=%s", r.status_code, name)
                raise UpstreamUnavailable(f"upstream returned HTTP {r.status_code}")
            body = self._read_body(r, deadline, name)

        try:
            payload = json.loads(body)
        except ValueError as e:
            log.warning("upstream body is not JSON: name=%s", name)
            raise UpstreamInvalidResponse(f"invalid upstream response: {e}") from e

        if payload is None:
            return []
        try:
            return _CANDIDATES.validate_python(payload)
        except ValidationError as e:
            log.warning("upstream payload has unexpected shape: name=%s", name)
            raise UpstreamInvalidResponse(f"invalid upstream response: {e}") from e

    def _read_body(self, r: requests.Response, deadline: float, name: str) -> bytes:
        """Read the streamed body, giving up once `deadline` has passed."""
        buf = bytearray()
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                log.warning("upstream deadline exceeded: name=%s", name)
                raise UpstreamUnavailable(f"upstream timed out after {self.timeout:g}s")
            _limit_next_read(r, remaining)
            try:
                # read1: return whatever has arrived instead of waiting for a full chunk
                chunk = r.raw.read1(_READ_CHUNK, decode_content=True)
            except (TransportError, OSError) as e:
                log.warning("upstream read failed: name=%s error=%s", name, e)
                raise UpstreamUnavailable(f"upstream timed out or dropped the connection: {e}") from e
            if not chunk:
                return bytes(buf)
            buf += chunk

    def close(self):
        self.session.close()


def _limit_next_read(r: requests.Response, seconds: float):
    # a single blocking recv must not outlive the overall deadline
    conn = getattr(r.raw, "connection", None)
    sock = getattr(conn, "sock", None)
    if sock is not None:
        sock.settimeout(seconds)

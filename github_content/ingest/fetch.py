from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from github_content.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from github_content.errors import FetchError

USER_AGENT = "github-content/1.0"


def decode_content(payload: Dict[str, Any]) -> bytes:
    """
    Turn a contents API file object into raw bytes.

    GitHub sends `content` base64 encoded (wrapped at 60 columns). An empty
    encoding means the content is already plain text. Files above the API
    size limit come back with encoding "none" and no content; those are
    reported as errors rather than fetched some other way.
    """
    encoding = payload.get("encoding") or ""
    content = payload.get("content")
    if content is None:
        content = ""
    if not isinstance(content, str):
        raise FetchError(f"malformed content field of type {type(content).__name__}")

    if encoding == "base64":
        # line breaks are the only non-alphabet characters GitHub inserts
        cleaned = content.replace("\n", "").replace("\r", "")
        try:
            return base64.b64decode(cleaned.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError) as e:
            raise FetchError(f"error in decoding github file content: {e}") from e
    if encoding == "":
        return content.encode("utf-8")
    raise FetchError(f"unsupported content encoding: {encoding}")


class GithubContentClient:
    """
    Minimal client for the repository contents endpoint:
      GET /repos/{owner}/{repo}/contents/{path}?ref={ref}
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def contents_url(self, owner: str, repo: str, path: str) -> str:
        return (
            f"{self.api_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"
            f"/contents/{quote(path.lstrip('/'))}"
        )

    def get_contents(self, owner: str, repo: str, path: str, ref: str) -> bytes:
        """
        Download `path` as it existed at revision `ref`.

        Exactly one request is made. Any transport, HTTP or decoding
        failure raises FetchError.
        """
        url = self.contents_url(owner, repo, path)
        try:
            resp = self.session.get(
                url,
                params={"ref": ref},
                headers=self.headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise FetchError(
                f"error in fetching {owner}/{repo}/{path}@{ref}: HTTP {status}"
            ) from e
        except (requests.RequestException, ValueError) as e:
            raise FetchError(f"error in fetching {owner}/{repo}/{path}@{ref}: {e}") from e

        if isinstance(payload, list):
            raise FetchError(f"{path} is a directory, not a file")
        if not isinstance(payload, dict):
            raise FetchError(f"unexpected response for {path}: {type(payload).__name__}")
        kind = payload.get("type", "file")
        if kind != "file":
            raise FetchError(f"{path} is a {kind}, not a file")

        return decode_content(payload)


__all__ = ["GithubContentClient", "decode_content", "USER_AGENT"]

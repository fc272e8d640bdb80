"""Builders for GitHub API payloads and an in-memory fake of GitHub."""

import base64
import json
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from ghcopier.models import CopierConfig
from ghcopier.services import GitHubAPIService


API = "https://api.github.com"
RAW = "https://raw.githubusercontent.com"


# ---- Payload builders ------------------------------------------------------

def api_url(owner: str, repo: str, path: str, ref: str = "main") -> str:
    """Contents URL as it goes over the wire; ``path`` is given unencoded."""
    return f"{API}/repos/{owner}/{repo}/contents/{quote(path)}?ref={ref}"


def raw_url(owner: str, repo: str, path: str, ref: str = "main") -> str:
    return f"{RAW}/{owner}/{repo}/{ref}/{quote(path)}"


def encode_content(data: bytes) -> str:
    """Base64 the way GitHub serves it: 60-character lines, trailing newline."""
    encoded = base64.b64encode(data).decode("ascii")
    return "".join(encoded[i:i + 60] + "\n" for i in range(0, len(encoded), 60))


def file_payload(
    owner: str,
    repo: str,
    path: str,
    data: bytes,
    ref: str = "main",
    inline: bool = True,
    download_url: Optional[str] = "default",
) -> dict:
    """Single-file response of the contents API."""
    if download_url == "default":
        download_url = raw_url(owner, repo, path, ref)
    self_url = api_url(owner, repo, path, ref)
    return {
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "sha": "3d21ec53a331a6f037a91c368710b99387d012c1",
        "size": len(data),
        "url": self_url,
        "html_url": f"https://github.com/{owner}/{repo}/blob/{ref}/{path}",
        "git_url": f"{API}/repos/{owner}/{repo}/git/blobs/3d21ec5",
        "download_url": download_url,
        "type": "file",
        "content": encode_content(data) if inline else "",
        "encoding": "base64" if inline else "none",
        "_links": {
            "self": self_url,
            "git": f"{API}/repos/{owner}/{repo}/git/blobs/3d21ec5",
            "html": f"https://github.com/{owner}/{repo}/blob/{ref}/{path}",
        },
    }


def listing_item(owner: str, repo: str, path: str, type_: str = "file", ref: str = "main") -> dict:
    """One element of a directory listing (no inline content)."""
    return {
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "sha": "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391",
        "size": 0 if type_ == "dir" else 12,
        "url": api_url(owner, repo, path, ref),
        "html_url": f"https://github.com/{owner}/{repo}/{'tree' if type_ == 'dir' else 'blob'}/{ref}/{path}",
        "download_url": raw_url(owner, repo, path, ref) if type_ == "file" else None,
        "type": type_,
        "_links": {"self": api_url(owner, repo, path, ref)},
    }


# ---- Fake GitHub -----------------------------------------------------------

class FakeGitHub:
    """In-memory stand-in for api.github.com and raw.githubusercontent.com."""

    def __init__(self):
        self.routes: Dict[str, Tuple[int, bytes, Dict[str, str]]] = {}
        self.requests: List[str] = []
        self.headers: List[httpx.Headers] = []

    def add_json(self, url: str, payload, status: int = 200) -> None:
        self.routes[url] = (status, json.dumps(payload, indent=2).encode("utf-8"), {})

    def add_raw(self, url: str, data: bytes, status: int = 200) -> None:
        self.routes[url] = (status, data, {})

    def add_status(self, url: str, status: int, headers: Optional[Dict[str, str]] = None) -> None:
        self.routes[url] = (status, b'{"message": "error"}', headers or {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        self.headers.append(request.headers)
        if url not in self.routes:
            return httpx.Response(404, content=b'{"message": "Not Found"}')
        status, body, headers = self.routes[url]
        return httpx.Response(status, content=body, headers=headers)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def service(self, config: Optional[CopierConfig] = None) -> GitHubAPIService:
        return GitHubAPIService(config or CopierConfig(), client=self.client())

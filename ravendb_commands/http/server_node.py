from __future__ import annotations

from typing import Optional


class ServerNode:
    def __init__(self, url: str, database: Optional[str] = None, cluster_tag: Optional[str] = None):
        self.url = url.rstrip("/") if url else url
        self.database = database
        self.cluster_tag = cluster_tag

    def __repr__(self):
        return f"ServerNode(url={self.url!r}, database={self.database!r}, cluster_tag={self.cluster_tag!r})"

r"""Sling-style decomposition of a request path.

    /content/site/page.tab.detail.html/extra/info
    \_______________/ \________/ \__/ \_________/
      resource path    selectors  ext    suffix

The first segment that contains a dot closes the resource path. Its text
before the first dot belongs to the resource path, the last dot-separated
piece is the extension and whatever sits in between are selectors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PathInfo:
    resource_path: str
    selectors: Tuple[str, ...] = ()
    extension: Optional[str] = None
    suffix: Optional[str] = None

    @property
    def selector_string(self) -> Optional[str]:
        return ".".join(self.selectors) if self.selectors else None


def decompose_path(path: Optional[str]) -> PathInfo:
    if not path:
        return PathInfo(resource_path="")

    segments = path.split("/")
    for index, segment in enumerate(segments):
        if "." not in segment:
            continue

        name, _, rest = segment.partition(".")
        pieces = [piece for piece in rest.split(".") if piece]
        extension = pieces.pop() if pieces else None

        resource_path = "/".join(segments[:index] + [name])
        remainder = segments[index + 1:]
        suffix = "/" + "/".join(remainder) if remainder else None
        return PathInfo(
            resource_path=resource_path,
            selectors=tuple(pieces),
            extension=extension,
            suffix=suffix,
        )

    return PathInfo(resource_path=path)

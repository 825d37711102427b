"""Copy passthrough assets from the content root into the output tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .models import StaticCopyResult
from .paths import ContentMatcher, walk_source_files

logger = logging.getLogger(__name__)


class StaticCopier:
    """Mirror every non-content file byte-for-byte under the output root."""

    def __init__(
        self, content_dir: Path, output_dir: Path, *, matcher: ContentMatcher
    ) -> None:
        self.content_dir = content_dir
        self.output_dir = output_dir
        self.matcher = matcher

    def run(self) -> StaticCopyResult:
        """Copy each asset, recording failures without stopping."""
        result = StaticCopyResult()
        if not self.content_dir.is_dir():
            return result
        for source in walk_source_files(self.content_dir):
            rel_path = source.relative_to(self.content_dir).as_posix()
            if self.matcher.is_content(rel_path):
                continue
            target = self.output_dir / rel_path
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(source, target)
            except OSError as exc:
                logger.error("Failed to copy %s: %s", rel_path, exc)
                result.failed[rel_path] = str(exc)
                continue
            logger.debug("copied %s", target)
            result.copied.append(target)
        return result


__all__ = ["StaticCopier"]

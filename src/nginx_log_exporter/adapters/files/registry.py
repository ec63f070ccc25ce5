"""Rotation-aware registry of files matched by a glob pattern."""

import glob
import logging
import os

from nginx_log_exporter.core.models import WatchedFile

logger = logging.getLogger(__name__)


class FileRegistry:
    """Tracks the files matching a glob pattern and their read positions.

    Args:
        pattern: Glob pattern naming the files to tail
            (e.g., "/var/log/nginx/*.log"). "**" matches any
            number of directory levels.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._files: dict[str, WatchedFile] = {}

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, path: object) -> bool:
        return path in self._files

    def get(self, path: str) -> WatchedFile | None:
        """Return the entry for path, if registered."""
        return self._files.get(path)

    def files(self) -> list[WatchedFile]:
        """Return registered entries ordered by path."""
        return [self._files[path] for path in sorted(self._files)]

    def _match(self) -> set[str]:
        matches = glob.glob(self.pattern, recursive=True)
        return {p for p in matches if os.path.isfile(p)}

    def refresh(self) -> None:
        """Re-evaluate the glob pattern against the filesystem.

        Paths that no longer match are dropped together with their offset.
        Newly matched paths start at offset 0 with the inode seen now.
        File contents are not read.
        """
        matched = self._match()

        for path in list(self._files):
            if path not in matched:
                logger.debug("Remove file %s from watch", path)
                del self._files[path]

        for path in sorted(matched - self._files.keys()):
            try:
                inode = os.stat(path).st_ino
            except OSError as e:
                logger.warning("Failed to stat new file %s: %s", path, e)
                continue
            logger.debug("Add file %s to watch", path)
            self._files[path] = WatchedFile(path=path, inode=inode)

    def check_rotation(self, entry: WatchedFile) -> bool:
        """Detect rotation of entry and reset its position if needed.

        A file is rotated when its inode changed (replaced) or its size is
        smaller than the tracked offset (truncated).

        Args:
            entry: Registered file to check.

        Returns:
            True if the file can be read this cycle, False if it could not
            be stat'ed. In the latter case the entry is left untouched.
        """
        try:
            st = os.stat(entry.path)
        except OSError as e:
            logger.warning("Failed to find file %s, skipped: %s", entry.path, e)
            return False

        if st.st_ino != entry.inode or st.st_size < entry.offset:
            logger.debug("Rotation of file %s detected", entry.path)
            entry.offset = 0
            entry.inode = st.st_ino
        return True

"""Constants for cache discovery and archive file-name parsing."""

from __future__ import annotations

import re

PACKAGE_FILE_GLOB: str = "*-*.pkg.tar*"
SIGNATURE_SUFFIX: str = ".sig"

# Drops the trailing "<arch>.pkg.tar[.<ext>]" segment, keeping "<name>-<pkgver>-<pkgrel>".
ARCH_SEGMENT_PATTERN: re.Pattern[str] = re.compile(r"\A(.+)-[^-]+\Z")
MIN_NAME_SEGMENTS: int = 3

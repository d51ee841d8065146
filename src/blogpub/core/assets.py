"""Copy referenced Logseq assets into a page bundle and rewrite their references"""

import logging
import re
import shutil
from pathlib import Path


logger = logging.getLogger(__name__)

ASSET_RE = re.compile(r'!\[([^\]]*)\]\(([^)]*?assets/)([^)]*)\)')
VIDEO_EXTENSIONS = {'.mp4', '.mov', '.avi', '.wmv', '.flv', '.webm', '.mkv', '.m4v', '.mpg', '.mpeg'}


def is_video(filename: str) -> bool:
    return Path(filename).suffix.lower() in VIDEO_EXTENSIONS


def _copy_asset(src: Path, dst: Path) -> bool:
    """Copy src to dst; log and return False when the asset cannot be copied."""
    if not src.is_file():
        logger.warning("Missing asset %s", src)
        return False
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        logger.warning("Could not copy %s to %s: %s", src, dst, e)
        return False
    return True


def _rewrite(m: re.Match) -> str:
    alt, filename = m.group(1), m.group(3)
    if is_video(filename):
        return f'{{{{< video src="{filename}" >}}}}'
    return f"![{alt}]({filename})"


def process_content(content: str, input_dir: Path, bundle_dir: Path) -> str:
    """Copy every asset referenced in content and point references at the bundle copy.

    `![alt](../assets/pic.png)` becomes `![alt](pic.png)`; videos become the
    Hugo `video` shortcode.
    """
    for m in ASSET_RE.finditer(content):
        _copy_asset(input_dir / f"{m.group(2)}{m.group(3)}", bundle_dir / m.group(3))
    return ASSET_RE.sub(_rewrite, content)


def process_header(header: str, input_dir: Path, bundle_dir: Path) -> Path | None:
    """Copy the header image to `featured<ext>` in the bundle. Returns the copy's path."""
    if not header:
        return None
    dst = bundle_dir / f"featured{Path(header).suffix}"
    return dst if _copy_asset(input_dir / header, dst) else None

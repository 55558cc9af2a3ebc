"""
File utilities for UGC Voiceover.
"""

import os
import re
from pathlib import Path


def get_safe_filename(filename: str, max_length: int = 255) -> str:
    """
    Convert a string to a safe filename.

    Args:
        filename: The proposed filename.
        max_length: Maximum allowed filename length.

    Returns:
        A filesystem-safe filename.
    """
    # Path separators and characters Windows rejects
    filename = re.sub(r'[<>:"/\\|?*]', '_', filename)

    # Remove null bytes and other control characters
    filename = re.sub(r'[\x00-\x1f\x7f]', '', filename)

    # Remove leading/trailing whitespace and dots
    filename = filename.strip(' .')

    # Truncate if too long (preserving extension)
    if len(filename) > max_length:
        name, ext = os.path.splitext(filename)
        max_name_length = max_length - len(ext)
        filename = name[:max_name_length] + ext

    if not filename:
        filename = "untitled"

    return filename


def ensure_parent_exists(path: Path) -> Path:
    """
    Ensure the parent directory of a path exists.

    Args:
        path: Path whose parent directory should exist.

    Returns:
        The original path (for chaining).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def get_unique_path(path: Path) -> Path:
    """
    Get a unique path by appending a number if the path exists.

    Examples:
        If 'ugc-voiceover-kore.mp3' exists, returns 'ugc-voiceover-kore_2.mp3', etc.
    """
    path = Path(path)
    if not path.exists():
        return path

    stem = path.stem
    suffix = path.suffix
    parent = path.parent

    counter = 2
    while True:
        new_path = parent / f"{stem}_{counter}{suffix}"
        if not new_path.exists():
            return new_path
        counter += 1


def get_size_human(num_bytes: int) -> str:
    """
    Human-readable byte count (e.g., "4.2 MB").
    """
    size = float(num_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} {unit}"
        size /= 1024
    return f"{size:.1f} TB"

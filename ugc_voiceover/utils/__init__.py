"""
Utility modules for UGC Voiceover.
"""

from ugc_voiceover.utils.slug import voice_label_slug, voiceover_filename
from ugc_voiceover.utils.file_utils import (
    get_safe_filename,
    ensure_parent_exists,
    get_unique_path,
    get_size_human,
)
from ugc_voiceover.utils.audio_utils import (
    calculate_db_level,
    peak_level,
    format_duration,
)

__all__ = [
    "voice_label_slug",
    "voiceover_filename",
    "get_safe_filename",
    "ensure_parent_exists",
    "get_unique_path",
    "get_size_human",
    "calculate_db_level",
    "peak_level",
    "format_duration",
]

"""
Filename helpers for voice-over downloads.
"""

import re

FILENAME_PREFIX = "ugc-voiceover"


def voice_label_slug(label: str) -> str:
    """
    Turn a voice label into the filename fragment used for downloads.

    Whitespace runs become a single hyphen and the result is lowercased;
    nothing else is stripped.

    Examples:
        >>> voice_label_slug("Warm Narrator")
        'warm-narrator'

        >>> voice_label_slug("Kore  (Firm)")
        'kore-(firm)'
    """
    return re.sub(r"\s+", "-", label).lower()


def voiceover_filename(voice_label: str, extension: str = "mp3") -> str:
    """
    Build the suggested download name for a voice-over.

    Args:
        voice_label: Display label of the voice used upstream.
        extension: File extension, with or without a leading dot.

    Returns:
        Filename in format: ugc-voiceover-{voice-label}.{extension}

    Examples:
        >>> voiceover_filename("Warm Narrator", "wav")
        'ugc-voiceover-warm-narrator.wav'
    """
    extension = extension.lstrip(".")
    return f"{FILENAME_PREFIX}-{voice_label_slug(voice_label)}.{extension}"

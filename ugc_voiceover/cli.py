#!/usr/bin/env python3
"""
UGC Voiceover - Command Line Interface

Render a synthesized speech payload into a downloadable voice-over file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ugc_voiceover",
        description="UGC Voiceover - Turn synthesized speech into an MP3 voice-over",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  # Basic — writes ugc-voiceover-default.mp3 to the output folder
  ugc_voiceover -i speech.b64

  # Faster read with a named voice
  ugc_voiceover -i speech.b64 --voice-label "Warm Narrator" --speed 1.3

  # Read the payload from stdin, force WAV
  cat speech.b64 | ugc_voiceover -i - --format wav -o ~/Desktop/
        """,
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        help="File holding the base64 PCM payload, or '-' for stdin",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output directory (default: ~/Music/voiceovers/)",
    )

    parser.add_argument(
        "--voice-label",
        type=str,
        default="Default",
        help="Voice label used in the output filename (default: Default)",
    )

    parser.add_argument(
        "--speed", "-s",
        type=float,
        default=None,
        help="Playback speed 0.5-2.0 in 0.1 steps (default: 1.0)",
    )

    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        type=str,
        choices=["mp3", "wav"],
        default=None,
        help="Output format; mp3 falls back to wav without lameenc (default: mp3)",
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="JSON settings file",
    )

    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace an existing file instead of numbering a new one",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress progress output",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log pipeline stages",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log sample counts for every stage",
    )

    return parser


def read_payload(source: str) -> str:
    """Read the base64 payload from a file path or stdin ('-')."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="ascii")


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.input:
        parser.error("--input/-i is required")

    # Import here to avoid slow startup for --help
    from ugc_voiceover.config import Config
    from ugc_voiceover.core.pipeline import VoiceoverPipeline
    from ugc_voiceover.exceptions import VoiceoverError
    from ugc_voiceover.utils.audio_utils import calculate_db_level, format_duration, peak_level
    from ugc_voiceover.utils.file_utils import get_safe_filename, get_size_human, get_unique_path
    from ugc_voiceover.utils.logging import setup_logging

    if args.debug:
        setup_logging(logging.DEBUG)
    elif args.verbose:
        setup_logging(logging.INFO)
    else:
        setup_logging(logging.WARNING)

    try:
        config = Config.load(Path(args.config)) if args.config else Config()
        config.validate()
    except VoiceoverError as e:
        print(f"Error: {e}")
        sys.exit(1)

    speed = config.audio.default_speed if args.speed is None else args.speed
    snapped = config.clamp_speed(speed)
    if snapped != speed and not args.quiet:
        print(f"Speed {speed} adjusted to {snapped}x")
    speed = snapped

    try:
        payload = read_payload(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read input: {e}")
        sys.exit(1)

    output_dir = Path(args.output).expanduser() if args.output else config.output_dir

    pbar = None

    def progress_callback(current: int, total: int):
        nonlocal pbar
        if pbar is None:
            pbar = tqdm(total=total, desc="Encoding", unit="block")
        pbar.update(1)

    pipeline = VoiceoverPipeline(config)

    try:
        stretched = pipeline.prepare(payload, speed=speed)
        artifact = pipeline.encode(
            stretched,
            output_format=args.output_format,
            progress_callback=progress_callback if not args.quiet else None,
        )
    except VoiceoverError as e:
        print(f"\nError during rendering: {e}")
        sys.exit(1)
    finally:
        if pbar:
            pbar.close()

    filename = get_safe_filename(artifact.suggested_filename(args.voice_label))
    output_path = output_dir / filename
    if not args.overwrite:
        output_path = get_unique_path(output_path)
    artifact.save(output_path)

    if not args.quiet:
        level_db = calculate_db_level(stretched.samples)
        print("\n" + "=" * 50)
        print("VOICEOVER COMPLETE")
        print("=" * 50)
        print(f"  Format:   {artifact.extension.upper()} ({artifact.mime_type})")
        print(f"  Speed:    {speed}x")
        print(f"  Duration: {format_duration(stretched.duration_seconds)}")
        print(f"  Level:    {level_db:.1f} dBFS RMS, peak {peak_level(stretched.samples):.2f}")
        print(f"  Size:     {get_size_human(artifact.size)}")
        print(f"  File:     {output_path}")


if __name__ == "__main__":
    main()

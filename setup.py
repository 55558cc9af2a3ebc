#!/usr/bin/env python3
"""
UGC Voiceover - Setup

Speech post-processing that turns AI-generated marketing copy audio
into a downloadable MP3 voice-over.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README if it exists
readme_path = Path(__file__).parent / "README.md"
long_description = ""
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="ugc-voiceover",
    version="0.1.0",
    author="UGC Voiceover",
    description="Speed-adjusted MP3/WAV voice-overs from synthesized speech payloads",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "soundfile>=0.12.1",
        "lameenc>=1.7.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "dev": ["pytest", "black", "flake8"],
    },
    entry_points={
        "console_scripts": [
            "ugc_voiceover=ugc_voiceover.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio :: Conversion",
        "Topic :: Multimedia :: Sound/Audio :: Speech",
    ],
    keywords="tts voiceover audio mp3 wav resampling marketing",
)

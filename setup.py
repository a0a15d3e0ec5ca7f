#!/usr/bin/env python3
"""
Setup configuration for musixmatch-client
A client library and CLI for the Musixmatch desktop API
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Core requirements (always installed)
core_requirements = [
    "requests>=2.31.0",
    "pyyaml>=6.0.1",
    "python-dotenv>=1.0.0",
    "click>=8.1.7",
    "colorama>=0.4.6",
]

setup(
    name="musixmatch-client",
    version="0.1.0",
    author="musixmatch-client Team",
    description="Client library for the Musixmatch desktop API: tracks, lyrics and synced subtitles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["musixmatch_client", "musixmatch_client.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.10",
    install_requires=core_requirements,
    extras_require={
        "test": [
            "pytest>=7.4.3",
            "responses>=0.25.0",
        ],
        "dev": [
            "pytest>=7.4.3",
            "responses>=0.25.0",
            "black>=23.11.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mxm=musixmatch_client.cli:main",
        ],
    },
    keywords="musixmatch lyrics subtitles lrc api client",
)

"""setuptools entry point for the audiofilters coefficient library."""
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="audiofilters",
    version="0.1.0",
    description="Biquad, crossover cascade and RIAA coefficient design for audio filters",
    packages=find_packages(include=["audiofilters", "audiofilters.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)

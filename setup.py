#!/usr/bin/env python
"""Python package description."""

from pathlib import Path

from setuptools import setup

setup(
    name="pybluelink",
    version="0.1.0",
    description="Python library and CLI for communicating with the Hyundai / Kia Bluelink API.",
    long_description=Path("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    include_package_data=True,
    license="Apache-2.0",
    packages=["pybluelink"],
    package_data={"pybluelink": ["data/*.txt"]},
    python_requires=">=3.10",
    install_requires=["httpx<1", "rich"],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-cov",
        ],
    },
    entry_points={"console_scripts": ["bluelink=pybluelink.cli:cli"]},
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Operating System :: OS Independent",
    ],
)

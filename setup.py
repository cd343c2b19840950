# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="gfshare",
    version="0.1.0",
    description="Shamir's Secret Sharing over GF(256)",
    author="gfshare contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
    ],
    extras_require={
        # dev / testing
        "test": [
            "pytest>=8.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gfshare=gfshare.cli:main",
        ],
    },
)

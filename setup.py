#!/usr/bin/env python3

import os
import re

from setuptools import setup, find_packages


def read_version():
    init_path = os.path.join(os.path.dirname(__file__), "src", "localctx", "__init__.py")
    with open(init_path, "r") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    return match.group(1)


setup(
    name="localctx",
    version=read_version(),
    description="Terminal assistant with a local context store injected into prompts",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "openai>=1.0.0",
        "python-dotenv",
        "pyreadline3; platform_system=='Windows'",
        "pydantic>=2.0.0",
        "tiktoken",
    ],
    entry_points={
        "console_scripts": [
            "localctx=localctx.cli:run_cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.9",
)

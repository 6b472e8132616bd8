#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Setup script for EditorKit
"""

from pathlib import Path

from setuptools import find_packages, setup

# Determine the directory containing this setup.py file
here = Path(__file__).parent.absolute()


# Read version from __init__.py
def get_version():
    init_file = here / "src" / "editorkit" / "__init__.py"
    if init_file.exists():
        with open(init_file, "r", encoding="utf-8") as f:
            for line in f:
                if line.startswith("__version__"):
                    return line.split("=")[1].strip().strip('"').strip("'")
    return "1.0.0"


# Read the README file
def get_long_description():
    readme_file = here / "README.md"
    if readme_file.exists():
        with open(readme_file, "r", encoding="utf-8") as f:
            return f.read()
    return ""


# Core dependencies
INSTALL_REQUIRES = [
    "pydantic>=2.0.0,<3.0.0",
    "PyYAML>=6.0",
    "networkx>=3.0",
]

# Optional dependencies
EXTRAS_REQUIRE = {
    "dev": [
        "pytest>=8.2.1",
        "pytest-cov>=5.0.0",
        "pytest-mock>=3.12.0",
        "pytest-xdist>=3.6.0",
        "black>=23.0.0",
        "isort>=5.12.0",
        "flake8>=6.0.0",
        "mypy>=1.5.0",
        "types-PyYAML>=6.0",
        "pre-commit>=3.0.0",
    ],
}

setup(
    name="editorkit",
    version=get_version(),
    description="富文本编辑器插件依赖解析引擎：依赖闭包、推荐插件、付费插件依赖、校验与加载顺序",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    author="EditorKit",
    license="MIT",
    # Package discovery
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    # Dependencies
    python_requires=">=3.10.0",
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    # Entry points
    entry_points={
        "console_scripts": [
            "editorkit=editorkit.cli:main",
        ],
    },
    # Classification
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Text Editors :: Word Processors",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=[
        "rich-text",
        "editor",
        "plugins",
        "dependency-resolution",
        "topological-sort",
    ],
    zip_safe=False,
)

#!/usr/bin/env python3
"""Setup script for RSS Notes."""
from setuptools import find_packages, setup

# Read version from package
with open("src/rss_notes/__init__.py", "r") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="rss-notes",
    version=version,
    description="Sync RSS/Atom feeds into a vault of markdown notes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="RSS Notes Team",
    author_email="example@example.com",
    url="https://github.com/example/rss-notes",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"rss_notes": ["templates/*.j2"]},
    python_requires=">=3.9",
    install_requires=[
        "feedparser>=6.0.0",
        "requests>=2.28.0",
        "python-dateutil>=2.8.2",
        "python-dotenv>=1.0.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "jinja2>=3.0.0",
        "html2text>=2020.1.16",
        "PyYAML>=6.0",
        "APScheduler>=3.10,<4",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rss-notes=rss_notes.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
    ],
)

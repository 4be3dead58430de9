import runpy
from pathlib import Path

from setuptools import setup, find_packages

# Single source of truth for the version: src/launchlog/_version.py
_version = runpy.run_path(str(Path(__file__).parent / "src" / "launchlog" / "_version.py"))

setup(
    name="launchlog",
    version=_version["PIP_VERSION"],
    description="Leveled, colored console logging for service launch output",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    url="https://github.com/djdarcy/launchlog",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "launchlog=launchlog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)

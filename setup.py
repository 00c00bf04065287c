"""
Setup script for the worduel package.

Pure-Python package in a src/ layout. The ``worduel`` console script
exposes the dictionary lookup and match preview tools.
"""

from setuptools import setup, find_packages

setup(
    name="worduel",
    version="1.0.0",
    description="Worduel - two-player word duel engine with timed and turn-based play",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "worduel=worduel.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="robots-gen",
    version="0.1.0",
    description="robots.txt / humans.txt generator and validator for static sites",
    packages=find_packages(exclude=["tests", "tests.*"]),  # picks up robots_gen and subpackages
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "robots-gen=robots_gen.cli:cli",
        ],
    },
    python_requires=">=3.11",
)

"""
Setup script for subnet-quiz.

Subnet Quiz generates randomized multiple-choice questions about IPv4
subnetting and serves them through a terminal quiz with scoring and a
strikes-based elimination rule:

1. Subnet engine - bit-exact IPv4 calculator
2. Question generator - eight archetypes, one correct option each
3. Terminal quiz - rich UI, scoring, strikes

The 'subnet-quiz' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="subnet-quiz",
    version="1.0.0",
    description="Randomized IPv4 subnetting quiz for the terminal",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Subnet Quiz",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "subnet-quiz=subnet_quiz.cli.quiz_cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: System :: Networking",
    ],
    keywords="subnetting ipv4 cidr quiz cli education networking",
)

"""
Setup script for skillquest-engine.

SkillQuest is a gamified skill-assessment engine. It serves three roles:

1. Game Engine - Grade quiz, coding and simulation submissions
2. Skill Tracker - Fold results into per-skill progress and employability
3. Learning Planner - Skill gaps, recommendations and weekly paths

The 'skillquest' command is the terminal entry point.
"""

from setuptools import find_packages, setup

setup(
    name="skillquest-engine",
    version="1.0.0",
    description="Gamified skill assessment engine with adaptive learning paths",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["skillquest", "skillquest.*"]),
    py_modules=["config"],
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
            "skillquest=skillquest.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="gamification assessment learning-path cli education",
)

"""
Setup script for tasktrack.
"""
from setuptools import setup, find_packages

setup(
    name="tasktrack",
    version="0.1.0",
    packages=find_packages(include=["tasktrack", "tasktrack.*"]),
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "click>=8.1.0",
        "httpx>=0.25.0",
    ],
    extras_require={
        "postgresql": ["psycopg2-binary>=2.9"],
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "tasktrack=tasktrack.__main__:main",
            "tasktrack-cli=tasktrack.cli:cli",
        ],
    },
    python_requires=">=3.11",
)

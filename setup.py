"""Setup file for the flash deals service."""

from setuptools import setup, find_packages

setup(
    name="flash-deals",
    version="1.0.0",
    packages=find_packages(include=["deals", "deals.*"]),
    py_modules=["main", "app"],
    install_requires=[
        "fastapi>=0.100",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dotenv>=1.0",
        "uvicorn>=0.23",
    ],
    extras_require={
        "test": [
            "pytest>=7.0,<9.1",
            "pytest-asyncio>=0.21",
            "httpx>=0.24",
        ],
    },
    python_requires=">=3.9",
)

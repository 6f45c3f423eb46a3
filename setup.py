"""Setup file for stance-github package."""

from setuptools import setup, find_packages

setup(
    name="stance-github",
    version="1.0.0",
    description="Object-oriented client for the GitHub v3 API",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "python-dotenv"
    ],
    extras_require={
        "dev": [
            "pytest",
            "responses",
            "black",
            "flake8",
            "mypy"
        ]
    }
)

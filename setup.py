# setup.py
from setuptools import setup, find_packages

setup(
    name="scor",
    version="1.0.0",
    description="Normalise numeric measurements into [0, 1] scores and combine them",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

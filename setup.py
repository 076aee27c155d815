# setup.py
from setuptools import setup, find_packages

setup(
    name="jack",
    version="0.1.0",
    description="Tree-walking evaluator for the Jack scripting language",
    packages=find_packages(include=["jack", "jack.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    zip_safe=False,
)

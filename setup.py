# setup.py
from setuptools import setup, find_packages

setup(
    name="sexpread",
    version="0.1.0",
    description="S-expression reader and primitive procedures for a small Lisp",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

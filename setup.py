# setup.py
from setuptools import setup, find_packages

setup(
    name="mdexpr",
    version="0.1.0",
    description="Lisp-style template expansion for generating markdown fragments",
    packages=find_packages(include=["mdexpr", "mdexpr.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

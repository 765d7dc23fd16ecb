# setup.py
from setuptools import setup, find_packages

setup(
    name="egg-lang",
    version="0.1.0",
    description="Tree-walking interpreter for the Egg language",
    packages=find_packages(include=["egg", "egg.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

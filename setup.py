# setup.py
from setuptools import setup, find_packages

setup(
    name="cata",
    version="0.1.0",
    description="A small s-expression interpreter",
    packages=find_packages(include=["cata", "cata.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["cata=cata.cli:main"],
    },
    zip_safe=False,
)

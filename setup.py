# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A minimal interpreter for a Lisp-family expression language",
    packages=find_packages(include=["minilisp", "minilisp.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilisp=minilisp.__main__:main"],
    },
    zip_safe=False,
)

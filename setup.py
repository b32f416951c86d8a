# setup.py
from setuptools import setup, find_packages

setup(
    name="conslisp",
    version="0.1.0",
    description="A minimal cons-cell Lisp interpreter",
    packages=find_packages(include=["conslisp", "conslisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["conslisp=conslisp.cli:main"],
    },
    zip_safe=False,
)

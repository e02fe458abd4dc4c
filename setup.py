# setup.py
from setuptools import setup, find_packages

setup(
    name="lithp",
    version="0.1.0",
    description="A small lexically scoped Lisp interpreter",
    packages=find_packages(include=["lithp", "lithp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lithp = lithp.__main__:main"],
    },
    zip_safe=False,
)

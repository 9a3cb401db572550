# setup.py
from setuptools import setup, find_packages

setup(
    name="egglisp",
    version="0.1.0",
    description="A small Lisp with lexical closures and first-class macros",
    packages=find_packages(include=["egglisp", "egglisp.*"]),
    package_data={"egglisp": ["prelude/*.egg"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["egglisp=egglisp.__main__:main"],
    },
    zip_safe=False,
)

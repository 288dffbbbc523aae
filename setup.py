#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys
import os
from setuptools import setup, find_packages
from pathlib import Path
this_dir = Path(__file__).absolute().parent

VERSION = {}
with open(this_dir / "rdeval" / "version.py") as f:
    exec(f.read(), VERSION)

if sys.argv[-1].startswith('publish'):
    if os.system("pip list | grep wheel"):
        print("wheel not installed.\nUse `pip install wheel`.\nExiting.")
        sys.exit()
    if os.system("pip list | grep twine"):
        print("twine not installed.\nUse `pip install twine`.\nExiting.")
        sys.exit()
    os.system("python setup.py sdist bdist_wheel")
    if sys.argv[-1] == 'publishtest':
        os.system("twine upload -r test dist/*")
    else:
        os.system("twine upload dist/*")
    sys.exit()

if __name__ == "__main__":
    setup(
        name="rdeval",
        version=VERSION["__version__"],
        description="One-pass recursive-descent evaluator for arithmetic "
                    "expressions",
        license="MIT",
        python_requires=">=3.8",
        packages=find_packages(include=["rdeval", "rdeval.*"]),
        install_requires=["click>=7.0"],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "rdeval = rdeval.cli:rdeval",
            ],
        },
    )

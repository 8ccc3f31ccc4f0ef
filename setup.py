#!/usr/bin/env python

import os
import sys

from packaging.version import Version
from setuptools import find_packages, setup

python_version = sys.version.split()[0]
if Version(python_version) < Version("3.9"):
    raise RuntimeError("yonum requires python >= 3.9 " "but your Python version is {}".format(sys.version))


cwd = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(cwd, "yonum", "VERSION")) as fin:
    version = fin.read().strip()

requirements = open(os.path.join(cwd, "requirements.txt"), "r").readlines()
with open(os.path.join(cwd, "requirements.dev.txt"), "r") as f:
    requirements_dev = f.readlines()
requirements_all = requirements_dev

with open(os.path.join(cwd, "README.md"), "r", encoding="utf-8") as readme_file:
    README = readme_file.read()

setup(
    name="yonum",
    version=version,
    description="Spell numbers, years and money amounts in Yoruba words.",
    long_description=README,
    long_description_content_type="text/markdown",
    license="MPL-2.0",
    include_package_data=True,
    packages=find_packages(include=["yonum", "yonum.*"], exclude=["*.tests", "*tests.*", "tests.*", "*tests", "tests"]),
    package_data={
        "yonum": [
            "VERSION",
        ]
    },
    install_requires=requirements,
    extras_require={
        "all": requirements_all,
        "dev": requirements_dev,
    },
    python_requires=">=3.9.0",
    entry_points={"console_scripts": ["yonum-spell=yonum.bin.spell_number:main"]},
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Linguistic",
    ],
    zip_safe=False,
)

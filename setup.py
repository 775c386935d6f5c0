#!/usr/bin/env python3
from setuptools import setup

import pysrp6a.const as pysrp6a_const

NAME = "pysrp6a"
DESCRIPTION = "SRP-6a password-authenticated key exchange in python"
URL = "https://github.com/pysrp6a/{}".format(NAME)


PROJECT_URLS = {
    "Bug Reports": "{}/issues".format(URL),
    "Source": "{}/tree/master".format(URL),
}


MIN_PY_VERSION = ".".join(map(str, pysrp6a_const.REQUIRED_PYTHON_VER))

with open("README.md", "r", encoding="utf-8") as f:
    README = f.read()


REQUIRES = ["cryptography"]


setup(
    name=NAME,
    version=pysrp6a_const.__version__,
    description=DESCRIPTION,
    long_description=README,
    long_description_content_type="text/markdown",
    url=URL,
    packages=["pysrp6a"],
    project_urls=PROJECT_URLS,
    python_requires=">={}".format(MIN_PY_VERSION),
    install_requires=REQUIRES,
    license="Apache License 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

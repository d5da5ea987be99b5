#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

DICTPATCH_PATH = HERE / "dictpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(DICTPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="dictpatch",
      version=VERSION,
      description="Apply dictdiffer diff lists to nested dicts and lists in place",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(include=["dictpatch", "dictpatch.*"]),
      package_data={
          "dictpatch": ["diff_format.schema.json"],
          "dictpatch.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "jsonschema",
              "dictdiffer",
          ],
      },
      entry_points={
          "console_scripts": [
              "dictpatch = dictpatch.__main__:main_dispatch",
          ],
      },
      )

#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()


DDBUPDATE_PATH = HERE / "ddbupdate"


def get_version(path):
    """Read __version__ from a python file without importing it"""
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    return match.group(1)


VERSION = get_version(DDBUPDATE_PATH / '_version.py')

LONG_DESCRIPTION = """\
ddbupdate computes the difference between two JSON documents and compiles it
into DynamoDB update_item arguments: an UpdateExpression with aliased
attribute names and values, optionally guarded by a version lock
ConditionExpression.
"""


if __name__ == '__main__':
    setup(
      name="ddbupdate",
      version=VERSION,
      description="Diff JSON documents into DynamoDB update expressions",
      long_description=LONG_DESCRIPTION,
      author="Jupyter Development Team",
      license="BSD",
      python_requires=">=3.7",
      packages=[
          "ddbupdate",
          "ddbupdate.diffing",
          "ddbupdate.tests",
      ],
      package_data={
          "ddbupdate": ["*.schema.json"],
          "ddbupdate.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "jsonschema",
          ],
      },
      entry_points={
          "console_scripts": [
              "ddbupdate = ddbupdate.__main__:main_dispatch",
              "ddbdiff = ddbupdate.ddbdiffapp:main",
              "ddbexpr = ddbupdate.ddbexprapp:main",
          ],
      },
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
      ],
    )

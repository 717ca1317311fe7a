# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import io
import json
import logging
import os
import shutil

from jsonschema import Draft4Validator as Validator
from pytest import fixture


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


def _load(filespath, name):
    with io.open(pjoin(filespath, name), encoding="utf8") as f:
        return json.load(f)


@fixture(scope='session')
def _product(filespath):
    return _load(filespath, "original.json")


@fixture
def product(_product):
    """A product document, fresh for every test so tests may modify it"""
    return copy.deepcopy(_product)


@fixture
def modified_product(filespath):
    return _load(filespath, "modified.json")


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def json_schema_update_expression(request):
    schema_path = os.path.join(schema_dir, 'update_expression.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def expression_validator(request, json_schema_update_expression):
    return Validator(json_schema_update_expression)

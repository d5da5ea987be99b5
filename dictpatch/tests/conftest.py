# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

import dictpatch.config


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def json_schema_diff(request):
    schema_path = os.path.join(schema_dir, 'diff_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def diff_validator(request, json_schema_diff):
    return Validator(json_schema_diff)


@fixture
def sample_object():
    return {
        "a": {"b": {"c": 3, "list": [1, 2]}},
        "y": [100, 200, 300],
        "remove_this": "blah",
    }


@fixture
def reset_config(tmpdir, monkeypatch):
    """Run in an empty working directory with no cached or user config."""
    monkeypatch.setattr(dictpatch.config, '_config_cache', {})
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter_config')))
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    monkeypatch.chdir(str(tmpdir))
    return tmpdir

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging

import pytest
from traitlets import Enum

import dictpatch
from dictpatch.args import ConfigBackedParser, LogLevelAction
from dictpatch.config import build_config, entrypoint_configurables, Global
from dictpatch import patchapp


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


@pytest.fixture
def entrypoint_config(reset_config):
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert dictpatch.log.logger.level == logging.ERROR


def test_build_config_defaults(reset_config):
    config = build_config('dictpatch')
    assert config == {'log_level': 'INFO', 'strict': False}
    config = build_config('dictpatch', include_none=True)
    assert config == {'log_level': 'INFO', 'strict': False, 'indent': None}


def test_build_config_unknown_entrypoint(reset_config):
    with pytest.raises(ValueError):
        build_config('not-an-entrypoint')


def test_config_file_sets_patch_defaults(reset_config):
    reset_config.join('dictpatch_config.json').write_text(
        json.dumps({
            'Global': {'log_level': 'ERROR'},
            'Patch': {'strict': True, 'indent': 2},
        }),
        'utf-8'
    )
    arguments = patchapp._build_arg_parser().parse_args(['a.json', 'b.json'])
    assert arguments.strict is True
    assert arguments.indent == 2
    assert arguments.log_level == 'ERROR'

    # Command line wins over config
    arguments = patchapp._build_arg_parser().parse_args(
        ['a.json', 'b.json', '--indent', '4', '--log-level', 'DEBUG'])
    assert arguments.indent == 4
    assert arguments.log_level == 'DEBUG'


import argparse
import json
import logging

import pytest

from traitlets import Enum

import ddbupdate.log
from ddbupdate.args import (
    ConfigBackedParser, LogLevelAction, add_locking_args, add_document_args,
    modify_config_for_print,
)
from ddbupdate.config import (
    entrypoint_configurables, build_config, Global, _Compiling,
)
from ddbupdate.diff_format import Missing


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']

class CompilingConfig(_Compiling):
    pass

@pytest.fixture
def entrypoint_compiling_config():
    entrypoint_configurables['test-prog'] = CompilingConfig
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
    assert ddbupdate.log.logger.level == logging.ERROR


def test_config_parser_unknown_prog():
    # No config for the entrypoint, argparse defaults apply
    parser = ConfigBackedParser('not-configured')
    parser.add_argument('--orphans', action='store_true', default=False)
    assert parser.parse_args([]).orphans is False


def test_config_file(entrypoint_compiling_config, tmpdir):
    tmpdir.join('ddbupdate_config.json').write_text(
        json.dumps({
            'CompilingConfig': {
                'orphans': True,
            },
            '_Compiling': {
                'prefix': 'my',
            },
        }),
        encoding='utf-8'
    )

    with tmpdir.as_cwd():
        config = build_config('test-prog')
        parser = ConfigBackedParser('test-prog')
        parser.add_argument('--orphans', action='store_true', default=False)
        parser.add_argument('--prefix', default=None)
        arguments = parser.parse_args([])

    assert config['orphans'] is True
    assert config['prefix'] == 'my'
    assert config['support_sets'] is False
    assert arguments.orphans is True
    assert arguments.prefix == 'my'


def test_config_defaults(entrypoint_compiling_config, tmpdir):
    with tmpdir.as_cwd():
        config = build_config('test-prog')
        full_config = build_config('test-prog', include_none=True)
    assert config == {
        'log_level': 'INFO',
        'orphans': False,
        'support_sets': False,
    }
    assert full_config['prefix'] is None


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('no-such-prog')


def test_modify_config_for_print():
    assert modify_config_for_print({'a': True, 'b': {}, 'c': {'d': '$.version'}}) == {
        'a': 'true',
        'b': '{}',
        'c': {'d': '"$.version"'},
    }


def test_locking_args():
    parser = argparse.ArgumentParser()
    add_locking_args(parser)

    arguments = parser.parse_args([])
    assert arguments.versioned is False
    assert arguments.lock is False
    assert arguments.version_path == '$.version'
    assert arguments.condition == '='
    assert arguments.use_current is True
    assert arguments.new_version is Missing

    arguments = parser.parse_args(
        ['--lock', '--new-version', '1000', '--condition', '<', '--version-path', 'start'])
    assert arguments.lock is True
    assert arguments.new_version == 1000
    assert arguments.condition == '<'
    assert arguments.version_path == 'start'

    arguments = parser.parse_args(['--versioned', '--use-new', '--new-version', '"b"'])
    assert arguments.use_current is False
    assert arguments.new_version == 'b'


@pytest.mark.parametrize("args", [
    ['--versioned', '--lock'],
    ['--condition', '=='],
])
def test_locking_args_invalid(args):
    parser = argparse.ArgumentParser()
    add_locking_args(parser)
    with pytest.raises(SystemExit):
        parser.parse_args(args)


def test_document_args_modified_optional():
    parser = argparse.ArgumentParser()
    add_document_args(parser, modified_optional=True)
    arguments = parser.parse_args(['a.json'])
    assert arguments.original == 'a.json'
    assert arguments.modified is None
    assert arguments.decimal is False

    parser = argparse.ArgumentParser()
    add_document_args(parser)
    with pytest.raises(SystemExit):
        parser.parse_args(['a.json'])

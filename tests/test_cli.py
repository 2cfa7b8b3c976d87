"""Tests for the command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mdpresent import cli
from mdpresent.config import Config


def test_parse_arguments():
    args = cli.parse_arguments(['deck.md', '--config', 'c.yaml', '--log-level', 'DEBUG'])

    assert args.document == 'deck.md'
    assert args.config == 'c.yaml'
    assert args.log_level == 'DEBUG'


def test_parse_arguments_defaults():
    args = cli.parse_arguments([])

    assert args.document is None
    assert args.config is None


def test_load_config_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = cli.load_config(None)

    assert config.get('paths') is None


def test_fallback_config_keeps_logs_off_the_terminal(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
    monkeypatch.chdir(tmp_path)

    config = cli.load_config(None)

    assert config.get('settings.logging.enabled') is False
    assert [type(h) for h in calls[0]['handlers']] == [logging.NullHandler]


def test_load_config_explicit_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        cli.load_config(str(tmp_path / 'missing.yaml'))


def test_resolve_document_prefers_argument(tmp_path):
    config = Config.from_dict({'paths': {'content': 'configured.md'}}, tmp_path)

    assert cli.resolve_document(config, 'given.md') == Path('given.md')


def test_resolve_document_from_config(tmp_path):
    (tmp_path / 'configured.md').write_text('# A\n', encoding='utf-8')
    config = Config.from_dict({'paths': {'project_root': '.', 'content': 'configured.md'}}, tmp_path)

    assert cli.resolve_document(config, None) == tmp_path.resolve() / 'configured.md'


def test_resolve_document_missing(tmp_path):
    config = Config.from_dict({}, tmp_path)

    with pytest.raises(FileNotFoundError):
        cli.resolve_document(config, None)


def test_resolve_document_configured_file_missing(tmp_path):
    config = Config.from_dict({'paths': {'project_root': '.', 'content': 'gone.md'}}, tmp_path)

    with pytest.raises(FileNotFoundError, match='gone.md'):
        cli.resolve_document(config, None)


def test_main_reports_missing_document(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert cli.main([str(tmp_path / 'missing.md')]) == 1
    assert 'not found' in capsys.readouterr().out


def test_main_reports_missing_config(tmp_path, capsys):
    assert cli.main(['--config', str(tmp_path / 'nope.yaml')]) == 1
    assert 'Error' in capsys.readouterr().out


def test_main_runs_presenter(tmp_path, monkeypatch):
    document = tmp_path / 'slides.md'
    document.write_text('# A\n', encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(cli.curses, 'wrapper', lambda func, *args: calls.append((func, args)))

    assert cli.main([str(document)]) == 0
    assert calls[0][0] is cli.run_presenter
    assert calls[0][1][1] == document

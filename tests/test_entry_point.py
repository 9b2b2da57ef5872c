"""Tests for the ``python -m mem0_mcp.server`` entry point."""

from unittest.mock import patch

import pytest

from mem0_mcp import __version__
from mem0_mcp.server import __main__ as entry_point


def test_unknown_args_are_passed_over(monkeypatch):
    monkeypatch.setattr('sys.argv', ['mem0-mcp', '--transport', 'stdio'])

    with patch.object(entry_point, 'main') as main:
        entry_point.run_with_args()

    main.assert_called_once_with()


def test_version_flag_exits_before_serving(monkeypatch, capsys):
    monkeypatch.setattr('sys.argv', ['mem0-mcp', '--version'])

    with patch.object(entry_point, 'main') as main:
        with pytest.raises(SystemExit) as exc_info:
            entry_point.run_with_args()

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
    main.assert_not_called()

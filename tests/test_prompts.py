"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from aix._types import Extra, ProjectType
from aix.cli._prompts import prompt_extras, prompt_project_type


class TestPromptProjectType:
    @patch("aix.cli._prompts.TerminalMenu")
    def test_returns_standalone(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        result = prompt_project_type()
        assert result is ProjectType.STANDALONE

    @patch("aix.cli._prompts.TerminalMenu")
    def test_returns_workspace(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        result = prompt_project_type()
        assert result is ProjectType.WORKSPACE

    @patch("aix.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_project_type()


class TestPromptExtras:
    @patch("aix.cli._prompts.TerminalMenu")
    def test_returns_all_selected(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = (1, 0)

        result = prompt_extras()
        assert result == [Extra.CI, Extra.DOCKER]

    @patch("aix.cli._prompts.TerminalMenu")
    def test_nothing_selected(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        assert prompt_extras() == []

    @patch("aix.cli._prompts.TerminalMenu")
    def test_menu_is_multi_select(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = ()

        prompt_extras()
        assert mock_menu_cls.call_args.kwargs["multi_select"] is True

"""Shared test fixtures for specment.

Provides:
- git_user: stubs the git user lookup so README content is deterministic
- cli_runner: Click CliRunner
- make_selections: factory for UserSelections
- fake_prompter: scripted Prompter recording every call
- project_dir: temp directory used as the cwd for generation
"""

from datetime import date

import pytest
from click.testing import CliRunner

from specment.config import SpecmentConfig
from specment.core.prompts import Prompter
from specment.errors import UserCancelledError
from specment.features import get_available_features
from specment.locales import Language
from specment.models import UserSelections
from specment.templates import auto_enabled_features, find_template

FIXED_DATE = date(2024, 1, 15)


@pytest.fixture(autouse=True)
def git_user(monkeypatch):
    """Avoid reading the developer's real git config."""
    monkeypatch.setattr(
        "specment.utils.template_processor.get_user_info",
        lambda cwd=None: {"name": "Test User", "email": "test@test.com"},
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Generation must not depend on the CI runner's environment."""
    for name in (
        "CI",
        "GITHUB_ACTIONS",
        "SPECMENT_INSTALL_TIMEOUT",
        "SPECMENT_PACKAGE_MANAGER",
        "SPECMENT_ORGANIZATION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def config():
    return SpecmentConfig()


@pytest.fixture
def make_selections():
    """Build UserSelections from template and feature names.

    Auto-enabled features of the templates are switched on, like the
    collector does.
    """
    def _make(project_name="docs-site", templates=("classic-spec",), features=(), language=Language.EN):
        descriptors = tuple(find_template(name, language) for name in templates)
        enabled = set(features) | set(auto_enabled_features(descriptors))
        return UserSelections(
            project_name=project_name,
            templates=descriptors,
            features=tuple(
                f.with_enabled(f.name in enabled) for f in get_available_features(language)
            ),
            language=language,
        )

    return _make


class FakePrompter(Prompter):
    """Answers prompts from queues and records what was asked.

    Each queue entry is returned for the next call of that kind. An
    ``UserCancelledError`` instance in a queue is raised instead.
    """

    def __init__(self, select=(), text=(), multiselect=()):
        self.answers = {
            "select": list(select),
            "text": list(text),
            "multiselect": list(multiselect),
        }
        self.calls = []
        self.notes = []
        self.choices = []
        self.text_defaults = []

    def _next(self, kind, message, choices=None):
        self.calls.append((kind, message, [c.value for c in choices or ()]))
        self.choices.append(list(choices or ()))
        answer = self.answers[kind].pop(0)
        if isinstance(answer, UserCancelledError):
            raise answer
        return answer

    def select(self, message, choices, language=Language.EN):
        return self._next("select", message, choices)

    def text(self, message, default=None, validate=None, language=Language.EN):
        self.text_defaults.append(default)
        return self._next("text", message)

    def multiselect(self, message, choices, required=True, language=Language.EN):
        return self._next("multiselect", message, choices)

    def note(self, title, lines):
        self.notes.append((title, list(lines)))

    def kinds(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_prompter():
    return FakePrompter


@pytest.fixture
def project_dir(tmp_path):
    """Directory projects are generated into."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    return workdir

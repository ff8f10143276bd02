"""Tests for change detection and the save policy."""

import pytest

from spalink.config.store import PersistedConfig
from spalink.core.save_policy import ask_yes_no, detect_changes, should_save

SAVED = PersistedConfig(
    library_path="C:\\src\\lib\\",
    infinity_path='"C:\\src\\infinity"',
    additional_spa_paths="",
    package_name="@infinity/ui-components",
    updated="2026-01-01T09:00:00",
)


class Confirm:
    def __init__(self, answer):
        self.answer = answer
        self.questions = []

    def __call__(self, question):
        self.questions.append(question)
        return self.answer


def test_cosmetic_differences_are_not_changes():
    """Test trailing separators, quotes and None versus empty are ignored."""
    current = PersistedConfig(
        library_path="C:\\src\\lib",
        infinity_path="C:\\src\\infinity",
        additional_spa_paths=None,
        package_name="@infinity/ui-components",
    )
    assert detect_changes(SAVED, current) == []


def test_changed_fields_are_listed():
    """Test each differing field is reported."""
    current = PersistedConfig(
        library_path="C:\\src\\lib",
        infinity_path="D:\\infinity",
        additional_spa_paths="C:\\src\\admin",
        package_name="@infinity/ui-components",
    )
    assert detect_changes(SAVED, current) == [
        "Infinity path",
        "additional SPA paths",
    ]


def test_no_config_non_interactive_does_not_save_or_prompt():
    """Test a first run without prompting never saves."""
    confirm = Confirm(True)
    assert not should_save(
        config_existed=False, changed=True, interactive=False, confirm=confirm
    )
    assert confirm.questions == []


@pytest.mark.parametrize("answer", [True, False])
def test_no_config_interactive_asks(answer):
    """Test a first interactive run saves only on confirmation."""
    confirm = Confirm(answer)
    assert should_save(config_existed=False, changed=False, confirm=confirm) is answer
    assert len(confirm.questions) == 1


def test_unchanged_config_does_not_save_or_prompt():
    """Test nothing happens when the config exists and nothing changed."""
    confirm = Confirm(True)
    assert not should_save(config_existed=True, changed=False, confirm=confirm)
    assert confirm.questions == []


def test_changed_config_interactive_asks():
    """Test a change prompts and follows the answer."""
    confirm = Confirm(True)
    assert should_save(config_existed=True, changed=True, confirm=confirm)
    assert confirm.questions == ["Paths changed. Update saved defaults?"]


def test_changed_config_non_interactive_does_not_save():
    """Test changes are not saved without prompting."""
    confirm = Confirm(True)
    assert not should_save(
        config_existed=True, changed=True, interactive=False, confirm=confirm
    )
    assert confirm.questions == []


def test_force_save_skips_prompt():
    """Test force_save saves without asking, even non-interactively."""
    confirm = Confirm(False)
    assert should_save(
        config_existed=True,
        changed=False,
        force_save=True,
        interactive=False,
        confirm=confirm,
    )
    assert confirm.questions == []


def test_no_save_beats_force_save():
    """Test no_save wins over every other input."""
    confirm = Confirm(True)
    assert not should_save(
        config_existed=False,
        changed=True,
        force_save=True,
        no_save=True,
        confirm=confirm,
    )
    assert confirm.questions == []


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("y", True),
        ("YES", True),
        (" Yes ", True),
        ("n", False),
        ("", False),
        ("yep", False),
    ],
)
def test_ask_yes_no(answer, expected):
    """Test free-text answers are matched against the affirmative pattern."""
    assert ask_yes_no("Save?", prompt=lambda *a, **k: answer) is expected

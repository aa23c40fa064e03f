from __future__ import annotations

import pytest

from unwind.core.errors import InvalidChoiceError
from unwind.core.types import DailyTime, PracticeTime, Screen, StretchLevel, Weekday
from unwind.core.wizard import (
    WIZARD_STEPS,
    OnboardingWizard,
    is_step_complete,
    progress_markers,
    step_number,
)


def test_new_wizard_has_no_complete_steps() -> None:
    wizard = OnboardingWizard()

    assert not any(wizard.can_continue(step) for step in WIZARD_STEPS)
    assert wizard.is_complete() is False


@pytest.mark.parametrize("level", list(StretchLevel))
def test_stretch_level_gate_opens_for_any_level(level: StretchLevel) -> None:
    wizard = OnboardingWizard()
    assert wizard.can_continue(Screen.STRETCH_LEVEL) is False

    wizard.select_stretch_level(level)

    assert wizard.can_continue(Screen.STRETCH_LEVEL) is True


def test_selecting_stretch_level_overwrites_previous_value() -> None:
    wizard = OnboardingWizard()

    wizard.select_stretch_level("newbie")
    wizard.select_stretch_level(StretchLevel.ADVANCED)

    assert wizard.choices.stretch_level is StretchLevel.ADVANCED


def test_toggle_training_day_twice_restores_original_set() -> None:
    wizard = OnboardingWizard()
    wizard.toggle_training_day("Wed")
    before = set(wizard.choices.training_days)

    wizard.toggle_training_day("Mon")
    wizard.toggle_training_day("Mon")

    assert wizard.choices.training_days == before


def test_training_days_gate_follows_set_emptiness() -> None:
    wizard = OnboardingWizard()

    wizard.toggle_training_day(Weekday.FRI)
    assert wizard.can_continue(Screen.TRAINING_DAYS) is True
    wizard.toggle_training_day(Weekday.FRI)
    assert wizard.can_continue(Screen.TRAINING_DAYS) is False


def test_training_days_are_unique_and_ordered_by_week() -> None:
    wizard = OnboardingWizard()
    for day in ("Sat", "Mon", "sun", "Mon", "Mon"):
        wizard.toggle_training_day(day)

    assert wizard.choices.ordered_training_days() == [Weekday.SUN, Weekday.MON, Weekday.SAT]


def test_daily_and_practice_time_gates() -> None:
    wizard = OnboardingWizard()

    wizard.select_daily_time("45+")
    wizard.select_practice_time("evening")

    assert wizard.choices.daily_time is DailyTime.FORTY_FIVE_PLUS
    assert wizard.choices.practice_time is PracticeTime.EVENING
    assert wizard.can_continue(Screen.DAILY_TIME)
    assert wizard.can_continue(Screen.PRACTICE_TIME)


def test_unknown_option_raises() -> None:
    wizard = OnboardingWizard()

    with pytest.raises(InvalidChoiceError):
        wizard.select_stretch_level("guru")
    with pytest.raises(InvalidChoiceError):
        wizard.toggle_training_day("Funday")
    with pytest.raises(ValueError):
        wizard.select_daily_time("90")


def test_personalize_intro_needs_no_data() -> None:
    wizard = OnboardingWizard()

    assert is_step_complete(Screen.PERSONALIZE, wizard.choices) is True
    assert is_step_complete(Screen.LIBRARY, wizard.choices) is False


def test_step_numbers_and_progress_markers() -> None:
    assert [step_number(step) for step in WIZARD_STEPS] == [1, 2, 3, 4]
    assert step_number(Screen.LOGIN) is None
    assert progress_markers(Screen.DAILY_TIME) == [True, True, True, False]
    assert progress_markers(Screen.PERSONALIZE) == [False, False, False, False]


def test_clear_resets_all_choices() -> None:
    wizard = OnboardingWizard()
    wizard.select_stretch_level("novice")
    wizard.toggle_training_day("Tue")

    wizard.clear()

    assert wizard.choices.stretch_level is None
    assert wizard.choices.training_days == set()


def test_choices_copy_is_independent() -> None:
    wizard = OnboardingWizard()
    wizard.toggle_training_day("Thu")

    snapshot = wizard.choices.copy()
    wizard.toggle_training_day("Fri")

    assert snapshot.training_days == {Weekday.THU}


def test_summary_waits_for_every_step() -> None:
    wizard = OnboardingWizard()
    wizard.select_stretch_level("familiar")
    wizard.toggle_training_day("Sat")

    assert wizard.summary() is None


def test_summary_lists_days_in_week_order() -> None:
    wizard = OnboardingWizard()
    wizard.select_stretch_level("familiar")
    for day in ("Sat", "Mon", "Sun"):
        wizard.toggle_training_day(day)
    wizard.select_daily_time("45+")
    wizard.select_practice_time("evening")

    assert wizard.is_complete() is True
    assert wizard.summary() == "Sun, Mon, Sat · 45+ min · Evening"

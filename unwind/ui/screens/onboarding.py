"""Pantallas del asistente de personalización: introducción y cuatro pasos.

Cada paso muestra las opciones, marca la elegida y deja *Continue*
deshabilitado mientras el paso esté incompleto."""

from __future__ import annotations

import streamlit as st

from unwind.core.controller import AppController
from unwind.core.types import DailyTime, PracticeTime, Screen, Weekday
from unwind.ui.content import (
    DAILY_TIME_LABELS,
    PRACTICE_TIME_LABELS,
    STRETCH_LEVEL_OPTIONS,
    WIZARD_TITLES,
)
from unwind.ui.state import safe_rerun

from .utils import back_button, screen_container, wizard_progress


def _continue_button(controller: AppController, *, label: str = "Continue") -> None:
    step = controller.screen
    if st.button(
        label,
        key=f"{step.value}_continue",
        type="primary",
        disabled=not controller.can_continue(),
        use_container_width=True,
    ):
        controller.continue_wizard()
        safe_rerun()


def _option_button(label: str, *, key: str, selected: bool) -> bool:
    return st.button(
        f"✓ {label}" if selected else label,
        key=key,
        type="primary" if selected else "secondary",
        use_container_width=True,
    )


def _step_header(controller: AppController) -> None:
    step = controller.screen
    back_button(controller, key=f"{step.value}_back")
    wizard_progress(step)
    st.markdown(f"### {WIZARD_TITLES[step.value]}")


def _personalize_screen(controller: AppController) -> None:
    with screen_container("personalize"):
        back_button(controller, key="personalize_back")
        st.markdown("## Let's Personalize Your Plan")
        st.write("Just a few quick questions to tailor a yoga schedule perfect for you.")
        _continue_button(controller, label="Get Started")


def _stretch_level_screen(controller: AppController) -> None:
    with screen_container("stretch-level"):
        _step_header(controller)
        current = controller.wizard.choices.stretch_level
        columns = st.columns(2)
        for index, (level, (title, description)) in enumerate(STRETCH_LEVEL_OPTIONS.items()):
            with columns[index % 2]:
                if _option_button(title, key=f"stretch_{level.value}", selected=current is level):
                    controller.select_stretch_level(level)
                    safe_rerun()
                st.caption(description)
        _continue_button(controller)


def _training_days_screen(controller: AppController) -> None:
    with screen_container("training-days"):
        _step_header(controller)
        selected = controller.wizard.choices.training_days
        columns = st.columns(len(Weekday))
        for column, day in zip(columns, Weekday):
            with column:
                if _option_button(day.value, key=f"day_{day.value}", selected=day in selected):
                    controller.toggle_training_day(day)
                    safe_rerun()
        _continue_button(controller)


def _daily_time_screen(controller: AppController) -> None:
    with screen_container("daily-time"):
        _step_header(controller)
        current = controller.wizard.choices.daily_time
        for option in DailyTime:
            label = DAILY_TIME_LABELS[option]
            if _option_button(label, key=f"daily_{option.value}", selected=current is option):
                controller.select_daily_time(option)
                safe_rerun()
        _continue_button(controller)


def _practice_time_screen(controller: AppController) -> None:
    with screen_container("practice-time"):
        _step_header(controller)
        current = controller.wizard.choices.practice_time
        for option in PracticeTime:
            label = PRACTICE_TIME_LABELS[option]
            if _option_button(label, key=f"practice_{option.value}", selected=current is option):
                controller.select_practice_time(option)
                safe_rerun()
        _continue_button(controller, label="Finish")


ONBOARDING_SCREENS = {
    Screen.PERSONALIZE: _personalize_screen,
    Screen.STRETCH_LEVEL: _stretch_level_screen,
    Screen.TRAINING_DAYS: _training_days_screen,
    Screen.DAILY_TIME: _daily_time_screen,
    Screen.PRACTICE_TIME: _practice_time_screen,
}

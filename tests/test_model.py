"""Tests for the state machine in loginpanel/core/model.py."""

import itertools

import pytest

from loginpanel.core.model import (
    WINDOW_TITLE,
    ApplicationState,
    FieldsChanged,
    FormFields,
    LoginSubmit,
    Navigate,
    Page,
    Theme,
    ToggleTheme,
    initial_state,
    update,
)

ALL_STATES = [
    ApplicationState(theme=theme, page=page, fields=fields)
    for theme, page, fields in itertools.product(
        Theme,
        Page,
        [FormFields(), FormFields(email="x@y.org", password="secret")],
    )
]


class TestInitialState:
    def test_defaults(self):
        state = initial_state()

        assert state.theme is Theme.DARK
        assert state.page is Page.LOGIN
        assert state.fields.email == ""
        assert state.fields.password == ""

    def test_window_title(self):
        assert WINDOW_TITLE == "Rust UI - Iced"


class TestToggleTheme:
    @pytest.mark.parametrize("state", ALL_STATES)
    def test_flips_theme_only(self, state):
        toggled = update(state, ToggleTheme())

        assert toggled.theme is not state.theme
        assert toggled.page is state.page
        assert toggled.fields == state.fields

    @pytest.mark.parametrize("state", ALL_STATES)
    def test_twice_restores_theme(self, state):
        assert update(update(state, ToggleTheme()), ToggleTheme()).theme is state.theme


class TestNavigate:
    @pytest.mark.parametrize("state", ALL_STATES)
    def test_known_routes(self, state):
        assert update(state, Navigate("login")).page is Page.LOGIN
        assert update(state, Navigate("register")).page is Page.REGISTER

    @pytest.mark.parametrize("route", ["", "home", "LOGIN", "register ", "/login"])
    @pytest.mark.parametrize("state", ALL_STATES)
    def test_unknown_route_is_ignored(self, state, route):
        assert update(state, Navigate(route)) == state

    def test_from_route(self):
        assert Page.from_route("login") is Page.LOGIN
        assert Page.from_route("register") is Page.REGISTER
        assert Page.from_route("settings") is None


class TestFieldsChanged:
    @pytest.mark.parametrize("state", ALL_STATES)
    def test_replaces_both_fields(self, state):
        changed = update(state, FieldsChanged("new@mail.com", "hunter2"))

        assert changed.fields == FormFields(email="new@mail.com", password="hunter2")
        assert changed.theme is state.theme
        assert changed.page is state.page

    def test_accepts_empty_values(self):
        state = ApplicationState(fields=FormFields(email="a", password="b"))

        assert update(state, FieldsChanged("", "")).fields == FormFields()


class TestLoginSubmit:
    @pytest.mark.parametrize("state", ALL_STATES)
    def test_leaves_state_alone(self, state):
        assert update(state, LoginSubmit()) == state


class TestUpdate:
    def test_scenario(self):
        state = initial_state()

        state = update(state, FieldsChanged("a@b.com", "pw"))
        assert state == ApplicationState(Theme.DARK, Page.LOGIN, FormFields("a@b.com", "pw"))

        state = update(state, Navigate("register"))
        assert state == ApplicationState(Theme.DARK, Page.REGISTER, FormFields("a@b.com", "pw"))

        state = update(state, ToggleTheme())
        assert state == ApplicationState(Theme.LIGHT, Page.REGISTER, FormFields("a@b.com", "pw"))

        state = update(state, Navigate("login"))
        assert state == ApplicationState(Theme.LIGHT, Page.LOGIN, FormFields("a@b.com", "pw"))

    def test_does_not_mutate_input(self):
        state = initial_state()

        update(state, ToggleTheme())

        assert state == initial_state()

    def test_rejects_non_messages(self):
        with pytest.raises(TypeError):
            update(initial_state(), "toggle")


class TestValues:
    def test_round_trip_through_host_fields(self):
        state = ApplicationState(Theme.LIGHT, Page.REGISTER, FormFields("a@b.com", "pw"))

        values = state.to_values()

        assert values == {
            "theme": "light",
            "page": "register",
            "email": "a@b.com",
            "password": "pw",
        }
        assert ApplicationState.from_values(**values) == state

"""Tests for route classification and the gate decision table."""

import pytest

from timeline.web.gate import GateAction, GateDecision, PathClass, classify_path, decide, login_location


class TestClassifyPath:
    @pytest.mark.parametrize("path", ["/login", "/register", "/login/", "/register/confirm"])
    def test_public(self, path):
        assert classify_path(path) is PathClass.PUBLIC

    @pytest.mark.parametrize("path", ["/", "/profile/u2", "/logout", "/loginx", "/registered", "/settings/login"])
    def test_protected(self, path):
        assert classify_path(path) is PathClass.PROTECTED

    @pytest.mark.parametrize(
        "path",
        ["/api/timeline", "/api", "/static/app.css", "/favicon.ico", "/openapi.json", "/docs", "/health"],
    )
    def test_excluded(self, path):
        assert classify_path(path) is PathClass.EXCLUDED

    def test_dot_only_counts_in_last_segment(self):
        assert classify_path("/v1.2/profile") is PathClass.PROTECTED


class TestLoginLocation:
    def test_root_has_no_redirect_param(self):
        assert login_location("/") == "/login"

    def test_path_preserved(self):
        assert login_location("/profile/u2") == "/login?redirect=%2Fprofile%2Fu2"


class TestDecide:
    def test_protected_anonymous_root(self):
        assert decide("/", authenticated=False) == GateDecision.redirect("/login")

    def test_protected_anonymous_with_redirect(self):
        decision = decide("/profile/u2", authenticated=False)

        assert decision.action is GateAction.REDIRECT
        assert decision.location == "/login?redirect=%2Fprofile%2Fu2"

    def test_protected_authenticated(self):
        assert decide("/profile/u2", authenticated=True) == GateDecision.allow()

    @pytest.mark.parametrize("path", ["/login", "/register"])
    def test_public_authenticated(self, path):
        assert decide(path, authenticated=True) == GateDecision.redirect("/")

    @pytest.mark.parametrize("path", ["/login", "/register"])
    def test_public_anonymous(self, path):
        assert decide(path, authenticated=False) == GateDecision.allow()

    @pytest.mark.parametrize("authenticated", [True, False])
    def test_excluded_always_allowed(self, authenticated):
        assert decide("/api/tweets", authenticated) == GateDecision.allow()
        assert decide("/favicon.ico", authenticated) == GateDecision.allow()

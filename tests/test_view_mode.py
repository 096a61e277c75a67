"""
View Mode Tests
===============

Allowed transitions, readiness gating and the fatal path.
"""

import pytest

from game.view_mode import InvalidViewModeError, ViewMode, ViewModeMachine, check_mode

CONTENT_VIEWS = [ViewMode.SCALE, ViewMode.DISTANCE, ViewMode.CREDITS]


class TestTransitions:

    def test_starts_uninitialized(self):
        assert ViewModeMachine().mode is ViewMode.UNINITIALIZED

    @pytest.mark.parametrize("target", CONTENT_VIEWS)
    def test_menu_to_any_view_and_back(self, target):
        vm = ViewModeMachine()
        assert vm.request(target) is True
        assert vm.mode is target
        assert vm.request(ViewMode.UNINITIALIZED) is True
        assert vm.mode is ViewMode.UNINITIALIZED

    @pytest.mark.parametrize("source", CONTENT_VIEWS)
    @pytest.mark.parametrize("target", CONTENT_VIEWS)
    def test_no_direct_jump_between_views(self, source, target, capsys):
        if source is target:
            pytest.skip("same view")
        vm = ViewModeMachine()
        vm.request(source)
        capsys.readouterr()
        assert vm.request(target) is False
        assert vm.mode is source
        assert "Warning" in capsys.readouterr().out

    def test_same_mode_is_a_no_op(self):
        vm = ViewModeMachine()
        assert vm.request(ViewMode.UNINITIALIZED) is False
        vm.request(ViewMode.SCALE)
        assert vm.request(ViewMode.SCALE) is False
        assert vm.mode is ViewMode.SCALE


class TestReadiness:

    def test_rejected_until_ready(self, capsys):
        ready = {"value": False}
        vm = ViewModeMachine(is_ready=lambda: ready["value"])

        assert vm.request(ViewMode.SCALE) is False
        assert vm.mode is ViewMode.UNINITIALIZED
        assert "still initializing" in capsys.readouterr().out

        ready["value"] = True
        assert vm.request(ViewMode.SCALE) is True


class TestInvalidModes:

    @pytest.mark.parametrize("value", ["SCALE", 1, None])
    def test_request_with_non_mode_is_fatal(self, value):
        with pytest.raises(InvalidViewModeError):
            ViewModeMachine().request(value)

    def test_corrupted_state_is_fatal(self):
        vm = ViewModeMachine()
        vm._mode = 7
        with pytest.raises(InvalidViewModeError):
            vm.mode

    def test_check_mode_passes_members_through(self):
        assert check_mode(ViewMode.CREDITS) is ViewMode.CREDITS

"""Unit tests for the pytest hook object and per-test options."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from fixture_factories.testing import CaseConfig, FixtureInjector, FixtureManager


class FakeItem:
    """Minimal stand-in for :class:`pytest.Item`."""

    def __init__(self, markers=None, cls=None, nodeid="tests/test_x.py::test_x"):
        self.markers = markers or {}
        self.cls = cls
        self.nodeid = nodeid

    def get_closest_marker(self, name):
        return self.markers.get(name)


def _marker(*args):
    return SimpleNamespace(args=args)


@pytest.fixture()
def manager() -> Mock:
    manager = Mock(spec=FixtureManager)
    manager.truncate_dirty_tables_for_all_test_connections.return_value = {}
    return manager


class TestCaseConfig:
    def test_defaults(self):
        assert CaseConfig.from_item(FakeItem()) == CaseConfig()

    def test_markers(self):
        item = FakeItem(
            {"skip_truncation": _marker(), "fixtures": _marker("authors", "posts")}
        )

        assert CaseConfig.from_item(item) == CaseConfig(("authors", "posts"), True)

    def test_marker_argument_can_disable_skip(self):
        class Case:
            skip_truncation = True

        item = FakeItem({"skip_truncation": _marker(False)}, cls=Case)

        assert CaseConfig.from_item(item).skip_truncation is False

    def test_class_attributes(self):
        class Case:
            skip_truncation = True
            fixtures = ["authors"]

        assert CaseConfig.from_item(FakeItem(cls=Case)) == CaseConfig(("authors",), True)


class TestHooks:
    def test_session_start_initializes_database(self, manager):
        FixtureInjector(manager).pytest_sessionstart(session=Mock())

        manager.init_db.assert_called_once_with()

    def test_setup_truncates_before_the_test(self, manager):
        FixtureInjector(manager).pytest_runtest_setup(FakeItem())

        manager.truncate_dirty_tables_for_all_test_connections.assert_called_once_with()
        manager.load_fixtures.assert_not_called()

    def test_setup_honours_skip_truncation(self, manager):
        FixtureInjector(manager).pytest_runtest_setup(
            FakeItem({"skip_truncation": _marker()})
        )

        manager.truncate_dirty_tables_for_all_test_connections.assert_not_called()

    def test_setup_loads_fixtures_after_truncation(self, manager):
        FixtureInjector(manager).pytest_runtest_setup(FakeItem({"fixtures": _marker("seed")}))

        assert [call[0] for call in manager.method_calls] == [
            "truncate_dirty_tables_for_all_test_connections",
            "load_fixtures",
        ]
        manager.load_fixtures.assert_called_once_with(("seed",))

    def test_truncation_errors_propagate(self, manager):
        manager.truncate_dirty_tables_for_all_test_connections.side_effect = RuntimeError("locked")

        with pytest.raises(RuntimeError, match="locked"):
            FixtureInjector(manager).pytest_runtest_setup(FakeItem())

    def test_teardown_and_session_finish_leave_data(self, manager):
        injector = FixtureInjector(manager)

        injector.pytest_runtest_teardown(FakeItem())
        injector.pytest_sessionfinish(session=Mock(), exitstatus=0)

        assert manager.method_calls == []

    def test_configure_registers_markers(self):
        config = Mock()

        FixtureInjector(Mock()).pytest_configure(config)

        lines = [call.args for call in config.addinivalue_line.call_args_list]
        assert [name for name, _ in lines] == ["markers", "markers"]
        assert lines[0][1].startswith("skip_truncation:")
        assert lines[1][1].startswith("fixtures(*names):")

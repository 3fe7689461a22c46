"""
Tests for the viewer session: atomic snapshot replacement and lazy inspection.
"""

import pytest

from syntax_viewer import session as session_module
from syntax_viewer.config import ViewerConfig
from syntax_viewer.session import ViewerSession, parse_path


class TestReload:

    def test_successful_reload_publishes_snapshot(self, class_tree):
        session = ViewerSession()
        outcome = session.reload("class Foo { void Bar() {} }")
        assert outcome.ok
        snapshot = session.snapshot
        assert snapshot.root is outcome.root
        assert snapshot.display_root.label == "CompilationUnit - CompilationUnitSyntax"

    def test_failed_reload_keeps_previous_snapshot(self):
        session = ViewerSession()
        session.reload("class A {}")
        before = session.snapshot
        outcome = session.reload("class {")
        assert not outcome.ok
        assert session.snapshot is before

    def test_reload_replaces_snapshot(self):
        session = ViewerSession()
        session.reload("class A {}")
        first = session.snapshot
        session.reload("class B {}")
        assert session.snapshot is not first
        assert session.snapshot.root.members[0].identifier.text == "B"

    def test_depth_limit_comes_from_config(self):
        session = ViewerSession(ViewerConfig(max_depth=1))
        session.reload("class A { void M() {} }")
        assert any(n.is_placeholder for n in session.snapshot.display_root.walk())


class TestSelection:

    def test_properties_by_path(self):
        session = ViewerSession()
        session.reload("class Foo { void Bar() {} }")
        names = {e.name: e.formatted_value for e in session.properties("0.1")}
        assert names["Text"] == "Foo"

    def test_unknown_path(self):
        session = ViewerSession()
        session.reload("class A {}")
        with pytest.raises(LookupError):
            session.select("9.9")
        with pytest.raises(LookupError):
            session.select("x")

    def test_nothing_loaded(self):
        with pytest.raises(LookupError):
            ViewerSession().select("")

    def test_placeholder_properties(self):
        session = ViewerSession(ViewerConfig(max_depth=0))
        session.reload("class A {}")
        entries = session.properties("0")
        assert len(entries) == 1
        assert entries[0].is_error
        assert "depth limit exceeded" in entries[0].formatted_value

    def test_inspection_is_lazy(self, monkeypatch):
        calls = []
        real = session_module.get_properties

        def recording(element, config):
            calls.append(element)
            return real(element, config)

        monkeypatch.setattr(session_module, "get_properties", recording)
        session = ViewerSession()
        session.reload("class A { void M() {} }")
        assert calls == []
        session.properties("0")
        assert calls == [session.snapshot.root.members[0]]


class TestParsePath:

    def test_forms(self):
        assert parse_path("") == []
        assert parse_path("0.3.1") == [0, 3, 1]
        assert parse_path([2, "4"]) == [2, 4]

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            parse_path("0.-1")

    def test_empty_segments_rejected(self):
        for path in ("0..1", ".0", "0.", " .1"):
            with pytest.raises(ValueError):
                parse_path(path)

    def test_malformed_selection_is_a_lookup_error(self):
        session = ViewerSession()
        session.reload("class A {}")
        with pytest.raises(LookupError):
            session.select("0..1")
        with pytest.raises(LookupError):
            session.properties(".0")


class TestSnapshotOwnership:

    def test_load_returns_the_snapshot_it_built(self):
        session = ViewerSession()
        outcome, first = session.load("class A {}")
        assert outcome.ok
        _, second = session.load("class B {}")
        assert first.root.members[0].identifier.text == "A"
        assert second is session.snapshot

    def test_failed_load_returns_no_snapshot(self):
        session = ViewerSession()
        _, before = session.load("class A {}")
        outcome, snapshot = session.load("class {")
        assert not outcome.ok
        assert snapshot is None
        assert session.snapshot is before

    def test_lookups_pinned_to_an_older_snapshot(self):
        session = ViewerSession()
        _, pinned = session.load("class Foo {}")
        session.reload("class Bar {}")
        node = session.select("0.1", pinned)
        assert node.label == 'IdentifierToken: "Foo"'
        values = {e.name: e.formatted_value for e in session.properties("0.1", pinned)}
        assert values["Text"] == "Foo"
        assert {e.name: e.formatted_value for e in session.properties("0.1")}["Text"] == "Bar"

"""
Tests for the HTTP surface.
"""

from fastapi.testclient import TestClient

from app import viewer
from app.main import app

client = TestClient(app)


class TestParseEndpoint:

    def test_parse_returns_tree(self):
        response = client.post("/parse", json={"source": "class Foo { void Bar() {} }"})
        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "success"
        tree = body["tree"]
        assert tree["label"] == "CompilationUnit - CompilationUnitSyntax"
        cls = tree["children"][0]
        assert cls["path"] == "0"
        assert cls["classification"] == "Node"
        assert cls["children"][1]["label"] == 'IdentifierToken: "Foo"'
        assert body["tree_text"].startswith("CompilationUnit")

    def test_parse_error(self):
        response = client.post("/parse", json={"source": "class {"})
        body = response.json()
        assert body["status"] == "error"
        assert body["error"]["line"] == 1


class TestAnalyzeEndpoint:

    def test_rejects_non_cs_files(self):
        response = client.post("/analyze", files={"file": ("a.txt", b"class A {}")})
        assert response.status_code == 400

    def test_accepts_cs_upload(self):
        response = client.post("/analyze", files={"file": ("a.cs", b"class A {}")})
        assert response.json()["status"] == "success"
        assert response.json()["file_name"] == "a.cs"


class TestPropertiesEndpoint:

    def test_properties_of_selected_node(self):
        client.post("/parse", json={"source": "class Foo { void Bar() {} }"})
        body = client.get("/properties", params={"path": "0"}).json()
        assert body["label"] == "ClassDeclaration - ClassDeclarationSyntax"
        props = {p["name"]: p["value"] for p in body["properties"]}
        assert props["Identifier"] == "Foo (SyntaxToken)"

    def test_unknown_path(self):
        client.post("/parse", json={"source": "class A {}"})
        response = client.get("/properties", params={"path": "7.7"})
        assert response.status_code == 404

    def test_malformed_path(self):
        client.post("/parse", json={"source": "class A {}"})
        response = client.get("/properties", params={"path": "0..1"})
        assert response.status_code == 404


class TestConcurrentReload:

    def test_response_uses_the_tree_it_parsed(self, monkeypatch):
        """A reload landing between parse and serialization does not leak into the response."""
        real_load = viewer.session.load

        def load_then_interleave(code):
            result = real_load(code)
            real_load("class Other {}")
            return result

        monkeypatch.setattr(viewer.session, "load", load_then_interleave)
        body = viewer.view_source("class Mine {}")
        assert body["tree"]["children"][0]["children"][1]["label"] == 'IdentifierToken: "Mine"'
        assert viewer.session.snapshot.root.members[0].identifier.text == "Other"

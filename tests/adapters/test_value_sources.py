"""Tests for value sources (lookup only)."""

from form_binding.adapters import FormSource, MapSource, MultiMapSource, ValueSource


class TestMapSource:
    def test_present_key_yields_single_value(self):
        source = MapSource({"a": "1", "b": ""})
        assert source.get("a") == ["1"]
        assert source.get("b") == [""]

    def test_absent_key_yields_empty(self):
        assert MapSource({}).get("a") == []

    def test_keys_are_case_sensitive(self):
        assert MapSource({"Name": "x"}).get("name") == []

    def test_satisfies_protocol(self):
        assert isinstance(MapSource({}), ValueSource)


class TestMultiMapSource:
    def test_all_values_in_order(self):
        source = MultiMapSource({"id": ["3", "1", "2"]})
        assert source.get("id") == ["3", "1", "2"]
        assert source.get("missing") == []

    def test_returns_copy(self):
        data = {"id": ["1"]}
        source = MultiMapSource(data)
        source.get("id").append("2")
        assert data["id"] == ["1"]

    def test_from_pairs_groups_and_keeps_order(self):
        source = MultiMapSource.from_pairs([("b", "1"), ("a", "x"), ("b", "2")])
        assert source.keys() == ["b", "a"]
        assert source.get("b") == ["1", "2"]

    def test_satisfies_protocol(self):
        assert isinstance(MultiMapSource({}), ValueSource)


class TestFormSource:
    def test_parses_urlencoded_body(self):
        source = FormSource.from_urlencoded("tag=a&tag=b&name=J%C3%B3zef+K&empty=")
        assert source.get("tag") == ["a", "b"]
        assert source.get("name") == ["Józef K"]
        assert source.get("empty") == [""]
        assert source.get("absent") == []

    def test_accepts_bytes_and_query_prefix(self):
        source = FormSource.from_urlencoded(b"?page=2")
        assert source.get("page") == ["2"]

    def test_empty_body(self):
        assert FormSource.from_urlencoded("").keys() == []

    def test_undecodable_bytes_replaced(self):
        source = FormSource.from_urlencoded(b"name=\xff&page=2")
        assert source.get("name") == ["\ufffd"]
        assert source.get("page") == ["2"]

    def test_only_one_leading_question_mark_dropped(self):
        source = FormSource.from_urlencoded("??a=1")
        assert source.get("?a") == ["1"]
        assert source.get("a") == []

"""Tests for lookup and in-memory mutation of parsed documents."""

import pytest
import ckv


class TestQuery:
    """Document.get and the derived mapping."""

    def test_get(self):
        doc = ckv.parse("name=Alice\nage=30")
        assert doc.get("age") == "30"

    def test_get_missing_key(self):
        doc = ckv.parse("name=Alice")
        with pytest.raises(ckv.KeyNotFound) as exc_info:
            doc.get("Name")
        assert exc_info.value.key == "Name"
        assert exc_info.value.line is None

    def test_container_protocol(self):
        doc = ckv.parse("a=1\nb=2\na=3")
        assert "a" in doc
        assert "z" not in doc
        assert len(doc) == 2
        assert list(doc) == ["a", "b"]


class TestSet:
    """Document.set keeps position or appends."""

    def test_replace_keeps_position(self):
        doc = ckv.parse("key1=a\nkey2=b\nkey3=c")
        doc.set("key2", "new")
        assert ckv.render(doc) == "key1=a\nkey2=new\nkey3=c"

    def test_replace_multiline_with_single_line(self):
        doc = ckv.parse("a=x\n\ty\nb=1\n")
        doc.set("a", "z")
        assert ckv.render(doc) == "a=z\nb=1\n"

    def test_append_new_key(self):
        doc = ckv.parse("a=1\n")
        doc.set("b", "two\nlines")
        assert ckv.render(doc) == "a=1\nb=two\n\tlines\n"

    def test_interior_blank_lines_survive(self):
        doc = ckv.parse("a=x\n\n\ty\nb=1")
        doc.set("a", "z")
        assert ckv.render(doc) == "a=z\n\nb=1"

    def test_replaces_visible_duplicate(self):
        doc = ckv.parse("k=1\nk=2")
        doc.set("k", "3")
        assert ckv.render(doc) == "k=1\nk=3"
        assert doc.get("k") == "3"

    def test_replaces_first_duplicate_under_first_policy(self):
        doc = ckv.parse("k=1\nk=2", ckv.CkvConfig(duplicate_keys="first"))
        doc.set("k", "3")
        assert ckv.render(doc) == "k=3\nk=2"

    def test_idempotent(self):
        doc = ckv.parse("a=1\nb=x\n\ty\nc=3")
        doc.set("b", "v")
        once = ckv.render(doc)
        doc.set("b", "v")
        assert ckv.render(doc) == once

    @pytest.mark.parametrize("key, char", [("a=b", "="), ("a\tb", "\t"), ("a\nb", "\n")])
    def test_invalid_key(self, key, char):
        doc = ckv.parse("")
        with pytest.raises(ckv.InvalidCharacter) as exc_info:
            doc.set(key, "v")
        assert exc_info.value.char == char

    def test_empty_key(self):
        with pytest.raises(ckv.EqualToWithoutAKey):
            ckv.parse("").set("", "v")

    def test_empty_value_rejected_by_policy(self):
        doc = ckv.parse("a=1", ckv.CkvConfig(allow_empty_values=False))
        with pytest.raises(ckv.NoValueFoundForKey):
            doc.set("a", "")


class TestRemove:
    """Document.remove drops exactly the entry's lines."""

    def test_remove_multiline_entry(self):
        doc = ckv.parse("k1=a\nk2=b\n\tc\nk3=d")
        doc.remove("k2")
        assert ckv.render(doc) == "k1=a\nk3=d"

    def test_neighbouring_blank_lines_stay(self):
        doc = ckv.parse("a=1\n\nb=2\n\nc=3\n")
        doc.remove("b")
        assert ckv.render(doc) == "a=1\n\n\nc=3\n"

    def test_other_values_untouched(self):
        text = "a=1\nb=x\n\ty\nc=\n\tz\n"
        before = ckv.parse(text).mapping
        doc = ckv.parse(text)
        doc.remove("b")
        after = doc.mapping
        del before["b"]
        assert after == before

    def test_removes_every_duplicate(self):
        doc = ckv.parse("k=1\na=2\nk=3")
        doc.remove("k")
        assert ckv.render(doc) == "a=2"

    def test_missing_key(self):
        doc = ckv.parse("a=1")
        with pytest.raises(ckv.KeyNotFound):
            doc.remove("b")
        assert ckv.render(doc) == "a=1"

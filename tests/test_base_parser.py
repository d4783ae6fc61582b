import gzip
import pytest
from pathlib import Path
from netjson.exceptions import MissingRequiredField, TypeMismatch
from netjson.parsers.base import BaseParser

class DummyParser(BaseParser):
    def parse(self, path):
        return "parsed"

    def parse_string(self, content):
        return content

def test_read_file_plain(tmp_path):
    parser = DummyParser()
    f = tmp_path / "test.json"
    f.write_text("hello world", encoding="utf-8")

    assert parser._read_file(f) == "hello world"

def test_read_file_gzip(tmp_path):
    parser = DummyParser()
    f = tmp_path / "test.json.gz"
    with gzip.open(f, "wt", encoding="utf-8") as gf:
        gf.write("hello gzip")

    assert parser._read_file(f) == "hello gzip"

def test_take_consumes_keys():
    parser = DummyParser()
    obj = {"a": 1, "b": 2}

    assert parser._take(obj, "a", ()) == 1
    assert obj == {"b": 2}

    # Default when absent, key left alone
    assert parser._take(obj, "c", (), 0) == 0
    assert obj == {"b": 2}

    with pytest.raises(MissingRequiredField) as exc:
        parser._take(obj, "c", ("modules", "m"))
    assert exc.value.path == ("modules", "m", "c")
    assert str(exc.value) == "modules.m.c: missing required field 'c'"

def test_shape_checks():
    parser = DummyParser()

    assert parser._expect_object({}, ()) == {}
    assert parser._expect_array([1], ()) == [1]
    assert parser._expect_string("s", ()) == "s"
    assert parser._expect_uint(0, ()) == 0

    with pytest.raises(TypeMismatch, match="expected an object"):
        parser._expect_object([], ("x",))
    with pytest.raises(TypeMismatch, match="expected an array"):
        parser._expect_array({}, ("x",))
    with pytest.raises(TypeMismatch, match="expected a string"):
        parser._expect_string(None, ("x",))
    for value in (-1, 1.5, True, "3"):
        with pytest.raises(TypeMismatch, match="non-negative integer"):
            parser._expect_uint(value, ("x",))

def test_validate_default():
    assert DummyParser().validate("anything") == []

"""Tests for name transforms: camelize, decamelize, class_to_file, class_to_path."""

import pytest

from webcmd.core.utils import (
    camelize,
    class_to_file,
    class_to_path,
    decamelize,
    is_command_name,
)


class TestCamelize:
    def test_basic(self):
        assert camelize("generate_app") == "GenerateApp"

    def test_single_word(self):
        assert camelize("version") == "Version"

    def test_already_camel(self):
        assert camelize("FooBar") == "FooBar"

    def test_empty(self):
        assert camelize("") == ""

    def test_digits(self):
        assert camelize("base64_tool") == "Base64Tool"


class TestDecamelize:
    def test_basic(self):
        assert decamelize("MyCommand") == "my_command"

    def test_single_word(self):
        assert decamelize("Version") == "version"

    def test_lowercase_unchanged(self):
        assert decamelize("foo_bar") == "foo_bar"

    def test_acronym_run(self):
        assert decamelize("HTTPServer") == "http_server"

    def test_trailing_acronym(self):
        assert decamelize("ServeHTTP") == "serve_http"

    def test_digit_boundary(self):
        assert decamelize("Base64Data") == "base64_data"

    @pytest.mark.parametrize("name", ["generate_app", "inflate", "my_command", "base64_tool"])
    def test_roundtrip_from_snake(self, name):
        assert decamelize(camelize(name)) == name


class TestClassToFile:
    def test_perl_style(self):
        assert class_to_file("Foo::Bar") == "foo_bar"

    def test_dotted(self):
        assert class_to_file("Foo.Bar") == "foo_bar"

    def test_plain(self):
        assert class_to_file("MyApp") == "my_app"


class TestClassToPath:
    def test_perl_style(self):
        assert class_to_path("Foo::Bar") == "Foo/Bar.py"

    def test_dotted(self):
        assert class_to_path("Foo.Bar.Baz") == "Foo/Bar/Baz.py"

    def test_plain(self):
        assert class_to_path("MyApp") == "MyApp.py"


class TestIsCommandName:
    @pytest.mark.parametrize("name", ["foo", "generate_app", "Foo2", "_x"])
    def test_valid(self, name):
        assert is_command_name(name) is True

    @pytest.mark.parametrize("name", ["", None, "foo-bar", "foo bar", "../x", "foo.bar", "naïve"])
    def test_invalid(self, name):
        assert is_command_name(name) is False

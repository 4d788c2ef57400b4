"""generate_app: application skeleton rendered from this module's embedded templates."""

from __future__ import annotations

from ...core.utils import class_to_file, is_command_name
from ..base import Command


class GenerateApp(Command):
    description = "Generate application directory structure."
    usage = """\
usage: webcmd generate_app [NAME]

Creates NAME (default: MyApp) as a directory named after it in snake case,
with a package, a launcher script, tests and static files.
"""

    def run(self, *args: str) -> int:
        class_name = args[0] if args else "MyApp"
        if not is_command_name(class_name) or not class_name[0].isalpha():
            self.help()
            return 2

        name = class_to_file(class_name)
        variables = {"class_name": class_name, "name": name}

        self.render_to_rel_file("launcher", f"{name}/script/{name}", **variables)
        self.chmod_rel_file(f"{name}/script/{name}", 0o744)

        self.render_to_rel_file("pyproject", f"{name}/pyproject.toml", **variables)
        self.render_to_rel_file("package", f"{name}/src/{name}/__init__.py", **variables)
        self.render_to_rel_file("app", f"{name}/src/{name}/app.py", **variables)
        self.render_to_rel_file("test", f"{name}/tests/test_app.py", **variables)

        self.write_rel_file(f"{name}/public/logo.png", self.get_data("logo.png"))
        self.create_rel_dir(f"{name}/log")
        return 0


__DATA__ = r'''
@@ launcher
#!/usr/bin/env python3
"""Command line launcher for {{ class_name }}."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src"))
os.environ.setdefault("WEBCMD_APP", "{{ name }}.app:app")

from webcmd.__main__ import main

main()
@@ pyproject
[build-system]
requires = ["setuptools>=68"]
build-backend = "setuptools.build_meta"

[project]
name = "{{ name }}"
version = "0.1.0"
dependencies = ["webcmd"]

[project.optional-dependencies]
test = ["pytest>=8"]
@@ package
"""{{ class_name }} application."""

from .app import app

__all__ = ["app"]
@@ app
"""{{ class_name }}: WSGI application."""

from __future__ import annotations


class {{ class_name }}:
    def __call__(self, environ, start_response):
        body = b"Hello from {{ class_name }}!\n"
        start_response("200 OK", [("Content-Type", "text/plain"), ("Content-Length", str(len(body)))])
        return [body]


app = {{ class_name }}()
@@ test
from {{ name }}.app import app


def test_hello():
    seen = {}

    def start_response(status, headers):
        seen["status"] = status

    body = b"".join(app({"PATH_INFO": "/"}, start_response))
    assert seen["status"] == "200 OK"
    assert b"{{ class_name }}" in body
@@ logo.png (base64)
iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg==
__END__
'''

"""inflate: write a module's embedded resources out as real files."""

from __future__ import annotations

from ..base import Command


class Inflate(Command):
    description = "Inflate embedded files to real files."
    usage = """\
usage: webcmd inflate MODULE... [--to DIR]

Writes every "@@ name" section embedded in each MODULE to DIR/name
(default: the current directory).
"""

    def run(self, *args: str) -> int:
        target = ""
        units: list[str] = []
        i = 0
        while i < len(args):
            if args[i] in ("--to", "-t"):
                if i + 1 >= len(args):
                    self.help()
                    return 2
                target = args[i + 1]
                i += 2
            else:
                units.append(args[i])
                i += 1

        if not units:
            self.help()
            return 2

        base = self.rel_dir(target) if target else self.cwd
        for unit in units:
            for name, data in self.get_all_data(unit).items():
                parts = [p for p in name.split("/") if p not in ("", ".", "..")]
                self.write_file(base.joinpath(*parts), data)
        return 0

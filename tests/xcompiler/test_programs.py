from pathlib import Path

import pytest

from xlang.codegen.compiler import Compiler
from xlang.utils.helpers import parse_file

PROGRAMS_DIR = Path(__file__).parent.parent.joinpath("xtests")


def smart_search(dir: Path = PROGRAMS_DIR):
    for path in sorted(dir.iterdir()):
        if path.is_dir():
            yield from smart_search(path)
        elif path.suffix == ".x":
            yield path


def expected_result(path: Path):
    """Reads the `// expect: VALUE` header of a sample program."""
    first_line = path.read_text().splitlines()[0]
    value = first_line.split("expect:", 1)[1].strip()
    if value in ("true", "false"):
        return value == "true"
    return float(value)


@pytest.mark.parametrize("path", list(smart_search()), ids=lambda p: p.name)
def test_program(path):
    compiler = Compiler(path.read_text(), str(path))
    compiler.compile(parse_file(str(path)))
    compiler.verify()
    assert compiler.runwithjit("main") == expected_result(path)
    compiler.shutdown()

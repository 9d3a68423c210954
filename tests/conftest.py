import io

import pytest

from pyinifile import IniOptions, from_stream


TYPES_INI = """\
[float]
positive=4
negative=-2.3333
string=abc

[int]
positive=4
negative=-1
float=4.5
string=abc

[uint]
positive=4
negative=-1
float=4.5
string=abc

[Boolean]
value1=True
value2=1
value3=TRUE
value4=False
value5=0
value6=f
value7=FALSE
"""


@pytest.fixture
def types_ini() -> str:
    return TYPES_INI


@pytest.fixture
def parse():
    def load(text: str, **changes):
        return from_stream(io.StringIO(text), IniOptions().evolve(**changes))

    return load


@pytest.fixture
def ini_file(tmp_path):
    def write(text: str, name: str = "test.ini", encoding: str = "utf-8"):
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return write

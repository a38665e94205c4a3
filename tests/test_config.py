from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")


def test_pytest_collects_tests_and_doctests():
    with open(Path(__file__).parent.parent / 'pyproject.toml', 'rb') as f:
        options = tomllib.load(f)['tool']['pytest']['ini_options']
    assert options['testpaths'] == ['tests', 'automin']
    # путь в addopts подменил бы testpaths
    assert options['addopts'].split() == ['--doctest-modules']

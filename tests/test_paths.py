"""Tests for node address building."""

import pytest

from json_inspector.paths import build_path


def test_root_path_ignores_key():
    assert build_path('', 'root') == '$'
    assert build_path('', 0) == '$'

def test_dot_notation():
    assert build_path('$', 'user') == '$.user'
    assert build_path('$.user', 'name') == '$.user.name'
    assert build_path('$', '_private9') == '$._private9'

def test_array_index():
    assert build_path('$', 0) == '$[0]'
    assert build_path('$.items', 3) == '$.items[3]'

@pytest.mark.parametrize("key, expected", [
    ('my-key', '$["my-key"]'),
    ('key with space', '$["key with space"]'),
    ('9lives', '$["9lives"]'),
    ('', '$[""]'),
    ('0', '$["0"]'),
])
def test_bracket_notation(key, expected):
    assert build_path('$', key) == expected

def test_quotes_are_not_escaped():
    assert build_path('$', 'say "hi"') == '$["say "hi""]'

def test_bool_key_is_not_an_index():
    assert build_path('$', True) == '$.True'

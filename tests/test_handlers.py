"""Tests for the UI handlers and file reading."""

import io

import pytest

from json_inspector.formatting import minify
from json_inspector.handlers import (
    describe_parse_error,
    load_file_handler,
    minify_handler,
    prettify_handler,
    search_handler,
    validate_handler,
)
from json_inspector.io_utils import read_text_content
from json_inspector.parsing import parse_json


# ---------------------------------------------------------------------------
# read_text_content
# ---------------------------------------------------------------------------

def test_read_text_from_stream():
    assert read_text_content(io.BytesIO(b'\xef\xbb\xbf{"a": 1}')) == '{"a": 1}'

def test_read_text_from_path(tmp_path):
    path = tmp_path / 'doc.json'
    path.write_text('[1, 2', encoding='utf-8')
    assert read_text_content(str(path)) == '[1, 2'

def test_read_text_requires_file():
    with pytest.raises(ValueError, match="No file uploaded"):
        read_text_content(None)

def test_load_file_handler(tmp_path):
    path = tmp_path / 'doc.json'
    path.write_text('{}', encoding='utf-8')
    text, status = load_file_handler(str(path))
    assert text == '{}'
    assert status == 'Loaded 2 bytes.'

def test_load_file_handler_missing_file(tmp_path):
    _, status = load_file_handler(str(tmp_path / 'missing.json'))
    assert status.startswith('Error reading file:')


# ---------------------------------------------------------------------------
# format / validate
# ---------------------------------------------------------------------------

def test_prettify_handler():
    output, status = prettify_handler('{"b": 1, "a": 2}', True)
    assert output == '{\n  "a": 2,\n  "b": 1\n}'
    assert status == 'Valid JSON.'

def test_minify_handler():
    output, status = minify_handler('[1, 2,\n 3]')
    assert output == '[1,2,3]'
    assert status == 'Valid JSON.'

def test_prettify_handler_reports_error():
    _, status = prettify_handler('{"a": [1, 2}', False)
    assert status.startswith('Invalid JSON:')
    assert '(line 1, column 12)' in status
    assert 'Structure: Unclosed { at line 1, column 1; Unclosed [ at line 1, column 7' in status

def test_describe_parse_error_empty():
    assert describe_parse_error('', parse_json('')) == 'Invalid JSON: Input is empty'

def test_validate_handler_valid():
    status, report = validate_handler('{"a": [1]}')
    assert status == 'Valid JSON.'
    assert report['is_balanced'] is True
    assert report['brackets'] == {'open': 1, 'close': 1}

def test_validate_handler_invalid():
    status, report = validate_handler('[1, 2, 3]]')
    assert status.startswith('Invalid JSON:')
    assert report['is_balanced'] is False
    assert report['unexpected'] == [{'char': ']', 'line': 1, 'column': 10, 'position': 9}]


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------

def test_search_handler_matches():
    outline, paths, status = search_handler('{"user": {"name": "John"}, "id": 1}', 'john')
    assert paths == [['$.user.name']]
    assert status == '1 matches.'
    assert '**John**' in outline

def test_search_handler_blank_term():
    outline, paths, status = search_handler('{"a": 1, "b": 2}', '')
    assert paths == []
    assert status == '2 top-level entries.'
    assert outline.startswith('$ (object)')

def test_search_handler_no_match():
    _, paths, status = search_handler('[1]', 'zzz')
    assert paths == []
    assert status == "No matches for 'zzz'."

def test_search_handler_invalid_json():
    outline, paths, status = search_handler('{', 'a')
    assert (outline, paths) == ('', [])
    assert status.startswith('Invalid JSON:')

def test_search_handler_large_input(monkeypatch):
    from json_inspector import handlers
    from json_inspector.config import Settings

    monkeypatch.setattr(handlers, 'SETTINGS', Settings(large_input_bytes=4))
    outline, paths, status = search_handler('[1, 2, 3]', '1')
    assert (outline, paths) == ('', [])
    assert status.startswith('Input too large')

def test_search_handler_primitive_root():
    outline, paths, status = search_handler('"just text"', '')
    assert paths == []
    assert status == 'Single string value.'
    assert outline == '$ (string) "just text"'

def test_search_handler_deep_nesting():
    text = '[' * 400 + '"x"' + ']' * 400
    outline, paths, status = search_handler(text, 'x')
    assert status == '1 matches.'
    assert paths[0][0].endswith('[0][0]')
    assert outline


# ---------------------------------------------------------------------------
# out-of-range numbers
# ---------------------------------------------------------------------------

def test_minify_handler_rejects_out_of_range_number():
    output, status = minify_handler('[1e400]')
    assert status.startswith('Invalid JSON: Number out of range: 1e400')
    assert '(line 1, column 2)' in status

def test_format_reports_serializer_error():
    from json_inspector.handlers import _format

    output, status = _format('[1]', lambda v: minify([float('nan')]))
    assert output is None
    assert status.startswith('Could not format JSON:')

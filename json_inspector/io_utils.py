from __future__ import annotations


def read_text_content(file_obj) -> str:
    """Read raw text from an uploaded file or file path.

    The text is returned unparsed so syntax errors can be located against it.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()

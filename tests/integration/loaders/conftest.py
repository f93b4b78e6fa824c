from pathlib import Path

import pytest

SAMPLE_MARKDOWN = """# Markdown Preview

Welcome to the **preview**.

## Features

- Syntax highlighted code blocks
- Search within document

```javascript
function hello() {
  console.log("Hello, world!");
}
```

> This is a blockquote.

---
"""


@pytest.fixture
def markdown_dir(tmp_path: Path) -> Path:
    """Sample documents under several extensions and encodings."""
    (tmp_path / "guide.md").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    (tmp_path / "guide.MARKDOWN").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("# Notes\n\nplain", encoding="utf-8")
    (tmp_path / "latin.md").write_bytes(b"# Caf\xe9\n\nna\xefve text\n")
    (tmp_path / "bom.md").write_text("# Title\n\nbody\n", encoding="utf-8-sig")
    return tmp_path

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

# Make backend packages importable when running tests from the repo root.
BACKEND = Path(__file__).resolve().parents[1] / "backend"
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))

from snippets import Document  # noqa: E402

RUBY_SHEET = """\
# Ruby to Rust

Quick reference for Rubyists.

## Variables

```ruby
foo = 1
```

```rust
let foo = 1;
```

Rust bindings are immutable by default.

## Functions

```ruby
def f; end
```

```rust
fn f() {}
```
"""


@pytest.fixture
def ruby_sheet() -> str:
    return RUBY_SHEET


@pytest.fixture
def warnings_log():
    """Collect loguru WARNING+ messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def ruby_doc() -> Document:
    doc = Document(title="Ruby to Rust", source_language="Ruby", intro="Quick reference.")
    doc.add_entry("Variables", "foo = 1", "let foo = 1;")
    doc.add_entry("Functions", "def f; end", "fn f() {}")
    doc.add_entry("Conditionals", "x if y", "if y { x }", note="`if` is an expression.")
    return doc


@pytest.fixture
def js_doc() -> Document:
    doc = Document(title="JavaScript to Rust", source_language="JavaScript")
    doc.add_entry("Conditionals", "if (y) { x }", "if y { x }")
    doc.add_entry("Maps", "new Map()", "HashMap::new()")
    doc.add_entry("WeakMap", "new WeakMap()", "// no direct equivalent")
    return doc


@pytest.fixture
def csharp_doc() -> Document:
    doc = Document(title="C# to Rust", source_language="C#")
    doc.add_entry("Variables", "var x = 1;", "let x = 1;")
    doc.add_entry("Functions", "void F() {}", "fn f() {}")
    doc.add_entry("Conditionals", "if (y) { x(); }", "if y { x(); }")
    return doc

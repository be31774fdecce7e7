from pathlib import Path

import pytest

from objectfile import ObjectSerializer

READ_FIXTURES = {
    "test-json.json": '{ "test": "json" }',
    "test-json5.json5": '// Test\n{ test: "json5" }',
    "test-yaml.yaml": "# Test\ntest: yaml",
    "test-yml.yml": "# Test\ntest: yml",
    "test-hybrid.json": '// Test\n{ "test": "hjson" }',
    "test-nomatch.xyz": "xyzzy",
}


@pytest.fixture
def read_dir(tmp_path: Path) -> Path:
    """A directory holding one sample file per format plus an empty ``foo`` subdirectory."""
    root = tmp_path / "test-read"
    root.mkdir()
    for name, content in READ_FIXTURES.items():
        (root / name).write_text(content, encoding="utf-8")
    (root / "foo").mkdir()
    return root


@pytest.fixture
def write_dir(tmp_path: Path) -> Path:
    root = tmp_path / "test-write"
    root.mkdir()
    return root


@pytest.fixture
def serializer() -> ObjectSerializer:
    return ObjectSerializer()

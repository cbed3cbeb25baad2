from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from vime_utils import UnsupportedFormatError, load_merged, read_document


def test_read_yaml(base_dir: Path) -> None:
    document = read_document(base_dir / "service.yml")

    assert document["service"]["transport"] == {"primary": "smtp", "retries": 2}


def test_read_toml(local_dir: Path) -> None:
    document = read_document(local_dir / "limits.toml")

    assert document == {"service": {"limits": {"daily": 1000, "burst": 50}}}


def test_empty_yaml_reads_as_empty_mapping(local_dir: Path) -> None:
    assert read_document(local_dir / "empty.yml") == {}


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "settings.ini"
    path.write_text("[a]\nb = 1\n", encoding="utf-8")

    with pytest.raises(UnsupportedFormatError):
        read_document(path)


def test_documents_are_merged_in_order(base_dir: Path, local_dir: Path) -> None:
    merged = load_merged([
        base_dir / "service.yml",
        local_dir / "service.json",
        local_dir / "limits.toml",
        local_dir / "empty.yml",
    ])

    service = merged["service"]
    assert service["name"] == "catalog"
    assert service["transport"] == {"primary": "slack", "retries": 2}
    assert service["tags"] == ["core", "billing", "local"]
    assert service["debug"] is True
    assert service["limits"] == {"daily": 1000, "burst": 50}


def test_order_changes_precedence(base_dir: Path, local_dir: Path) -> None:
    reversed_merge = load_merged([local_dir / "service.json", base_dir / "service.yml"])

    assert reversed_merge["service"]["transport"]["primary"] == "smtp"
    assert reversed_merge["service"]["tags"] == ["local", "core", "billing"]


def test_missing_document_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_merged([tmp_path / "missing.yml"])


def test_missing_document_is_skipped_when_optional(base_dir: Path, tmp_path: Path) -> None:
    merged = load_merged([tmp_path / "missing.yml", base_dir / "service.yml"], optional=True)

    assert merged["service"]["name"] == "catalog"


def test_non_mapping_document_replaces_previous(base_dir: Path, tmp_path: Path) -> None:
    path = tmp_path / "list.yml"
    path.write_text(yaml.safe_dump(["a", "b"]), encoding="utf-8")

    assert load_merged([base_dir / "service.yml", path]) == ["a", "b"]


def test_no_documents_yield_empty_mapping() -> None:
    assert load_merged([]) == {}

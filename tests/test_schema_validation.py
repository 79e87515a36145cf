from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from maverick.paths import get_paths
from maverick.services.content import ContentError, ContentService


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_catalog_matches_shipped_monsters() -> None:
    paths = get_paths()
    catalog = ContentService(paths.data_dir, paths.schema_dir).load_catalog()
    assert len(catalog) == 18

    dragon = catalog.get("Dragon")
    assert dragon.strength == 5
    assert dragon.ability == "Reign"
    assert dragon.to_slay == ("Move", "Melee", "Range")
    assert catalog.get("Bug").ability is None
    with pytest.raises(KeyError):
        catalog.get("Unicorn")


def _write_catalog(tmp_path: Path, monsters: object) -> ContentService:
    paths = get_paths()
    schema_dir = tmp_path / "schemas"
    shutil.copytree(paths.schema_dir, schema_dir)
    (tmp_path / "monsters.json").write_text(json.dumps({"monsters": monsters}), encoding="utf-8")
    return ContentService(tmp_path, schema_dir)


def test_unknown_requirement_fails_validation(tmp_path: Path) -> None:
    content = _write_catalog(tmp_path, [{"name": "Slime", "strength": 1, "to_slay": ["Bite"]}])
    with pytest.raises(ContentError, match="Schema validation failed"):
        content.load_catalog()


def test_too_many_requirements_fail_validation(tmp_path: Path) -> None:
    monster = {"name": "Hydra", "strength": 5, "to_slay": ["Melee", "Melee", "Range", "Move"]}
    content = _write_catalog(tmp_path, [monster])
    with pytest.raises(ContentError):
        content.load_catalog()


def test_duplicate_names_are_rejected(tmp_path: Path) -> None:
    bug = {"name": "Bug", "strength": 1, "ability": None, "to_slay": ["Range"]}
    content = _write_catalog(tmp_path, [bug, bug])
    with pytest.raises(ContentError, match="Duplicate"):
        content.load_catalog()


def test_missing_content_file(tmp_path: Path) -> None:
    paths = get_paths()
    content = ContentService(tmp_path, paths.schema_dir)
    with pytest.raises(ContentError, match="Missing content file"):
        content.load_catalog()

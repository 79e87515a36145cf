from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from maverick.engine.types import Ability, MonsterArchetype, MonsterCatalog, Requirement


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def _load_schema(path: Path) -> object:
    return _load_json(path)


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


def _parse_to_slay(raw: object) -> tuple[Requirement, ...]:
    if not isinstance(raw, list):
        raise ContentError("to_slay must be a list")
    # trust schema for allowed values
    return tuple(item for item in raw if isinstance(item, str))  # type: ignore[misc]


def _parse_ability(raw: object) -> Ability | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ContentError("ability must be a string or null")
    return raw  # type: ignore[return-value]


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_catalog(self) -> MonsterCatalog:
        path = self._data_dir / "monsters.json"
        schema = _load_schema(self._schema_dir / "monsters.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))

        if not isinstance(raw, dict):
            raise ContentError("monsters.json must be an object")
        raw_monsters = raw.get("monsters")
        if not isinstance(raw_monsters, list):
            raise ContentError("monsters.json.monsters must be a list")

        seen: set[str] = set()
        archetypes: list[MonsterArchetype] = []
        for item in raw_monsters:
            if not isinstance(item, dict):
                continue
            name = _require_str(item, "name")
            if name in seen:
                raise ContentError(f"Duplicate monster name: {name}")
            seen.add(name)
            archetypes.append(
                MonsterArchetype(
                    name=name,
                    strength=_require_int(item, "strength"),
                    to_slay=_parse_to_slay(item.get("to_slay")),
                    ability=_parse_ability(item.get("ability")),
                )
            )
        return MonsterCatalog(archetypes=tuple(archetypes))

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_catalog()

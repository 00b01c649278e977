# File: tests/conftest.py
# Shared fixtures: a small Appwrite project with users, posts and an empty collection.

import copy
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from appwrite_typegen.domain.models import AppwriteSchema, parse_schema
from appwrite_typegen.generator import TypesGenerator


FIXED_TIMESTAMP = "2024-01-01T00:00:00.000Z"

SAMPLE_SCHEMA: Dict[str, Any] = {
    "projectId": "demo-project",
    "projectName": "Demo",
    "databases": [
        {"$id": "db1", "name": "Main DB", "enabled": True},
    ],
    "collections": [
        {
            "$id": "users",
            "databaseId": "db1",
            "name": "Users",
            "enabled": True,
            "attributes": [
                {"key": "name", "type": "string", "required": True, "array": False, "size": 255},
                {
                    "key": "role",
                    "type": "string",
                    "required": True,
                    "array": False,
                    "format": "enum",
                    "elements": ["admin", "member"],
                },
                {"key": "age", "type": "integer", "required": False, "array": False},
                {"key": "tags", "type": "string", "required": False, "array": True, "size": 64},
                {
                    "key": "posts",
                    "type": "relationship",
                    "required": False,
                    "array": False,
                    "relatedCollection": "posts",
                    "relationType": "oneToMany",
                    "twoWay": True,
                    "twoWayKey": "author",
                    "side": "parent",
                    "onDelete": "cascade",
                },
            ],
            "indexes": [],
        },
        {
            "$id": "posts",
            "databaseId": "db1",
            "name": "Posts",
            "attributes": [
                {"key": "title", "type": "string", "required": True, "size": 128},
                {
                    "key": "status",
                    "type": "string",
                    "required": False,
                    "format": "enum",
                    "elements": ["draft", "published"],
                },
                {
                    "key": "author",
                    "type": "relationship",
                    "required": False,
                    "relatedCollection": "users",
                    "relationType": "oneToMany",
                    "twoWay": True,
                    "twoWayKey": "posts",
                    "side": "child",
                    "onDelete": "cascade",
                },
            ],
        },
        {"$id": "archive", "databaseId": "db1", "name": "Archive", "attributes": []},
    ],
}


@pytest.fixture
def sample_schema() -> Dict[str, Any]:
    """A fresh copy of the raw schema document."""
    return copy.deepcopy(SAMPLE_SCHEMA)


@pytest.fixture
def schema_model(sample_schema) -> AppwriteSchema:
    return parse_schema(sample_schema)


@pytest.fixture
def schema_file(tmp_path: Path, sample_schema) -> Path:
    path = tmp_path / "appwrite.json"
    path.write_text(json.dumps(sample_schema, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def fixed_timestamp(monkeypatch) -> str:
    """Pin the header timestamp so generated output is comparable."""
    monkeypatch.setattr(TypesGenerator, "_timestamp", lambda self: FIXED_TIMESTAMP)
    return FIXED_TIMESTAMP


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty working directory, so no config file is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path

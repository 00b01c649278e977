"""
Tests for database and collection ID constant generation.
"""
import logging
import unittest

import pytest

from appwrite_typegen.config import IdConstantsConfig
from appwrite_typegen.exceptions import StructuralError
from appwrite_typegen.generators.id_constants import ConstantEntry, IdConstantsGenerator


EXPECTED_CONSTANTS = (
    "/** Database identifiers for the project */\n"
    "export const DATABASE_IDS = {\n"
    "  /** Database ID for Main DB */\n"
    "  MAIN_DB: 'db1',\n"
    "};\n"
    "\n"
    "/** Collection identifiers for the project */\n"
    "export const COLLECTION_IDS = {\n"
    "  /** Collection ID for Users */\n"
    "  USERS: 'users',\n"
    "  /** Collection ID for Posts */\n"
    "  POSTS: 'posts',\n"
    "  /** Collection ID for Archive */\n"
    "  ARCHIVE: 'archive',\n"
    "};"
)


def test_generate_id_constants_from_raw_document(sample_schema):
    assert IdConstantsGenerator.generate_id_constants(sample_schema) == EXPECTED_CONSTANTS


def test_generate_id_constants_from_schema_model(schema_model):
    assert IdConstantsGenerator.generate_id_constants(schema_model) == EXPECTED_CONSTANTS


def test_tables_keep_document_order(schema_model):
    tables = IdConstantsGenerator.build_tables(schema_model)

    assert tables.database_table == {"MAIN_DB": ConstantEntry("db1", "Main DB")}
    assert list(tables.collection_table) == ["USERS", "POSTS", "ARCHIVE"]


class TestConstantOptions(unittest.TestCase):

    def setUp(self):
        self.document = {
            "databases": [{"$id": "db1", "name": "Main DB"}],
            "collections": [{"$id": "c1", "name": "User Profiles", "attributes": []}],
        }

    def test_without_comments(self):
        output = IdConstantsGenerator.generate_id_constants(
            self.document, IdConstantsConfig(include_comments=False)
        )

        self.assertNotIn("ID for", output)
        self.assertIn("export const DATABASE_IDS = {\n  MAIN_DB: 'db1',\n};", output)

    def test_prefix_suffix_and_custom_transform(self):
        config = IdConstantsConfig(
            constant_prefix="APP_",
            constant_suffix="_ID",
            naming_transform=lambda name: name.replace(" ", ""),
        )

        tables = IdConstantsGenerator.build_tables(self.document, config)

        self.assertEqual(list(tables.database_table), ["APP_MAINDB_ID"])
        self.assertEqual(list(tables.collection_table), ["APP_USERPROFILES_ID"])

    def test_sections_can_be_omitted(self):
        only_collections = IdConstantsGenerator.generate_id_constants(
            self.document, include_databases=False
        )
        only_databases = IdConstantsGenerator.generate_id_constants(
            self.document, include_collections=False
        )

        self.assertNotIn("DATABASE_IDS", only_collections)
        self.assertIn("COLLECTION_IDS", only_collections)
        self.assertNotIn("COLLECTION_IDS", only_databases)

    def test_collection_without_id_uses_name(self):
        document = {"collections": [{"name": "drafts", "attributes": []}]}

        tables = IdConstantsGenerator.build_tables(document)

        self.assertEqual(tables.collection_table["DRAFTS"].identifier, "drafts")

    def test_missing_lists_give_empty_tables(self):
        output = IdConstantsGenerator.generate_id_constants({})

        self.assertIn("export const DATABASE_IDS = {\n};", output)
        self.assertIn("export const COLLECTION_IDS = {\n};", output)


def test_colliding_names_overwrite_earlier_entries(caplog):
    document = {
        "collections": [
            {"$id": "a", "name": "user-list", "attributes": []},
            {"$id": "b", "name": "other", "attributes": []},
            {"$id": "c", "name": "userlist", "attributes": []},
        ]
    }

    with caplog.at_level(logging.DEBUG, logger="appwrite_typegen.generators.id_constants"):
        tables = IdConstantsGenerator.build_tables(document)

    assert list(tables.collection_table) == ["USERLIST", "OTHER"]
    assert tables.collection_table["USERLIST"].identifier == "c"
    assert "replaces an earlier entry" in caplog.text


def test_identifiers_are_escaped():
    output = IdConstantsGenerator.generate_id_constants(
        {"databases": [{"$id": "it's", "name": "Quoted"}]},
        include_collections=False,
    )

    assert "  QUOTED: 'it\\'s',\n" in output


@pytest.mark.parametrize("schema", [None, "appwrite.json", 42, ["collections"]])
def test_non_object_input_raises_structural_error(schema):
    with pytest.raises(StructuralError) as exc_info:
        IdConstantsGenerator.build_tables(schema)

    assert exc_info.value.error_code == "STRUCTURAL_ERROR"

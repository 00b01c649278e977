"""
Unit tests for the naming helpers.
"""
import re

import pytest

from appwrite_typegen.domain.naming import (
    default_naming_transform,
    doc_text,
    format_constant_name,
    format_enum_key,
    format_property_name,
    generate_enum_type_name,
    generate_interface_name,
    generate_type_name,
    singularize,
    to_pascal_case,
    ts_single_quoted,
    ts_string,
)


@pytest.mark.parametrize("name, expected", [
    ("users", "user"),
    ("Users", "User"),
    ("status", "statu"),  # only a single trailing "s" is stripped
    ("data", "data"),
    ("boss", "bos"),
    ("", ""),
])
def test_singularize(name, expected):
    assert singularize(name) == expected


@pytest.mark.parametrize("name, expected", [
    ("user", "User"),
    ("blog_post", "BlogPost"),
    ("blog-post", "BlogPost"),
    ("blogPost", "BlogPost"),
    ("account_status-code", "AccountStatusCode"),
    ("Blog Posts", "BlogPosts"),
    ("  team\tmembers ", "TeamMembers"),
])
def test_to_pascal_case(name, expected):
    assert to_pascal_case(name) == expected


def test_generate_type_name_singularizes_then_pascal_cases():
    assert generate_type_name("blog_posts") == "BlogPost"
    assert generate_type_name("Users") == "User"
    assert generate_type_name("Blog Posts") == "BlogPost"


def test_generate_interface_name_with_prefix_and_suffix():
    assert generate_interface_name("users") == "User"
    assert generate_interface_name("users", prefix="I", suffix="Document") == "IUserDocument"


def test_generate_enum_type_name():
    assert generate_enum_type_name("Users", "role") == "UserRole"
    assert generate_enum_type_name("posts", "publish_state") == "PostPublishState"


class TestFormatEnumKey:
    @pytest.mark.parametrize("value, expected", [
        ("admin", "ADMIN"),
        ("in-progress", "IN_PROGRESS"),
        ("in progress", "IN_PROGRESS"),
        ("1st", "_1ST"),
    ])
    def test_pascal(self, value, expected):
        assert format_enum_key(value, "pascal") == expected

    def test_camel_lowers_first_character(self):
        assert format_enum_key("admin", "camel") == "aDMIN"
        assert format_enum_key("in-progress", "camel") == "iN_PROGRESS"

    def test_snake_lowers_everything(self):
        assert format_enum_key("In-Progress", "snake") == "in_progress"

    def test_digit_prefix_survives_every_strategy(self):
        for strategy in ("pascal", "camel", "snake"):
            assert format_enum_key("2fa", strategy).startswith("_")

    def test_empty_value_becomes_underscore(self):
        for strategy in ("pascal", "camel", "snake"):
            assert format_enum_key("", strategy) == "_"


class TestConstantNames:
    def test_default_transform(self):
        assert default_naming_transform("  Main   DB ") == "Main_DB"
        assert default_naming_transform("user-profiles (v2)") == "userprofiles_v2"

    @pytest.mark.parametrize("name, expected", [
        ("Main DB", "MAIN_DB"),
        ("users", "USERS"),
        ("2024 archive", "_2024_ARCHIVE"),
        ("!!!", "_"),
        ("", "_"),
    ])
    def test_format_constant_name(self, name, expected):
        assert format_constant_name(name) == expected

    def test_prefix_and_suffix_are_applied_after_upper_casing(self):
        assert format_constant_name("Main DB", prefix="db_", suffix="_id") == "db_MAIN_DB_id"

    def test_custom_transform_output_is_still_sanitized(self):
        assert format_constant_name("a.b", transform=lambda name: name) == "A_B"
        assert format_constant_name("x", transform=lambda name: "9" + name) == "_9X"

    @pytest.mark.parametrize("name", [
        "Main DB",
        "  padded  ",
        "Ünïcödé",
        "日本語",
        "café-menu",
        "!!!",
        "---",
        "@#$%^&*()",
        "",
        "   ",
        "2024",
        "9 lives",
        "٣ arabic digit",
        "_private",
        "tab\tand\nnewline",
        "emoji 🚀 launch",
    ])
    def test_default_sanitizer_always_gives_a_constant_identifier(self, name):
        assert re.fullmatch(r"[A-Z_][A-Z0-9_]*", format_constant_name(name))


class TestLiterals:
    def test_property_names(self):
        assert format_property_name("title") == "title"
        assert format_property_name("$id") == "$id"
        assert format_property_name("first-name") == '"first-name"'
        assert format_property_name("2nd") == '"2nd"'

    def test_ts_string_escapes_quotes(self):
        assert ts_string('say "hi"') == '"say \\"hi\\""'
        assert ts_string("café") == '"café"'

    def test_ts_single_quoted_escapes_quotes(self):
        assert ts_single_quoted("db1") == "'db1'"
        assert ts_single_quoted("it's") == "'it\\'s'"

    def test_doc_text_cannot_close_comment(self):
        assert "*/" not in doc_text("evil */ value")
        assert "\n" not in doc_text("two\nlines")

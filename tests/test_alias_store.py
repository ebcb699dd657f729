"""
Unit tests for the alias store.

This module tests loading, saving and mutating the persisted alias mapping.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from storage.alias_store import AliasStore, ALIASES_FILE
from storage.models import Alias, AliasStoreError, ValidationError


class TestAliasStore:
    """Test AliasStore persistence."""

    def setup_method(self):
        """Set up a temporary config directory before each test."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_dir = Path(self.temp_dir) / "nested" / "ago"
        self.store = AliasStore(self.config_dir)

    def teardown_method(self):
        """Clean up the temporary directory after each test."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_path_inside_config_dir(self):
        assert self.store.path == self.config_dir / ALIASES_FILE
        assert ALIASES_FILE == "aliases.json"

    def test_load_missing_file_returns_empty(self):
        assert self.store.load() == {}
        assert not self.config_dir.exists()

    def test_save_creates_directory(self):
        self.store.save({"foo": "github.com/foo/bar"})
        assert self.store.path.exists()

    def test_save_format_is_sorted_and_indented(self):
        self.store.save({"b": "y", "a": "x"})
        content = self.store.path.read_text(encoding='utf-8')
        assert content == '{\n  "a": "x",\n  "b": "y"\n}\n'

    def test_round_trip(self):
        aliases = {"foo": "github.com/foo/bar/v2", "k8s": "k8s.io/client-go"}
        self.store.save(aliases)
        assert self.store.load() == aliases

        self.store.save(self.store.load())
        assert self.store.load() == aliases

    def test_save_overwrites_previous_state(self):
        self.store.save({"foo": "github.com/foo/bar", "baz": "example.com/baz"})
        self.store.save({"foo": "github.com/foo/bar"})
        assert self.store.load() == {"foo": "github.com/foo/bar"}

    def test_save_leaves_no_temporary_files(self):
        self.store.save({"foo": "github.com/foo/bar"})
        assert os.listdir(self.config_dir) == [ALIASES_FILE]

    def test_load_invalid_json_raises(self):
        self.config_dir.mkdir(parents=True)
        self.store.path.write_text("{not json", encoding='utf-8')
        with pytest.raises(AliasStoreError) as exc_info:
            self.store.load()
        assert "decode aliases file" in str(exc_info.value)
        assert exc_info.value.path == str(self.store.path)

    def test_load_invalid_utf8_raises(self):
        self.config_dir.mkdir(parents=True)
        self.store.path.write_bytes(b'{"foo": "\xff\xfe"}')
        with pytest.raises(AliasStoreError) as exc_info:
            self.store.load()
        assert "decode aliases file" in str(exc_info.value)
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_load_non_object_raises(self):
        self.config_dir.mkdir(parents=True)
        self.store.path.write_text('["foo"]', encoding='utf-8')
        with pytest.raises(AliasStoreError):
            self.store.load()

    def test_load_non_string_target_raises(self):
        self.config_dir.mkdir(parents=True)
        self.store.path.write_text('{"foo": 3}', encoding='utf-8')
        with pytest.raises(AliasStoreError):
            self.store.load()

    def test_load_read_failure_raises(self):
        self.config_dir.mkdir(parents=True)
        self.store.path.write_text('{}', encoding='utf-8')
        with patch('builtins.open', side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(AliasStoreError) as exc_info:
                self.store.load()
        assert "open aliases file" in str(exc_info.value)

    def test_save_directory_failure_raises(self):
        # A regular file where the directory should be.
        blocker = Path(self.temp_dir) / "blocker"
        blocker.write_text("", encoding='utf-8')
        store = AliasStore(blocker / "ago")
        with pytest.raises(AliasStoreError) as exc_info:
            store.save({"foo": "github.com/foo/bar"})
        assert "create config dir" in str(exc_info.value)

    def test_set_and_remove_are_pure_mutations(self):
        aliases = {}
        AliasStore.set(aliases, "foo", "github.com/foo/bar")
        assert aliases == {"foo": "github.com/foo/bar"}
        assert not self.store.path.exists()

        AliasStore.remove(aliases, "foo")
        assert aliases == {}

    def test_remove_missing_alias_is_noop(self):
        aliases = {"bar": "example.com/bar"}
        assert AliasStore.remove(aliases, "foo") == {"bar": "example.com/bar"}

    def test_set_replaces_existing_alias(self):
        aliases = {"foo": "github.com/foo/bar"}
        AliasStore.set(aliases, "foo", "github.com/foo/bar/v2")
        assert aliases == {"foo": "github.com/foo/bar/v2"}

    def test_set_rejects_empty_alias(self):
        with pytest.raises(ValidationError):
            AliasStore.set({}, "", "github.com/foo/bar")

    def test_set_rejects_empty_target(self):
        with pytest.raises(ValidationError):
            AliasStore.set({}, "foo", "   ")

    def test_add_alias_persists(self):
        self.store.add_alias("foo", "github.com/foo/bar")
        self.store.add_alias("baz", "example.com/baz")
        assert self.store.load() == {
            "foo": "github.com/foo/bar",
            "baz": "example.com/baz"
        }

    def test_remove_alias_persists(self):
        self.store.save({"foo": "github.com/foo/bar", "baz": "example.com/baz"})
        self.store.remove_alias("foo")
        assert self.store.load() == {"baz": "example.com/baz"}

    def test_remove_alias_missing_still_persists(self):
        result = self.store.remove_alias("foo")
        assert result == {}
        assert json.loads(self.store.path.read_text(encoding='utf-8')) == {}

    def test_list_aliases_sorted(self):
        self.store.save({"b": "y", "a": "x", "c": "z"})
        assert self.store.list_aliases() == [("a", "x"), ("b", "y"), ("c", "z")]


class TestAliasModel:
    """Test the Alias data class."""

    def test_valid_alias(self):
        alias = Alias(name="foo", target="github.com/foo/bar")
        assert alias.name == "foo"
        assert alias.target == "github.com/foo/bar"

    def test_whitespace_name_rejected(self):
        with pytest.raises(ValidationError):
            Alias(name="  ", target="github.com/foo/bar")

"""Tests for settings validation and logging setup."""

from __future__ import annotations

import logging

import pytest

from varstash.config import StashSettings
from varstash.logging_config import setup_logging
from varstash.startup_checks import validate_settings


class TestStashSettings:
    def test_defaults(self, settings: StashSettings) -> None:
        assert settings.store_path == "varstash_data"
        assert settings.metadata_filename == "datainfo__.json"
        assert settings.blob_extension == ".pkl"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VARSTASH_STORE_PATH", "from_env")
        monkeypatch.setenv("VARSTASH_HASH_SEED", "7")
        settings = StashSettings()
        assert settings.store_path == "from_env"
        assert settings.hash_seed == 7

    def test_pickle_protocol_bounds(self) -> None:
        with pytest.raises(ValueError):
            StashSettings(pickle_protocol=1)


class TestValidateSettings:
    def test_defaults_pass(self, settings: StashSettings) -> None:
        validate_settings(settings)

    @pytest.mark.parametrize("ext", ["", "pkl", ".", "./x"])
    def test_bad_blob_extension(self, ext: str) -> None:
        with pytest.raises(ValueError, match="BLOB_EXTENSION"):
            validate_settings(StashSettings(blob_extension=ext))

    def test_metadata_name_must_not_look_like_blob(self) -> None:
        with pytest.raises(ValueError, match="METADATA_FILENAME"):
            validate_settings(StashSettings(metadata_filename="info.pkl"))

    def test_metadata_name_must_be_plain(self) -> None:
        with pytest.raises(ValueError, match="METADATA_FILENAME"):
            validate_settings(StashSettings(metadata_filename="sub/info.json"))

    @pytest.mark.parametrize("name", ["", "..", "a/b"])
    def test_bad_trash_dirname(self, name: str) -> None:
        with pytest.raises(ValueError, match="TRASH_DIRNAME"):
            validate_settings(StashSettings(trash_dirname=name))

    def test_visible_trash_dir_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="varstash.startup_checks"):
            validate_settings(StashSettings(trash_dirname="trash"))
        assert "not hidden" in caplog.text


class TestSetupLogging:
    def test_sets_package_level(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(StashSettings(log_level="WARNING"))
            assert logging.getLogger("varstash").level == logging.WARNING
            setup_logging(StashSettings(log_level="WARNING"), verbose=True)
            assert logging.getLogger("varstash").level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            logging.getLogger("varstash").setLevel(logging.NOTSET)

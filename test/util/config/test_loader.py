# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import logging

from typing import TYPE_CHECKING

import pytest

from ormreflect.reflection.reflector_factory import DEFAULT_REFLECTOR_FACTORY


if TYPE_CHECKING:
    from .fixture import ConfigFixture


@pytest.mark.config
class TestConfigLoader:
    def test_config_loads_yaml(self, config: "ConfigFixture"):
        config.load("""
            logging:
                levels:
                    tty: INFO
        """)

        assert hasattr(config, "logging")
        assert hasattr(config, "reflection")
        assert config.logging.levels.tty == logging.INFO
        assert config.reflection.class_cache_enabled is True

    def test_config_defaults(self, config: "ConfigFixture"):
        config.load({})

        assert config.placeholders.open_token == "${"
        assert config.placeholders.close_token == "}"
        assert config.placeholders.enable_default_value is False
        assert config.placeholders.default_value_separator == ":"
        assert dict(config.variables) == {}

    def test_config_invalid_yaml(self, config: "ConfigFixture"):
        with pytest.raises(ValueError, match=r"Extra inputs are not permitted"):
            config.load("""
                any: text
            """)

    def test_config_invalid_log_level(self, config: "ConfigFixture"):
        with pytest.raises(ValueError, match=r"Unknown logging level string: banana"):
            config.load("""
                logging:
                  levels:
                    tty: banana
            """)

    def test_config_empty(self, config: "ConfigFixture"):
        with pytest.raises(ValueError, match="Configuration is empty"):
            config.load("")

    def test_config_not_a_mapping(self, config: "ConfigFixture"):
        with pytest.raises(TypeError, match="Expected a mapping, got list"):
            config.load("""
                - one
                - two
            """)

    def test_config_load_from_file(self, tmp_path, config: "ConfigFixture"):
        config_path = tmp_path / "test.yaml"
        with config_path.open("w") as f:
            f.write("""
                logging:
                    levels:
                        tty: INFO
            """)

        config.open(config_path)

        assert config.logging.levels.tty == logging.INFO
        assert config.logging.levels.tty == "INFO"

    def test_config_include(self, tmp_path, config: "ConfigFixture"):
        (tmp_path / "levels.yaml").write_text("tty: DEBUG\n")
        config_path = tmp_path / "main.yaml"
        config_path.write_text("logging:\n  levels: !include levels.yaml\n")

        config.open(config_path)

        assert config.logging.levels.tty == logging.DEBUG

    def test_config_circular_include(self, tmp_path, config: "ConfigFixture"):
        config_path = tmp_path / "main.yaml"
        config_path.write_text("logging: !include main.yaml\n")

        with pytest.raises(Exception, match="Circular !include"):
            config.open(config_path)


@pytest.mark.config
@pytest.mark.parsing
class TestConfigPlaceholders:
    def test_placeholders_are_expanded(self, config: "ConfigFixture"):
        config.load("""
            variables:
                log_dir_name: ormreflect-test.log
            logging:
                file_name: ${log_dir_name}
        """)

        assert config.logging.file_name == "ormreflect-test.log"
        assert config.variables["log_dir_name"] == "ormreflect-test.log"

    def test_unresolved_placeholders_are_kept(self, config: "ConfigFixture"):
        config.load("""
            logging:
                file_name: ${missing}.log
        """)

        assert config.logging.file_name == "${missing}.log"

    def test_placeholder_default_values(self, config: "ConfigFixture"):
        config.load("""
            placeholders:
                enable_default_value: true
                default_value_separator: "?"
            logging:
                file_name: ${name?fallback}.log
        """)

        assert config.logging.file_name == "fallback.log"

    def test_variables_are_not_expanded(self, config: "ConfigFixture"):
        config.load("""
            variables:
                a: ${b}
                b: value
        """)

        assert config.variables["a"] == "${b}"

    def test_variables_must_be_a_mapping(self, config: "ConfigFixture"):
        with pytest.raises(TypeError, match="'variables' must be a mapping"):
            config.load("""
                variables:
                    - a
            """)


@pytest.mark.config
@pytest.mark.reflection
class TestConfigApply:
    def test_class_cache_flag_is_applied(self, config: "ConfigFixture"):
        config.load("""
            reflection:
                class_cache_enabled: false
        """)
        assert DEFAULT_REFLECTOR_FACTORY.is_class_cache_enabled() is False

        config.load({})
        assert DEFAULT_REFLECTOR_FACTORY.is_class_cache_enabled() is True

    def test_reset_forgets_configuration(self, config: "ConfigFixture"):
        config.config.reset()

        with pytest.raises(RuntimeError, match="Configuration not initialized"):
            _ = config.config.reflection

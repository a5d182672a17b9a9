"""Tests for request cache configuration loading."""

import json
import logging

import pytest
import yaml

from request_cache import (
    InvalidArgument,
    NullReference,
    RequestCacheConfig,
    RequestCacheOptions,
    RequestCacheOptionsSchema,
    create_request_cache_options,
)


class TestFromDict:
    """Test cases for dictionary configuration."""

    def test_empty_dict_gives_defaults(self):
        assert RequestCacheConfig.from_dict({}) == RequestCacheOptions()

    def test_full_dict(self, custom_options_data, custom_options):
        assert RequestCacheConfig.from_dict(custom_options_data) == custom_options

    def test_defaults_fill_missing_values(self, custom_options):
        options = RequestCacheConfig.from_dict({"evict_before": False}, defaults=custom_options)

        assert options.get_evict_before() is False
        assert options.get_expires_after_write() == 5000
        assert options.get_cached_status_codes() == {200, 203, 404}

    def test_defaults_not_mutated(self, custom_options):
        RequestCacheConfig.from_dict({"expires_after_write": 1}, defaults=custom_options)

        assert custom_options.get_expires_after_write() == 5000

    @pytest.mark.parametrize("data, field", [
        ({"expires_after_write": 0}, "expires_after_write"),
        ({"expires_after_access": -1}, "expires_after_access"),
        ({"expires_after_write": "2000"}, "expires_after_write"),
        ({"evict_before": "yes"}, "evict_before"),
        ({"cached_status_codes": ["200"]}, "cached_status_codes"),
        ({"unknown_option": 1}, "unknown_option"),
    ])
    def test_invalid_values_rejected(self, data, field):
        with pytest.raises(InvalidArgument) as exc_info:
            RequestCacheConfig.from_dict(data)

        assert exc_info.value.field == field
        assert exc_info.value.error_code == "CONFIG_VALIDATION_ERROR"
        assert exc_info.value.details["errors"]

    def test_non_string_key_rejected(self):
        with pytest.raises(InvalidArgument) as exc_info:
            RequestCacheConfig.from_dict({200: True})

        assert exc_info.value.error_code == "CONFIG_VALIDATION_ERROR"

    def test_null_status_codes_rejected(self):
        with pytest.raises(NullReference):
            RequestCacheConfig.from_dict({"cached_status_codes": None})

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidArgument):
            RequestCacheConfig.from_dict([("evict_before", True)])

    def test_validation_failure_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="request_cache"):
            with pytest.raises(InvalidArgument):
                RequestCacheConfig.from_dict({"expires_after_write": -5})

        assert "Invalid request cache configuration" in caplog.text


class TestFromEnvironment:
    """Test cases for environment configuration."""

    def test_no_variables_gives_defaults(self):
        assert RequestCacheConfig.from_environment() == RequestCacheOptions()

    def test_all_variables(self, monkeypatch, custom_options):
        monkeypatch.setenv("REQUEST_CACHE_EXPIRES_AFTER_WRITE_MILLIS", "5000")
        monkeypatch.setenv("REQUEST_CACHE_EVICT_BEFORE", "true")
        monkeypatch.setenv("REQUEST_CACHE_EXPIRES_AFTER_ACCESS_MILLIS", "1500")
        monkeypatch.setenv("REQUEST_CACHE_EVICT_ALL_BEFORE", "On")
        monkeypatch.setenv("REQUEST_CACHE_CACHED_STATUS_CODES", "200, 203,404")

        assert RequestCacheConfig.from_environment() == custom_options

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("API_CACHE_EVICT_BEFORE", "1")

        options = RequestCacheConfig.from_environment(prefix="API_CACHE")

        assert options.get_evict_before() is True

    def test_empty_status_codes(self, monkeypatch):
        monkeypatch.setenv("REQUEST_CACHE_CACHED_STATUS_CODES", "")

        options = RequestCacheConfig.from_environment()

        assert options.get_cached_status_codes() == frozenset()

    @pytest.mark.parametrize("name, value", [
        ("REQUEST_CACHE_EXPIRES_AFTER_WRITE_MILLIS", "soon"),
        ("REQUEST_CACHE_EVICT_BEFORE", "maybe"),
        ("REQUEST_CACHE_CACHED_STATUS_CODES", "200,ok"),
    ])
    def test_unparseable_values_name_the_variable(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(InvalidArgument) as exc_info:
            RequestCacheConfig.from_environment()

        assert exc_info.value.field == name
        assert exc_info.value.error_code == "INVALID_ENVIRONMENT_VALUE"

    def test_out_of_range_value_rejected(self, monkeypatch):
        monkeypatch.setenv("REQUEST_CACHE_EXPIRES_AFTER_WRITE_MILLIS", "0")

        with pytest.raises(InvalidArgument):
            RequestCacheConfig.from_environment()


class TestFiles:
    """Test cases for file configuration."""

    def test_yaml_and_json_load_equal(self, tmp_path, custom_options_data, custom_options):
        yaml_path = tmp_path / "cache.yaml"
        json_path = tmp_path / "cache.json"
        yaml_path.write_text(yaml.safe_dump(custom_options_data))
        json_path.write_text(json.dumps(custom_options_data))

        from_yaml = RequestCacheConfig.from_file(yaml_path)
        from_json = RequestCacheConfig.from_file(str(json_path))

        assert from_yaml == from_json == custom_options

    def test_request_cache_section_unwrapped(self, tmp_path):
        path = tmp_path / "app.yml"
        path.write_text("request_cache:\n  expires_after_write: 750\n")

        options = RequestCacheConfig.from_file(path)

        assert options.get_expires_after_write() == 750

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RequestCacheConfig.from_file(path) == RequestCacheOptions()

    def test_non_string_key_in_yaml_rejected(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text("200: true\n")

        with pytest.raises(InvalidArgument):
            RequestCacheConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RequestCacheConfig.from_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "cache.toml"
        path.write_text("")

        with pytest.raises(InvalidArgument):
            RequestCacheConfig.from_file(path)

    @pytest.mark.parametrize("name", ["saved.yaml", "saved.json"])
    def test_save_and_reload(self, tmp_path, custom_options, name):
        path = tmp_path / name

        RequestCacheConfig.save_to_file(custom_options, path)

        assert RequestCacheConfig.from_file(path) == custom_options

    def test_save_unsupported_format(self, tmp_path, custom_options):
        with pytest.raises(InvalidArgument):
            RequestCacheConfig.save_to_file(custom_options, tmp_path / "saved.ini")

    def test_to_json(self, custom_options, custom_options_data):
        assert json.loads(RequestCacheConfig.to_json(custom_options)) == custom_options_data

    def test_to_yaml(self, custom_options, custom_options_data):
        assert yaml.safe_load(RequestCacheConfig.to_yaml(custom_options)) == custom_options_data


class TestSchema:
    """Test cases for the options schema."""

    def test_schema_defaults_match_options(self):
        assert RequestCacheOptionsSchema().to_options() == RequestCacheOptions()

    def test_from_options(self, custom_options, custom_options_data):
        schema = RequestCacheOptionsSchema.from_options(custom_options)

        assert schema.to_domain_data() == custom_options_data


class TestFactory:
    """Test cases for create_request_cache_options."""

    def test_defaults(self):
        assert create_request_cache_options(source="defaults") == RequestCacheOptions()

    def test_environment_with_overrides(self, monkeypatch):
        monkeypatch.setenv("REQUEST_CACHE_EXPIRES_AFTER_WRITE_MILLIS", "9000")

        options = create_request_cache_options(overrides={"evict_all_before": True})

        assert options.get_expires_after_write() == 9000
        assert options.get_evict_all_before() is True

    def test_file(self, tmp_path, custom_options):
        path = tmp_path / "cache.json"
        RequestCacheConfig.save_to_file(custom_options, path)

        assert create_request_cache_options(source="file", config_path=path) == custom_options

    def test_file_requires_path(self):
        with pytest.raises(InvalidArgument):
            create_request_cache_options(source="file")

    def test_unknown_source(self):
        with pytest.raises(InvalidArgument):
            create_request_cache_options(source="consul")

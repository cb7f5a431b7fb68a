import dataclasses

import pytest

from nano_chunker import ConfigurationError, SplitterConfig
from nano_chunker.config import (
    create_config_from_template,
    create_splitter_from_config,
    get_default_config,
    load_config,
    save_config,
    validate_config,
)


class TestSplitterConfig:

    def test_defaults(self):
        config = SplitterConfig()

        assert config.chunk_size == 4000
        assert config.length_function is len
        assert config.keep_separator is False
        assert config.separators == ("\n\n", "\n", " ", "")
        assert config.is_separator_regex is False
        assert config.strict_separators is False

    def test_separators_are_stored_as_tuple(self):
        assert SplitterConfig(separators=["\n", ""]).separators == ("\n", "")

    def test_is_frozen(self):
        config = SplitterConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.chunk_size = 10

    @pytest.mark.parametrize("chunk_size", [0, -1, True, "10", 2.5])
    def test_rejects_invalid_chunk_size(self, chunk_size):
        with pytest.raises(ConfigurationError) as exc_info:
            SplitterConfig(chunk_size=chunk_size)

        assert exc_info.value.field == "chunk_size"

    @pytest.mark.parametrize("separators", [[], (), "abc", ["\n", 1]])
    def test_rejects_invalid_separators(self, separators):
        with pytest.raises(ConfigurationError) as exc_info:
            SplitterConfig(separators=separators)

        assert exc_info.value.field == "separators"

    def test_rejects_non_callable_length_function(self):
        with pytest.raises(ConfigurationError):
            SplitterConfig(length_function="len")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            SplitterConfig(chunk_size=0)


class TestConfigFiles:

    def test_default_config_comes_from_template(self):
        config = get_default_config()

        assert config["chunk_size"] == 4000
        assert config["separators"] == ["\n\n", "\n", ". ", " ", ""]
        assert validate_config(config)

    def test_save_and_load_json(self, tmp_path):
        path = str(tmp_path / "conf" / "chunker.json")
        save_config({"chunk_size": 100, "separators": ["\n", ""]}, path)

        assert load_config(path) == {"chunk_size": 100, "separators": ["\n", ""]}

    def test_save_and_load_yaml(self, tmp_path):
        path = str(tmp_path / "chunker.yaml")
        save_config({"chunk_size": 100, "separators": ["\n\n", ""], "keep_separator": True}, path)

        assert load_config(path) == {"chunk_size": 100, "separators": ["\n\n", ""], "keep_separator": True}

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"))

    def test_load_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(str(path))

    def test_create_config_from_template(self, tmp_path):
        path = str(tmp_path / "chunker.yml")

        config = create_config_from_template(path, chunk_size=250, tiktoken_model=None)

        assert config["chunk_size"] == 250
        assert config["tiktoken_model"] == "gpt-4o"
        assert load_config(path) == config

    def test_create_config_from_template_with_dotted_keys(self, tmp_path):
        path = str(tmp_path / "chunker.json")

        config = create_config_from_template(path, **{"metadata.owner": "docs", "metadata.tags.lang": "en"})

        assert config["metadata"] == {"owner": "docs", "tags": {"lang": "en"}}
        assert config["chunk_size"] == 4000
        assert load_config(path)["metadata"]["tags"]["lang"] == "en"


class TestValidateConfig:

    def test_missing_required_field(self):
        assert not validate_config({"chunk_size": 10})

    @pytest.mark.parametrize("chunk_size", [0, -5, "abc", True])
    def test_invalid_chunk_size(self, chunk_size):
        assert not validate_config({"chunk_size": chunk_size, "separators": [""]})

    def test_numeric_string_chunk_size_is_accepted(self):
        assert validate_config({"chunk_size": "200", "separators": [""]})

    @pytest.mark.parametrize("separators", [[], "abc", ["\n", 3]])
    def test_invalid_separators(self, separators):
        assert not validate_config({"chunk_size": 10, "separators": separators})

    def test_invalid_flag_type(self):
        assert not validate_config({"chunk_size": 10, "separators": [""], "keep_separator": "yes"})

    def test_unknown_length_function(self):
        assert not validate_config({"chunk_size": 10, "separators": [""], "length_function": "words"})


class TestCreateSplitterFromConfig:

    def test_coerces_chunk_size_and_fills_defaults(self):
        splitter = create_splitter_from_config({"chunk_size": "12"})

        assert splitter.config.chunk_size == 12
        assert splitter.config.separators == ("\n\n", "\n", ". ", " ", "")
        assert splitter.config.length_function is len

    def test_builds_working_splitter(self):
        splitter = create_splitter_from_config({"chunk_size": 7, "separators": [" ", ""]})

        assert splitter.split_text("one two three") == ["one two", "three"]

    def test_rejects_invalid_values(self):
        with pytest.raises(ConfigurationError):
            create_splitter_from_config({"chunk_size": 0})
        with pytest.raises(ConfigurationError):
            create_splitter_from_config({"chunk_size": "ten"})

    def test_rejects_unknown_length_function(self):
        with pytest.raises(ConfigurationError):
            create_splitter_from_config({"length_function": "words"})

    def test_rejects_boolean_chunk_size(self):
        with pytest.raises(ConfigurationError) as exc_info:
            create_splitter_from_config({"chunk_size": True})

        assert exc_info.value.field == "chunk_size"

    @pytest.mark.parametrize("field", ["keep_separator", "is_separator_regex", "strict_separators"])
    @pytest.mark.parametrize("value", ["false", "yes", 0, 1, None])
    def test_rejects_non_boolean_flags(self, field, value):
        with pytest.raises(ConfigurationError) as exc_info:
            create_splitter_from_config({"chunk_size": 10, field: value})

        assert exc_info.value.field == field

    def test_accepts_boolean_flags(self):
        splitter = create_splitter_from_config({"chunk_size": 10, "keep_separator": True})

        assert splitter.config.keep_separator is True
        assert splitter.config.is_separator_regex is False

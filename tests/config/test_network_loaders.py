import json

import pytest
import yaml

from process_flow.config.loaders import ConfigLoader, load_network_config
from process_flow.config.network_config import DeviceConfig, NetworkConfig, StreamConfig
from process_flow.core.enums import DeviceType
from process_flow.core.exceptions import ConfigurationError


def test_load_yaml_configuration(tmp_path, demo_yaml):
    """Test loading YAML configuration."""
    config_file = tmp_path / "network.yaml"
    config_file.write_text(demo_yaml)

    config = load_network_config(config_file)

    assert config.name == "Test Network"
    assert config.version == "1.0"
    assert [s.resolved_name for s in config.streams] == ["s1", "s2", "s3", "product_a", "product_b"]
    assert config.streams[0].mass_flow == 10.0
    assert config.devices[0].type == DeviceType.MIXER
    assert config.devices[0].inputs_count == 2
    assert config.devices[1].double is True
    assert config.devices[1].outputs == ["product_a", "product_b"]


def test_load_json_configuration(tmp_path, demo_yaml):
    """Test loading JSON configuration."""
    config_file = tmp_path / "network.json"
    config_file.write_text(json.dumps(yaml.safe_load(demo_yaml)))

    config = load_network_config(config_file)

    assert len(config.devices) == 2
    assert config.devices[1].type == DeviceType.REACTOR


def test_load_nonexistent_file():
    with pytest.raises(ConfigurationError, match="not found"):
        load_network_config("nonexistent_network.yaml")


def test_unsupported_suffix(tmp_path):
    config_file = tmp_path / "network.toml"
    config_file.write_text("streams = []")

    with pytest.raises(ConfigurationError, match="Unsupported"):
        load_network_config(config_file)


def test_load_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("streams: [index: 1\n")

    with pytest.raises(ConfigurationError, match="parse YAML"):
        load_network_config(config_file)


def test_schema_rejects_unknown_device_type():
    config = {
        "streams": [{"index": 1}],
        "devices": [{"id": "d1", "type": "separator"}],
    }

    with pytest.raises(ConfigurationError, match="Schema validation failed"):
        ConfigLoader().from_dict(config)


def test_schema_rejects_stream_without_name_or_index():
    with pytest.raises(ConfigurationError):
        ConfigLoader().from_dict({"streams": [{"mass_flow": 1.0}]})


def test_unknown_stream_reference_rejected():
    config = {
        "streams": [{"index": 1}],
        "devices": [{"id": "m", "type": "mixer", "inputs_count": 1, "inputs": ["s9"]}],
    }

    with pytest.raises(ConfigurationError, match="unknown stream 's9'"):
        ConfigLoader().from_dict(config)


def test_mixer_requires_inputs_count():
    config = {
        "streams": [{"index": 1}],
        "devices": [{"id": "m", "type": "mixer"}],
    }

    with pytest.raises(ConfigurationError, match="inputs_count"):
        ConfigLoader().from_dict(config)


def test_non_mapping_document_rejected():
    with pytest.raises(ConfigurationError, match="mapping"):
        ConfigLoader().from_dict(["streams"])


def test_missing_schema_file_skips_schema(tmp_path):
    loader = ConfigLoader(schema_path=tmp_path / "absent.json")

    assert loader.schema == {}
    config = loader.from_dict({"streams": [{"name": "feed"}]})
    assert config.streams[0].resolved_name == "feed"


def test_duplicate_names_fail_validation():
    config = NetworkConfig(streams=[StreamConfig(index=1), StreamConfig(name="s1")])

    with pytest.raises(ValueError, match="Duplicate stream names"):
        config.validate()


def test_duplicate_device_ids_fail_validation():
    config = NetworkConfig(
        streams=[StreamConfig(index=1)],
        devices=[
            DeviceConfig(id="r", type=DeviceType.REACTOR),
            DeviceConfig(id="r", type=DeviceType.REACTOR, double=True),
        ],
    )

    with pytest.raises(ValueError, match="Duplicate device IDs"):
        config.validate()


def test_inputs_count_only_for_mixers():
    with pytest.raises(ValueError, match="only applies to mixers"):
        DeviceConfig(id="r", type=DeviceType.REACTOR, inputs_count=1).validate()


def test_double_only_for_reactors():
    config = {
        "streams": [{"index": 1}],
        "devices": [{"id": "m", "type": "mixer", "inputs_count": 1, "double": True}],
    }

    with pytest.raises(ConfigurationError, match="double only applies to reactors"):
        ConfigLoader().from_dict(config)


def test_reactor_without_double_is_single():
    config = ConfigLoader().from_dict({
        "streams": [{"index": 1}],
        "devices": [{"id": "r", "type": "reactor"}],
    })

    assert config.devices[0].double is None


def test_load_invalid_json(tmp_path):
    config_file = tmp_path / "broken.json"
    config_file.write_text('{"streams": [')

    with pytest.raises(ConfigurationError, match="parse JSON"):
        ConfigLoader().load_json(config_file)


def test_loader_methods_report_missing_file(tmp_path):
    loader = ConfigLoader()

    with pytest.raises(ConfigurationError, match="not found"):
        loader.load_yaml(tmp_path / "absent.yaml")
    with pytest.raises(ConfigurationError, match="not found"):
        loader.load_json(tmp_path / "absent.json")

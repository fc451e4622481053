"""
Tests for the command-line grader.
"""

import json

import pytest

from service.cli import main, load_network, EXIT_PASSED, EXIT_FAILED, EXIT_ERROR


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name="network.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


class TestLoadNetwork:
    """Test reading request bodies and bare network files."""

    def test_request_body(self, write_json, star_network):
        path = write_json({"network": star_network, "moduleId": "m1"})

        assert load_network(path) == star_network

    def test_bare_network(self, write_json, star_network):
        assert load_network(write_json(star_network)) == star_network


class TestMain:
    """Test exit codes and output modes."""

    def test_passing_network(self, write_json, star_network, capsys):
        code = main([str(write_json(star_network))])

        assert code == EXIT_PASSED
        out = capsys.readouterr().out
        assert "85/100" in out
        assert "Excellent network design!" in out

    def test_failing_network(self, write_json):
        assert main([str(write_json({"devices": ["PC"]}))]) == EXIT_FAILED

    def test_threshold_override(self, write_json, star_network):
        assert main([str(write_json(star_network)), "--threshold", "90"]) == EXIT_FAILED

    def test_invalid_threshold(self, write_json, star_network):
        assert main([str(write_json(star_network)), "--threshold", "500"]) == EXIT_ERROR

    def test_json_output(self, write_json, star_network, capsys):
        code = main([str(write_json(star_network)), "--json"])

        assert code == EXIT_PASSED
        body = json.loads(capsys.readouterr().out)
        assert body["score"] == 85
        assert body["details"]["connectionScore"] == 25

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "absent.json")]) == EXIT_ERROR

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        assert main([str(path)]) == EXIT_ERROR

    def test_malformed_device(self, write_json):
        assert main([str(write_json({"devices": [["Router"]]}))]) == EXIT_ERROR

    def test_config_overrides(self, write_json, star_network):
        network = write_json(star_network)
        config = write_json({"pass_threshold": 90}, name="config.json")

        assert main([str(network), "--config", str(config)]) == EXIT_FAILED

    def test_threshold_applies_over_config(self, write_json, star_network):
        network = write_json(star_network)
        config = write_json({"pass_threshold": 90}, name="config.json")

        assert main([str(network), "--config", str(config), "--threshold", "80"]) == EXIT_PASSED

    @pytest.mark.parametrize("overrides", [{"colour": "blue"}, {"pass_threshold": 500}, [1, 2]])
    def test_invalid_config(self, write_json, star_network, overrides):
        network = write_json(star_network)
        config = write_json(overrides, name="config.json")

        assert main([str(network), "--config", str(config)]) == EXIT_ERROR

    def test_missing_config_file(self, write_json, star_network, tmp_path):
        network = write_json(star_network)

        assert main([str(network), "--config", str(tmp_path / "absent.json")]) == EXIT_ERROR

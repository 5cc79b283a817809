import json
import logging

import pytest
import yaml

from disks.cli import main
from disks.manifests import Manifest
from disks.utils.logging import get_logger


def test_sort_command(capsys):
    assert main(["sort", "3", "--algorithm", "lawnmower"]) == 0
    out = capsys.readouterr().out
    assert "before    : D L D L D L" in out
    assert "after     : L L L D D D" in out
    assert "swaps     : 6" in out


def test_sort_explicit_non_alternating_row(capsys):
    assert main(["sort", "--row", "L D L D"]) == 0
    out = capsys.readouterr().out
    assert "after     : L D L D" in out
    assert "swaps     : 0" in out


def test_sort_strict_rejects_non_alternating_row():
    with pytest.raises(ValueError):
        main(["sort", "--row", "L D L D", "--strict"])


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_compare_writes_output_and_manifest(tmp_path, capsys):
    output = tmp_path / "comparison.csv"
    manifest = tmp_path / "manifest.json"
    code = main(
        [
            "compare",
            "--sizes",
            "1",
            "2",
            "--repeats",
            "1",
            "--output",
            str(output),
            "--manifest",
            str(manifest),
        ]
    )
    assert code == 0
    assert output.exists()
    assert Manifest.load(manifest).command == "compare"
    assert '"all_sorted": true' in capsys.readouterr().out


def test_run_from_yaml_config(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text(
        yaml.safe_dump(
            {
                "sort": {"algorithm": "left-to-right", "light_count": 2},
                "compare": {"sizes": [1, 3], "repeats": 1, "output": str(tmp_path / "out.json")},
            }
        )
    )
    assert main(["run", str(config)]) == 0
    out = capsys.readouterr().out
    assert "after     : L L D D" in out
    payload = json.loads((tmp_path / "out.json").read_text(encoding="utf-8"))
    assert {entry["light_count"] for entry in payload} == {1, 3}


def test_run_from_json_config_with_row(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"sort": {"algorithm": "lawnmower", "row": "D L D L"}}))
    assert main(["run", str(config)]) == 0
    assert "swaps     : 3" in capsys.readouterr().out


def test_run_requires_known_sections(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"other": {}}))
    with pytest.raises(ValueError):
        main(["run", str(config)])


def test_run_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["run", str(tmp_path / "missing.yaml")])


def test_verbose_flag_emits_sorter_debug_log(caplog):
    with caplog.at_level(logging.DEBUG):
        assert main(["-v", "sort", "2"]) == 0
    assert get_logger().level == logging.DEBUG
    assert "left-to-right sorted 4 disks with 3 swaps" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.DEBUG):
        assert main(["sort", "2"]) == 0
    assert get_logger().level == logging.INFO
    assert "sorted 4 disks" not in caplog.text


def test_run_config_with_string_strict_is_rejected(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"sort": {"row": "L D", "strict": "false"}}))
    with pytest.raises(ValueError, match="strict"):
        main(["run", str(config)])


def test_run_config_row_as_light_count(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text(yaml.safe_dump({"sort": {"algorithm": "lawnmower", "row": 2}}))
    assert main(["run", str(config)]) == 0
    out = capsys.readouterr().out
    assert "before    : D L D L" in out
    assert "swaps     : 3" in out


def test_run_rejects_list_config(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text(yaml.safe_dump([{"sort": {}}, {"compare": {}}]))
    with pytest.raises(ValueError, match="section"):
        main(["run", str(config)])

# backend/tests/unit/test_validate_flows.py

import json

from scripts.validate_flows import count_nodes, main, validate_all


def test_registered_flows_pass(mocker):
    mocker.patch("scripts.validate_flows.setup_logging")
    assert main([]) == 0


def test_defective_file_fails(tmp_path, mocker):
    mocker.patch("scripts.validate_flows.setup_logging")
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"prompt": ["Root?"], "options": []}), encoding="utf-8")
    assert main([str(path)]) == 1


def test_missing_file_is_counted(tmp_path):
    assert validate_all([str(tmp_path / "missing.json")]) == 1


def test_max_depth_applies_to_registered_flows():
    assert validate_all([], max_depth=1) == 1


def test_count_nodes(small_flow):
    assert count_nodes(small_flow) == 5

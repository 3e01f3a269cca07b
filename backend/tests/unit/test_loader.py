# backend/tests/unit/test_loader.py

import json
import pytest

from sanctuary.config.settings import settings
from sanctuary.errors import FlowErrorCode, FlowNotFound, StructuralDefect
from sanctuary.flows.definitions import FOUND_ANIMAL
from sanctuary.flows.loader import dump_flow, get_flow, load_flow, load_flow_file


class TestLoadFlow:

    def test_builds_nested_nodes(self, small_flow):
        assert small_flow.prompt == ("Root?",)
        assert [o.name for o in small_flow.options] == ["A", "B"]
        assert small_flow.options[1].flow.options is None

    def test_missing_prompt_is_malformed(self):
        data = {"prompt": ["Root?"], "options": [{"name": "Yes", "flow": {"options": None}}]}
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow(data)
        assert exc_info.value.error_code is FlowErrorCode.MALFORMED_FLOW
        assert exc_info.value.path == ("Yes",)

    def test_unnamed_option_is_reported_by_position(self):
        data = {"prompt": ["Root?"], "options": [{"name": "Yes", "flow": {"prompt": ["ok"]}}, {"flow": {"prompt": ["ok"]}}]}
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow(data)
        assert exc_info.value.error_code is FlowErrorCode.MALFORMED_FLOW
        assert exc_info.value.path == ("#1",)

    def test_prompt_must_be_a_list(self):
        with pytest.raises(StructuralDefect, match="MALFORMED_FLOW"):
            load_flow({"prompt": "What animal?"})

    def test_empty_options_rejected(self):
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow({"prompt": ["Leaf"], "options": []})
        assert exc_info.value.error_code is FlowErrorCode.EMPTY_OPTIONS

    def test_null_options_rejected(self):
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow({"prompt": ["Root?"], "options": None})
        assert exc_info.value.error_code is FlowErrorCode.EMPTY_OPTIONS
        assert exc_info.value.path == ()

    def test_nested_null_options_reports_path(self):
        data = {"prompt": ["Root?"], "options": [
            {"name": "A", "flow": {"prompt": ["a"]}},
            {"name": "B", "flow": {"prompt": ["b"], "options": None}},
        ]}
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow(data)
        assert exc_info.value.error_code is FlowErrorCode.EMPTY_OPTIONS
        assert exc_info.value.path == ("B",)

    def test_misspelled_options_key_rejected(self):
        data = {"prompt": ["Root?"], "option": [{"name": "A", "flow": {"prompt": ["a"]}}]}
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow(data)
        assert exc_info.value.error_code is FlowErrorCode.MALFORMED_FLOW
        assert exc_info.value.path == ()
        assert "option" in exc_info.value.message

    def test_unknown_option_key_reports_path(self):
        data = {"prompt": ["Root?"], "options": [{"name": "A", "flows": {"prompt": ["a"]}}]}
        with pytest.raises(StructuralDefect) as exc_info:
            load_flow(data)
        assert exc_info.value.error_code is FlowErrorCode.MALFORMED_FLOW
        assert exc_info.value.path == ("A",)

    def test_configured_max_depth_applies(self, mocker, small_flow):
        mocker.patch.object(settings, "flow_max_depth", 1)
        with pytest.raises(StructuralDefect, match="MAX_DEPTH_EXCEEDED"):
            load_flow(dump_flow(small_flow))

    def test_explicit_max_depth_overrides_settings(self, mocker, small_flow):
        mocker.patch.object(settings, "flow_max_depth", 1)
        root = load_flow(dump_flow(small_flow), max_depth=5)
        assert root.prompt == ("Root?",)


class TestDumpFlow:

    def test_terminal_nodes_omit_options(self, small_flow):
        data = dump_flow(small_flow)
        assert data["options"][1] == {"name": "B", "flow": {"prompt": ["End B"]}}

    def test_bundled_flow_round_trips(self, found_animal):
        assert dump_flow(found_animal) == FOUND_ANIMAL


class TestLoadFlowFile:

    def test_loads_json(self, tmp_path, small_flow):
        path = tmp_path / "flow.json"
        path.write_text(json.dumps(dump_flow(small_flow)), encoding="utf-8")
        assert load_flow_file(path) == small_flow

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "flow.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StructuralDefect, match="not valid JSON"):
            load_flow_file(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "flow.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(StructuralDefect, match="JSON object"):
            load_flow_file(path)


class TestGetFlow:

    def test_is_cached(self):
        assert get_flow("found_animal") is get_flow("found_animal")

    def test_unknown_key(self):
        with pytest.raises(FlowNotFound, match="found_animal"):
            get_flow("found_reptile")

    def test_flow_not_found_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            get_flow("nope")

    def test_malformed_registered_flow(self, mocker):
        mocker.patch.dict("sanctuary.flows.loader.FLOWS", {"broken": {"prompt": []}})
        with pytest.raises(StructuralDefect, match="EMPTY_PROMPT"):
            get_flow("broken")

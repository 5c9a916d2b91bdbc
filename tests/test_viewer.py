# tests/test_viewer.py
import logging

import pytest

from cgp_core import (
    CgpViewPipeline, ParseFailure, ViewerSettings, process_cgp_text,
)
from tests.conftest import SIMPLE_CGP, CHAIN_CGP


class TestCgpViewPipeline:

    def test_successful_run(self, pipeline):
        result = pipeline.process(SIMPLE_CGP)

        assert result.ok
        assert result.parse_error is None
        assert result.active_nodes == {3}
        data = result.parsed_data
        assert data.config.start_index == 2
        assert data.output_node_indices == (3,)
        assert data.input_names == ("Input 0", "Input 1")
        assert data.output_names == ("Output 0",)
        assert data.node_delays["output-0"] == 1
        assert data.active_nodes == result.active_nodes
        assert result.warnings == []

    def test_contract_mapping(self, pipeline):
        contract = pipeline.process(SIMPLE_CGP).parsed_data.to_contract()
        assert set(contract) == {
            "config", "nodeDefinitions", "outputNodeIndices",
            "inputNames", "outputNames", "nodeDelays", "activeNodes",
        }
        assert contract["config"]["startIndex"] == 2
        assert contract["nodeDefinitions"][3] == {"index": 3, "funcId": 1, "inputs": [0, 1]}
        assert contract["outputNodeIndices"] == [3]
        assert contract["activeNodes"] == {3}
        assert contract["nodeDelays"] == {0: 0, 1: 0, 2: 0, 3: 0, "output-0": 1}

    def test_directive_names_are_merged(self, pipeline):
        result = pipeline.process(f"#%i a,b\n#%o y\n{SIMPLE_CGP}")
        assert result.parsed_data.input_names == ("a", "b")
        assert result.parsed_data.output_names == ("y",)

    def test_name_mismatch_is_only_a_warning(self, pipeline, caplog):
        with caplog.at_level(logging.WARNING):
            result = pipeline.process(f"#%i a,b,c\n{SIMPLE_CGP}")
        assert result.ok
        assert result.parsed_data.input_names == ("a", "b")
        assert result.parsed_data.output_names == ("Output 0",)
        assert {issue.code for issue in result.warnings} == {"MissingOutputNames", "InputNameCountMismatch"}

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", None])
    def test_empty_input(self, pipeline, text):
        result = pipeline.process(text)
        assert result.parsed_data is None
        assert result.parse_error.error == "CGP string is empty."
        assert result.active_nodes == frozenset()

    def test_non_string_input(self, pipeline):
        result = pipeline.process(12)
        assert result.parse_error.code == "InvalidInputType"

    def test_no_data_line(self, pipeline):
        result = pipeline.process("#%i a,b\n# nothing else")
        assert result.parse_error == ParseFailure(
            error="No valid CGP string found.",
            detail=result.parse_error.detail,
            code="NoDataLine",
        )

    def test_parse_error_suppresses_analysis(self, pipeline):
        result = pipeline.process("{2,1,1,2,2}([2]0,1,0)([3]0,1,1)(3)")
        assert not result.ok
        assert result.parsed_data is None
        assert result.active_nodes == frozenset()
        assert result.parse_error.to_dict() == {
            "error": "Invalid configuration: Expected 7 parameters, found 5.",
            "detail": "Required format: {inputs,outputs,rows,cols,arity,lback,funcSetSize}",
        }

    def test_missing_config_message(self, pipeline):
        result = pipeline.process("([2]0,1,0)([3]0,1,1)(3)")
        assert result.parse_error.error == "Missing configuration block."

    def test_unexpected_fault_becomes_generic_failure(self, pipeline, monkeypatch):
        def explode(_text):
            raise RuntimeError("boom")
        monkeypatch.setattr(pipeline._parser, "parse", explode)

        result = pipeline.process(SIMPLE_CGP)
        assert result.parsed_data is None
        assert result.parse_error.to_dict() == {"error": "Parsing error", "detail": "boom"}

    def test_settings_are_applied(self):
        settings = ViewerSettings(
            input_name_template="x{index}", output_name_template="f{index}", function_labels={1: "MINUS"},
        )
        result = process_cgp_text(CHAIN_CGP, settings=settings)
        data = result.parsed_data
        assert data.input_names == ("x0", "x1")
        assert data.output_names == ("f0", "f1")
        assert data.function_info(3).type == "MINUS"
        assert data.function_info(2).type == "ADD"

    def test_path_tracer_from_view_data(self, pipeline):
        data = pipeline.process(SIMPLE_CGP).parsed_data
        assert data.path_tracer().trace("output-0").nodes == {"output-0", "3", "0", "1"}

    def test_each_run_is_independent(self, pipeline):
        first = pipeline.process(SIMPLE_CGP)
        pipeline.process("garbage")
        again = pipeline.process(SIMPLE_CGP)
        assert first.parsed_data == again.parsed_data

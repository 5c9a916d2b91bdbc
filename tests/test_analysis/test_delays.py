# tests/test_analysis/test_delays.py
import logging

import pytest

from cgp_core import CgpParser
from cgp_core.analysis import DelayCalculator, DelayCalculationError, DelayMap, calculate_node_delays
from tests.conftest import SIMPLE_CGP, CHAIN_CGP, GRID_CGP, make_parsed


class TestDelayCalculator:

    def test_nodes_fed_only_by_inputs_have_zero_delay(self, parser):
        delays = DelayCalculator(parser.parse(SIMPLE_CGP)).calculate()
        assert delays.as_dict() == {0: 0, 1: 0, 2: 0, 3: 0, "output-0": 1}

    def test_chain_delays(self, parser):
        delays = DelayCalculator(parser.parse(CHAIN_CGP)).calculate()
        assert dict(delays.node_delays) == {0: 0, 1: 0, 2: 0, 3: 1, 4: 2, 5: 3}
        assert dict(delays.output_delays) == {0: 4, 1: 2}

    def test_primary_input_output_has_delay_one(self, parser):
        delays = calculate_node_delays(parser.parse(GRID_CGP))
        assert delays["output-0"] == 2
        assert delays["output-1"] == 1
        assert delays[6] == 0

    def test_delay_non_decreasing_along_dependencies(self, parser):
        for cgp in (SIMPLE_CGP, CHAIN_CGP, GRID_CGP):
            parsed = parser.parse(cgp)
            delays = DelayCalculator(parsed).calculate()
            for i in range(parsed.config.inputs):
                assert delays[i] == 0
            for index, node in parsed.node_definitions.items():
                for reference in node.inputs:
                    if reference >= parsed.config.inputs:
                        assert delays[index] >= delays[reference] + 1
            for position, source in enumerate(parsed.output_node_indices):
                assert delays[f"output-{position}"] == delays[source] + 1

    def test_result_independent_of_definition_order(self, parser):
        forward = parser.parse(CHAIN_CGP)
        reverse = parser.parse("{2,2,1,4,2,2,4}([5]4,0,3)([4]3,2,2)([3]2,1,1)([2]0,1,0)(5,3)")
        assert DelayCalculator(forward).calculate() == DelayCalculator(reverse).calculate()

    def test_long_chain_does_not_recurse(self):
        length = 5000
        nodes = "".join(f"([{i}]{i - 1},0,0)" for i in range(3, length + 2))
        cgp = f"{{2,1,1,{length},2,1,1}}([2]0,1,0){nodes}({length + 1})"
        delays = DelayCalculator(CgpParser().parse(cgp)).calculate()
        assert delays[length + 1] == length - 1
        assert delays["output-0"] == length

    def test_dangling_reference_counts_as_one_stage(self):
        parsed = make_parsed((2, 1, 1, 3, 2, 2, 4), {2: (0, (0, 1)), 4: (0, (3, 2))}, [4])
        delays = DelayCalculator(parsed).calculate()
        assert delays[4] == 1
        assert 3 not in delays.node_delays
        assert delays["output-0"] == 2

    def test_cycle_is_reported(self):
        parsed = make_parsed((2, 1, 1, 3, 2, 2, 4), {2: (0, (3, 0)), 3: (0, (2, 1))}, [3])
        with pytest.raises(DelayCalculationError) as excinfo:
            DelayCalculator(parsed).calculate()
        assert "Delay Calculation Error" in excinfo.value.get_diagnostic_report()
        assert excinfo.value.node_index in (2, 3)
        assert "cycle" in str(excinfo.value)

    def test_dangling_reference_is_logged(self, caplog):
        parsed = make_parsed((2, 1, 1, 3, 2, 2, 4), {4: (0, (3, 0))}, [4])
        with caplog.at_level(logging.WARNING):
            delays = DelayCalculator(parsed).calculate()
        assert delays[4] == 1
        assert "Node 4 connects to undefined node index 3" in caplog.text


class TestDelayMap:

    @pytest.fixture
    def delay_map(self):
        return DelayMap(node_delays={0: 0, 1: 0, 2: 1}, output_delays={0: 2, 1: 1})

    def test_lookup_by_index_and_output_key(self, delay_map):
        assert delay_map[2] == 1
        assert delay_map["output-1"] == 1
        assert delay_map.node_delay(0) == 0
        assert delay_map.output_delay(0) == 2

    @pytest.mark.parametrize("key", ["output-x", "node-2", 7, "output-5", True])
    def test_unknown_keys(self, delay_map, key):
        with pytest.raises(KeyError):
            delay_map[key]
        assert key not in delay_map

    def test_unified_view(self, delay_map):
        assert len(delay_map) == 5
        assert list(delay_map) == [0, 1, 2, "output-0", "output-1"]
        assert delay_map.as_dict() == {0: 0, 1: 0, 2: 1, "output-0": 2, "output-1": 1}

    def test_is_read_only(self, delay_map):
        with pytest.raises(TypeError):
            delay_map.node_delays[3] = 4
        with pytest.raises(TypeError):
            delay_map["output-2"] = 1

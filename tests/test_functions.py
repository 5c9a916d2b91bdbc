# tests/test_functions.py
from cgp_core import DEFAULT_FUNCTION_TYPES, FunctionCatalog, FunctionInfo, NodeDefinition


def test_default_table_covers_sixteen_functions():
    assert sorted(DEFAULT_FUNCTION_TYPES) == list(range(16))
    assert DEFAULT_FUNCTION_TYPES[10] == FunctionInfo("XOR", "Logical XOR", "logical")


def test_known_and_unknown_ids():
    catalog = FunctionCatalog()
    assert catalog.get(2).type == "MUL"
    assert catalog.get("15").type == "IF"
    assert catalog.get(42) == FunctionInfo("FUNC_42", "Unknown function", "unknown")


def test_custom_label_keeps_description_and_category():
    catalog = FunctionCatalog({3: "SAFE_DIV", 40: "MYSTERY"})
    assert catalog.get(3) == FunctionInfo("SAFE_DIV", "Protected Division (x / y)", "arithmetic")
    assert catalog.get(40) == FunctionInfo("MYSTERY", "Custom function", "unknown")


def test_describe_node():
    node = NodeDefinition(index=5, func_id=8, inputs=(0, 1))
    assert FunctionCatalog().describe(node).type == "AND"

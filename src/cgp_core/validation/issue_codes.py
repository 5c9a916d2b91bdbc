# src/cgp_core/validation/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class CgpIssueCode(Enum):
    """
    Registry of every parse error and warning the core can report.
    Each member's value is a tuple: (code_str, error_template, detail_template).
    For warnings the error template is a short title and the detail template
    is the logged message.
    """

    # --- Input Shape (INPUT_...) ---
    INVALID_INPUT_TYPE = ("InvalidInputType", "Invalid input: Must be a string.", "Received value of type '{type_name}' instead.")
    EMPTY_INPUT = ("EmptyInput", "CGP string is empty.", "Please enter a valid CGP string or upload a file.")
    EMPTY_EXPRESSION = ("EmptyExpression", "Empty CGP string.", "Please enter a valid CGP string with configuration, nodes and output definitions.")
    NO_DATA_LINE = ("NoDataLine", "No valid CGP string found.", "Expected format: {{inputs,outputs,rows,columns,arity,lback,funcSetSize}}([index]in1,...,inK,funcId)...(out1,out2,...)")

    # --- Configuration Block (CONFIG_...) ---
    MISSING_CONFIG = ("MissingConfig", "Missing configuration block.", "Configuration must be defined in the format: {{inputs,outputs,rows,columns,arity,lback,funcSetSize}}")
    NON_NUMERIC_CONFIG = ("NonNumericConfig", "Configuration block contains non-numeric values.", "Expected 7 numbers but found: {content}")
    WRONG_CONFIG_ARITY = ("WrongConfigArity", "Invalid configuration: Expected 7 parameters, found {found}.", "Required format: {{inputs,outputs,rows,cols,arity,lback,funcSetSize}}")
    INVALID_INPUTS = ("InvalidInputs", "Invalid number of inputs.", "Value must be >= 0, but found: {value}")
    INVALID_OUTPUTS = ("InvalidOutputs", "Invalid number of outputs.", "Value must be > 0, but found: {value}")
    INVALID_ROWS = ("InvalidRows", "Invalid number of rows.", "Value must be > 0, but found: {value}")
    INVALID_COLS = ("InvalidCols", "Invalid number of columns.", "Value must be > 0, but found: {value}")
    INVALID_ARITY = ("InvalidArity", "Invalid arity value.", "Arity must be >= 2, but found: {value}")
    INVALID_LBACK = ("InvalidLback", "Invalid L-back parameter.", "L-back must be > 0, but found: {value}")
    INVALID_FUNC_SET_SIZE = ("InvalidFuncSetSize", "Invalid function set size.", "Function set size must be > 0, but found: {value}")

    # --- Node Definitions (NODE_...) ---
    NODE_INDEX_OUT_OF_RANGE = ("NodeIndexOutOfRange", "Node index {index} out of range.", "Valid range is [{start}-{end}]. Check your node indices.")
    DUPLICATE_NODE_DEFINITION = ("DuplicateNodeDefinition", "Duplicate node definition.", "Node index [{index}] is defined multiple times.")
    NON_NUMERIC_NODE_CONTENT = ("NonNumericNodeContent", "Invalid node [{index}] definition.", "Node contains non-numeric values: \"({content})\". All values must be integers.")
    WRONG_NODE_ARITY = ("WrongNodeArity", "Incorrect number of parameters for node [{index}].", "Expected {arity} inputs + 1 function ID ({expected} values), but found {found}.")
    FUNCTION_ID_OUT_OF_RANGE = ("FunctionIdOutOfRange", "Invalid function ID in node [{index}].", "Function ID {func_id} is out of range [0-{max_func_id}].")
    INVALID_CONNECTION = ("InvalidConnection", "Invalid connection in node [{index}].", "Input {position} references invalid node {reference}. Nodes can only connect to input nodes (0-{last_input}) or previous nodes.")
    LBACK_VIOLATION = ("LbackViolation", "L-back constraint violation in node [{index}].", "Input {position} (node {reference}) is {distance} columns back, but L-back is limited to {lback}.")

    # --- Graph Level (GRAPH_...) ---
    NO_NODE_DEFINITIONS = ("NoNodeDefinitions", "No node definitions found.", "CGP string must include node definitions in the format: ([index]in1,...,inK,funcId)")
    MISSING_OUTPUT_DEFINITION = ("MissingOutputDefinition", "Missing output definition.", "CGP string must end with output node references in the format: (node1,node2,...)")
    INVALID_OUTPUT_DEFINITION = ("InvalidOutputDefinition", "Invalid output definition.", "Output section contains non-numeric values: \"{content}\"")
    OUTPUT_COUNT_MISMATCH = ("OutputCountMismatch", "Incorrect number of output nodes.", "Configuration specifies {expected} outputs, but {found} were provided.")
    INVALID_OUTPUT_REFERENCE = ("InvalidOutputReference", "Invalid output node reference: {reference}.", "Output must reference a primary input (0-{last_input}) or a defined node ({start}-{last_node}).")

    # --- Unexpected Faults ---
    UNEXPECTED_ERROR = ("ParsingError", "Parsing error", "{message}")

    # --- Warnings (non-blocking) ---
    INPUT_NAME_COUNT_MISMATCH = ("InputNameCountMismatch", "Input name count mismatch.", "Number of input names ({found}) doesn't match the CGP inputs count ({expected}).")
    OUTPUT_NAME_COUNT_MISMATCH = ("OutputNameCountMismatch", "Output name count mismatch.", "Number of output names ({found}) doesn't match the CGP outputs count ({expected}).")
    MISSING_INPUT_NAMES = ("MissingInputNames", "Input names missing.", "Output names were provided but input names are missing.")
    MISSING_OUTPUT_NAMES = ("MissingOutputNames", "Output names missing.", "Input names were provided but output names are missing.")
    DANGLING_REFERENCE = ("DanglingReference", "Dangling node reference.", "Node {index} connects to undefined node index {reference}.")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def error_template(self) -> str:
        return self.value[1]

    @property
    def detail_template(self) -> str:
        return self.value[2]

    def format_error(self, **kwargs) -> str:
        return self._format(self.error_template, kwargs)

    def format_detail(self, **kwargs) -> str:
        return self._format(self.detail_template, kwargs)

    def _format(self, template: str, kwargs) -> str:
        try:
            return template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{template}' Args: {kwargs}"

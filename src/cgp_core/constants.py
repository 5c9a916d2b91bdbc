# --- src/cgp_core/constants.py ---
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

# --- Configuration Header ---

#: Positional order of the seven integers inside the `{...}` configuration block.
CONFIG_FIELDS: Tuple[str, ...] = (
    "inputs", "outputs", "rows", "cols", "arity", "lback", "func_set_size",
)

# --- Directive Lines ---

COMMENT_PREFIX = "#"
INPUT_NAMES_DIRECTIVE = "#%i"
OUTPUT_NAMES_DIRECTIVE = "#%o"

# --- Keys shared with the presentation layer ---

#: Key format for output terminals in the unified delay view and in path traces.
OUTPUT_KEY_PREFIX = "output-"

DEFAULT_INPUT_NAME_TEMPLATE = "Input {index}"
DEFAULT_OUTPUT_NAME_TEMPLATE = "Output {index}"


def output_key(position: int) -> str:
    """Returns the string key naming the output terminal at `position`."""
    return f"{OUTPUT_KEY_PREFIX}{position}"

"""Receiver type inference for ServiceNow scripts.

Variable types are inferred from declaration patterns in the raw text:

    var gr = new GlideRecord('incident');   -> gr: GlideRecord
    var user = gs.getUser();                -> user: GlideUser
    var session = gs.getSession();          -> session: GlideSession

The scan is regex based and does not parse the script, so it works on
syntactically broken input.
"""

import logging
import re

from snfix.analysis.dictionary import ApiDictionary

logger = logging.getLogger(__name__)

DECLARATION_KEYWORDS = r"(?:var|let|const)"

NEW_INSTANCE_PATTERN = re.compile(DECLARATION_KEYWORDS + r"\s+(\w+)\s*=\s*new\s+(\w+)\s*\(")

# Factory calls on gs that return a fixed type
FACTORY_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(DECLARATION_KEYWORDS + r"\s+(\w+)\s*=\s*gs\.getUser\s*\("), "GlideUser"),
    (re.compile(DECLARATION_KEYWORDS + r"\s+(\w+)\s*=\s*gs\.getSession\s*\("), "GlideSession"),
]


def infer_variable_types(code: str, dictionary: ApiDictionary) -> dict[str, str]:
    """Build a variable name -> type map from declarations in code.

    Only classes present in the dictionary are recorded. When a name is bound
    more than once, the binding that appears last in the text wins.

    Args:
        code: Script source
        dictionary: API dictionary providing the known class names

    Returns:
        Mapping from variable name to inferred context key
    """
    bindings: list[tuple[int, str, str]] = []

    for match in NEW_INSTANCE_PATTERN.finditer(code):
        var_name, class_name = match.group(1), match.group(2)
        if dictionary.is_class(class_name):
            bindings.append((match.start(), var_name, class_name))

    for pattern, type_name in FACTORY_PATTERNS:
        for match in pattern.finditer(code):
            bindings.append((match.start(), match.group(1), type_name))

    type_map: dict[str, str] = {}
    for _, var_name, type_name in sorted(bindings):
        type_map[var_name] = type_name

    logger.debug(f"Inferred {len(type_map)} variable types: {type_map}")
    return type_map


def get_receiver_type(
    receiver: str, type_map: dict[str, str], dictionary: ApiDictionary
) -> str | None:
    """Resolve the context key for the receiver of a method call.

    Resolution order:
    1. The receiver is itself a context key (``gs``, ``g_form``, ``current``,
       or a class used for static calls). A global name is never shadowed
       by an inferred local type.
    2. The receiver was bound to a known type in type_map.
    3. Unknown (None).

    Args:
        receiver: Identifier before the dot (e.g. 'gr', 'gs')
        type_map: Result of infer_variable_types
        dictionary: API dictionary

    Returns:
        Context key, or None if no context is known
    """
    if dictionary.has_context(receiver):
        return receiver

    return type_map.get(receiver)

"""Known fixups for the upstream SillyTavern global declarations.

The upstream file targets a different type checker. These rules
rewrite the constructs Deno rejects. Rules run in order and each
sees the output of the previous one; a rule with no match is a no-op.
"""

from __future__ import annotations

import re

from core.constants import TYPES_FILE_HEADER
from core.types import TransformationRule

SILLYTAVERN_GLOBAL_DECLARATION = """
declare interface SillyTavern {
    getContext(): any;
    llm: any;
};
declare var SillyTavern: SillyTavern;
"""

GLOBAL_TYPE_TRANSFORMATIONS: tuple[TransformationRule, ...] = (
    TransformationRule(
        pattern=re.compile(re.escape(": function")),
        replacement=": () => void",
    ),
    # Matches the upstream formatting only; a reformatted block is left untouched.
    TransformationRule(
        pattern=re.compile(
            r"declare var SillyTavern: \{\s*getContext\(\): any;\s*llm: any;\s*\};"
        ),
        replacement=SILLYTAVERN_GLOBAL_DECLARATION,
    ),
)


def fix_global_types(
    content: str,
    rules: tuple[TransformationRule, ...] = GLOBAL_TYPE_TRANSFORMATIONS,
) -> str:
    """Apply transformation rules sequentially.

    Args:
        content: Declaration text.
        rules: Ordered rules to apply.

    Returns:
        Transformed declaration text.
    """
    for rule in rules:
        content = rule.apply(content)
    return content


def prepare_global_types(upstream_text: str) -> str:
    """Prepend checker directives and apply the known fixups.

    Args:
        upstream_text: Raw declaration text as served upstream.

    Returns:
        Declaration text ready to be written into the workspace.
    """
    return fix_global_types(f"{TYPES_FILE_HEADER}{upstream_text}")

"""
Pipeline component - Load a content document, then validate it.

Loader errors propagate and abort the run. Validator findings come back
together in the output.
"""

from __future__ import annotations

import logging

from panelkit.components.loader import DocumentReaderPort, LoadContentInput, run_load
from panelkit.components.validator import ValidateContentInput, run_validate
from panelkit.rules.models import Rules

from .models import ContentPipelineOutput

logger = logging.getLogger(__name__)


def run(
    inp: LoadContentInput,
    *,
    reader: DocumentReaderPort | None = None,
    rules: Rules | None = None,
) -> ContentPipelineOutput:
    """
    Load and validate a content document.

    Args:
        inp: Input containing the document path.
        reader: Document reader port. Uses the local file system if None.
        rules: Rules supplying the allowed step colors. Defaults if None.

    Returns:
        ContentPipelineOutput with the document and all violations.
    """
    document = run_load(inp, reader=reader)
    result = run_validate(
        ValidateContentInput(panels=document.panels, steps=document.steps),
        rules=rules,
    )

    if result.is_valid:
        logger.info(
            "%s: %d panels, %d steps, no violations",
            document.source,
            len(document.panels),
            len(document.steps),
        )
    else:
        logger.info("%s: %d violations", document.source, len(result.violations))

    return ContentPipelineOutput(document=document, violations=result.violations)

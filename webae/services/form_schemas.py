"""Form Schemas — embedded JSON Schema-like documents describing administrative form fields.

Invariants:
    - Documents are package resources (webae/resources/form_schemas/<code>.json)
    - Text is returned exactly as stored — never re-serialized, line endings kept
    - Each document is read and parsed once per process, only to reject malformed JSON

Design Decisions:
    - lru_cache over a module-level dict: lazy, same caching idiom as get_settings()
    - importlib.resources: works from wheels and editable installs alike
"""

import json
import logging
from functools import lru_cache
from importlib import resources

from webae.core.domain_types import FormSchemaCode
from webae.core.errors import SchemaDocumentError

logger = logging.getLogger(__name__)

_RESOURCE_PACKAGE = "webae.resources.form_schemas"


@lru_cache
def load_form_schema(code: FormSchemaCode) -> str:
    """Return the raw text of the form schema document for `code`."""
    try:
        text = (
            resources.files(_RESOURCE_PACKAGE)
            .joinpath(f"{code.value}.json")
            .read_bytes()
            .decode("utf-8")
        )
    except FileNotFoundError:
        raise SchemaDocumentError(code.value, "document not found")
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(
            f"Form schema {code.value} is not valid JSON: {e}",
            extra={"schema_code": code.value},
        )
        raise SchemaDocumentError(code.value, "document is not valid JSON")
    logger.info(
        f"Loaded form schema {code.value} ({len(text)} chars)",
        extra={"schema_code": code.value},
    )
    return text

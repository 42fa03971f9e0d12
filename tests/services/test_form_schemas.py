"""Form Schemas — loading, well-formedness check, caching."""

import json

import pytest

from webae.core.domain_types import FormSchemaCode
from webae.core.errors import SchemaDocumentError
from webae.services import form_schemas
from webae.services.form_schemas import load_form_schema


@pytest.mark.parametrize("code", list(FormSchemaCode))
def test_every_code_has_a_well_formed_document(code):
    doc = json.loads(load_form_schema(code))
    assert doc["title"] == code.value.upper()
    assert doc["properties"]


def test_documents_are_cached():
    assert load_form_schema(FormSchemaCode.CAE) is load_form_schema(FormSchemaCode.CAE)


def test_accented_labels_survive_loading():
    text = load_form_schema(FormSchemaCode.ADF)
    assert "Numéro dans la voie" in text


def test_missing_document_raises(monkeypatch, tmp_path):
    class _EmptyFiles:
        def joinpath(self, name):
            return tmp_path / name

    monkeypatch.setattr(form_schemas.resources, "files", lambda package: _EmptyFiles())
    load_form_schema.cache_clear()
    try:
        with pytest.raises(SchemaDocumentError) as exc_info:
            load_form_schema(FormSchemaCode.ACE)
        assert exc_info.value.http_status == 500
    finally:
        load_form_schema.cache_clear()


def test_malformed_document_raises(monkeypatch, tmp_path):
    (tmp_path / "ace.json").write_text('{"title": "ACE",', encoding="utf-8")

    class _TmpFiles:
        def joinpath(self, name):
            return tmp_path / name

    monkeypatch.setattr(form_schemas.resources, "files", lambda package: _TmpFiles())
    load_form_schema.cache_clear()
    try:
        with pytest.raises(SchemaDocumentError, match="not valid JSON"):
            load_form_schema(FormSchemaCode.ACE)
    finally:
        load_form_schema.cache_clear()

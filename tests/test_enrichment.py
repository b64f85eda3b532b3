"""
Tests for author registry enrichment.

Registry lookups are served by StaticAuthorRegistry or mocks; no network
client is involved.
"""

from unittest.mock import Mock

import pytest

from dc import IdentifierRecord, SemanticDocument
from enrichment import (
    AssignorJob,
    AuthorRegistry,
    StaticAuthorRegistry,
    enrich_document,
    format_identifier_record,
    query_name,
    transliterate,
)

ANA = {
    "idCvuConacyt": "123",
    "nombres": "Ana",
    "primerApellido": "Ruiz",
    "segundoApellido": "Peña",
}
LUIS = {"curp": "GOLL700101", "nombres": "Luis", "primerApellido": "González"}


@pytest.fixture
def registry():
    """Registry knowing two authors."""
    return StaticAuthorRegistry({"Ana Ruiz Pena": [ANA], "Luis Gonzalez": [LUIS, ANA]})


@pytest.fixture
def document():
    return SemanticDocument(
        id="w1",
        type="Article",
        fields={
            "title": ["Estudio"],
            "creator": ["Ruiz Peña, Ana", "Nadie, Nemo"],
            "contributor": ["González, Luis"],
        },
    )


class TestQueryName:
    """Tests for registry query building."""

    def test_reorders_names(self):
        assert query_name("Ruiz, Ana") == "Ana Ruiz"

    def test_removes_accents_and_punctuation(self):
        assert query_name("Peña-Núñez, José M.") == "Jose M PenaNunez"

    def test_without_comma(self):
        assert query_name("Anónimo") == "Anonimo"

    def test_transliterate(self):
        assert transliterate("Ñuño Çélis") == "Nuno Celis"

    @pytest.mark.parametrize(
        "name, query",
        [
            ("Kowalski, Łukasz", "Lukasz Kowalski"),
            ("Strauß, Jørgen", "Jorgen Strauss"),
            ("Đurić, Ægir", "AEgir Duric"),
            ("Œuvray, Þóra", "Thora OEuvray"),
        ],
    )
    def test_letters_without_decomposition(self, name, query):
        """Letters like Ł, ø and ß are approximated instead of dropped."""
        assert query_name(name) == query


class TestFormatIdentifierRecord:
    """Tests for rendering registry entries."""

    def test_key_value_lines(self):
        text = format_identifier_record({"idCvuConacyt": 123, "nombres": "Ana"})

        assert text == "idCvuConacyt: 123\nnombres: Ana\n"

    def test_parses_back(self):
        record = IdentifierRecord.parse(format_identifier_record(ANA))

        assert record.display_name() == "Ana Ruiz Peña"
        assert record.identifier_uri() == "info:eu-repo/dai/mx/cvu/123"


class TestEnrichDocument:
    """Tests for enrich_document."""

    def test_first_match_assigned(self, registry, document):
        enriched = enrich_document(document, registry)

        assert enriched.fields["creator_conacyt"] == [format_identifier_record(ANA)]
        assert enriched.fields["contributor_conacyt"] == [format_identifier_record(LUIS)]

    def test_input_document_untouched(self, registry, document):
        enrich_document(document, registry)

        assert "creator_conacyt" not in document.fields

    def test_other_fields_kept(self, registry, document):
        enriched = enrich_document(document, registry)

        assert enriched.fields["title"] == ["Estudio"]
        assert enriched.id == "w1"

    def test_existing_records_replaced(self, registry):
        doc = SemanticDocument(id="w2", fields={"creator_conacyt": ["old"]})

        enriched = enrich_document(doc, registry)

        assert enriched.fields["creator_conacyt"] == []
        assert enriched.fields["contributor_conacyt"] == []

    def test_registry_errors_propagate(self, document):
        failing = Mock()
        failing.find_by_full_name.side_effect = ConnectionError("registry down")

        with pytest.raises(ConnectionError):
            enrich_document(document, failing)

    def test_queries_sent(self, document):
        mock_registry = Mock()
        mock_registry.find_by_full_name.return_value = []

        enrich_document(document, mock_registry)

        queried = [c.args[0] for c in mock_registry.find_by_full_name.call_args_list]
        assert queried == ["Ana Ruiz Pena", "Nemo Nadie", "Luis Gonzalez"]


class TestAssignorJob:
    """Tests for the batch job."""

    def test_static_registry_protocol(self, registry):
        assert isinstance(registry, AuthorRegistry)

    def test_run_counts(self, registry, document):
        job = AssignorJob(registry)
        other = SemanticDocument(id="w3", fields={"creator": ["Ruiz Peña, Ana"]})

        results = list(job.run([document, other]))

        assert [d.id for d in results] == ["w1", "w3"]
        assert job.processed == 2
        assert job.matched == 3

    def test_registry_from_json(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text('{"Ana Ruiz": [{"nombres": "Ana"}]}', encoding="utf-8")

        registry = StaticAuthorRegistry.from_json(path)

        assert registry.find_by_full_name("Ana Ruiz") == [{"nombres": "Ana"}]
        assert registry.find_by_full_name("Otro") == []

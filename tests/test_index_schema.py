"""
Tests for index schema composition.

Tests cover:
- Field group declarations
- Last-write-wins merging across groups
- Base schema handling
- Config overrides of field groups
- Solr field naming
"""

import pytest

from indexing import (
    FIELD_GROUPS,
    SOLR_SUFFIXES,
    STORED_AND_FACETABLE_FIELDS,
    STORED_FIELDS,
    SYMBOL_FIELDS,
    FieldGroup,
    IndexBehavior,
    IndexObject,
    IndexSchema,
    build_schema,
    configured_schema,
    field_groups_from_config,
    index_object_for,
    merge_config,
    solr_names,
    to_solr,
)


class TestFieldGroups:
    """Tests for the declared field groups."""

    def test_groups_in_composition_order(self):
        """Groups are applied facetable, then stored, then symbol."""
        assert [g.name for g in FIELD_GROUPS] == ["stored_and_facetable", "stored", "symbol"]

    def test_groups_are_disjoint(self):
        """No field is declared in more than one default group."""
        facetable = set(STORED_AND_FACETABLE_FIELDS)
        stored = set(STORED_FIELDS)
        symbol = set(SYMBOL_FIELDS)

        assert not facetable & stored
        assert not facetable & symbol
        assert not stored & symbol

    def test_group_treatments(self):
        """Each group carries its own behaviours."""
        behaviors = {g.name: g.behaviors for g in FIELD_GROUPS}

        assert behaviors["stored_and_facetable"] == ("stored_searchable", "facetable")
        assert behaviors["stored"] == ("stored_searchable",)
        assert behaviors["symbol"] == ("symbol",)

    def test_group_behaviors_are_enum_members(self):
        """Default groups declare their behaviours with IndexBehavior."""
        for group in FIELD_GROUPS:
            assert all(isinstance(b, IndexBehavior) for b in group.behaviors)

    def test_groups_are_immutable(self):
        """Field groups cannot be modified after declaration."""
        with pytest.raises(AttributeError):
            FIELD_GROUPS[0].fields = ()

    def test_config_override(self):
        """Lists from the [index] section replace the default lists."""
        groups = field_groups_from_config({"symbol": ["import_url", "handle", "handle"]})
        by_name = {g.name: g for g in groups}

        assert by_name["symbol"].fields == ("import_url", "handle")
        assert by_name["stored"].fields == STORED_FIELDS

    def test_empty_config_keeps_defaults(self):
        """No overrides yields the default groups."""
        assert field_groups_from_config(None) == FIELD_GROUPS


class TestBuildSchema:
    """Tests for build_schema."""

    def test_every_group_field_present(self):
        """All declared fields appear in the schema."""
        schema = build_schema()

        for group in FIELD_GROUPS:
            for name in group.fields:
                assert schema[name].behaviors == group.behaviors

    def test_base_fields_kept(self):
        """Base entries without a group keep their treatment."""
        schema = build_schema({"title": ["stored_searchable"], "date_modified": "stored_sortable"})

        assert schema["title"].behaviors == ("stored_searchable",)
        assert schema["date_modified"].behaviors == ("stored_sortable",)
        assert "creator" in schema

    def test_group_overrides_base(self):
        """A group replaces the base treatment of the same field."""
        schema = build_schema({"description": ["stored_searchable", "facetable", "displayable"]})

        assert schema["description"].behaviors == ("stored_searchable",)

    def test_last_group_wins(self):
        """A field in several groups gets the treatment of the last one."""
        groups = (
            FieldGroup("first", ("shared", "only_first"), ("stored_searchable", "facetable")),
            FieldGroup("second", ("shared",), ("stored_searchable",)),
            FieldGroup("third", ("shared",), ("symbol",)),
        )
        schema = build_schema({"shared": ["displayable"]}, groups)

        assert schema["shared"] == IndexObject("shared", ("symbol",))
        assert schema["only_first"].behaviors == ("stored_searchable", "facetable")

    def test_behaviors_not_combined(self):
        """Merging replaces behaviours instead of joining them."""
        groups = (
            FieldGroup("a", ("f",), ("facetable",)),
            FieldGroup("b", ("f",), ("symbol",)),
        )
        assert build_schema(groups=groups)["f"].behaviors == ("symbol",)

    def test_empty_group_is_noop(self):
        """An empty group leaves the schema unchanged."""
        base = {"title": ["stored_searchable"]}
        schema = build_schema(base, (FieldGroup("empty", (), ("symbol",)),))

        assert schema.to_dict() == {"title": ["stored_searchable"]}

    def test_schema_is_read_only(self):
        """The composed schema cannot be modified."""
        schema = build_schema()

        with pytest.raises(TypeError):
            schema["title"] = IndexObject("title")  # type: ignore[index]

    def test_configured_schema(self):
        """configured_schema applies [index] overrides."""
        schema = configured_schema({"symbol": ["handle"]})

        assert schema["handle"].behaviors == ("symbol",)
        assert "import_url" not in schema


class TestMergeConfig:
    """Tests for merge_config."""

    def test_second_wins(self):
        first = {"a": index_object_for("a", ["facetable"]), "b": index_object_for("b", ["symbol"])}
        second = {"a": index_object_for("a", ["symbol"])}

        merged = merge_config(first, second)

        assert isinstance(merged, IndexSchema)
        assert merged["a"].behaviors == ("symbol",)
        assert merged["b"].behaviors == ("symbol",)

    def test_inputs_untouched(self):
        first = {"a": index_object_for("a", ["facetable"])}
        merge_config(first, {"a": index_object_for("a", ["symbol"])})

        assert first["a"].behaviors == ("facetable",)


class TestSolrNames:
    """Tests for Solr field naming."""

    def test_facetable_field(self):
        obj = index_object_for("creator", ["stored_searchable", "facetable"])
        assert solr_names(obj) == ["creator_tesim", "creator_sim"]

    def test_symbol_field(self):
        assert solr_names(index_object_for("import_url", ["symbol"])) == ["import_url_ssim"]

    def test_unknown_behavior(self):
        with pytest.raises(ValueError, match="no_such_behavior"):
            solr_names(index_object_for("x", ["no_such_behavior"]))

    def test_to_solr(self):
        """Only schema fields with values are written."""
        schema = build_schema()
        doc = to_solr(
            schema,
            {
                "creator": ["Ruiz, Ana"],
                "description": "Un estudio",
                "not_indexed": ["x"],
                "keyword": [],
            },
        )

        assert doc == {
            "creator_tesim": ["Ruiz, Ana"],
            "creator_sim": ["Ruiz, Ana"],
            "description_tesim": ["Un estudio"],
        }

    def test_every_behavior_has_suffix(self):
        """Each indexing behaviour maps to a Solr dynamic-field suffix."""
        assert set(SOLR_SUFFIXES) == set(IndexBehavior)

    def test_enum_and_string_behaviors(self):
        """Behaviours given as enum members or plain strings name the same fields."""
        from_enum = index_object_for("date_created", [IndexBehavior.DATEABLE])
        from_string = index_object_for("date_created", ["dateable"])

        assert from_enum == from_string
        assert solr_names(from_enum) == ["date_created_dtsim"]

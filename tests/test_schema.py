"""Tests for the GraphQL schema provider."""

import pytest

from schema_diagram.core import (
    ClassEntity,
    ClassStereotype,
    DirectiveEntity,
    EdgeHint,
    ScalarEntity,
    SchemaParseError,
)
from schema_diagram.schema import load_schema, parse_schema


def relation_tuples(document):
    return [(r.source, r.target, r.label, r.hint) for r in document.relations]


def test_entities_in_definition_order(sample_document):
    assert [(type(e), e.name) for e in sample_document.entities] == [
        (ScalarEntity, "DateTime"),
        (DirectiveEntity, "auth"),
        (ClassEntity, "Role"),
        (ClassEntity, "Entity"),
        (ClassEntity, "User"),
        (ClassEntity, "Post"),
        (ClassEntity, "PostFilter"),
    ]


def test_class_stereotypes(sample_document):
    stereotypes = {c.name: c.stereotype for c in sample_document.classes()}

    assert stereotypes == {
        "Role": ClassStereotype.ENUM,
        "Entity": ClassStereotype.INTERFACE,
        "User": ClassStereotype.TYPE,
        "Post": ClassStereotype.TYPE,
        "PostFilter": ClassStereotype.INPUT,
    }


def test_field_type_strings(sample_document):
    user = sample_document.get_entity("User")
    fields = {f.name: (f.type, f.required) for f in user.fields}

    assert fields["id"] == ("ID!", True)
    assert fields["posts"] == ("[Post!]!", True)
    assert fields["name"] == ("String", False)


def test_enum_values_become_untyped_fields(sample_document):
    role = sample_document.get_entity("Role")

    assert [(f.name, f.type) for f in role.fields] == [("ADMIN", ""), ("USER", "")]


def test_scalar_description(sample_document):
    assert sample_document.get_entity("scalar_DateTime").description == "Custom date"


def test_directive_arguments_and_locations(sample_document):
    auth = sample_document.get_entity("directive_auth")

    assert auth.locations == ["FIELD_DEFINITION", "OBJECT"]
    assert [(a.name, a.type, a.default_value) for a in auth.arguments] == [
        ("role", "Role", "ADMIN"),
        ("since", "DateTime", ""),
    ]


def test_relations(sample_document):
    assert relation_tuples(sample_document) == [
        ("directive_auth", "Role", "uses", EdgeHint.DIRECTIVE),
        ("directive_auth", "scalar_DateTime", "uses", EdgeHint.DIRECTIVE),
        ("User", "Post", "has", EdgeHint.PLAIN),
        ("User", "PostFilter", "uses", EdgeHint.DEPENDENCY),
        ("User", "scalar_DateTime", "uses", EdgeHint.PLAIN),
        ("User", "Role", "has", EdgeHint.PLAIN),
        ("Post", "User", "has", EdgeHint.PLAIN),
        ("Post", "Tag", "has", EdgeHint.PLAIN),
        ("PostFilter", "UserRef", "uses", EdgeHint.DEPENDENCY),
    ]


def test_builtin_scalars_never_relate():
    document = parse_schema("type A { s: String i: Int f: Float b: Boolean id: ID }")

    assert document.relations == []


def test_string_default_value_is_quoted():
    document = parse_schema('directive @tag(name: String = "x") on FIELD_DEFINITION')

    assert document.directives()[0].arguments[0].default_value == '"x"'


def test_blank_source_gives_empty_document():
    document = parse_schema("   \n")

    assert document.entities == []
    assert document.relations == []


def test_syntax_error():
    with pytest.raises(SchemaParseError):
        parse_schema("type User {")


def test_load_schema(tmp_path, sample_source):
    path = tmp_path / "schema.graphqls"
    path.write_text(sample_source)

    assert len(load_schema(path).entities) == 7

import pytest
from graphql import parse_type

from amplience_schema import GraphConfigError, load_schema
from amplience_schema.core.defs import CONTENT_LINK, LOCALIZED_STRING, LOCALIZED_VALUE, MEDIA_TYPES
from amplience_schema.core.properties import (
    amplience_property_type,
    check_localized,
    localized,
    object_properties,
)
from amplience_schema.core.directives import FieldDirectives

from conftest import HOST


def link_to(*names: str) -> dict:
    return {
        "allOf": [
            {"$ref": CONTENT_LINK},
            {"properties": {"contentType": {"enum": [f"{HOST}/{n}" for n in names]}}},
        ]
    }


@pytest.fixture
def properties(article, schema):
    return object_properties(article, schema, HOST)


class TestObjectProperties:
    """Property map of an object type."""

    def test_excludes_children_and_ignored_fields(self, properties):
        assert "section" not in properties
        assert "internal" not in properties

    def test_declaration_order(self, properties):
        assert list(properties) == [
            "title", "subtitle", "slug", "kind", "tags", "color", "featured", "rating",
            "score", "image", "video", "author", "related", "teaser", "publishedAt",
        ]

    def test_title_and_description(self, properties):
        assert properties["publishedAt"] == {"title": "Published At"}
        assert properties["author"]["title"] == "Author"
        assert properties["author"]["description"] == "Who wrote it"
        assert "description" not in properties["slug"]

    def test_string_constraints(self, properties):
        assert properties["slug"] == {
            "title": "Slug",
            "type": "string",
            "format": "slug",
            "maxLength": 64,
            "examples": ["my-slug"],
        }

    def test_const_string(self, properties):
        assert properties["kind"] == {"title": "Kind", "type": "string", "const": "article"}

    def test_array(self, properties):
        assert properties["tags"] == {
            "title": "Tags",
            "type": "array",
            "minItems": 1,
            "maxItems": 5,
            "items": {"type": "string"},
            "const": ["a", "b"],
        }

    def test_enum(self, properties):
        assert properties["color"] == {"title": "Color", "type": "string", "enum": ["RED", "GREEN", "BLUE"]}

    def test_numbers(self, properties):
        assert properties["rating"] == {"title": "Rating", "type": "integer", "minimum": 0, "maximum": 5}
        assert properties["score"] == {"title": "Score", "type": "number", "minimum": 0.5}

    def test_media(self, properties):
        image_ref, _ = MEDIA_TYPES["AmplienceImage"]
        _, localized_video_ref = MEDIA_TYPES["AmplienceVideo"]
        assert properties["image"] == {"title": "Image", "allOf": [{"$ref": image_ref}]}
        assert properties["video"] == {"title": "Video", "allOf": [{"$ref": localized_video_ref}]}

    def test_inline_object(self, properties):
        assert properties["author"] == {
            "title": "Author",
            "description": "Who wrote it",
            "type": "object",
            "properties": {
                "name": {"title": "Name", "type": "string"},
                "bio": {"title": "Bio", "type": "string"},
            },
            "propertyOrder": ["name", "bio"],
            "required": ["name"],
        }

    def test_link(self, properties):
        assert properties["related"] == {"title": "Related", **link_to("article")}

    def test_union(self, properties):
        assert properties["teaser"] == {"title": "Teaser", **link_to("banner", "article")}

    def test_unknown_custom_scalar(self, properties):
        assert properties["publishedAt"] == {"title": "Published At"}

    def test_stable_between_calls(self, article, schema):
        assert object_properties(article, schema, HOST) == object_properties(article, schema, HOST)


class TestLocalization:
    """Localized field wrapping."""

    def test_only_localized_string_is_canonical(self, properties):
        assert properties["title"] == {"title": "Title", "allOf": [{"$ref": LOCALIZED_STRING}]}

    def test_localized_string_with_constraints(self, properties):
        assert properties["subtitle"] == {
            "title": "Subtitle",
            **localized({"type": "string", "minLength": 3}),
        }
        assert properties["subtitle"]["allOf"] == [{"$ref": LOCALIZED_VALUE}]
        assert properties["subtitle"]["properties"]["values"]["items"]["properties"]["value"] == {
            "type": "string",
            "minLength": 3,
        }

    def test_localized_boolean(self, properties):
        assert properties["featured"] == {"title": "Featured", **localized({"type": "boolean"})}

    def test_media_variants(self):
        schema = load_schema("type T { img: AmplienceImage @localized, vid: AmplienceVideo }")
        properties = object_properties(schema.get_type("T"), schema, HOST)
        assert properties["img"] == {"title": "Img", "allOf": [{"$ref": MEDIA_TYPES["AmplienceImage"][1]}]}
        assert properties["vid"] == {"title": "Vid", "allOf": [{"$ref": MEDIA_TYPES["AmplienceVideo"][0]}]}

    def test_localized_numbers(self):
        schema = load_schema("type T { n: Int @localized, f: Float @localized @number(minimum: 1) }")
        properties = object_properties(schema.get_type("T"), schema, HOST)
        assert properties["n"] == {"title": "N", **localized({"type": "integer"})}
        assert properties["f"] == {"title": "F", **localized({"type": "number", "minimum": 1})}

    def test_localized_string_with_other_directive(self):
        schema = load_schema("type T { a: String @localized @sortable }")
        properties = object_properties(schema.get_type("T"), schema, HOST)
        assert properties["a"] == {"title": "A", **localized({"type": "string"})}

    def test_not_localized_unchanged(self):
        result = {"type": "integer"}
        assert check_localized(FieldDirectives(), parse_type("Int"), result) is result


class TestTypeResolution:
    """Resolution of single type references."""

    def test_unresolved_type_is_empty(self, article, schema):
        field = article.ast_node.fields[0]
        assert amplience_property_type(field, parse_type("Missing"), schema, HOST) == {}

    def test_decodes_directives_when_omitted(self, article, schema):
        field = article.ast_node.fields[0]
        assert amplience_property_type(field, field.type, schema, HOST) == {"allOf": [{"$ref": LOCALIZED_STRING}]}


class TestRecursion:
    """Object types referring to themselves."""

    def test_inline_self_reference_fails(self):
        schema = load_schema("type Node { name: String, parent: Node }")
        with pytest.raises(GraphConfigError, match="Node"):
            object_properties(schema.get_type("Node"), schema, HOST)

    def test_inline_cycle_through_other_type_fails(self):
        schema = load_schema("type A { b: B } type B { a: A }")
        with pytest.raises(GraphConfigError):
            object_properties(schema.get_type("A"), schema, HOST)

    def test_link_breaks_cycle(self):
        schema = load_schema("type Node { name: String, parent: Node @link }")
        properties = object_properties(schema.get_type("Node"), schema, HOST)
        assert properties["parent"] == {"title": "Parent", **link_to("node")}

    def test_same_type_twice_is_not_a_cycle(self):
        schema = load_schema("type Pair { left: Point, right: Point } type Point { x: Int }")
        properties = object_properties(schema.get_type("Pair"), schema, HOST)
        assert properties["left"]["properties"] == properties["right"]["properties"]

import pytest

from wadl2swagger.converter.schema import build_schema, convert_representations, merge_schemas
from wadl2swagger.errors import InvalidWadlError
from wadl2swagger.parser.wadl import parse_wadl_string


def _param(path: str, type_: str | None = None):
    type_attr = f' type="{type_}"' if type_ else ""
    return parse_wadl_string(f'<param name="p" style="plain" path="{path}"{type_attr}/>')


class TestBuildSchema:
    def test_single_property(self):
        assert build_schema(_param("name", "xs:string")) == {
            "type": "object",
            "properties": {"name": {"type": "string"}},
        }

    def test_array_of_objects(self):
        assert build_schema(_param("items[n].name", "string")) == {
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {"name": {"type": "string"}},
                    },
                }
            },
        }

    def test_bare_array_leaf(self):
        assert build_schema(_param("a.tags[n]", "xs:string")) == {
            "type": "object",
            "properties": {
                "a": {
                    "type": "object",
                    "properties": {"tags": {"type": "array", "items": {"type": "string"}}},
                }
            },
        }

    def test_nested_arrays(self):
        schema = build_schema(_param("a.b[n].c.d[n]", "xs:int"))
        b = schema["properties"]["a"]["properties"]["b"]
        assert b["type"] == "array"
        d = b["items"]["properties"]["c"]["properties"]["d"]
        assert d == {"type": "array", "items": {"type": "integer", "format": "int32"}}

    def test_untyped_leaf(self):
        assert build_schema(_param("note")) == {"type": "object", "properties": {"note": {}}}

    def test_falls_back_to_name(self):
        node = parse_wadl_string('<param name="title" style="plain" type="xs:string"/>')
        assert build_schema(node)["properties"] == {"title": {"type": "string"}}

    @pytest.mark.parametrize("path", ["a..b", "a[n", "a[0].b", "a[n][n]", ".a", "a."])
    def test_malformed_path_raises(self, path):
        with pytest.raises(InvalidWadlError):
            build_schema(_param(path, "xs:string"))


class TestMergeSchemas:
    def test_siblings_kept(self):
        merged = merge_schemas(build_schema(_param("a.x", "string")), build_schema(_param("a.y", "integer")))
        assert merged == {
            "type": "object",
            "properties": {
                "a": {
                    "type": "object",
                    "properties": {"x": {"type": "string"}, "y": {"type": "integer"}},
                }
            },
        }

    def test_siblings_inside_array_items(self):
        merged = merge_schemas(
            build_schema(_param("items[n].sku", "string")),
            build_schema(_param("items[n].qty", "int")),
        )
        props = merged["properties"]["items"]["items"]["properties"]
        assert set(props) == {"sku", "qty"}

    def test_associative(self):
        a = build_schema(_param("a.x", "string"))
        b = build_schema(_param("a.y", "long"))
        c = build_schema(_param("b", "boolean"))
        assert merge_schemas(merge_schemas(a, b), c) == merge_schemas(a, merge_schemas(b, c))

    def test_inputs_not_mutated(self):
        a = build_schema(_param("a.x", "string"))
        b = build_schema(_param("a.y", "string"))
        merge_schemas(a, b)
        assert a["properties"]["a"]["properties"] == {"x": {"type": "string"}}


class TestConvertRepresentations:
    def test_json_representation(self):
        node = parse_wadl_string(
            "<request>"
            '<representation mediaType="application/json">'
            '<param name="a" style="plain" path="a" type="xs:string"/>'
            '<param name="b" style="query" path="b" type="xs:string"/>'
            "</representation>"
            "</request>"
        )
        result = convert_representations(node.all("representation"))
        assert result == {
            "application/json": {"type": "object", "properties": {"a": {"type": "string"}}}
        }

    def test_non_json_ignored(self):
        node = parse_wadl_string(
            "<request>"
            '<representation mediaType="application/xml">'
            '<param name="a" style="plain" path="a"/>'
            "</representation>"
            "</request>"
        )
        assert convert_representations(node.all("representation")) == {}

    def test_json_without_params(self):
        node = parse_wadl_string('<request><representation mediaType="application/json"/></request>')
        assert convert_representations(node.all("representation")) == {}

from postmanify.generator.defaults import DATE_TIME_PLACEHOLDER, synthesize
from postmanify.generator.example import build_array, build_object_body, build_value
from postmanify.parser.base import SchemaNode


class TestSynthesize:
    def test_no_type(self):
        assert synthesize(None) == ""
        assert synthesize([]) == ""

    def test_integer(self):
        assert synthesize("integer") == 0
        assert synthesize(["integer", "null"]) == 0

    def test_string(self):
        assert synthesize("string") == "string"

    def test_date_time(self):
        assert synthesize(["string"], "date-time") == DATE_TIME_PLACEHOLDER
        assert DATE_TIME_PLACEHOLDER == "2009-11-17T20:34:58Z"

    def test_other_types(self):
        assert synthesize("boolean") == ""
        assert synthesize("number", "double") == ""


class TestBuildObjectBody:
    def test_examples_used_verbatim(self):
        body = build_object_body({
            "username": SchemaNode(example="john"),
            "id": SchemaNode(example=1234),
        })
        assert body == {"id": 1234, "username": "john"}
        assert list(body) == ["id", "username"]

    def test_defaults_by_type(self):
        body = build_object_body({
            "createdAt": SchemaNode(type="string", format="date-time"),
            "id": SchemaNode(example=1234),
            "username": SchemaNode(type="string"),
            "flag": SchemaNode(type="boolean"),
            "count": SchemaNode(type="integer"),
        })
        assert body == {
            "count": 0,
            "createdAt": "2009-11-17T20:34:58Z",
            "flag": "",
            "id": 1234,
            "username": "string",
        }

    def test_nested_object(self):
        body = build_object_body({
            "test": SchemaNode(type="object", properties={"test": SchemaNode(type="integer", example=1234)}),
        })
        assert body == {"test": {"test": 1234}}

    def test_object_without_properties(self):
        assert build_object_body({"meta": SchemaNode(type="object")}) == {"meta": {}}

    def test_string_enum_takes_first(self):
        body = build_object_body({"status": SchemaNode(type="string", enum=["ok", "nok"])})
        assert body == {"status": "ok"}

    def test_example_wins_over_enum(self):
        body = build_object_body({"status": SchemaNode(type="string", enum=["ok", "nok"], example="nok")})
        assert body == {"status": "nok"}

    def test_integer_enum_not_used(self):
        body = build_object_body({"level": SchemaNode(type="integer", enum=[3, 4])})
        assert body == {"level": 0}

    def test_array_of_strings(self):
        body = build_object_body({"result": SchemaNode(type="array", items=SchemaNode(type="string"))})
        assert body == {"result": ["string"]}

    def test_array_of_objects(self):
        items = SchemaNode(type="object", properties={"test": SchemaNode(type="integer", example=1234)})
        body = build_object_body({"result": SchemaNode(type="array", items=items)})
        assert body == {"result": [{"test": 1234}]}

    def test_array_without_items(self):
        assert build_object_body({"result": SchemaNode(type="array")}) == {"result": [""]}

    def test_empty_properties(self):
        assert build_object_body({}) == {}
        assert build_object_body(None) == {}


class TestBuildValue:
    def test_none_node(self):
        assert build_value(None) == ""

    def test_scalar_node(self):
        assert build_value(SchemaNode(type="integer")) == 0

    def test_self_reference_is_finite(self):
        node = SchemaNode(type="object", properties={"id": SchemaNode(type="integer")})
        node.properties["parent"] = node
        assert build_value(node) == {"id": 0, "parent": {}}

    def test_self_reference_through_array(self):
        node = SchemaNode(type="object", properties={"name": SchemaNode(type="string")})
        node.properties["children"] = SchemaNode(type="array", items=node)
        assert build_value(node) == {"children": [{}], "name": "string"}

    def test_shared_node_on_separate_branches(self):
        shared = SchemaNode(type="object", properties={"id": SchemaNode(type="integer")})
        node = SchemaNode(type="object", properties={"a": shared, "b": shared})
        assert build_value(node) == {"a": {"id": 0}, "b": {"id": 0}}


class TestBuildArray:
    def test_scalar_items_ignore_item_example(self):
        assert build_array(SchemaNode(type="string", example="x")) == ["string"]

    def test_date_time_items(self):
        assert build_array(SchemaNode(type="string", format="date-time")) == [DATE_TIME_PLACEHOLDER]

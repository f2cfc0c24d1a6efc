"""
命名空间函数定义单元测试
"""

import pytest
from xwidget_plus.core.definer import (
    JsNamespace, build_function_source, callable_name, define_function
)
from xwidget_plus.domain.entities import FunctionDefinition


@pytest.fixture
def add_definition():
    return FunctionDefinition("demo", "add", ("x", "y"), "return x+y;", "x + y")


class TestBuildFunctionSource:
    """JS 源码生成"""

    def test_demo_add(self, add_definition):
        assert build_function_source(add_definition) == \
            "function __xwidget_plus_demo_add(x, y) {return x+y;};"

    def test_identifiers_are_mangled(self):
        definition = FunctionDefinition("my-ns", "set-title", ["new-title"], "document.title = new_title;")

        assert build_function_source(definition) == \
            "function __xwidget_plus_my_ns_set_title(new_title) {document.title = new_title;};"

    def test_no_parameters(self):
        definition = FunctionDefinition("demo", "ping", (), "return 1;")
        assert build_function_source(definition) == "function __xwidget_plus_demo_ping() {return 1;};"


class TestDefineFunction:
    """define_function 测试"""

    def test_registers_source(self, registry, add_definition):
        defined = define_function(registry, add_definition)

        assert registry.get_function_source("demo", "add") == defined.source
        assert defined.source == "function __xwidget_plus_demo_add(x, y) {return x+y;};"

    def test_callable_submits_call_expression(self, registry, widget, add_definition):
        defined = define_function(registry, add_definition)

        defined(widget, 2, 3)

        assert widget.submissions == [("__xwidget_plus_demo_add(2, 3)", None)]

    def test_callable_forwards_callback(self, registry, widget, add_definition):
        results = []
        widget.results["__xwidget_plus_demo_add(2, 3)"] = 5
        defined = define_function(registry, add_definition)

        defined.function(widget, 2, 3, callback=results.append)

        assert results == [5]

    def test_callable_metadata(self, registry, add_definition):
        func = define_function(registry, add_definition).function

        assert func.__name__ == "xwwp_demo_add"
        assert func.__qualname__ == "demo.add"
        assert func.__doc__ == "x + y"
        assert func.definition is add_definition

    def test_wrong_arity_raises_before_submission(self, registry, widget, add_definition):
        defined = define_function(registry, add_definition)

        with pytest.raises(TypeError):
            defined(widget, 2)

        assert widget.submissions == []

    def test_redefinition_overwrites(self, registry):
        define_function(registry, FunctionDefinition("demo", "f", (), "return 1;"))
        define_function(registry, FunctionDefinition("demo", "f", (), "return 2;"))

        assert registry.get_namespace_source("demo") == "function __xwidget_plus_demo_f() {return 2;};"

    def test_callable_name(self):
        assert callable_name("my-ns", "do-it") == "xwwp_my_ns_do_it"


class TestJsNamespace:
    """JsNamespace 测试"""

    def test_define_and_attribute_access(self, registry, widget):
        demo = JsNamespace(registry, "demo")
        demo.define("set-title", ["new-title"], "document.title = new_title;")

        demo.set_title(widget, "hi")

        assert "set-title" in demo
        assert widget.scripts == ['__xwidget_plus_demo_set_title("hi")']

    def test_unknown_attribute(self, registry):
        demo = JsNamespace(registry, "demo")

        with pytest.raises(AttributeError):
            demo.missing

    def test_source_and_inject(self, registry, widget, model_dom):
        demo = JsNamespace(registry, "demo")
        demo.define("add", ["x", "y"], "return x+y;")
        demo.define("sub", ["x", "y"], "return x-y;")

        demo.inject(widget)
        model_dom.run(widget.scripts[0])

        element = model_dom.get_element_by_id("--xwwp-demo")
        assert element["innerHTML"] == demo.source()
        assert demo.source().split("\n") == [
            "function __xwidget_plus_demo_add(x, y) {return x+y;};",
            "function __xwidget_plus_demo_sub(x, y) {return x-y;};",
        ]
        assert demo.function_names() == ["add", "sub"]

    @pytest.mark.parametrize("name", [
        "name", "source", "inject", "define", "registry", "function-names",
    ])
    def test_name_colliding_with_attribute_is_rejected(self, registry, name):
        """与命名空间属性同名的函数无法按属性访问，拒绝定义"""
        demo = JsNamespace(registry, "demo")

        with pytest.raises(ValueError):
            demo.define(name, [], "return 1;")

        assert name not in demo
        assert registry.functions("demo") == []
        assert demo.name == "demo"

    def test_item_access_by_name(self, registry, widget):
        demo = JsNamespace(registry, "demo")
        defined = demo.define("set-title", ["t"], "document.title = t;")

        assert demo["set-title"] is defined
        assert demo["set_title"] is defined
        with pytest.raises(KeyError):
            demo["missing"]

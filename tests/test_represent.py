#
# seqrepr - Represent Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import re
from collections import OrderedDict, namedtuple
from dataclasses import dataclass, field
from enum import Enum

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from seqrepr.config import COMPACT, NEAT, VERBOSE
from seqrepr.represent import Kind, Representer, entries, is_composite, kind_of, represent
from seqrepr.sequences import take


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class Color(Enum):
    RED = 1


@dataclass
class Node:
    name: str
    children: list = field(default_factory=list)


class Loud:
    """Object whose own repr must never be used for address strings."""

    def __init__(self):
        self.x = 1

    def __repr__(self):
        raise RuntimeError("repr must not be called")

    __str__ = __repr__


Point = namedtuple("Point", "x y")

ADDRESS = r"<[\w.]+ object at 0x[0-9a-f]+>"


# Tests ----------------------------------------------------------------------------------------------------------------

class TestKinds:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, Kind.PRIMITIVE, id="int"),
            pytest.param(None, Kind.PRIMITIVE, id="none"),
            pytest.param(b"ab", Kind.PRIMITIVE, id="bytes"),
            pytest.param(bytearray(b"ab"), Kind.PRIMITIVE, id="bytearray"),
            pytest.param(Color.RED, Kind.PRIMITIVE, id="enum"),
            pytest.param(ValueError("x"), Kind.PRIMITIVE, id="exception"),
            pytest.param(len, Kind.PRIMITIVE, id="builtin-function"),
            pytest.param(lambda: 0, Kind.PRIMITIVE, id="function"),
            pytest.param("ab", Kind.STRING, id="str"),
            pytest.param(int, Kind.TYPE, id="type"),
            pytest.param(Node, Kind.TYPE, id="user-type"),
            pytest.param({}, Kind.COMPOSITE, id="dict"),
            pytest.param([], Kind.COMPOSITE, id="list"),
            pytest.param((1,), Kind.COMPOSITE, id="tuple"),
            pytest.param({1}, Kind.COMPOSITE, id="set"),
            pytest.param(frozenset(), Kind.COMPOSITE, id="frozenset"),
            pytest.param(frozendict(a=1), Kind.COMPOSITE, id="frozendict"),
            pytest.param(Node("n"), Kind.COMPOSITE, id="dataclass"),
        ],
    )
    def test_kind_of(self, obj, expected):
        assert kind_of(obj) is expected

    def test_is_composite(self):
        assert is_composite([1])
        assert not is_composite("abc")


class TestEntries:

    def test_mapping(self):
        assert take(entries({"a": 1, "b": 2})) == [("a", 1), ("b", 2)]

    def test_sequence(self):
        assert take(entries(["x", "y"])) == [(0, "x"), (1, "y")]

    def test_set(self):
        assert take(entries({7})) == [(7, True)]

    def test_object(self):
        assert take(entries(Node("n"))) == [("name", "n"), ("children", [])]

    @pytest.mark.parametrize("obj", [42, "text", None, int])
    def test_non_composite(self, obj):
        with pytest.raises(TypeError, match=r"(?i).*composite.*"):
            entries(obj)


class TestPrimitives:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "42", id="int"),
            pytest.param(3.5, "3.5", id="float"),
            pytest.param(True, "True", id="bool"),
            pytest.param(None, "None", id="none"),
            pytest.param(b"ab", "b'ab'", id="bytes"),
            pytest.param("hi", '"hi"', id="str"),
            pytest.param("", '""', id="str-empty"),
            pytest.param('say "x"\n', '"say "x"\n"', id="str-not-escaped"),
            pytest.param(int, "<class 'int'>", id="type"),
        ],
    )
    def test_default(self, obj, expected):
        assert represent(obj) == expected

    def test_string_style(self):
        assert represent("hi", {"string": {"style": '"%s"'}}) == '"hi"'
        assert represent("hi", {"string": {"style": "'%s'"}}) == "'hi'"

    def test_type_fully_qualified(self):
        assert represent(Node, {"type": {"fully_qualified": True}}) == f"<class '{__name__}.Node'>"


class TestComposites:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param({}, "{}", id="dict-empty"),
            pytest.param([], "{}", id="list-empty"),
            pytest.param({"a": 1}, '{["a"] = 1}', id="dict"),
            pytest.param([10, 20], "{[0] = 10, [1] = 20}", id="list"),
            pytest.param((None,), "{[0] = None}", id="tuple"),
            pytest.param(OrderedDict(b=2, a=1), '{["b"] = 2, ["a"] = 1}', id="ordered"),
            pytest.param(Point(1, 2), "{[0] = 1, [1] = 2}", id="namedtuple"),
            pytest.param({1: {"k": "v"}}, '{[1] = {["k"] = "v"}}', id="nested"),
            pytest.param(Node("n"), '{["name"] = "n", ["children"] = {}}', id="object"),
            pytest.param({int: "t"}, "{[<class 'int'>] = \"t\"}", id="type-key"),
        ],
    )
    def test_default(self, obj, expected):
        assert represent(obj) == expected

    def test_compact_unordered(self):
        result = represent({1, 2}, COMPACT)
        assert result in ("{[1] = True, [2] = True}", "{[2] = True, [1] = True}")

    def test_neat(self):
        result = represent({"a": 1, "b": [True]}, NEAT)
        assert result == '{\n\t["a"] = 1,\n\t["b"] = {\n\t\t[0] = True\n\t}\n}'

    def test_pair_style(self):
        config = {"composite": {"pair": {"style": "%s: %s"}}, "string": {"style": "%s"}}
        assert represent({"a": [1]}, config) == "{a: {0: 1}}"

    def test_content_style(self):
        assert represent([1], {"table": {"content": {"style": "<%s>"}}}) == "<[0] = 1>"

    def test_deep_nesting(self):
        value = []
        for _ in range(60):
            value = [value]
        assert represent(value) == "{[0] = " * 60 + "{}" + "}" * 60

    def test_preset_name(self):
        assert represent([1, 2], "compact") == represent([1, 2], COMPACT)

    @pytest.mark.parametrize(
        "config",
        [
            pytest.param({"composite": {"content": {"sep": 5}}}, id="sep-not-str"),
            pytest.param({"string": {"style": "no placeholder"}}, id="string-style-no-slot"),
            pytest.param({"composite": {"pair": {"style": "%s"}}}, id="pair-style-one-slot"),
        ],
    )
    def test_malformed_config_falls_back(self, config):
        with pytest.warns(UserWarning):
            assert represent({"a": 1}, config) == '{["a"] = 1}'


class TestCycles:

    def test_self_reference(self):
        a = {}
        a["self"] = a
        assert represent(a) == '{["self"] = {...}}'

    def test_self_reference_list(self):
        a = [1]
        a.append(a)
        assert represent(a) == "{[0] = 1, [1] = {...}}"

    def test_two_cycle(self, two_cycle):
        a, b = two_cycle
        assert represent(a) == '{["b"] = {["a"] = {...}}}'
        assert represent(b) == '{["a"] = {["b"] = {...}}}'

    def test_object_cycle(self):
        root = Node("root")
        root.children.append(root)
        assert represent(root) == '{["name"] = "root", ["children"] = {[0] = {...}}}'

    def test_custom_substitution(self):
        a = []
        a.append(a)
        config = {"composite": {"circular_reference": {"substitution": "<cycle>", "style": "%s"}}}
        assert represent(a, config) == "{[0] = <cycle>}"

    def test_shared_siblings_not_cyclic(self):
        """A value referenced twice without a cycle renders fully both times."""
        shared = [1]
        assert represent([shared, shared]) == "{[0] = {[0] = 1}, [1] = {[0] = 1}}"

    def test_nested_cycle_no_leak(self, two_cycle):
        """Marks of a nested cycle are cleared before the next sibling subtree."""
        a, _ = two_cycle
        expected = '{["b"] = {["a"] = {...}}}'
        assert represent([a, a]) == "{[0] = %s, [1] = %s}" % (expected, expected)

    def test_visited_set_restored(self, two_cycle):
        a, _ = two_cycle
        on_path = {}
        represent({"x": a, "y": [a]}, on_path=on_path)
        assert on_path == {}

    def test_external_visited_set(self):
        """A caller-owned visited set marks values as already on the path."""
        inner = [1]
        on_path = {id(inner): True}
        assert represent({"v": inner}, on_path=on_path) == '{["v"] = {...}}'
        assert on_path == {id(inner): True}

    def test_deep_cycle_terminates(self):
        head = {"next": None}
        node = head
        for i in range(30):
            node["next"] = {"i": i}
            node = node["next"]
        node["next"] = head
        result = represent(head)
        assert result.endswith("{...}" + "}" * 31)

    def test_visited_set_restored_on_error(self):
        class Broken:
            __slots__ = ()

            def __str__(self):
                raise RuntimeError("broken")

        container = [Broken()]
        on_path = {}
        with pytest.raises(RuntimeError, match="broken"):
            represent(container, on_path=on_path)
        assert on_path == {}


class TestMetaInfo:

    def test_address(self):
        result = represent([1], {"composite": {"show_address": True}})
        assert re.fullmatch(r"\{\(\(" + ADDRESS + r"\)\), \[0\] = 1\}", result)

    def test_address_does_not_call_repr(self):
        result = represent(Loud(), {"composite": {"show_address": True}})
        assert re.fullmatch(r"\{\(\(<[\w.]+\.Loud object at 0x[0-9a-f]+>\)\), \[\"x\"\] = 1\}", result)

    def test_metatable(self):
        assert represent({"a": 1}, {"composite": {"show_metatable": True}}) == "{((<class 'dict'>)), [\"a\"] = 1}"

    def test_metatable_not_expanded_on_cycle(self):
        a = []
        a.append(a)
        assert represent(a, {"composite": {"show_metatable": True}}) == "{((<class 'list'>)), [0] = {...}}"

    def test_address_on_cycle(self):
        a = []
        a.append(a)
        result = represent(a, {"composite": {"show_address": True, "show_metatable": True}})
        pattern = (
            r"\{\(\(" + ADDRESS + r", <class 'list'>\)\), "
            r"\[0\] = \{\(\(" + ADDRESS + r"\)\) \.\.\.\}\}"
        )
        assert re.fullmatch(pattern, result)

    def test_verbose(self):
        result = represent({"a": 1}, VERBOSE)
        pattern = (
            r"\{\n"
            r"\t\(\(\n\t\t" + ADDRESS + r"\n\t\t<class 'dict'>\n\t\)\),\n"
            r"\t\[\"a\"\] = 1\n"
            r"\}"
        )
        assert re.fullmatch(pattern, result)


class TestRepresenter:

    def test_reusable(self):
        r = Representer("compact")
        assert r({"a": [1, 2]}) == '{["a"] = {[0] = 1, [1] = 2}}'
        assert r([]) == "{}"

    def test_custom_renderer(self):
        def upper(obj, config, representer, on_path, depth):
            return obj.upper()

        r = Representer(renderers={Kind.STRING: upper})
        assert r(["ab"]) == "{[0] = AB}"

    def test_config_is_frozen(self):
        r = Representer({"string": {"style": "%s"}})
        assert isinstance(r.config, frozendict)
        assert r.config["string"]["style"] == "%s"

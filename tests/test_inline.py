import threading

from openenum.codegen.core.inline import InlineDefinitionRegistry, TypeReference


def test_definition_rendered_once():
    registry = InlineDefinitionRegistry()
    calls = []

    def render():
        calls.append(1)
        return "struct Wrapper;"

    first = registry.get_or_define("types", "Wrapper", render)
    second = registry.get_or_define("types", "Wrapper", render)

    assert first == second == TypeReference(name="Wrapper", module="types")
    assert len(calls) == 1
    assert registry.definitions("types") == ["struct Wrapper;"]


def test_modules_are_separate():
    registry = InlineDefinitionRegistry()
    registry.get_or_define("a", "Wrapper", lambda: "a")
    registry.get_or_define("b", "Wrapper", lambda: "b")
    registry.get_or_define("a", "Other", lambda: "a2")

    assert registry.definitions("a") == ["a", "a2"]
    assert registry.definitions("b") == ["b"]
    assert registry.is_defined("b", "Wrapper")
    assert not registry.is_defined("b", "Other")


def test_reset():
    registry = InlineDefinitionRegistry()
    registry.get_or_define("types", "Wrapper", lambda: "x")
    registry.reset()

    assert registry.definitions("types") == []
    assert not registry.is_defined("types", "Wrapper")


def test_concurrent_requests_render_once():
    registry = InlineDefinitionRegistry()
    calls = []
    barrier = threading.Barrier(8)

    def render():
        calls.append(1)
        return "definition"

    def worker():
        barrier.wait()
        registry.get_or_define("types", "Wrapper", render)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert registry.definitions("types") == ["definition"]


def test_qualified_path():
    ref = TypeReference(name="UnknownVariantValue", module="types")
    assert ref.qualified() == "crate::types::UnknownVariantValue"
    assert ref.qualified(separator=".", prefix="") == "types.UnknownVariantValue"

import prettypy
from prettypy import DocText, text
from prettypy.doc import text as doc_text

_FACTORIES = (
    "choice",
    "concat",
    "flatten",
    "group",
    "hang",
    "indent",
    "join",
    "newline",
    "parameters",
    "render",
    "run_render",
    "text",
)


def test_text_factory_survives_package_import() -> None:
    assert callable(prettypy.text)
    assert prettypy.text is doc_text
    assert text("a") == DocText("a")


def test_every_exported_name_resolves() -> None:
    for name in prettypy.__all__:
        assert hasattr(prettypy, name), name


def test_exported_factories_are_callable() -> None:
    for name in _FACTORIES:
        assert name in prettypy.__all__
        assert callable(getattr(prettypy, name)), name


def test_exported_api_renders_end_to_end() -> None:
    arguments = prettypy.parameters([prettypy.text("alpha"), prettypy.text("beta")])
    doc = prettypy.text("call(") + arguments + prettypy.text(")")

    assert prettypy.render(doc, 80) == "call(alpha, beta)"
    assert doc.pretty(80, prettypy.RenderOptions()) == "call(alpha, beta)"
    assert prettypy.run_render(doc, 80).fits is True
    assert prettypy.concat() is prettypy.EMPTY
    assert prettypy.flatten(prettypy.NEWLINE) == DocText(" ")
    assert prettypy.render(prettypy.group(prettypy.newline()), 0) == "\n"
    assert isinstance(prettypy.Renderer(prettypy.EMPTY, 10), prettypy.Renderer)
    assert issubclass(prettypy.MalformedTextError, ValueError)

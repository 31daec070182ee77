import pytest

from docmodel import DOCTYPES, DocumentDefaults, DocumentModel


@pytest.fixture
def document():
    return DocumentModel()


def test_html5_doctype(document):
    assert document.render("doctype") == "<!DOCTYPE html>\n"


@pytest.mark.parametrize("doctype", ["", None, "html6"])
def test_unknown_doctype_renders_nothing(document, doctype):
    document.doctype = doctype
    assert document.render("doctype") == ""


def test_switch_doctype(document):
    assert document.renderer.switch_doctype("html4-strict") == DOCTYPES["html4-strict"] + "\n"
    assert document.doctype == "html4-strict"


def test_unknown_render_names(document):
    assert document.render("nothing") == ""
    assert document.render("") == ""
    assert document.render(None) == ""


def test_render_names_are_case_insensitive(document):
    document.add_script_block_bottom("go();")
    assert document.render("scriptblocksbottom") == document.render("scriptBlocksBottom")
    assert document.render("HTMLCLOSE") == "</html>"


def test_charset(document):
    assert document.render("charset") == (
        '\t<meta http-equiv="Content-type" content="text/html;charset=UTF-8">\n'
    )

    document.charset = None
    assert "charset=UTF-8" in document.render("charset")


def test_title_join_and_escape(document):
    document.append_title("Home").append_title("My Site")
    assert document.render("title") == "\t<title>Home : My Site</title>\n"

    document.set_title('A & B <"C">')
    assert document.render("title") == "\t<title>A &amp; B &lt;&quot;C&quot;&gt;</title>\n"


def test_metas(document):
    document.append_meta("author", "Jo & Co")
    document.append_meta("charset")
    document.append("metas", "not a record")
    document.append("metas", {"name": "empty", "content": ""})

    assert document.render("metas") == (
        '\t<meta name="author" content="Jo &amp; Co" />\n'
        '\t<meta http-equiv="Content-type" content="text/html;charset=UTF-8" />\n'
    )


def test_meta_names_are_not_escaped(document):
    document.append_meta('a"b', "c")
    assert document.render("metas") == '\t<meta name="a"b" content="c" />\n'


def test_http_equiv_needs_a_charset(document):
    document.append_meta("http-equiv")
    document.append_meta("charset")
    assert document.render("metas").count("Content-type") == 2

    # charset meta still renders (with the UTF-8 fallback); http-equiv does not.
    document.charset = ""
    assert document.render("metas") == (
        '\t<meta http-equiv="Content-type" content="text/html;charset=UTF-8" />\n'
    )


def test_stylesheets(document):
    document.append_stylesheet("style.css")
    document.append_stylesheet("print.css", "print")
    document.append("stylesheets", {"media": "screen"})

    assert document.render("stylesheets") == (
        '\t<link rel="stylesheet" type="text/css" href="style.css" />\n'
        '\t<link rel="stylesheet" type="text/css" href="print.css" media="print" />\n'
    )


def test_script_attributes(document):
    document.add_script(src="a.js", type="text/javascript", defer=True, async_=False)
    rendered = document.render("scripts")

    assert 'src="a.js"' in rendered
    assert 'type="text/javascript"' in rendered
    assert ' defer="defer"' in rendered
    assert "async" not in rendered
    assert rendered == '\t<script src="a.js" type="text/javascript" defer="defer"></script>\n'


def test_async_script_and_bare_entries(document):
    document.add_javascript("b.js", async_=True)
    document.append("scripts", "c.js")

    assert document.render("javascript") == (
        '\t<script src="b.js" type="text/javascript" async="async"></script>\n'
        '\t<script src="c.js"></script>\n'
    )


def test_script_blocks(document):
    document.add_script_block("var a = 1 < 2;")
    document.add_script_block_bottom("run();", "module")

    assert document.render("scriptBlocks") == (
        '\t<script type="text/javascript">\nvar a = 1 < 2;\n\t</script>\n'
    )
    assert document.render("scriptBlocksBottom") == '\t<script type="module">\nrun();\n\t</script>\n'


def test_css_blocks(document):
    document.add_css_block("body { margin: 0; }")
    document.add_css_block("a { color: red; }", "print")

    assert document.render("cssBlocks") == (
        '\t<style type="text/css">\nbody { margin: 0; }\n\t</style>\n'
        '\t<style type="text/css" media="print">\na { color: red; }\n\t</style>\n'
    )


def test_minified_blocks():
    document = DocumentModel(DocumentDefaults(minify=True))
    document.add_css_block("body {\n    margin: 0;\n}\n")
    document.add_script_block("var  a  =  1 ;")

    assert "body{margin:0}" in document.render("cssBlocks")
    assert "var a=1;" in document.render("scriptBlocks")


def test_keywords_and_description(document):
    assert document.render("keywords") == ""
    assert document.render("description") == ""

    document.keywords = "fish & chips"
    document.description = 'A "quoted" page'

    assert document.render("keywords") == '\t<meta name="keywords" content="fish &amp; chips" />\n'
    assert document.render("description") == (
        '\t<meta name="description" content="A &quot;quoted&quot; page" />\n'
    )


def test_html_open(document):
    assert document.render("htmlOpen") == '<html lang="en" dir="ltr">\n'

    document.doctype = "xhtml1-strict"
    document.language = "DE-at"
    document.direction = "rtl"
    assert document.render("htmlOpen") == (
        '<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="de" dir="rtl">\n'
    )


def test_html_open_skips_unknown_language_and_direction(document):
    document.language = "xx-yy"
    document.direction = None
    assert document.render("htmlOpen") == "<html>\n"

    document.direction = '"><'
    assert document.render("htmlOpen") == '<html dir="&quot;&gt;&lt;">\n'


def test_indentation_and_line_endings():
    document = DocumentModel(DocumentDefaults(tab="  ", eol="win"))
    document.set_title("Test")
    assert document.render("title") == "  <title>Test</title>\r\n"


def test_render_is_repeatable(document):
    document.append_title("Test").append_stylesheet("style.css")
    first = document.render("head")
    assert document.render("head") == first
    assert document.to_sequence("title") == ["Test"]


def test_end_to_end_head(document):
    document.doctype = "html5"
    document.charset = "UTF-8"
    document.set_title("Test")
    document.append_stylesheet("style.css")
    document.append_javascript("app.js")

    rendered = "".join(
        document.render(section)
        for section in ("doctype", "charset", "title", "stylesheets", "scripts")
    )

    assert rendered == (
        "<!DOCTYPE html>\n"
        '\t<meta http-equiv="Content-type" content="text/html;charset=UTF-8">\n'
        "\t<title>Test</title>\n"
        '\t<link rel="stylesheet" type="text/css" href="style.css" />\n'
        '\t<script src="app.js" type="text/javascript"></script>\n'
    )


def test_render_head(document):
    document.set_title("Test")
    document.description = "About"

    assert document.render("head") == (
        "<head>\n"
        '\t<meta http-equiv="Content-type" content="text/html;charset=UTF-8">\n'
        "\t<title>Test</title>\n"
        '\t<meta name="description" content="About" />\n'
        "</head>\n"
    )


def test_missing_line_ending_renders_nothing(document):
    document.set_eol()
    document.set_title("T")

    assert document.eol == ""
    assert document.render("title") == "\t<title>T</title>"
    assert document.render("doctype") == "<!DOCTYPE html>"


def test_none_line_ending_and_indentation(document):
    document.eol = None
    document.set_property("tab", None)
    document.set_title("T")
    document.add_script_block("go();")

    assert document.render("title") == "<title>T</title>"
    assert document.render("scriptBlocks") == '<script type="text/javascript">go();</script>'
    assert document.render("htmlOpen") == '<html lang="en" dir="ltr">'


def test_none_separator_joins_without_gaps(document):
    document.set_property("separator", None)
    document.append_title("Home").append_title("Site")

    assert document.render("title") == "\t<title>HomeSite</title>\n"


def test_script_mappings_without_src_are_skipped(document):
    document.append("scripts", {"type": "text/javascript", "defer": True})
    document.append_javascript("app.js")

    assert document.render("scripts") == (
        '\t<script src="app.js" type="text/javascript"></script>\n'
    )

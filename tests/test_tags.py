from stencil import render
from stencil.attributes import (
    action,
    attrs,
    classes,
    for_,
    href,
    id_,
    name,
    placeholder,
    required,
    selected,
    src,
    type_,
    value,
)
from stencil.tags import (
    a,
    body,
    br,
    del_,
    div,
    dd,
    dl,
    dt,
    form,
    h1,
    head,
    html5,
    input_,
    label,
    li,
    link,
    meta,
    ol,
    option,
    p,
    script,
    select,
    style,
    table,
    tbody,
    td,
    textarea,
    th,
    thead,
    title,
    tr,
    ul,
)


def test_html5_document():
    page = html5(head(title("T")), body(p("x")))
    assert (
        render(page)
        == "<!DOCTYPE html><html><head><title>T</title></head><body><p>x</p></body></html>"
    )


def test_title_is_escaped():
    assert render(title("a < b")) == "<title>a &#60; b</title>"


def test_selector_shorthand():
    e = h1("This is a title h1", selector="#main-tite.big-title")
    assert render(e) == '<h1 id="main-tite" class="big-title">This is a title h1</h1>'


def test_table():
    e = table(
        thead(tr(th("First name"), th("Last name"))),
        tbody(tr(td("John"), td("Doe")), tr(td("Jane"), td("Doe"))),
    )
    assert render(e) == (
        "<table><thead><tr><th>First name</th><th>Last name</th></tr></thead>"
        "<tbody><tr><td>John</td><td>Doe</td></tr>"
        "<tr><td>Jane</td><td>Doe</td></tr></tbody></table>"
    )


def test_lists():
    e = div(
        p("this is a paragraph"),
        ul(li("list item"), li("list item")),
        ol(li("a")),
        dl(dt("DSL"), dd("Domain Specific Language")),
    )
    assert render(e) == (
        "<div><p>this is a paragraph</p>"
        "<ul><li>list item</li><li>list item</li></ul>"
        "<ol><li>a</li></ol>"
        "<dl><dt>DSL</dt><dd>Domain Specific Language</dd></dl></div>"
    )


def test_list_items_from_a_generator():
    assert render(ul(li(str(i)) for i in range(3))) == "<ul><li>0</li><li>1</li><li>2</li></ul>"


def test_void_tags():
    assert render(br()) == "<br>"
    assert render(meta(attributes=[("charset", "utf8")])) == '<meta charset="utf8">'
    assert (
        render(link(attributes=[("rel", "icon"), ("href", "favicon.ico")]))
        == '<link rel="icon" href="favicon.ico">'
    )


def test_form():
    e = form(
        label("Login :", attributes=[for_("login")]),
        input_(
            attributes=attrs(
                type_("text"),
                name("login"),
                placeholder("someone@example.com"),
                required(),
            )
        ),
        select(
            option("User", attributes=[value("USER"), selected()]),
            option("Admin", attributes=[value("ADMIN")]),
            attributes=[name("role")],
        ),
        textarea("this is a content", attributes=[id_("description")]),
        attributes=[("method", "POST"), action("/authenticate")],
    )
    assert render(e) == (
        '<form method="POST" action="/authenticate">'
        '<label for="login">Login :</label>'
        '<input type="text" name="login" placeholder="someone@example.com" required>'
        '<select name="role"><option value="USER" selected>User</option>'
        '<option value="ADMIN">Admin</option></select>'
        '<textarea id="description">this is a content</textarea>'
        "</form>"
    )


def test_script_and_style_are_not_escaped():
    assert render(script("if (a < b) {}")) == "<script>if (a < b) {}</script>"
    assert render(script(attributes=[src("app.js")])) == '<script src="app.js"></script>'
    assert render(style("p > a { color: red }")) == "<style>p > a { color: red }</style>"


def test_link_text_and_options():
    e = a("Leicester City", attributes=[href("/lcfc"), ("title", "Leicester City F.C.")])
    assert render(e) == '<a href="/lcfc" title="Leicester City F.C.">Leicester City</a>'
    assert render(p("x", classname="lead", id="intro")) == '<p id="intro" class="lead">x</p>'
    assert render(div(attributes=attrs(classes("a", "b")))) == '<div class="a b"></div>'


def test_underscored_names_use_the_real_tag():
    assert render(del_("old")) == "<del>old</del>"
    assert input_().tagName == "input"

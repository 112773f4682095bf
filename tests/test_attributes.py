import pytest

from stencil import FLAG, Attributes
from stencil import attributes as at


def test_attr_defaults_to_a_boolean_attribute():
    assert at.attr("hidden") == ("hidden", FLAG)
    assert at.attr("lang", "en") == ("lang", "en")


def test_attrs_collects_pairs_in_order():
    attributes = at.attrs(at.id_("super"), at.classes("class", "my-class"), at.id_("other"))
    assert isinstance(attributes, Attributes)
    assert list(attributes.items()) == [("id", "other"), ("class", "class my-class")]


def test_classes_skips_empty_names():
    assert at.classes("a", "", "b") == ("class", "a b")
    assert at.classes() == ("class", "")


def test_prefixed_attributes():
    assert at.data("user-id", "7") == ("data-user-id", "7")
    assert at.aria("label", "Close") == ("aria-label", "Close")


@pytest.mark.parametrize(
    "helper, name",
    [
        (at.required, "required"),
        (at.selected, "selected"),
        (at.checked, "checked"),
        (at.disabled, "disabled"),
        (at.readonly, "readonly"),
        (at.hidden, "hidden"),
        (at.async_, "async"),
        (at.defer, "defer"),
    ],
)
def test_boolean_helpers(helper, name):
    assert helper() == (name, FLAG)


def test_renamed_helpers_use_the_real_attribute_name():
    assert at.type_("text") == ("type", "text")
    assert at.for_("login") == ("for", "login")
    assert at.title_("Tip") == ("title", "Tip")
    assert at.http_equiv("refresh") == ("http-equiv", "refresh")


def test_numeric_helpers_convert_to_strings():
    assert at.rows(4) == ("rows", "4")
    assert at.cols("80") == ("cols", "80")
    assert at.colspan(2) == ("colspan", "2")
    assert at.width(100) == ("width", "100")

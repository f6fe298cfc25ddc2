import pytest

from restview.dommodel import DomModel, ModelIndex, Role

SAMPLE = b'<root a="1" b="two"><child>hello\nworld</child><other/></root>'


@pytest.fixture
def model():
    m = DomModel()
    assert m.load_xml(SAMPLE) is True
    return m


def test_empty_model_has_no_rows():
    m = DomModel()
    assert m.row_count() == 0
    assert not m.index(0, 0).is_valid()


def test_column_count_is_three(model):
    assert model.column_count() == 3


def test_top_level_is_document_element(model):
    assert model.row_count() == 1
    root = model.index(0, 0)
    assert root.is_valid()
    assert model.data(root, Role.DISPLAY) == "root"


def test_attributes_column(model):
    cell = model.index(0, 1)
    assert model.data(cell, Role.DISPLAY) == 'a="1" b="two"'


def test_children_and_text_value(model):
    root = model.index(0, 0)
    assert model.row_count(root) == 2
    child = model.index(0, 0, root)
    assert model.data(child) == "child"
    assert model.data(model.index(1, 0, root)) == "other"
    text = model.index(0, 0, child)
    assert model.data(text) == "#text"
    value = model.index(0, 2, child)
    assert model.data(value) == "hello world"


def test_element_value_is_empty(model):
    assert model.data(model.index(0, 2)) == ""


def test_parent_relationships(model):
    root = model.index(0, 0)
    child = model.index(1, 0, root)
    assert model.parent(child) == ModelIndex(0, 0, root.item)
    assert not model.parent(root).is_valid()
    assert not model.parent(ModelIndex()).is_valid()


def test_index_is_stable(model):
    root = model.index(0, 0)
    assert model.index(0, 0, root).item is model.index(0, 1, root).item


def test_out_of_range_index_is_invalid(model):
    assert not model.index(1, 0).is_valid()
    assert not model.index(0, 3).is_valid()
    assert not model.index(-1, 0).is_valid()


def test_row_count_zero_for_nonzero_column_parent(model):
    assert model.row_count(model.index(0, 1)) == 0


def test_invalid_xml_returns_false_and_empties(model):
    assert model.load_xml(b"<root><unclosed></root>") is False
    assert model.row_count() == 0


def test_whitespace_text_is_dropped():
    m = DomModel()
    assert m.load_xml("<r>\n   <a/>\n   <b/>\n</r>")
    r = m.index(0, 0)
    assert m.row_count(r) == 2
    assert [m.data(m.index(i, 0, r)) for i in range(2)] == ["a", "b"]


def test_header_data():
    m = DomModel()
    assert [m.header_data(i) for i in range(3)] == ["Name", "Attributes", "Value"]
    assert m.header_data(3) is None
    assert m.header_data(0, horizontal=False) is None
    assert m.header_data(0, True, Role.FONT) is None


def test_text_colors_and_font(model):
    assert model.data(model.index(0, 1), Role.TEXT_COLOR) == "#FFAA2C"
    assert model.data(model.index(0, 2), Role.TEXT_COLOR) == "#5293D8"
    assert model.data(model.index(0, 0), Role.TEXT_COLOR) is None
    assert model.data(model.index(0, 0), Role.FONT) == {"bold": True}
    assert model.data(model.index(0, 1), Role.FONT) == {"bold": False}


def test_data_on_invalid_index_is_none(model):
    assert model.data(ModelIndex(), Role.DISPLAY) is None


def test_flags(model):
    assert model.flags(ModelIndex()) == frozenset()
    assert model.flags(model.index(0, 0)) == frozenset({"selectable", "enabled"})
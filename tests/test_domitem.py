from xml.dom.minidom import parseString

import pytest

from restview.domitem import DomItem

XML = "<root><a x='1'/><b>text</b></root>"


@pytest.fixture
def root():
    return DomItem(parseString(XML), 0)


def test_root_has_no_parent(root):
    assert root.parent() is None
    assert root.row() == 0


def test_first_child_is_document_element(root):
    element = root.child(0)
    assert element.node().nodeName == "root"
    assert element.parent() is root
    assert element.row() == 0


def test_grandchildren_rows_and_names(root):
    element = root.child(0)
    a = element.child(0)
    b = element.child(1)
    assert a.node().nodeName == "a"
    assert b.node().nodeName == "b"
    assert a.row() == 0
    assert b.row() == 1
    assert b.parent() is element


def test_child_is_cached(root):
    element = root.child(0)
    assert root.child(0) is element
    assert element.child(1) is element.child(1)


def test_text_node_child(root):
    text = root.child(0).child(1).child(0)
    assert text.node().nodeValue == "text"


def test_out_of_range_child_is_none(root):
    element = root.child(0)
    assert element.child(2) is None
    assert element.child(-1) is None
    assert root.child(1) is None


def test_leaf_has_no_children(root):
    a = root.child(0).child(0)
    assert a.child(0) is None
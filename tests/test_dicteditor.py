import pytest

from restview.dicteditor import DictEditorModel


@pytest.fixture
def model():
    m = DictEditorModel()
    m.insert("Accept", "application/json")
    m.insert("Host", "example.com")
    return m


def test_empty_model_has_no_rows():
    assert DictEditorModel().row_count() == 0


def test_column_count_is_two(model):
    assert model.column_count() == 2


def test_insert_appends_in_order(model):
    assert model.row_count() == 2
    assert model.key(0) == "Accept"
    assert model.value(0) == "application/json"
    assert model.key(1) == "Host"
    assert model.value(1) == "example.com"


def test_duplicate_keys_are_kept(model):
    model.insert("Accept", "text/html")
    assert model.row_count() == 3
    assert [model.key(r) for r in range(3)] == ["Accept", "Host", "Accept"]


def test_data_by_column(model):
    assert model.data(1, 0) == "Host"
    assert model.data(1, 1) == "example.com"
    assert model.data(1, 2) is None


def test_data_outside_rows_is_none(model):
    assert model.data(5, 0) is None
    assert model.data(-1, 0) is None


def test_header_data_horizontal(model):
    assert model.header_data(0, True) == "test"
    assert model.header_data(2, True) == "test"


def test_header_data_vertical_and_out_of_range(model):
    assert model.header_data(0, False) is None
    assert model.header_data(3, True) is None
    assert model.header_data(-1, True) is None


def test_set_headers_stores_list(model):
    model.set_headers(["Key", "Value"])
    assert model.headers == ["Key", "Value"]


def test_remove_row(model):
    model.remove(0)
    assert model.row_count() == 1
    assert model.key(0) == "Host"


def test_remove_out_of_range_raises(model):
    with pytest.raises(IndexError):
        model.remove(2)
    with pytest.raises(IndexError):
        model.remove(-1)
    assert model.row_count() == 2


def test_key_and_value_out_of_range_raise(model):
    with pytest.raises(IndexError):
        model.key(2)
    with pytest.raises(IndexError):
        model.value(-1)


def test_clear_removes_everything(model):
    model.clear()
    assert model.row_count() == 0
    assert model.data(0, 0) is None


def test_iteration_yields_pairs(model):
    assert list(model) == [("Accept", "application/json"), ("Host", "example.com")]
    assert len(model) == 2
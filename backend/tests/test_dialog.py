from fleet.web import dialog


def test_from_query():
    assert dialog.from_query(None, None) == dialog.Closed()
    assert dialog.from_query("new", 5) == dialog.CreatingNew()
    assert dialog.from_query("edit", 5) == dialog.Editing(5)
    assert dialog.from_query("edit", None) == dialog.Closed()


def test_resolve_binds_row_or_closes():
    rows = [{"id": 1, "name": "Ana Maria"}]
    state, row = dialog.resolve(dialog.Editing(1), rows)
    assert state == dialog.Editing(1) and row["name"] == "Ana Maria"

    state, row = dialog.resolve(dialog.Editing(2), rows)
    assert state == dialog.Closed() and row is None

    state, row = dialog.resolve(dialog.CreatingNew(), rows)
    assert state.is_open and row is None


def test_editing_action():
    assert dialog.Editing(4).action == "/drivers/4"
    assert dialog.CreatingNew().action == "/drivers"

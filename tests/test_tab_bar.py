from pikaide.tab_bar import TabBar, TabInfo


def _bar(*names):
    bar = TabBar()
    for name in names:
        bar.add_tab(name, False)
    return bar


def test_new_tab_bar():
    bar = TabBar()
    assert len(bar) == 0
    assert not bar


def test_add_tab():
    bar = TabBar()
    bar.add_tab("main.rs", False)
    assert len(bar) == 1
    assert bar.active == 0
    bar.add_tab("app.rs", False)
    assert len(bar) == 2
    assert bar.active == 1


def test_close_tab():
    bar = _bar("a.rs", "b.rs", "c.rs")
    bar.set_active(2)
    closed = bar.close_tab(2)
    assert closed == TabInfo("c.rs", False)
    assert bar.active == 1


def test_close_middle_tab():
    bar = _bar("a.rs", "b.rs", "c.rs")
    bar.set_active(1)
    bar.close_tab(1)
    assert len(bar) == 2
    assert bar.tabs[0].name == "a.rs"
    assert bar.tabs[1].name == "c.rs"


def test_next_previous_tab():
    bar = _bar("a.rs", "b.rs", "c.rs")
    bar.set_active(0)
    bar.next_tab()
    assert bar.active == 1
    bar.next_tab()
    assert bar.active == 2
    bar.next_tab()
    assert bar.active == 0
    bar.previous_tab()
    assert bar.active == 2


def test_find_tab():
    bar = _bar("main.rs", "app.rs")
    assert bar.find_tab("app.rs") == 1
    assert bar.find_tab("nonexistent.rs") is None


def test_update_tab():
    bar = _bar("main.rs")
    bar.update_tab(0, "main.rs", True)
    assert bar.tabs[0].modified is True


def test_close_nonexistent_tab():
    bar = TabBar()
    assert bar.close_tab(0) is None


def test_set_active_out_of_range_ignored():
    bar = _bar("a.rs", "b.rs")
    bar.set_active(0)
    bar.set_active(5)
    assert bar.active == 0


def test_titles_mark_modified():
    bar = _bar("a.rs")
    bar.add_tab("b.rs", True)
    assert bar.titles() == [" a.rs ", " b.rs ● "]
from dataclasses import replace

from pikaide.status_bar import StatusInfo, format_status_line


def _info(**overrides):
    base = StatusInfo(
        file_name="main.rs",
        language="Rust",
        encoding="UTF-8",
        line_ending="LF",
        cursor_line=10,
        cursor_col=5,
        total_lines=100,
        modified=True,
        lsp_status="rust-analyzer",
    )
    return replace(base, **overrides)


def test_status_info_default():
    info = StatusInfo()
    assert info.cursor_line == 0
    assert info.cursor_col == 0
    assert info.modified is False
    assert info.lsp_status is None


def test_status_info_with_values():
    info = _info()
    assert info.file_name == "main.rs"
    assert info.modified is True
    assert info.lsp_status == "rust-analyzer"


def test_status_info_clone():
    info = _info(file_name="test.rs", modified=False, lsp_status=None)
    cloned = replace(info)
    assert cloned.file_name == info.file_name
    assert cloned == info


def test_line_fills_width():
    line = format_status_line(_info(), 80)
    assert len(line) == 80
    assert line.startswith(" main.rs [+]  Rust")
    assert line.endswith("rust-analyzer  UTF-8  Ln 11, Col 6  LF ")


def test_narrow_width_has_no_padding():
    info = _info()
    narrow = format_status_line(info, 0)
    wide = format_status_line(info, 80)
    assert narrow.replace(" ", "") == wide.replace(" ", "")
    assert len(narrow) < 80


def test_unmodified_without_lsp():
    line = format_status_line(_info(modified=False, lsp_status=None), 0)
    assert "[+]" not in line
    assert "No LSP" in line
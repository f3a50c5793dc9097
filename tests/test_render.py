from matching_core.render import assignment_mask, format_table, matrix_frame


def test_format_table_plain():
    assert format_table([[7]], [(0, 0)], color=False) == "        7^   \n\n"


def test_format_table_unmatched_cells():
    out = format_table([[1, 22]], None, color=False)
    assert "^" not in out
    assert out.startswith("        1       22")


def test_format_table_colours_matches():
    out = format_table([[1, 2], [3, 4]], [(0, 1), (1, 0)], color=True)
    assert out.count("\033[31m") == 2
    assert "    2^" in out


def test_assignment_mask():
    mask = assignment_mask((2, 3), [(0, 2), (1, 0)])
    assert mask.tolist() == [[False, False, True], [True, False, False]]
    assert not assignment_mask((1, 1), None).any()


def test_matrix_frame_labels():
    df = matrix_frame([[1, 2, 3], [4, 5, 6]])
    assert list(df.index) == ["r0", "r1"]
    assert list(df.columns) == ["c0", "c1", "c2"]

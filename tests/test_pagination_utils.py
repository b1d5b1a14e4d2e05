from utils.pagination import clamp_page_number, compute_total_pages, page_slice


def test_total_pages_rounds_up():
    assert compute_total_pages(25, 10) == 3
    assert compute_total_pages(30, 10) == 3
    assert compute_total_pages(1, 50) == 1


def test_total_pages_for_empty_list_is_zero():
    assert compute_total_pages(0, 10) == 0


def test_clamp_page_number():
    assert clamp_page_number(999, 3) == 3
    assert clamp_page_number(0, 3) == 1
    assert clamp_page_number(-4, 3) == 1
    assert clamp_page_number(2, 3) == 2


def test_clamp_with_no_pages_only_raises_to_one():
    assert clamp_page_number(5, 0) == 5
    assert clamp_page_number(0, 0) == 1


def test_page_slice_offsets():
    assert page_slice(1, 10) == (0, 10)
    assert page_slice(3, 25) == (50, 75)

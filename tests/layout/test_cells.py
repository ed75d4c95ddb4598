"""Tests for cell sizes."""

import pytest

from tablefit import merge_cells
from tablefit.layout.cells import (
    cell_sizes, inset_sizes, mask_spans, optimal_sizes, text_sizes)
from tablefit.layout.matrix import CellMatrix

from ..testing_utils import assert_no_logs, make_table, text_height, text_width


@assert_no_logs
def test_text_sizes_sum_runs(context):
    table = make_table([[[
        {'text': 'abcd', 'font_size': 12},
        {'text': 'ef', 'font_size': 20},
    ]]], col_keys=['a'])
    widths, heights = text_sizes(context, table, table.body)
    assert widths == [[pytest.approx(text_width('abcd', 12) + text_width('ef', 20))]]
    assert heights == [[pytest.approx(text_height(20))]]


@assert_no_logs
def test_text_sizes_fallback(context):
    table = make_table([[[
        {'text': '', 'width': 0.5, 'height': 0.2},
        {'text': '', 'width': 0.3, 'height': 0.25},
    ]]], col_keys=['a'])
    widths, heights = text_sizes(context, table, table.body)
    assert widths == [[pytest.approx(0.8)]]
    assert heights == [[0.25]]


@assert_no_logs
def test_text_sizes_missing(context):
    table = make_table([['', None, [' ', 'ab']]], col_keys='abc')
    widths, heights = text_sizes(context, table, table.body)
    assert widths == [[None, None, pytest.approx(text_width('ab'))]]
    assert heights == [[None, None, pytest.approx(text_height())]]


@assert_no_logs
@pytest.mark.parametrize('vertical_align, font_size', (
    ('baseline', 11),
    ('superscript', 5.5),
    ('subscript', 5.5),
))
def test_text_sizes_vertical_align(context, vertical_align, font_size):
    table = make_table(
        [[{'text': 'abcd', 'vertical_align': vertical_align}]], col_keys='a')
    widths, heights = text_sizes(context, table, table.body)
    assert widths == [[pytest.approx(text_width('abcd', font_size))]]
    assert heights == [[pytest.approx(text_height(font_size))]]


@assert_no_logs
def test_text_sizes_column_order(context):
    table = make_table([{'b': 'xx', 'a': 'xxxx'}], col_keys=['a', 'b'])
    widths, _ = text_sizes(context, table, table.body)
    assert widths == [[
        pytest.approx(text_width('xxxx')), pytest.approx(text_width('xx'))]]


def test_paragraph_insets():
    table = make_table([['x']], col_keys='a', padding=[0, 10, 0, 10])
    widths, heights = inset_sizes(table, table.body, 'padding')
    assert widths == [[pytest.approx((10 + 10) * (4 / 3) / 72)]]
    assert heights == [[0]]


def test_cell_margins():
    table = make_table(
        [['x', 'y']], col_keys='ab', padding=[1, 2, 3, 4], margin=[5, 6, 7, 8])
    widths, heights = inset_sizes(table, table.body, 'margin')
    assert widths == [[pytest.approx(14 * 4 / 3 / 72)] * 2]
    assert heights == [[pytest.approx(12 * 4 / 3 / 72)] * 2]
    widths, heights = inset_sizes(table, table.body, 'padding')
    assert widths == [[pytest.approx(6 * 4 / 3 / 72)] * 2]
    assert heights == [[pytest.approx(4 * 4 / 3 / 72)] * 2]


def test_mask_spans():
    table = make_table([['a', 'b'], ['c', 'd']], col_keys='xy')
    merge_cells(table.body, [0, 1], ['x'])
    widths = CellMatrix(matrix=[[1, 2], [3, 4]])
    heights = CellMatrix(matrix=[[5, 6], [7, None]])
    mask_spans(table.body, widths, heights)
    assert widths == [[1, 2], [0, 4]]
    assert heights == [[5, 6], [0, None]]


@assert_no_logs
def test_cell_sizes(context):
    table = make_table([['abc', None]], col_keys='xy', padding=3, margin=1)
    widths, heights = cell_sizes(context, table, table.body)
    insets = (3 + 3 + 1 + 1) * 4 / 3 / 72
    assert widths == [[pytest.approx(text_width('abc') + insets), pytest.approx(insets)]]
    assert heights == [[pytest.approx(text_height() + insets), pytest.approx(insets)]]


@assert_no_logs
def test_optimal_sizes(context):
    table = make_table(
        [['a', 'bbbb'], ['cc', {'text': 'd', 'font_size': 22}]], col_keys='xy')
    widths, heights = optimal_sizes(context, table, table.body)
    assert widths == [
        pytest.approx(text_width('cc')), pytest.approx(text_width('bbbb'))]
    assert heights == [
        pytest.approx(text_height()), pytest.approx(text_height(22))]


@assert_no_logs
def test_optimal_sizes_merged_region(context):
    table = make_table([
        ['a', 'b', 'c'],
        ['d', {'text': 'a very long text', 'font_size': 40}, 'f'],
        ['g', 'h', 'i'],
    ], col_keys='xyz', padding=5)
    merge_cells(table.body, [0, 1], ['x', 'y'])
    widths, heights = optimal_sizes(context, table, table.body)
    padding = (5 + 5) * 4 / 3 / 72
    # Covered cells don't contribute, even with their paddings.
    assert widths[1] == pytest.approx(text_width('h') + padding)
    assert heights[1] == pytest.approx(text_height() + padding)
    assert widths[0] == pytest.approx(text_width('a') + padding)
    assert widths[2] == pytest.approx(text_width('c') + padding)


@assert_no_logs
def test_optimal_sizes_merged_anchor_only(context):
    table = make_table([['abcdefgh', 'x'], ['y', 'z']], col_keys='ab')
    merge_cells(table.body, [0], ['a', 'b'])
    widths, heights = optimal_sizes(context, table, table.body)
    # The anchor keeps its whole width in its own column.
    assert widths == [
        pytest.approx(text_width('abcdefgh')), pytest.approx(text_width('z'))]
    assert heights == [pytest.approx(text_height())] * 2

"""Tests for autofit and fit to width."""

import pytest

from tablefit import (
    InvalidArgument, Table, autofit, current_dimensions, fit_to_width, merge_cells,
    pretty_dimensions, set_width, total_dimensions)
from tablefit.layout import shrink_font_sizes
from tablefit.logger import capture_logs
from tablefit.structure.table import Cell, TextRun, TextStyle

from ..testing_utils import (
    assert_no_logs, fake_context, make_table, text_height, text_width)


def _table():
    return make_table(
        [['abc', 'de', 'f'], ['g', 'hijkl', {'text': 'm', 'font_size': 20}]],
        col_keys='xyz', header=[['X', 'Y', 'Z']], padding=5)


@assert_no_logs
def test_autofit(context):
    table = _table()
    pretty = pretty_dimensions(table, context=context)
    assert autofit(table, context=context) is table
    current = current_dimensions(table)
    assert current['widths'] == [
        pytest.approx(width + 0.1) for width in pretty['widths']]
    assert current['heights'] == [
        pytest.approx(height + 0.1) for height in pretty['heights']]


@assert_no_logs
def test_autofit_values(context):
    table = _table()
    autofit(table, add_w=0, add_h='7.2pt', context=context)
    padding = 10 * 4 / 3 / 72
    assert table.body.column_widths == [
        pytest.approx(text_width('abc') + padding),
        pytest.approx(text_width('hijkl') + padding),
        pytest.approx(text_width('m', 20) + padding)]
    assert table.header.column_widths == table.body.column_widths
    assert table.footer.column_widths == table.body.column_widths
    assert table.header.row_heights == [
        pytest.approx(text_height() + padding + 0.1)]
    assert table.body.row_heights == [
        pytest.approx(text_height() + padding + 0.1),
        pytest.approx(text_height(20) + padding + 0.1)]
    assert table.footer.row_heights == []


@assert_no_logs
def test_autofit_overwrites(context):
    table = _table()
    set_width(table, 10)
    table.body.row_heights = [5, 5]
    autofit(table, 0, 0, context)
    assert total_dimensions(table)['width'] < 3
    assert max(current_dimensions(table)['heights']) < 1


@assert_no_logs
def test_autofit_merged_cells(context):
    table = make_table(
        [['abcdefghij', None], ['a', 'b']], col_keys='xy')
    merge_cells(table.body, [0], ['x', 'y'])
    autofit(table, 0, 0, context)
    # The merged text only counts for its first column.
    assert table.body.column_widths == [
        pytest.approx(text_width('abcdefghij')),
        pytest.approx(text_width('b'))]


@assert_no_logs
def test_autofit_default_options():
    context = fake_context(add_w=1, add_h=0)
    table = make_table([['ab']], col_keys='x')
    autofit(table, context=context)
    assert table.body.column_widths == [pytest.approx(text_width('ab') + 1)]
    assert table.body.row_heights == [pytest.approx(text_height())]


def test_autofit_invalid_extra(context):
    with pytest.raises(InvalidArgument):
        autofit(_table(), add_w='wide', context=context)


@assert_no_logs
def test_measure_cache(context):
    table = make_table([['a', 'a'], ['b', 'a']], col_keys='xy')
    autofit(table, context=context)
    autofit(table, context=context)
    pretty_dimensions(table, context=context)
    assert context.measurer.calls == [['a', 'b']]


@assert_no_logs
def test_shrink_font_sizes():
    table = make_table(
        [['a', {'text': 'b', 'font_size': 3}]], col_keys='xy')
    assert shrink_font_sizes(table, 2, 2)
    assert [run.style.font_size for _, _, run in table.iter_runs()] == [9, 2]
    assert shrink_font_sizes(table, 10, 2)
    assert [run.style.font_size for _, _, run in table.iter_runs()] == [2, 2]
    assert not shrink_font_sizes(table, 1, 2)


@assert_no_logs
def test_fit_to_width(context):
    table = make_table([['abcdefghij']], col_keys='x')
    autofit(table, 0, 0, context)
    assert total_dimensions(table)['width'] > 0.5
    assert fit_to_width(table, 0.5, context=context) is table
    run, = table.body.rows[0].cells[0].runs
    assert run.style.font_size == 7
    assert total_dimensions(table)['width'] == pytest.approx(
        text_width('abcdefghij', 7))


@assert_no_logs
def test_fit_to_width_increment(context):
    table = make_table([['abcdefghij']], col_keys='x')
    autofit(table, 0, 0, context)
    fit_to_width(table, '0.5in', inc=2.5, context=context)
    run, = table.body.rows[0].cells[0].runs
    assert run.style.font_size == 6


@assert_no_logs
def test_fit_to_width_already_fits(context):
    table = make_table([['abc']], col_keys='x')
    fit_to_width(table, 1, context=context)
    run, = table.body.rows[0].cells[0].runs
    assert run.style.font_size is None
    assert context.measurer.calls == []


def test_fit_to_width_max_iter(context):
    table = make_table([[{'text': '', 'width': 2}]], col_keys='x')
    with capture_logs() as logs:
        fit_to_width(table, 0.5, max_iter=3, context=context)
    assert len(logs) == 1
    assert 'larger than 0.5in after 3 iterations' in logs[0]
    run, = table.body.rows[0].cells[0].runs
    assert run.style.font_size == 8
    assert total_dimensions(table)['width'] == 2


def test_fit_to_width_no_iteration(context):
    table = make_table([['abc']], col_keys='x')
    with capture_logs() as logs:
        fit_to_width(table, 0.5, max_iter=0, context=context)
    assert len(logs) == 1
    assert 'after 0 iterations' in logs[0]
    assert total_dimensions(table)['width'] == 0.75


def test_fit_to_width_min_font_size():
    context = fake_context(min_font_size=5)
    table = make_table([['abcdefghijklmnopqrstuvwxyz']], col_keys='x')
    with capture_logs() as logs:
        fit_to_width(table, 0.1, max_iter=100, context=context)
    assert len(logs) == 1
    assert 'with minimal font sizes' in logs[0]
    run, = table.body.rows[0].cells[0].runs
    assert run.style.font_size == 5
    assert total_dimensions(table)['width'] == pytest.approx(
        text_width('abcdefghijklmnopqrstuvwxyz', 5))


@pytest.mark.parametrize('options', (
    {'inc': 0},
    {'inc': -1},
    {'max_iter': -1},
    {'max_width': 'wide'},
))
def test_fit_to_width_invalid(context, options):
    options = {'max_width': 0.1, **options}
    with pytest.raises(InvalidArgument):
        fit_to_width(_table(), context=context, **options)


@assert_no_logs
def test_table_built_by_hand(context):
    table = Table(['x', 'y'])
    run = TextRun('abcdefghij')
    table.body.append_row([
        Cell([run]), Cell([TextRun('ab', TextStyle(font_size=20))])])
    assert pretty_dimensions(table, context=context) == {
        'widths': [
            pytest.approx(text_width('abcdefghij')),
            pytest.approx(text_width('ab', 20))],
        'heights': [pytest.approx(text_height(20))]}
    autofit(table, 0, 0, context)
    fit_to_width(table, 0.8, context=context)
    assert run.style.font_size == 8
    assert total_dimensions(table)['width'] <= 0.8

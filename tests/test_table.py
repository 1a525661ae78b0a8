# -*- coding: utf-8 -*-
import pytest

from asciitty.ansi import strip
from asciitty.ansi import true_length
from asciitty.table import TableOptions
from asciitty.table import cell_index
from asciitty.table import format_entries
from asciitty.table import format_entry
from asciitty.table import table_lines

Y = '\x1b[33m'
M = '\x1b[35m'
B = '\x1b[34m'
C = '\x1b[36m'
G = '\x1b[32m'
R = '\x1b[31m'
Z = '\x1b[0m'


def plain(**kwargs):
    options = TableOptions(**kwargs)
    options.disable_color()
    return options


class TestTableOptions:

    def test___init__(self):
        options = TableOptions()
        assert options.dec is True
        assert options.hex is True
        assert options.oct is False
        assert options.bin is False
        assert options.chr is True
        assert options.horizontal is False
        assert options.color is True
        assert options.columns == 5
        assert options.column_width == 40
        assert options.separator == ' | '

    def test_disable_color(self):
        options = TableOptions(column_width=33)
        options.disable_color()
        assert options.color is False
        assert options.column_width == 0

    def test_representations(self):
        assert TableOptions().representations == ['dec', 'hex', 'chr']

        options = TableOptions(dec=False, oct=True, bin=True)
        assert options.representations == ['hex', 'oct', 'bin', 'chr']

        options = TableOptions(dec=False, hex=False, chr=False)
        assert options.representations == []

    def test___eq__(self):
        assert TableOptions() == TableOptions()
        assert TableOptions() != TableOptions(columns=4)
        assert TableOptions() != object()

    def test___repr__(self):
        text = repr(TableOptions())
        assert text.startswith('TableOptions(')
        assert 'columns=5' in text
        assert "separator=' | '" in text


def test_format_entry_plain():
    options = plain()
    assert format_entry(0x41, options) == '065  0x41 A   '
    assert format_entry(0x00, options) == '000  0x00 NUL '
    assert format_entry(0xFF, options) == '255  0xFF ÿ   '


def test_format_entry_plain_all():
    options = plain(oct=True, bin=True)
    ans_out = format_entry(0x41, options)
    ans_ref = '065  0x41 0o1010b01000001A   '
    assert ans_out == ans_ref


def test_format_entry_plain_single():
    assert format_entry(0x41, plain(hex=False, chr=False)) == '065  '
    assert format_entry(0x41, plain(dec=False, chr=False)) == '0x41 '
    assert format_entry(0x41, plain(dec=False, hex=False, oct=True, chr=False)) == '0o101'
    assert format_entry(0x41, plain(dec=False, hex=False, bin=True, chr=False)) == '0b01000001'
    assert format_entry(0x41, plain(dec=False, hex=False)) == 'A   '
    assert format_entry(0x41, plain(dec=False, hex=False, chr=False)) == ''


def test_format_entry_color():
    options = TableOptions()
    ans_out = format_entry(0x41, options)
    ans_ref = f'{Y}065{Z}  {M}0x41{Z}  {G}A{Z}  '
    assert ans_out == ans_ref


def test_format_entry_color_npc():
    options = TableOptions()
    ans_out = format_entry(0x00, options)
    ans_ref = f'{Y}000{Z}  {M}0x00{Z}  {R}NUL{Z}'
    assert ans_out == ans_ref

    assert format_entry(0x20, TableOptions(dec=False, hex=False)) == f'{R}SP{Z} '


def test_format_entry_color_all():
    options = TableOptions(oct=True, bin=True)
    ans_out = format_entry(0x41, options)
    ans_ref = (f'{Y}065{Z}  {M}0x41{Z}  {B}0o101{Z}  '
               f'{C}0b01000001{Z}  {G}A{Z}  ')
    assert ans_out == ans_ref


def test_format_entry_color_width():
    options = TableOptions(oct=True, bin=True)
    for byte in range(256):
        entry = format_entry(byte, options)
        visible = strip(entry)
        assert visible[:5] == '%03d  ' % byte
        assert true_length(entry) >= 5 + 6 + 7 + 12 + 3


def test_format_entries():
    options = plain(hex=False, chr=False)
    assert format_entries(b'\x01\x02\x01', options) == ['001  ', '002  ', '001  ']
    assert format_entries(b'', options) == []


def test_cell_index():
    assert cell_index(0, 1, 3, 2, False) == 3
    assert cell_index(0, 1, 3, 2, True) == 1
    assert cell_index(2, 1, 3, 2, False) == 5
    assert cell_index(2, 1, 3, 2, True) == 5
    assert cell_index(1, 0, 3, 2, False) == 1
    assert cell_index(1, 0, 3, 2, True) == 2


def test_cell_index_covers_entries():
    size = 17
    columns = 4
    row_count = (size + columns - 1) // columns

    for horizontal in (False, True):
        indices = sorted(cell_index(row, column, row_count, columns, horizontal)
                         for row in range(row_count)
                         for column in range(columns))
        assert indices == list(range(row_count * columns))


def test_table_lines_vertical():
    options = plain(hex=False, chr=False, columns=2)
    ans_out = list(table_lines(range(5), options))
    ans_ref = [
        '',
        ' 000   |  003  ',
        ' 001   |  004  ',
        ' 002  ',
        '',
    ]
    assert ans_out == ans_ref


def test_table_lines_horizontal():
    options = plain(hex=False, chr=False, columns=2, horizontal=True)
    ans_out = list(table_lines(range(5), options))
    ans_ref = [
        '',
        ' 000   |  001  ',
        ' 002   |  003  ',
        ' 004  ',
        '',
    ]
    assert ans_out == ans_ref


def test_table_lines_width():
    options = plain(hex=False, chr=False, columns=2)
    options.column_width = 8
    options.separator = '#'
    ans_out = list(table_lines(range(3), options))
    ans_ref = [
        '',
        ' 000     # 002     ',
        ' 001' + ' ' * 13,
        '',
    ]
    assert ans_out == ans_ref


def test_table_lines_color_alignment():
    options = TableOptions(columns=2)
    lines = list(table_lines(b'AB', options))
    assert len(lines) == 3
    assert lines[0] == lines[-1] == ''
    ans_out = strip(lines[1])
    ans_ref = (' 065  0x41  A  ' + ' ' * 26 +
               ' |  066  0x42  B  ' + ' ' * 26)
    assert ans_out == ans_ref


def test_table_lines_row_count():
    options = plain(columns=5)
    lines = list(table_lines(range(128), options))
    assert len(lines) == 26 + 2

    options = plain(columns=1)
    lines = list(table_lines(range(3), options))
    assert len(lines) == 3 + 2


def test_table_lines_empty():
    assert list(table_lines(b'', TableOptions())) == ['', '']


def test_table_lines_invalid_columns():
    with pytest.raises(ValueError, match='invalid columns'):
        list(table_lines(b'A', TableOptions(columns=0)))

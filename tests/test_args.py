# -*- coding: utf-8 -*-
from asciitty.args import associate_arguments
from asciitty.args import is_key

KEYS = [
    '--a',
    '--bytes',
    '--no-color',
    '--help',
    '--',
    '--columns=5',
    '-h',
    '-b',
    '-bc',
    '-5',
    '--x-y',
]

VALUES = [
    '',
    '-',
    'v1',
    'prog',
    '0..10',
    '65..67',
    '-abc',
    '--a--b',
    '----',
    'a--b',
    ' | ',
]


def test_is_key():
    for token in KEYS:
        assert is_key(token), token


def test_is_key_value():
    for token in VALUES:
        assert not is_key(token), token


def test_associate_arguments():
    argv = ['prog', '--a', 'v1', 'v2', '-b', 'v3']
    ans_out = associate_arguments(argv)
    ans_ref = [('--a', ('v1', 'v2')), ('-b', ('v3',))]
    assert ans_out == ans_ref


def test_associate_arguments_leading_values():
    argv = ['prog', 'x', 'y', '--a', 'v1']
    assert associate_arguments(argv) == [('--a', ('v1',))]


def test_associate_arguments_no_keys():
    assert associate_arguments([]) == []
    assert associate_arguments(['prog']) == []
    assert associate_arguments(['prog', 'x', 'y']) == []


def test_associate_arguments_empty_values():
    argv = ['prog', '--a', '--b', 'v1', '--c']
    ans_out = associate_arguments(argv)
    ans_ref = [('--a', ()), ('--b', ('v1',)), ('--c', ())]
    assert ans_out == ans_ref


def test_associate_arguments_repeated_keys():
    argv = ['prog', '--bytes', '1', '--bytes', '2', '3']
    ans_out = associate_arguments(argv)
    ans_ref = [('--bytes', ('1',)), ('--bytes', ('2', '3'))]
    assert ans_out == ans_ref


def test_associate_arguments_program_name():
    for program in ('--a', '-b', 'prog'):
        argv = [program, 'x', '--c', 'v']
        assert associate_arguments(argv) == [('--c', ('v',))]

    assert associate_arguments(['--a']) == []


def test_associate_arguments_order():
    argv = ['prog', '--z', '--a', 'v', '--m']
    keys = [key for key, _ in associate_arguments(argv)]
    assert keys == ['--z', '--a', '--m']

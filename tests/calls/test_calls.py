import legc.syntax.operators as opr
import legc.codegen.leaves as lv
import legc.codegen.flow as flow
import legc.codegen.calls as calls
import legc.codegen.compiler as compiler
from legc.syntax.values import Reg, Im

from unit_utils import render_one, run


def put(register, value):
    return lv.Bin('add', Im(0), Im(value), register)


def test_args():
    assert render_one(calls.Args()) == [
        '64 5 1 5', '7 5 1 0',
        '64 5 1 5', '7 5 2 0',
        '64 5 1 5', '7 5 3 0',
        '64 5 1 5', '7 5 4 0'
    ]


def test_call():
    assert render_one(calls.Call('proc')) == [
        '64 5 1 5',
        '64 6 3 0',
        '7 5 0 0',
        '208 0 0 proc',
        '65 5 1 5'
    ]


def test_ret():
    assert render_one(calls.Ret()) == [
        '6 5 0 4', '65 5 1 5',
        '6 5 0 3', '65 5 1 5',
        '6 5 0 2', '65 5 1 5',
        '6 5 0 1', '65 5 1 5',
        '6 5 0 6'
    ]


def test_args_ret_reverse_order():
    lines = compiler.render([calls.Args(), calls.Ret()])
    captured = [int(line.split()[2]) for line in lines if line.startswith('7 ')]
    restored = [int(line.split()[3]) for line in lines if line.startswith('6 ')]

    assert captured == [1, 2, 3, 4]
    assert restored[:4] == [4, 3, 2, 1]
    assert restored[4] == 6


def test_balanced_stack():
    lines = compiler.render([calls.Args(), calls.Call('f'), calls.Ret()])
    pushes = lines.count('64 5 1 5')
    pops = lines.count('65 5 1 5')

    assert pushes == pops == 5


def test_call_and_return_restores_registers():
    program = [
        put('r5', 100),
        put('r1', 11),
        put('r2', 22),
        put('r3', 33),
        put('r4', 44),
        calls.Call('proc'),
        lv.jump('end'),
        lv.Label('proc'),
        calls.Args(),
        put('r1', 0),
        put('r2', 0),
        put('r3', 0),
        put('r4', 0),
        put('r0', 99),
        calls.Ret(),
        lv.Label('end')
    ]

    gp = run(compiler.render(program))

    assert gp[:6] == [99, 11, 22, 33, 44, 100]


def test_nested_calls():
    # inner() doubles r1 into r0, outer() calls it twice
    program = [
        put('r5', 50),
        put('r1', 3),
        calls.Call('outer'),
        lv.jump('end'),

        lv.Label('outer'),
        calls.Args(),
        calls.Call('inner'),
        lv.Bin('add', Reg('r0'), Im(0), 'r1'),
        calls.Call('inner'),
        calls.Ret(),

        lv.Label('inner'),
        calls.Args(),
        lv.Bin('add', Reg('r1'), Reg('r1'), 'r0'),
        calls.Ret(),

        lv.Label('end')
    ]

    gp = run(compiler.render(program))

    assert gp[0] == 12
    assert gp[1] == 3
    assert gp[5] == 50


def test_loop_counter_runs():
    program = [
        put('r1', 0),
        flow.While(opr.Condition(Reg('r1'), Im(5), 'neq'), [
            lv.Bin('add', Reg('r1'), Im(1), 'r1'),
            lv.Bin('add', Reg('r2'), Im(2), 'r2')
        ])
    ]

    gp = run(compiler.render(program))

    assert gp[1] == 5
    assert gp[2] == 10

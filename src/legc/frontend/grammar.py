''' Structured assembly grammar '''

import pyparsing as pp

import legc.syntax.registers as regs
import legc.syntax.operators as opr
import legc.codegen.leaves as lv
import legc.codegen.flow as flow
import legc.codegen.calls as calls
from legc.syntax.values import Reg, Im


MAX_IMMEDIATE = 0xFF


def kw(literal: str):
    return pp.Keyword(literal).suppress()


def g_ops(names):
    return pp.MatchFirst([pp.Keyword(name) for name in names])


def on_immediate(s: str, loc: int, tokens: pp.ParseResults):
    value = int(tokens[0])

    if value > MAX_IMMEDIATE:
        raise pp.ParseFatalException(s, loc, f'Immediate {value} out of range')

    return Im(value)


def on_if(tokens: pp.ParseResults):
    else_body = list(tokens[2]) if len(tokens) > 2 else []
    return flow.If(tokens[0], list(tokens[1]), else_body)


ARROW = pp.Suppress('<-')
LBRACK, RBRACK, LBRACE, RBRACE = map(pp.Suppress, '[]{}')

keywords = [
    'while', 'if', 'else', 'loop', 'args', 'call', 'ret', 'hf'
] + list(opr.UNARY_OPS) + opr.BINARY_NAMES + opr.COMPARISON_NAMES

id = ~g_ops(keywords) + pp.Word(pp.alphas + '_', pp.alphanums + '_')

register = pp.Regex(r'\$(?:[0-5]|pc|in|out)(?![A-Za-z0-9_])')
register.set_parse_action(lambda r: regs.REGISTER_NAMES[r[0]])

reg_value = register.copy().add_parse_action(lambda r: Reg(r[0]))
immediate = pp.Regex('[0-9]+').set_parse_action(on_immediate)
value = reg_value | immediate

binary_op = g_ops(opr.BINARY_NAMES)
unary_op = g_ops(opr.UNARY_OPS)
comparison = g_ops(opr.COMPARISON_NAMES)

condition = (value + comparison + value).set_parse_action(
    lambda r: opr.Condition(r[0], r[2], r[1])
)

statement = pp.Forward()
body = pp.Group(LBRACE + pp.ZeroOrMore(statement) + RBRACE)

# Leaf statements
bin_stmt = (register + ARROW + value + binary_op + value).set_parse_action(
    lambda r: lv.Bin(r[2], r[1], r[3], r[0])
)
un_stmt = (register + ARROW + unary_op + value).set_parse_action(
    lambda r: lv.Un(r[1], r[2], r[0])
)
load_stmt = (register + ARROW + LBRACK + value + RBRACK).set_parse_action(
    lambda r: lv.Load(r[1], r[0])
)
save_stmt = (LBRACK + value + RBRACK + ARROW + value).set_parse_action(
    lambda r: lv.Save(r[0], r[1])
)
hf_stmt = (register + ARROW + kw('hf')).set_parse_action(lambda r: lv.Hf(r[0]))
label_stmt = (id + pp.Suppress(':')).set_parse_action(lambda r: lv.Label(r[0]))
br_stmt = (condition + pp.Suppress('?') + id).set_parse_action(
    lambda r: lv.Br(r[1], r[0])
)

# Structured control
while_stmt = (kw('while') + condition + body).set_parse_action(
    lambda r: flow.While(r[0], list(r[1]))
)
if_stmt = (kw('if') + condition + body + pp.Optional(kw('else') + body))
if_stmt.set_parse_action(on_if)
loop_stmt = (kw('loop') + body).set_parse_action(lambda r: flow.Loop(list(r[0])))

# Procedures
args_stmt = pp.Keyword('args').set_parse_action(lambda _: calls.Args())
call_stmt = (kw('call') + id).set_parse_action(lambda r: calls.Call(r[0]))
ret_stmt = pp.Keyword('ret').set_parse_action(lambda _: calls.Ret())

statement <<= (
    bin_stmt
    ^ un_stmt
    ^ load_stmt
    ^ save_stmt
    ^ hf_stmt
    ^ label_stmt
    ^ br_stmt
    ^ while_stmt
    ^ if_stmt
    ^ loop_stmt
    ^ args_stmt
    ^ call_stmt
    ^ ret_stmt
) + pp.Optional(pp.Suppress(';'))

program = pp.ZeroOrMore(statement)
program.ignore(pp.dbl_slash_comment)

from dataclasses import dataclass
from typing import Dict, List, Literal

import legc.common.ops as ops
from legc.syntax.base import JSON
from legc.syntax.values import Value, Im, pack_binary


BinaryOp = Literal[
    'add', 'sub', 'and', 'or', 'xor',
    'shl', 'shr', 'rol', 'ror', 'ashr', 'mul', 'div'
]

UnaryOp = Literal['not']

Comparison = Literal['eq', 'neq', 'lt', 'leq', 'gt', 'geq']

BINARY_OPS: Dict[BinaryOp, int] = {
    'add': ops.ADD,
    'sub': ops.SUB,
    'and': ops.AND,
    'or': ops.OR,
    'xor': ops.XOR,
    'shl': ops.SHL,
    'shr': ops.SHR,
    'rol': ops.ROL,
    'ror': ops.ROR,
    'ashr': ops.ASHR,
    'mul': ops.MUL,
    'div': ops.DIV
}

UNARY_OPS: Dict[UnaryOp, int] = {
    'not': ops.NOT
}

COMPARISONS: Dict[Comparison, int] = {
    'eq': ops.EQ,
    'neq': ops.NEQ,
    'lt': ops.LT,
    'leq': ops.LEQ,
    'gt': ops.GT,
    'geq': ops.GEQ
}

INVERSE: Dict[Comparison, Comparison] = {
    'eq': 'neq',
    'neq': 'eq',
    'lt': 'geq',
    'geq': 'lt',
    'leq': 'gt',
    'gt': 'leq'
}

# Keyword order matters for the grammar: longest spelling first
BINARY_NAMES: List[str] = sorted(BINARY_OPS.keys(), key=len, reverse=True)
COMPARISON_NAMES: List[str] = sorted(COMPARISONS.keys(), key=len, reverse=True)


@dataclass(frozen=True)
class Condition:
    lhs: Value
    rhs: Value
    cmp: Comparison

    def inverse(self) -> 'Condition':
        return Condition(self.lhs, self.rhs, INVERSE[self.cmp])

    def opcode(self) -> int:
        return pack_binary(COMPARISONS[self.cmp], self.lhs, self.rhs)

    def json(self) -> JSON:
        return {
            'Class': 'Condition',
            'Lhs': self.lhs.json(),
            'Rhs': self.rhs.json(),
            'Cmp': self.cmp
        }

    def __str__(self) -> str:
        return f'{self.lhs} {self.cmp} {self.rhs}'


# 0 == 0, used for unconditional jumps
ALWAYS = Condition(Im(0), Im(0), 'eq')

from dataclasses import dataclass

import legc.common.ops as ops
import legc.syntax.registers as regs
from legc.syntax.base import JSON


class Value:
    ''' Instruction operand: a register or an immediate byte '''

    def is_im(self) -> bool:
        raise NotImplementedError()

    def is_reg(self) -> bool:
        return not self.is_im()

    def to_num(self) -> int:
        raise NotImplementedError()

    def json(self) -> JSON:
        raise NotImplementedError()


@dataclass(frozen=True)
class Reg(Value):
    register: regs.Register

    def is_im(self) -> bool:
        return False

    def to_num(self) -> int:
        return regs.to_num(self.register)

    def json(self) -> JSON:
        return {'Class': 'Reg', 'Register': self.register}

    def __str__(self) -> str:
        return regs.spelling(self.register)


@dataclass(frozen=True)
class Im(Value):
    # NB: 0..255 is the parser's responsibility
    value: int

    def is_im(self) -> bool:
        return True

    def to_num(self) -> int:
        return self.value

    def json(self) -> JSON:
        return {'Class': 'Im', 'Value': self.value}

    def __str__(self) -> str:
        return str(self.value)


def pack_unary(base: int, operand: Value) -> int:
    return base + (ops.IMM_LEFT if operand.is_im() else 0)


def pack_binary(base: int, lhs: Value, rhs: Value) -> int:
    return pack_unary(base, lhs) + (ops.IMM_RIGHT if rhs.is_im() else 0)

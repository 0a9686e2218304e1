from dataclasses import dataclass
from typing import List

import legc.common.ops as ops
import legc.syntax.registers as regs
import legc.syntax.operators as opr
import legc.codegen.base as b
from legc.syntax.values import Value, pack_unary, pack_binary


def instruction(opcode: int, first: int, second: int, destination: int | str) -> str:
    return f'{opcode} {first} {second} {destination}'


@dataclass
class Bin(b.Leaf):
    op: opr.BinaryOp
    lhs: Value
    rhs: Value
    dst: regs.Register

    def encode(self) -> str:
        return instruction(
            pack_binary(opr.BINARY_OPS[self.op], self.lhs, self.rhs),
            self.lhs.to_num(),
            self.rhs.to_num(),
            regs.to_num(self.dst)
        )

    def __str__(self) -> str:
        return f'{regs.spelling(self.dst)} <- {self.lhs} {self.op} {self.rhs}'

    def json(self):
        data = super().json()

        data.update({
            'Class': 'Bin',
            'Op': self.op,
            'Lhs': self.lhs.json(),
            'Rhs': self.rhs.json(),
            'Dst': self.dst
        })

        return data


@dataclass
class Un(b.Leaf):
    op: opr.UnaryOp
    src: Value
    dst: regs.Register

    def encode(self) -> str:
        return instruction(
            pack_unary(opr.UNARY_OPS[self.op], self.src),
            self.src.to_num(),
            0,
            regs.to_num(self.dst)
        )

    def __str__(self) -> str:
        return f'{regs.spelling(self.dst)} <- {self.op} {self.src}'

    def json(self):
        data = super().json()

        data.update({
            'Class': 'Un',
            'Op': self.op,
            'Src': self.src.json(),
            'Dst': self.dst
        })

        return data


@dataclass
class Save(b.Leaf):
    addr: Value
    val: Value

    def encode(self) -> str:
        return instruction(
            pack_binary(ops.SAVE, self.addr, self.val),
            self.addr.to_num(),
            self.val.to_num(),
            0
        )

    def __str__(self) -> str:
        return f'[{self.addr}] <- {self.val}'

    def json(self):
        data = super().json()
        data.update({'Class': 'Save', 'Addr': self.addr.json(), 'Val': self.val.json()})
        return data


@dataclass
class Load(b.Leaf):
    addr: Value
    dst: regs.Register

    def encode(self) -> str:
        return instruction(
            pack_unary(ops.LOAD, self.addr),
            self.addr.to_num(),
            0,
            regs.to_num(self.dst)
        )

    def __str__(self) -> str:
        return f'{regs.spelling(self.dst)} <- [{self.addr}]'

    def json(self):
        data = super().json()
        data.update({'Class': 'Load', 'Addr': self.addr.json(), 'Dst': self.dst})
        return data


@dataclass
class Label(b.Leaf):
    name: str

    # Pseudo-instruction, resolved to an address by the consumer
    def encode(self) -> str:
        return f'label {self.name}'

    def declared_labels(self) -> List[str]:
        return [self.name]

    def __str__(self) -> str:
        return f'{self.name}:'

    def json(self):
        data = super().json()
        data.update({'Class': 'Label', 'Name': self.name})
        return data


@dataclass
class Br(b.Leaf):
    label: str
    cond: opr.Condition

    def referenced_labels(self) -> List[str]:
        return [self.label]

    def encode(self) -> str:
        return instruction(
            self.cond.opcode(),
            self.cond.lhs.to_num(),
            self.cond.rhs.to_num(),
            self.label
        )

    def __str__(self) -> str:
        return f'{self.cond} ? {self.label}'

    def json(self):
        data = super().json()
        data.update({'Class': 'Br', 'Label': self.label, 'Cond': self.cond.json()})
        return data


def jump(label: str) -> Br:
    return Br(label, opr.ALWAYS)


@dataclass
class Hf(b.Leaf):
    dst: regs.Register

    def encode(self) -> str:
        return instruction(ops.HF, 0, 0, regs.to_num(self.dst))

    def __str__(self) -> str:
        return f'{regs.spelling(self.dst)} <- hf'

    def json(self):
        data = super().json()
        data.update({'Class': 'Hf', 'Dst': self.dst})
        return data

''' Procedure call convention

r5 is the stack pointer (grows upwards), pc doubles as the return address
register. The callee saves r1..r4 in `args` and restores them in `ret`; r0 is
clobbered by `call` and carries results back. A call leaves on the stack:

    [return address] [r1] [r2] [r3] [r4] <- sp
'''

import logging as lg
from dataclasses import dataclass
from typing import List

from legc.codegen.flatten import flatten
import legc.syntax.registers as regs
import legc.codegen.base as b
import legc.codegen.leaves as lv
from legc.syntax.values import Reg, Im


SP = Reg(regs.STACK_POINTER)

# Distance from the return address computation to the resume point
RESUME_OFFSET = 3


def push_slot() -> lv.Bin:
    return lv.Bin('add', SP, Im(1), regs.STACK_POINTER)


def pop_slot() -> lv.Bin:
    return lv.Bin('sub', SP, Im(1), regs.STACK_POINTER)


@dataclass
class Args(b.Lowered):
    def __str__(self) -> str:
        return 'args'

    def json(self):
        data = super().json()
        data['Class'] = 'Args'
        return data

    def lower(self, labels: b.LabelFactory) -> b.Statements:
        lg.debug('Lowering procedure prologue')

        return flatten([
            [push_slot(), lv.Save(SP, Reg(register))]
            for register in regs.SAVED
        ])


@dataclass
class Call(b.Lowered):
    name: str

    def __str__(self) -> str:
        return f'call {self.name}'

    def referenced_labels(self) -> List[str]:
        return [self.name]

    def json(self):
        data = super().json()
        data.update({'Class': 'Call', 'Name': self.name})
        return data

    def lower(self, labels: b.LabelFactory) -> b.Statements:
        lg.debug(f'Lowering call to {self.name}')

        return [
            push_slot(),
            lv.Bin('add', Reg(regs.RETURN_ADDRESS), Im(RESUME_OFFSET), regs.RESULT),
            lv.Save(SP, Reg(regs.RESULT)),
            lv.jump(self.name),
            # Resume point, drops the return address
            pop_slot()
        ]


@dataclass
class Ret(b.Lowered):
    def __str__(self) -> str:
        return 'ret'

    def json(self):
        data = super().json()
        data['Class'] = 'Ret'
        return data

    def lower(self, labels: b.LabelFactory) -> b.Statements:
        lg.debug('Lowering procedure epilogue')

        # Exact reverse of the Args push order
        return flatten([
            [[lv.Load(SP, register), pop_slot()] for register in reversed(regs.SAVED)],
            lv.Load(SP, regs.RETURN_ADDRESS)
        ])

from pathlib import Path
from typing import Dict, List

import legc.codegen.base as b
import legc.codegen.compiler as compiler
from legc.frontend.parser import parse


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def render_source(source: str) -> List[str]:
    return compiler.render(parse(source))


def render_one(statement: b.Statement) -> List[str]:
    return compiler.render([statement])


def generated(lines: List[str]) -> List[str]:
    return [line.split()[1] for line in lines if line.startswith('label _')]


def run(lines: List[str], max_steps: int = 10000) -> List[int]:
    ''' Executes rendered lines on the subset of the machine the tests need '''
    code: List[List[str]] = []
    targets: Dict[str, int] = {}

    for line in lines:
        fields = line.split()

        if fields[0] == 'label':
            targets[fields[1]] = len(code)
        else:
            code.append(fields)

    gp = [0] * 8
    memory = [0] * 256
    pc = 0

    def read(index: int) -> int:
        return pc if index == 6 else gp[index]

    for _ in range(max_steps):
        if pc >= len(code):
            return gp

        op, a, b, dst = code[pc]
        op, a, b = int(op), int(a), int(b)
        lhs = a if op & 128 else read(a)
        rhs = b if op & 64 else read(b)
        base = op & 63
        result = None

        if base == 0:
            result = lhs + rhs
        elif base == 1:
            result = lhs - rhs
        elif base == 6:
            result = memory[lhs]
        elif base == 7:
            memory[lhs] = rhs
        elif base in BRANCHES:
            if BRANCHES[base](lhs, rhs):
                pc = targets[dst]
                continue
        else:
            raise AssertionError(f'Unexpected opcode {op}')

        if result is not None and int(dst) == 6:
            pc = result
            continue

        if result is not None:
            gp[int(dst)] = result

        pc += 1

    raise AssertionError('Program did not finish')


BRANCHES = {
    16: lambda l, r: l == r,
    17: lambda l, r: l != r,
    18: lambda l, r: l < r,
    19: lambda l, r: l <= r,
    20: lambda l, r: l > r,
    21: lambda l, r: l >= r
}

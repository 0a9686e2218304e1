from typing import Dict, List, Literal


Register = Literal['r0', 'r1', 'r2', 'r3', 'r4', 'r5', 'pc', 'in', 'out']
REGISTERS: List[Register] = ['r0', 'r1', 'r2', 'r3', 'r4', 'r5', 'pc', 'in', 'out']

# NB: 'in' and 'out' share the I/O port, the machine tells them apart by usage
REGISTER_INDICES: Dict[Register, int] = {
    'r0': 0,
    'r1': 1,
    'r2': 2,
    'r3': 3,
    'r4': 4,
    'r5': 5,
    'pc': 6,
    'in': 7,
    'out': 7
}

# Source spelling, as in `$0 <- $in add 1`
REGISTER_NAMES: Dict[str, Register] = {
    '$0': 'r0',
    '$1': 'r1',
    '$2': 'r2',
    '$3': 'r3',
    '$4': 'r4',
    '$5': 'r5',
    '$pc': 'pc',
    '$in': 'in',
    '$out': 'out'
}

# Calling convention
RESULT: Register = 'r0'
STACK_POINTER: Register = 'r5'
RETURN_ADDRESS: Register = 'pc'
SAVED: List[Register] = ['r1', 'r2', 'r3', 'r4']


def to_num(register: Register) -> int:
    return REGISTER_INDICES[register]


def spelling(register: Register) -> str:
    for name, known in REGISTER_NAMES.items():
        if known == register:
            return name

    raise ValueError(f'Unknown register {register}')

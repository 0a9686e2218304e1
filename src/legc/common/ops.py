# Binary arithmetic / logic
ADD = 0     # L + R -> D
SUB = 1     # L - R -> D
AND = 2     # L & R -> D
OR = 3      # L | R -> D
XOR = 5     # L ^ R -> D
SHL = 8     # L << R -> D
SHR = 9     # L >> R -> D
ROL = 10    # rotate L left by R -> D
ROR = 11    # rotate L right by R -> D
ASHR = 12   # arithmetic L >> R -> D
MUL = 13    # L * R -> D
DIV = 14    # L // R -> D

# Unary
NOT = 4     # ~S -> D

# Memory
LOAD = 6    # M[A] -> D
SAVE = 7    # V -> M[A]

# High bits of the last wide result
HF = 15     # H -> D

# Branches: if L .cmp R goto label
EQ = 16
NEQ = 17
LT = 18
LEQ = 19
GT = 20
GEQ = 21

# Operand flags
IMM_LEFT = 128   # first operand is a raw byte
IMM_RIGHT = 64   # second operand is a raw byte

# Procedure primitives
MOVE = ADD + IMM_RIGHT   # S + U -> D (moves, jumps via pc, stack pushes)
BUMP = SUB + IMM_RIGHT   # S - U -> D (stack pops)
ALWAYS = EQ + IMM_LEFT + IMM_RIGHT  # 0 == 0, unconditional branch

import logging as lg
from typing import Iterable, List, Sequence, Set

from legc.codegen.flatten import flatten
from legc.syntax.base import JSON


class LabelFactory:
    ''' Mints branch targets that are unique within one render '''
    labels: Set[str]
    counter: int

    def __init__(self, reserved: Iterable[str] = ()):
        self.labels = set(reserved)
        self.counter = 0

    def make_label(self, description: str) -> str:
        label = f'_{description}_{self.counter}'
        self.counter += 1

        while label in self.labels:
            label = f'_{description}_{self.counter}'
            self.counter += 1

        self.labels.add(label)
        lg.debug(f'New label {label}')
        return label


class Statement:
    def emit(self, labels: LabelFactory) -> Sequence[str]:
        raise NotImplementedError()

    def declared_labels(self) -> List[str]:
        return []

    def referenced_labels(self) -> List[str]:
        return []

    def json(self) -> JSON:
        return {'Class': 'Statement'}


Statements = Sequence[Statement]


class Leaf(Statement):
    ''' Renders to exactly one instruction line '''

    def encode(self) -> str:
        raise NotImplementedError()

    def emit(self, labels: LabelFactory) -> Sequence[str]:
        lg.debug(f'Encoding {self}')
        return [self.encode()]


class Lowered(Statement):
    ''' Expands to a sequence of simpler statements before encoding '''

    def lower(self, labels: LabelFactory) -> Statements:
        raise NotImplementedError()

    def emit(self, labels: LabelFactory) -> Sequence[str]:
        return flatten([statement.emit(labels) for statement in self.lower(labels)])


def body_labels(body: Statements) -> List[str]:
    return [label for statement in body for label in statement.declared_labels()]


def body_references(body: Statements) -> List[str]:
    return [label for statement in body for label in statement.referenced_labels()]


def used_labels(body: Statements) -> List[str]:
    return body_labels(body) + body_references(body)

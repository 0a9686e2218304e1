import logging as lg
from dataclasses import dataclass
from typing import List

from legc.codegen.flatten import flatten
import legc.syntax.operators as opr
import legc.codegen.base as b
import legc.codegen.leaves as lv


@dataclass
class If(b.Lowered):
    cond: opr.Condition
    then_body: b.Statements
    else_body: b.Statements

    def json(self):
        data = super().json()

        data.update({
            'Class': 'If',
            'Cond': self.cond.json(),
            'ThenBody': [s.json() for s in self.then_body],
            'ElseBody': [s.json() for s in self.else_body]
        })

        return data

    def declared_labels(self) -> List[str]:
        return b.body_labels(self.then_body) + b.body_labels(self.else_body)

    def referenced_labels(self) -> List[str]:
        return b.body_references(self.then_body) + b.body_references(self.else_body)

    def lower(self, labels: b.LabelFactory) -> b.Statements:
        true_label = labels.make_label('if_true')
        done_label = labels.make_label('if_done')

        lg.debug(f'Lowering if {self.cond} -> {true_label}/{done_label}')

        # Else path stays inline, then-block is only entered from one branch
        return flatten([
            lv.Br(true_label, self.cond),
            list(self.else_body),
            lv.jump(done_label),
            lv.Label(true_label),
            list(self.then_body),
            lv.Label(done_label)
        ])


@dataclass
class While(b.Lowered):
    cond: opr.Condition
    body: b.Statements

    def json(self):
        data = super().json()

        data.update({
            'Class': 'While',
            'Cond': self.cond.json(),
            'Body': [s.json() for s in self.body]
        })

        return data

    def declared_labels(self) -> List[str]:
        return b.body_labels(self.body)

    def referenced_labels(self) -> List[str]:
        return b.body_references(self.body)

    def lower(self, labels: b.LabelFactory) -> b.Statements:
        start_label = labels.make_label('while_start')
        end_label = labels.make_label('while_end')

        lg.debug(f'Lowering while {self.cond} -> {start_label}/{end_label}')

        return flatten([
            lv.Label(start_label),
            lv.Br(end_label, self.cond.inverse()),
            list(self.body),
            lv.jump(start_label),
            lv.Label(end_label)
        ])


@dataclass
class Loop(b.Lowered):
    # Exits only through a Br to a label outside the body
    body: b.Statements

    def json(self):
        data = super().json()
        data.update({'Class': 'Loop', 'Body': [s.json() for s in self.body]})
        return data

    def declared_labels(self) -> List[str]:
        return b.body_labels(self.body)

    def referenced_labels(self) -> List[str]:
        return b.body_references(self.body)

    def lower(self, labels: b.LabelFactory) -> b.Statements:
        start_label = labels.make_label('loop_start')

        lg.debug(f'Lowering loop -> {start_label}')

        return flatten([
            lv.Label(start_label),
            list(self.body),
            lv.jump(start_label)
        ])

import sys
import json
import logging as lg
from typing import Any, List, TextIO

import click

import legc.codegen.base as b
from legc.codegen.flatten import flatten
from legc.frontend.parser import parse, ParseError


class RenderSettings:
    verbose: bool
    produce_ast: bool

    def __init__(self):
        self.verbose = False
        self.produce_ast = False

    def update(
        self,
        verbose: bool | None = None,
        produce_ast: bool | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if produce_ast is not None:
            self.produce_ast = produce_ast

        return self


def eprint(*args: Any, **kwargs: Any):
    print(*args, file=sys.stderr, **kwargs)


def render(program: b.Statements, labels: b.LabelFactory | None = None) -> List[str]:
    if labels is None:
        labels = b.LabelFactory(b.used_labels(program))

    lg.debug(f'Rendering {len(program)} top-level statements')
    return flatten([statement.emit(labels) for statement in program])


def emit(settings: RenderSettings, program: b.Statements) -> str:
    if settings.produce_ast:
        eprint('------------------ AST -----------------------')
        eprint(json.dumps([s.json() for s in program], indent=2))

    code = '\n'.join(render(program))

    if settings.verbose:
        eprint('------------------ CODE ----------------------')
        eprint(code)
        eprint('----------------------------------------------')

    return code


def compile_string(settings: RenderSettings, source: str) -> str:
    program = parse(source)
    return emit(settings, program)


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--produce-ast', is_flag=True, help='Produce AST output')
@click.argument('input', type=click.File('r'), default='-')
@click.argument('output', type=click.File('w'), default='-')
def compile(ctx: click.Context, input: TextIO, output: TextIO, **params):
    ctx.ensure_object(RenderSettings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info(f'Rendering {input.name}')

    try:
        code = compile_string(ctx.obj, input.read())
    except ParseError as e:
        click.echo(str(e))
        ctx.exit(1)

    if code:
        output.write(code + '\n')


if __name__ == '__main__':
    compile()

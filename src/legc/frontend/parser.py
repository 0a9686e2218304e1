import logging as lg

import pyparsing as pp

import legc.codegen.base as b
import legc.frontend.grammar as grammar


class ParseError(Exception):
    pass


def parse(text: str) -> b.Statements:
    try:
        result = grammar.program.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        raise ParseError(f'Parse error at line {e.lineno}, column {e.col}: {e.msg}') from e

    program = list(result)
    lg.debug(f'Parsed {len(program)} top-level statements')
    return program

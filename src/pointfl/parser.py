## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import ast

import lark
from .errors import PointParseError, PointIncompleteParse


GRAMMAR = r"""?start: pipeline
pipeline: expr ("|" expr)*
?expr: call | ref | "(" pipeline ")"
call: NAME "(" (arg ("," arg)*)? ")"
ref: NAME

?arg: expr | literal
?literal: STRING                                  -> string
        | SIGNED_NUMBER                           -> number
        | "true"                                  -> true
        | "false"                                 -> false
        | "null"                                  -> null
        | "[" (arg ("," arg)*)? "]"               -> array
        | "{" (pair ("," pair)*)? "}"             -> object
pair: STRING ":" arg

// TOKENS
NAME: /[A-Za-z_][A-Za-z0-9_]*(?:-[A-Za-z0-9_]+)*(?:\.[A-Za-z_][A-Za-z0-9_]*(?:-[A-Za-z0-9_]+)*)?/
STRING: /"(?:[^"\\]|\\.)*"/ | /'(?:[^'\\]|\\.)*'/
COMMENT: /#[^\r\n]*/

%import common.SIGNED_NUMBER
%import common.WS
%ignore WS
%ignore COMMENT
"""

PATH_GRAMMAR = r"""?start: path
path: "."                                         -> root
    | "."? head tail*
?head: key | index | quoted
?tail: "." key | index | quoted
key: KEY | STRING
quoted: "[" STRING "]"                            -> key
index: "[" SIGNED_INT "]"

KEY: /[^.\[\]\s"']+/
STRING: /"(?:[^"\\]|\\.)*"/ | /'(?:[^'\\]|\\.)*'/

%import common.SIGNED_INT
%import common.WS
%ignore WS
"""


_PARSERS: dict[str, lark.Lark] = {}

def _get_parser(grammar: str) -> lark.Lark:
    if (parser := _PARSERS.get(grammar)) is None:
        parser = _PARSERS[grammar] = lark.Lark(grammar, start='start', parser="lalr", lexer="contextual", propagate_positions=True)
    return parser


def _parse_tree(grammar: str, source: str, filename=None) -> lark.Tree:
    try:
        return _get_parser(grammar).parse(source)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedCharacters) as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        if isinstance(exc, lark.exceptions.UnexpectedCharacters):
            token_val = exc.char
        error_class = PointIncompleteParse if token_val == '' else PointParseError
        kind = 'path' if grammar is PATH_GRAMMAR else 'expression'
        raise error_class(str(exc), kind=kind, filename=filename, line=attr('line'), column=attr('column'), token=token_val) from None


def _string(token: lark.Token) -> str:
    return ast.literal_eval(token.value)

def _number(token: lark.Token) -> int | float:
    text = token.value
    return float(text) if any(c in text for c in '.eE') else int(text)


def parse(source: str, filename=None):
    """Parse a pipeline expression into nested tuples, ready for linking.

    Node shapes:
        ('pipeline', [node, ...], meta)
        ('call', name, [node, ...], meta)
        ('ref', name, meta)
        ('value', python_value)
        ('array', [node, ...])
        ('object', [(key, node), ...])
    """
    def _meta(tree: lark.Tree) -> dict:
        if tree.meta.empty: return {'filename': filename}
        return {'filename': filename, 'line': tree.meta.line, 'columns': (tree.meta.column, tree.meta.end_column)}

    def _traverse(it):
        if isinstance(it, lark.Token):
            raise NotImplementedError(f"Unexpected token `{it}` from parser.")

        match it.data:
            case 'pipeline':
                return ('pipeline', [_traverse(ch) for ch in it.children], _meta(it))
            case 'call':
                name, *args = it.children
                return ('call', name.value, [_traverse(a) for a in args], _meta(it))
            case 'ref':
                return ('ref', it.children[0].value, _meta(it))
            case 'string':
                return ('value', _string(it.children[0]))
            case 'number':
                return ('value', _number(it.children[0]))
            case 'true' | 'false' | 'null':
                return ('value', {'true': True, 'false': False, 'null': None}[it.data])
            case 'array':
                return ('array', [_traverse(ch) for ch in it.children])
            case 'object':
                return ('object', [(_string(p.children[0]), _traverse(p.children[1])) for p in it.children])
        raise NotImplementedError(f"Unexpected rule `{it.data}` from parser.")

    return _traverse(_parse_tree(GRAMMAR, source, filename))


def parse_path(source: str, filename=None) -> list:
    """Parse a lens path like `a.b[0]."odd key"` into `['a', 'b', 0, 'odd key']`; `.` is the empty path."""
    tree = _parse_tree(PATH_GRAMMAR, source, filename)
    if tree.data == 'root':
        return []

    path = []
    for node in tree.children:
        match node.data:
            case 'key':
                tok = node.children[0]
                path.append(_string(tok) if tok.type == 'STRING' else tok.value)
            case 'index':
                path.append(int(node.children[0].value))
    return path


def format_parse_error_context(filename, line, column, token_value, source=None):
    lines = source.splitlines(keepends=True) if source else open(filename, 'r').readlines()
    line, column = line or 1, column or 0
    start_line, end_line = max(0, line - 3), min(len(lines), line + 2)
    result = [f"\033[97m  File \"{filename}\", line {line}\033[0m"]

    for i in range(start_line, end_line):
        line_content = lines[i].rstrip('\n')
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if column > 0 and column <= len(line_content):
                width = max(len(token_value or ''), 1)
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1:column+width-1]}\033[0m" +
                    line_content[column+width-1:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'

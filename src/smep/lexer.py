from functools import reduce
import operator

import regex

from .token import Number, Operator, Parenthesis, Variable
from .util import LexError


class Lexer:
    '''
    Lexer for dense arithmetic expressions, e.g. ``(3+4)*2``.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Number: 1, 12, 1.3, 1. (notice trailing dot), .2, 1e3, 2.5E-3
    NUMBER = r'''
              (?:
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              |
                  \.
                  \d+
              )
              (?:
                  # Exponent, only when followed by digits
                  [eE]
                  [+\-]?
                  \d+
              )?
              '''
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, '+-*/^')) + r')'
    PARENTHESIS = r'[()]'
    # A dot that starts no number
    STRAY = r'\.'
    SPACE = r'\s+'
    # Dropped without complaint
    OTHER = r'.'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<parenthesis>' + PARENTHESIS + r')|' \
             r'(?<stray>' + STRAY + r')|' \
             r'(?<space>' + SPACE + r')|' \
             r'(?<other>' + OTHER + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def matches(self, line):
        '''
        Take a line and yield all lexeme matches, whitespace included.
        '''
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        position = 0
        while position < len(line):
            match = pattern.match(line, position)
            yield match
            position = match.end()

    def lex(self, line):
        '''
        Take a line and yield its tokens.

        Characters outside the expression alphabet are silently dropped.
        '''
        for match in self.matches(line):
            kind = match.lastgroup
            text = match.group(0)
            if kind == 'number':
                yield Number(float(text))
            elif kind == 'operator':
                yield Operator(text)
            elif kind == 'parenthesis':
                yield Parenthesis(text)
            elif kind == 'stray':
                raise LexError("Couldn't lex {0}".format(
                    line[match.start():].strip()))


class ScriptLexer:
    '''
    Lexer for script statements, e.g. ``= total a + b * 2``.

    Words are whitespace-delimited and classified one by one; operators must
    stand apart from their operands.
    '''
    SINGLE_OPERATORS = frozenset('+-*/^')
    NUMBER = regex.compile(Lexer.NUMBER, flags=Lexer.FLAGS)

    def lex(self, line):
        '''
        Take a line and yield its tokens.

        Words that fit no token shape are silently dropped.
        '''
        for word in line.split():
            first = word[0]
            if word == '=':
                yield Operator('=')
            elif first.isalpha():
                yield Variable(word)
            elif first.isdigit() or first == '.':
                yield Number(self._number(word))
            elif word in type(self).SINGLE_OPERATORS:
                yield Operator(word)
            elif word in ('(', ')'):
                yield Parenthesis(word)

    def _number(self, word):
        '''
        Convert a whole word to a number, rejecting any trailing text.
        '''
        if type(self).NUMBER.fullmatch(word) is None:
            raise LexError('Cannot parse number {!r}'.format(word))
        return float(word)

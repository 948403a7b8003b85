"""Lark grammar for the manifest language understood by the default backend.

The grammar is LALR(1).  Keywords are plain string literals; lark turns
``NAME`` tokens whose text equals a keyword into that keyword.  The
contextual lexer tells a unary ``-`` from the binary ``ADD_OP`` by parser
state; where both are possible the higher priority of ``ADD_OP`` makes
the binary reading win.
"""

from __future__ import annotations

GRAMMAR: str = r"""
start: _statement*

_statement: class_definition
          | define_definition
          | node_definition
          | resource
          | assignment
          | if_statement
          | unless_statement
          | expression

// --- definitions ----------------------------------------------------------

class_definition: "class" NAME parameters? inherits? block
inherits: "inherits" NAME
define_definition: "define" NAME parameters? block
node_definition: "node" node_matcher ("," node_matcher)* block
?node_matcher: STRING -> node_name
             | "default" -> default_node

parameters: "(" (parameter ("," parameter)* ","?)? ")"
parameter: VARIABLE ("=" expression)?

block: "{" _statement* "}"

// --- conditionals ---------------------------------------------------------

if_statement: "if" expression block elsif_clause* else_clause?
elsif_clause: "elsif" expression block
else_clause: "else" block
unless_statement: "unless" expression block else_clause?

// --- statements -----------------------------------------------------------

assignment: VARIABLE "=" expression

resource: (NAME | TYPE_NAME) "{" resource_body (";" resource_body)* ";"? "}"
resource_body: expression ":" attributes?
attributes: attribute ("," attribute)* ","?
attribute: NAME "=>" attribute_value
?attribute_value: expression
                | NAME -> bare_word

// --- expressions ----------------------------------------------------------

?expression: or_test
?or_test: and_test
        | or_test "or" and_test -> or_op
?and_test: comparison
         | and_test "and" comparison -> and_op
?comparison: sum
           | sum COMPARE_OP sum -> compare
?sum: product
    | sum ADD_OP product -> arithmetic
?product: unary
        | product MUL_OP unary -> arithmetic
?unary: atom
      | "!" unary -> not_op
      | "-" unary -> negate
?atom: NUMBER -> number
     | STRING -> string
     | "true" -> true
     | "false" -> false
     | "undef" -> undef
     | VARIABLE -> variable
     | call
     | reference
     | array
     | hash
     | "(" expression ")"

call: NAME "(" arguments? ")"
reference: TYPE_NAME "[" arguments "]"
arguments: expression ("," expression)* ","?
array: "[" (expression ("," expression)* ","?)? "]"
hash: "{" (pair ("," pair)* ","?)? "}"
pair: expression "=>" expression

// --- terminals ------------------------------------------------------------

COMPARE_OP: "==" | "!=" | "<=" | ">=" | "<" | ">"
ADD_OP.1: "+" | "-"
MUL_OP: "*" | "/" | "%"

NAME: /[a-z_][a-zA-Z0-9_]*(?:::[a-z_][a-zA-Z0-9_]*)*/
TYPE_NAME: /(?:::)?[A-Z][a-zA-Z0-9_]*(?:::[A-Z][a-zA-Z0-9_]*)*/
VARIABLE: /\$(?:::)?(?:[a-z_][a-zA-Z0-9_]*(?:::[a-z_][a-zA-Z0-9_]*)*|[0-9]+)/
NUMBER: /0[xX][0-9a-fA-F]+|[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?/
STRING: /"(?:[^"\\]|\\.)*"/
      | /'(?:[^'\\]|\\.)*'/

COMMENT: /#[^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
"""

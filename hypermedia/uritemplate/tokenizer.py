"""
tokenizer module is responsible for splitting a URI template into
an ordered sequence of parts: literal text and variable groups.

e.g.:
"/events{/city}/concerts?eventName=Revo+Tour{&location,size}#top"
is translated to:

(
  Literal(text="/events", in_query=False),
  VariableGroup(type=PATH_SEGMENT, names=("city",), raw="{/city}"),
  Literal(text="/concerts", in_query=False),
  Literal(text="?eventName=Revo+Tour", in_query=True),
  VariableGroup(type=QUERY_PARAM_CONTINUED, names=("location", "size"),
                raw="{&location,size}"),
  Literal(text="#top", in_query=False),
)

Joining raw text of all parts always gives the original template back.
"""
import logging
import re

from hypermedia.uritemplate.constants import (
  FRAGMENT_OPERATOR, QUERY_CONTINUATION_OPERATOR, QUERY_PARAM_OPERATOR,
  ParseError
)
from hypermedia.uritemplate.models import Literal, VariableGroup, VariableType

logger = logging.getLogger(__name__)

# Any brace-delimited expression without nested braces.
EXPRESSION_REGEX = re.compile(r'\{([^{}]*)\}')

# Optional operator followed by comma separated variable specs.
EXPRESSION_BODY_REGEX = re.compile(r'([^\w%]?)(.*)', re.DOTALL)

# Variable name with an optional prefix (":3") or explode ("*") modifier.
VARSPEC_REGEX = re.compile(r'((?:[\w.]|%[0-9A-Fa-f]{2})+)(?::[^,]*|\*)?')


def classify_operator(operator):
  """ Maps the operator of a variable expression to a VariableType.

  Args:
    operator: a str, one of "", "/", "?", "&" or "#".
  Returns:
    A VariableType constant.
  Raises:
    ParseError if operator is not supported.
  """
  type_ = VariableType.from_operator(operator)
  if type_ is None:
    raise ParseError('Unsupported operator "{}"'.format(operator))
  return type_


def parse_template(template):
  """ Splits template into literal parts and variable groups.

  Args:
    template: a str containing literal text and variable expressions.
  Returns:
    A tuple of Literal and VariableGroup instances.
  Raises:
    ParseError if template is empty or contains malformed expressions.
  """
  if not template:
    raise ParseError('Template must not be empty')

  parts = []
  query_open = False
  position = 0
  for match in EXPRESSION_REGEX.finditer(template):
    literal = template[position:match.start()]
    _check_braces(literal, template, position)
    query_open = _append_literal(parts, literal, query_open, split=True)

    group = _parse_expression(match, template)
    parts.append(group)
    if VariableType.is_query(group.type):
      query_open = True
    position = match.end()

  remainder = template[position:]
  _check_braces(remainder, template, position)
  _append_literal(parts, remainder, query_open, split=False)

  logger.debug('Parsed template "{}" into {} parts'
               .format(template, len(parts)))
  return tuple(parts)


def _check_braces(literal, template, offset):
  """ Makes sure literal text has no stray braces. """
  for index, char in enumerate(literal):
    if char in '{}':
      raise ParseError('Unbalanced "{}"'.format(char), template, offset + index)


def _append_literal(parts, text, query_open, split):
  """ Appends text to parts tagging it as base or query bound.
  If split is True and query is not open yet, text is split
  at its first "?" so the "?"-prefixed piece is query bound.

  Args:
    parts: a list of parts to append to.
    text: a str of literal text, may be empty.
    query_open: a boolean indicating whether query was started before.
    split: a boolean indicating whether text may be split at "?".
  Returns:
    A boolean indicating whether query is open after text.
  """
  if not text:
    return query_open

  # Leading "?a=1" or "&a=1" is query bound even as the first part,
  # so "?a=1{&b}" keeps "?a=1" in query head and base stays empty.
  if split and not query_open:
    head, separator, tail = text.partition(QUERY_PARAM_OPERATOR)
    if separator:
      if head:
        parts.append(Literal(text=head, in_query=False))
      parts.append(Literal(text=separator + tail, in_query=True))
      return True

  in_query = (
    not text.startswith(FRAGMENT_OPERATOR)
    and (query_open or text.startswith((QUERY_PARAM_OPERATOR,
                                        QUERY_CONTINUATION_OPERATOR)))
  )
  parts.append(Literal(text=text, in_query=in_query))
  return query_open or in_query


def _parse_expression(match, template):
  """ Transforms a matched variable expression to VariableGroup.

  Args:
    match: a re.Match of EXPRESSION_REGEX.
    template: a str, the whole template (for error messages).
  Returns:
    A VariableGroup.
  """
  position = match.start()
  operator, varspecs = EXPRESSION_BODY_REGEX.fullmatch(match.group(1)).groups()
  try:
    type_ = classify_operator(operator)
  except ParseError as error:
    raise ParseError(str(error), template, position)

  if not varspecs:
    raise ParseError('Empty variable name list', template, position)

  names = []
  for varspec in varspecs.split(','):
    varspec_match = VARSPEC_REGEX.fullmatch(varspec)
    if varspec_match is None:
      raise ParseError('Malformed variable name "{}"'.format(varspec),
                       template, position)
    names.append(varspec_match.group(1))

  return VariableGroup(type=type_, names=names, raw=match.group(0))

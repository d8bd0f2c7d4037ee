"""
assembler module routes parts of a parsed template into four regions
of resulting URI: base uri, expanded query (head), names of
unexpanded query variables (tail) and fragment identifier.

Bound variables are substituted, unbound ones are kept as template
syntax, so the result can be expanded again later.
"""
import logging
from urllib.parse import quote

from hypermedia.uritemplate.constants import (
  FRAGMENT_OPERATOR, QUERY_CONTINUATION_OPERATOR, QUERY_PARAM_OPERATOR,
  SAFE_CHARACTERS, EncodingFailure
)
from hypermedia.uritemplate.models import (
  Components, Literal, TemplateVariable, UNFILTERED, VariableType
)

logger = logging.getLogger(__name__)


def encode_value(value):
  """ Percent-encodes UTF-8 representation of value.

  Args:
    value: a str or an object convertible to str.
  Returns:
    A str where every character except unreserved ones is percent-encoded.
  Raises:
    EncodingFailure if value can't be represented in UTF-8.
  """
  text = value if isinstance(value, str) else str(value)
  try:
    return quote(text, safe=SAFE_CHARACTERS, encoding='utf-8',
                 errors='strict')
  except UnicodeEncodeError as error:
    raise EncodingFailure('Failed to encode {!r} ({})'.format(text, error))


def assemble_components(parts, bindings, required_filter=UNFILTERED,
                        variable_names=()):
  """ Applies bindings to parts of a template.

  Args:
    parts: a sequence of Literal and VariableGroup.
    bindings: a mapping of variable name to value. Names missing
      in bindings or bound to None are treated as unbound.
    required_filter: a RequiredFilter deciding which unbound query
      variables are kept.
    variable_names: a sequence of all variable names of the template.
  Returns:
    A Components instance.
  """
  base = []
  query_head = []
  query_tail = []
  fragment = []

  for part in parts:
    if isinstance(part, Literal):
      if part.in_query:
        query_head.append(part.text)
      elif part.text.startswith(FRAGMENT_OPERATOR):
        fragment.append(part.text)
      else:
        base.append(part.text)
      continue

    for name in part.names:
      value = bindings.get(name)
      if value is None:
        _append_unbound(part.type, name, required_filter,
                        base, query_head, query_tail, fragment)
      else:
        _append_bound(part.type, name, encode_value(value),
                      base, query_head, fragment)

  components = Components(
    base_uri=''.join(base),
    query_head=''.join(query_head),
    query_tail=query_tail,
    fragment_identifier=''.join(fragment),
    variable_names=variable_names
  )
  logger.debug('Assembled {!r}'.format(components))
  return components


def _append_bound(type_, name, encoded, base, query_head, fragment):
  if VariableType.is_query(type_):
    query_head.append(QUERY_CONTINUATION_OPERATOR if query_head
                      else QUERY_PARAM_OPERATOR)
    query_head.append('{}={}'.format(name, encoded))
  elif type_ == VariableType.FRAGMENT:
    fragment.append(FRAGMENT_OPERATOR + encoded)
  elif type_ == VariableType.PATH_SEGMENT:
    base.append('/' + encoded)
  elif query_head:
    # Simple variable inside of already started query,
    # e.g.: "?eventName={eventName}".
    query_head.append(encoded)
  else:
    base.append(encoded)


def _append_unbound(type_, name, required_filter,
                    base, query_head, query_tail, fragment):
  variable = str(TemplateVariable(name=name, type=type_))
  if VariableType.is_query(type_):
    if required_filter.keeps(name):
      query_tail.append(name)
  elif type_ == VariableType.FRAGMENT:
    fragment.append(variable)
  elif type_ == VariableType.SIMPLE and query_head:
    query_head.append(variable)
  else:
    base.append(variable)

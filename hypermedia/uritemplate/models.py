"""
Declares models used by the tokenizer, the assembler and the partial
expansion API. Instances of these classes are frozen containers of
information, so a parsed template and every assembled result can be
shared between threads freely.

There are two groups of models:
  - Parts of a parsed template (Literal and VariableGroup);
  - Values flowing through assembly (RequiredFilter and Components).
"""
import attr

from hypermedia.uritemplate.constants import (
  FRAGMENT_OPERATOR, PATH_SEGMENT_OPERATOR, QUERY_CONTINUATION_OPERATOR,
  QUERY_PARAM_OPERATOR
)


class VariableType(object):
  SIMPLE = "simple"
  PATH_SEGMENT = "path_segment"
  QUERY_PARAM = "query_param"
  QUERY_PARAM_CONTINUED = "query_param_continued"
  FRAGMENT = "fragment"

  _BY_OPERATOR = {
    '': SIMPLE,
    PATH_SEGMENT_OPERATOR: PATH_SEGMENT,
    QUERY_PARAM_OPERATOR: QUERY_PARAM,
    QUERY_CONTINUATION_OPERATOR: QUERY_PARAM_CONTINUED,
    FRAGMENT_OPERATOR: FRAGMENT,
  }

  @classmethod
  def from_operator(cls, operator):
    """ Returns the variable type for operator or None if it's unknown. """
    return cls._BY_OPERATOR.get(operator)

  @classmethod
  def operator(cls, type_):
    for operator, known_type in cls._BY_OPERATOR.items():
      if known_type == type_:
        return operator
    raise KeyError(type_)

  @classmethod
  def is_query(cls, type_):
    return type_ in [cls.QUERY_PARAM, cls.QUERY_PARAM_CONTINUED]


# ==================================
#     PARTS OF A PARSED TEMPLATE
# ----------------------------------

@attr.s(slots=True, frozen=True)
class Literal(object):
  """
  A piece of template text without variables.
  e.g.: `/events{/city}?eventName=Revo+Tour{&location}`
         ^^^^^^^      ^^^^^^^^^^^^^^^^^^^^
         in_query=False   in_query=True
  """
  text = attr.ib()
  in_query = attr.ib(default=False)

  @property
  def raw(self):
    return self.text


@attr.s(slots=True, frozen=True)
class VariableGroup(object):
  """
  A single variable expression holding one or more names.
  e.g.: `{?eventName,location}`
          ^operator ^^^names^^
  """
  type = attr.ib()
  names = attr.ib(converter=tuple)
  raw = attr.ib()    # Expression text exactly as it appears in template


@attr.s(slots=True, frozen=True)
class TemplateVariable(object):
  name = attr.ib()
  type = attr.ib()

  def __str__(self):
    return '{{{}{}}}'.format(VariableType.operator(self.type), self.name)


# ==================================
#     VALUES FLOWING THROUGH ASSEMBLY
# ----------------------------------

@attr.s(slots=True, frozen=True)
class RequiredFilter(object):
  """
  Decides which unbound query variables survive assembly.
  names is None when nothing should be filtered, otherwise it is
  a frozenset of names to keep (possibly empty, keeping nothing).
  """
  names = attr.ib(default=None)

  @classmethod
  def unfiltered(cls):
    return UNFILTERED

  @classmethod
  def require_only(cls, names):
    return cls(names=frozenset(names or ()))

  @property
  def is_unfiltered(self):
    return self.names is None

  def keeps(self, name):
    return self.is_unfiltered or name in self.names


UNFILTERED = RequiredFilter(names=None)


@attr.s(slots=True, frozen=True)
class Components(object):
  """
  Result of assembling a template. Rendered form is
  base_uri + query + fragment_identifier.
  """
  base_uri = attr.ib()
  query_head = attr.ib()             # e.g. "?q=smith&page=2" or ""
  query_tail = attr.ib(converter=tuple)    # Unbound query variable names
  fragment_identifier = attr.ib()
  variable_names = attr.ib(converter=tuple, default=())

  @property
  def query(self):
    """ Query consisting of expanded parameters followed by
    still unexpanded ones, e.g. "?q=smith{&page}".
    """
    if not self.query_tail:
      return self.query_head
    tail = ','.join(self.query_tail)
    if not self.query_head:
      return '{{?{}}}'.format(tail)
    return '{}{{&{}}}'.format(self.query_head, tail)

  def is_base_uri_templated(self):
    return _contains_expression(self.base_uri)

  def has_variables(self):
    return (_contains_expression(self.base_uri)
            or _contains_expression(self.query_head)
            or bool(self.query_tail)
            or _contains_expression(self.fragment_identifier))

  def __str__(self):
    return self.base_uri + self.query + self.fragment_identifier


def _contains_expression(text):
  start = text.find('{')
  return start != -1 and text.find('}', start) != -1

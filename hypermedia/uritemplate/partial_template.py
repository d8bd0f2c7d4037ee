"""
URI template with the ability to be partially expanded, no matter if
its variables are required or not. Unsatisfied variables are kept as
variables, where other implementations either remove them or fail.

e.g.:
  >>> template = PartialUriTemplate('/customers{/id}{?q,page}')
  >>> str(template.expand({'id': '42', 'q': 'smith'}))
  '/customers/42?q=smith{&page}'
  >>> str(template.strip_optional_variables(['q']))
  '/customers{/id}{?q}'
"""
import logging
from collections.abc import Mapping

from hypermedia.uritemplate.assembler import assemble_components
from hypermedia.uritemplate.constants import InvalidArgument
from hypermedia.uritemplate.models import (
  RequiredFilter, TemplateVariable, UNFILTERED, VariableGroup
)
from hypermedia.uritemplate.tokenizer import parse_template

logger = logging.getLogger(__name__)


class PartialUriTemplate(object):
  """ A parsed URI template. Instances are never changed after
  construction and can be expanded any number of times. """

  def __init__(self, template):
    """ Parses template.

    Args:
      template: a non-empty str.
    Raises:
      ParseError if template is empty or malformed.
    """
    self._parts = parse_template(template)
    self._variables = tuple(
      TemplateVariable(name=name, type=part.type)
      for part in self._parts if isinstance(part, VariableGroup)
      for name in part.names
    )
    self._variable_names = tuple(
      variable.name for variable in self._variables)

  @property
  def parts(self):
    return self._parts

  @property
  def variables(self):
    return self._variables

  @property
  def variable_names(self):
    return self._variable_names

  @property
  def template(self):
    return ''.join(part.raw for part in self._parts)

  def as_components(self):
    """ Returns the template as components, without variable expansion. """
    return self._assemble({}, UNFILTERED)

  def expand(self, *args):
    """ Expands the template using given values.

    Args:
      args: either a single mapping of variable name to value or
        values for variables in order of their appearance in template.
        Variables beyond the number of given values stay unbound.
    Returns:
      A Components instance.
    Raises:
      InvalidArgument if nothing to bind is given.
    """
    if not args or (len(args) == 1 and isinstance(args[0], Mapping)
                    and not args[0]):
      raise InvalidArgument('At least one value must be given for expansion')
    return self._assemble(self._to_bindings(args), UNFILTERED)

  def expand_partially(self, *args):
    """ Expands the template as far as given values allow.
    Every unbound variable is kept in template form.

    Args:
      args: the same as for expand, but can be omitted.
    Returns:
      A Components instance.
    """
    return self._assemble(self._to_bindings(args), UNFILTERED)

  def strip_optional_variables(self, required_names):
    """ Removes unbound query variables which are not required.
    Simple, path segment and fragment variables are always kept.

    Args:
      required_names: an iterable of names of required variables
        or None if nothing is required.
    Returns:
      A Components instance.
    """
    return self._assemble({}, RequiredFilter.require_only(required_names))

  def _to_bindings(self, args):
    if len(args) == 1 and isinstance(args[0], Mapping):
      return args[0]
    if len(args) > len(self._variable_names):
      logger.debug('{} values given for {} variables of "{}", extra values '
                   'are ignored'.format(len(args), len(self._variable_names),
                                        self.template))
    # First appearance of a name gets the value.
    bindings = {}
    for name, value in zip(self._variable_names, args):
      bindings.setdefault(name, value)
    return bindings

  def _assemble(self, bindings, required_filter):
    return assemble_components(self._parts, bindings, required_filter,
                               self._variable_names)

  def __str__(self):
    return self.template

  def __repr__(self):
    return 'PartialUriTemplate({!r})'.format(self.template)


def required_arg_names(action_descriptors):
  """ Collects names of parameters required by any of action descriptors.

  Args:
    action_descriptors: an iterable of objects having required_parameters
      attribute (a mapping or an iterable of names).
  Returns:
    A list of names in order of appearance, without duplicates.
  """
  names = []
  for descriptor in action_descriptors:
    for name in descriptor.required_parameters:
      if name not in names:
        names.append(name)
  return names

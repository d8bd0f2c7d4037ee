"""
Partially expandable URI templates.

A template such as "/customers{/id}{?q,page}" can be expanded with only
some of its variables bound; unbound variables stay in the result as
valid template syntax, so the link can be completed later by a client.
"""
from hypermedia.uritemplate.constants import (
  EncodingFailure, InvalidArgument, ParseError, UriTemplateError
)
from hypermedia.uritemplate.models import (
  Components, RequiredFilter, UNFILTERED, VariableType
)
from hypermedia.uritemplate.partial_template import (
  PartialUriTemplate, required_arg_names
)

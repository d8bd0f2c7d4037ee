# Log format used by command line entry points.
LOG_FORMAT = '%(asctime)s %(levelname)s %(filename)s:%(lineno)s %(message)s '

# Characters left unencoded in bound values. Values are opaque data,
# so even "/" is percent-encoded.
SAFE_CHARACTERS = ''

# Operator characters recognized at the start of a variable expression.
PATH_SEGMENT_OPERATOR = '/'
QUERY_PARAM_OPERATOR = '?'
QUERY_CONTINUATION_OPERATOR = '&'
FRAGMENT_OPERATOR = '#'


class UriTemplateError(Exception):
  """ Base class for all errors raised by this package. """


class ParseError(UriTemplateError, ValueError):
  def __init__(self, message, template=None, position=None):
    self.template = template
    self.position = position
    if position is not None:
      message = '{} (at position {} of "{}")'.format(message, position, template)
    super(ParseError, self).__init__(message)


class InvalidArgument(UriTemplateError, ValueError):
  """ Should be raised when an expansion call gets nothing to bind. """


class EncodingFailure(UriTemplateError):
  """ Should be raised when a bound value can't be UTF-8 encoded. """

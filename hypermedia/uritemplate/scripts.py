"""
This module provides a command line tool for inspecting and
expanding URI templates.
"""
import argparse
import json
import logging
import sys

from hypermedia.uritemplate.constants import LOG_FORMAT, UriTemplateError
from hypermedia.uritemplate.partial_template import PartialUriTemplate

logger = logging.getLogger(__name__)

COMPONENTS = 'components'
EXPAND = 'expand'
PARTIAL = 'partial'
STRIP = 'strip'


def parse_binding(text):
  """ Converts "NAME=VALUE" command line argument to a tuple. """
  name, separator, value = text.partition('=')
  if not separator or not name:
    raise argparse.ArgumentTypeError(
      'Expected NAME=VALUE, got "{}"'.format(text))
  return name, value


def components_to_dict(components):
  return {
    'base_uri': components.base_uri,
    'query_head': components.query_head,
    'query_tail': list(components.query_tail),
    'fragment_identifier': components.fragment_identifier,
    'variable_names': list(components.variable_names),
    'query': components.query,
    'has_variables': components.has_variables(),
    'uri': str(components),
  }


def build_parser():
  parser = argparse.ArgumentParser(
    description='Expands URI templates, keeping unbound variables.')
  parser.add_argument(
    '-v', '--verbose', action='store_true', help='Output debug-level logging')
  parser.add_argument('template', help='URI template to process')
  parser.add_argument(
    '--mode', choices=[COMPONENTS, EXPAND, PARTIAL, STRIP], default=PARTIAL,
    help='How to process the template (default: {})'.format(PARTIAL))
  parser.add_argument(
    '--var', dest='bindings', action='append', type=parse_binding,
    default=[], metavar='NAME=VALUE', help='Value of a named variable')
  parser.add_argument(
    '--value', dest='values', action='append', default=[],
    help='Value of the next variable in order of appearance')
  parser.add_argument(
    '--required', nargs='*', default=[],
    help='Names of required variables (for strip mode)')
  parser.add_argument(
    '--json', action='store_true', help='Print components as JSON')
  return parser


def process(args):
  """ Processes template according to parsed command line arguments.

  Args:
    args: an argparse.Namespace.
  Returns:
    A Components instance.
  """
  template = PartialUriTemplate(args.template)
  if args.bindings and args.values:
    logger.warning('Both --var and --value are given, --value is ignored')
  bindings = [dict(args.bindings)] if args.bindings else args.values

  if args.mode == COMPONENTS:
    return template.as_components()
  if args.mode == EXPAND:
    return template.expand(*bindings)
  if args.mode == STRIP:
    return template.strip_optional_variables(args.required)
  return template.expand_partially(*bindings)


def main(argv=None):
  """ Processes a template and prints the result to stdout. """
  logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)

  args = build_parser().parse_args(argv)
  if args.verbose:
    logging.getLogger('hypermedia').setLevel(logging.DEBUG)

  try:
    components = process(args)
  except UriTemplateError as error:
    logger.error('Failed to process template ({}).'.format(error))
    sys.exit(1)

  if args.json:
    print(json.dumps(components_to_dict(components), indent=2))
  else:
    print(components)

import json

import pytest

from hypermedia.uritemplate import scripts

TEMPLATE = '/customers{/id}{?q,page}'


def test_partial_expansion(capsys):
  scripts.main([TEMPLATE, '--var', 'id=42', '--var', 'q=smith'])
  assert capsys.readouterr().out == '/customers/42?q=smith{&page}\n'


def test_positional_expansion(capsys):
  scripts.main([TEMPLATE, '--mode', 'expand', '--value', '42'])
  assert capsys.readouterr().out == '/customers/42{?q,page}\n'


def test_strip_mode(capsys):
  scripts.main([TEMPLATE, '--mode', 'strip', '--required', 'page'])
  assert capsys.readouterr().out == '/customers{/id}{?page}\n'


def test_json_output(capsys):
  scripts.main([TEMPLATE, '--mode', 'components', '--json'])
  output = json.loads(capsys.readouterr().out)
  assert output == {
    'base_uri': '/customers{/id}',
    'query_head': '',
    'query_tail': ['q', 'page'],
    'fragment_identifier': '',
    'variable_names': ['id', 'q', 'page'],
    'query': '{?q,page}',
    'has_variables': True,
    'uri': TEMPLATE,
  }


def test_expand_without_values_fails():
  with pytest.raises(SystemExit) as error:
    scripts.main([TEMPLATE, '--mode', 'expand'])
  assert error.value.code == 1


def test_malformed_template_fails():
  with pytest.raises(SystemExit) as error:
    scripts.main(['/customers{/id'])
  assert error.value.code == 1


def test_malformed_binding():
  with pytest.raises(SystemExit) as error:
    scripts.main([TEMPLATE, '--var', 'id'])
  assert error.value.code == 2

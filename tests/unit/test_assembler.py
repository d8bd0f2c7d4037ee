import pytest

from hypermedia.uritemplate.assembler import assemble_components, encode_value
from hypermedia.uritemplate.constants import EncodingFailure
from hypermedia.uritemplate.models import RequiredFilter, UNFILTERED
from hypermedia.uritemplate.tokenizer import parse_template


def test_query_bucket_separation():
  components = assemble_components(parse_template('/a{?x,y}'), {'x': 'v'})
  assert components.base_uri == '/a'
  assert components.query_head == '?x=v'
  assert components.query_tail == ('y',)
  assert components.query == '?x=v{&y}'
  assert str(components) == '/a?x=v{&y}'


def test_unbound_query_only():
  components = assemble_components(parse_template('/a{?x,y}'), {})
  assert components.query_head == ''
  assert components.query == '{?x,y}'


def test_fragment_isolation():
  parts = parse_template('/a{?x}{#section}')
  bound = assemble_components(parts, {'section': 'top'})
  assert bound.query_head == ''
  assert bound.query_tail == ('x',)
  assert bound.fragment_identifier == '#top'

  unbound = assemble_components(parts, {'x': '1'})
  assert unbound.query_head == '?x=1'
  assert unbound.query_tail == ()
  assert unbound.fragment_identifier == '{#section}'


def test_required_filter_drops_only_query_variables():
  parts = parse_template('/a/{id}{/sub}{?x,y}{#frag}')
  components = assemble_components(parts, {}, RequiredFilter.require_only(['y']))
  assert str(components) == '/a/{id}{/sub}{?y}{#frag}'


def test_required_filter_with_nothing_required():
  parts = parse_template('/a{?x,y}')
  components = assemble_components(parts, {}, RequiredFilter.require_only([]))
  assert str(components) == '/a'


def test_unfiltered():
  assert RequiredFilter.unfiltered() is UNFILTERED
  assert UNFILTERED.is_unfiltered
  assert UNFILTERED.keeps('anything')
  assert not RequiredFilter.require_only([]).is_unfiltered


def test_none_value_is_unbound():
  components = assemble_components(parse_template('/a{/id}'), {'id': None})
  assert str(components) == '/a{/id}'


def test_simple_variable_in_open_query():
  parts = parse_template('/a?{x}')
  assert str(assemble_components(parts, {'x': 'val'})) == '/a?val'
  assert str(assemble_components(parts, {})) == '/a?{x}'


def test_variable_names_are_recorded():
  components = assemble_components(parse_template('/a{?x}'), {},
                                   variable_names=['x'])
  assert components.variable_names == ('x',)


@pytest.mark.parametrize('value, encoded', [
  ('a b/c', 'a%20b%2Fc'),
  ('Revo Tour', 'Revo%20Tour'),
  ('x&y=z', 'x%26y%3Dz'),
  ('a-b_c.d~e', 'a-b_c.d~e'),
  (u'München', 'M%C3%BCnchen'),
  (42, '42'),
])
def test_encode_value(value, encoded):
  assert encode_value(value) == encoded


def test_encode_lone_surrogate():
  with pytest.raises(EncodingFailure):
    encode_value(u'\ud800')

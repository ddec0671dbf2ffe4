import pytest
from upstac.utils.path_matching import InvalidPathPattern, PathPredicate, ant, any_of, match_pattern


@pytest.mark.parametrize('path', ['/auth', '/auth/', '/auth/login', '/auth/a/b/c'])
def test_double_star_matches_any_depth(path):
    assert match_pattern('/auth/**', path)


@pytest.mark.parametrize('path', ['/authx', '/authentication/login', '/api/auth/login', 'auth/login', ''])
def test_double_star_respects_segment_boundary(path):
    assert not match_pattern('/auth/**', path)


def test_double_star_in_the_middle():
    assert match_pattern('/api/**/results', '/api/results')
    assert match_pattern('/api/**/results', '/api/labrequests/7/results')
    assert not match_pattern('/api/**/results', '/api/labrequests/7/results/pdf')


def test_single_star_and_question_mark_stay_in_segment():
    assert match_pattern('/users/*', '/users/42')
    assert not match_pattern('/users/*', '/users/42/roles')
    assert match_pattern('/files/report?.pdf', '/files/report1.pdf')
    assert not match_pattern('/files/report?.pdf', '/files/report12.pdf')


def test_template_variable_matches_one_segment():
    assert match_pattern('/documents/{id}', '/documents/12')
    assert not match_pattern('/documents/{id}', '/documents/12/download')


def test_trailing_separator_must_agree_without_double_star():
    assert match_pattern('/users/me', '/users/me')
    assert not match_pattern('/users/me', '/users/me/')
    assert match_pattern('/users/me/', '/users/me/')


def test_literal_characters_are_escaped():
    assert match_pattern('/v1.0/items', '/v1.0/items')
    assert not match_pattern('/v1.0/items', '/v1x0/items')


def test_flask_rule_syntax_is_treated_as_a_segment():
    assert match_pattern('/api/testrequests/**', '/api/testrequests/<int:request_id>')


def test_any_of_flattens_and_dedupes_in_order():
    secured = any_of('/users/**', '/api/labrequests/**')
    combined = any_of('/auth/**', secured, ant('/users/**'))
    assert combined.patterns == ('/auth/**', '/users/**', '/api/labrequests/**')
    assert combined.includes(secured)
    assert combined('/users/1')


def test_or_operator_combines_predicates():
    p = ant('/auth/**') | ant('/documents/**')
    assert p.matches('/documents/1')
    assert not p.matches('/public/health')


def test_predicates_compare_by_patterns():
    assert any_of('/a/**', '/b/**') == any_of('/a/**', '/b/**')
    assert any_of('/a/**', '/b/**') != any_of('/b/**', '/a/**')


def test_empty_predicate_matches_nothing():
    assert not PathPredicate().matches('/anything')


@pytest.mark.parametrize('bad', ['auth/**', '', '/documents/{id'])
def test_invalid_patterns_rejected(bad):
    with pytest.raises(InvalidPathPattern):
        ant(bad)


def test_invalid_pattern_is_a_value_error():
    with pytest.raises(ValueError):
        any_of('/ok/**', 'not-rooted')

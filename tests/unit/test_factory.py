"""Unit tests for QueryFactory."""

import pytest

from dbquery import AliasResolver, QueryFactory, UpdateQuery


class TestQueryFactory:
    def test_shared_resolver(self, factory, resolver):
        q = factory.create_update_query()
        assert isinstance(q, UpdateQuery)
        assert q.resolver is resolver

    def test_fresh_builder_each_time(self, factory):
        assert factory.create_update_query() is not factory.create_update_query()

    def test_update_shortcut(self, factory):
        sql = factory.update('legends').set('no', 99).compile()
        assert sql == 'UPDATE hockey_legends SET number = 99'

    def test_aliases_argument(self):
        factory = QueryFactory(aliases={'t': 'trades'})
        assert factory.update('t').set('x', '1').compile() == 'UPDATE trades SET x = 1'

    def test_resolver_and_aliases_conflict(self):
        with pytest.raises(ValueError):
            QueryFactory(AliasResolver(), aliases={'t': 'trades'})

    def test_custom_resolver(self):
        class Upper:
            def resolve(self, name):
                return str(name).upper()

        sql = QueryFactory(Upper()).update('t').set('x', 'y').compile()
        assert sql == 'UPDATE T SET X = Y'

"""Shared fixtures for dbquery tests."""

from __future__ import annotations

import pytest

from dbquery import AliasResolver, QueryFactory, UpdateQuery


@pytest.fixture
def resolver():
    """Resolver with a table alias and a column alias."""
    return AliasResolver({'legends': 'hockey_legends', 'no': 'number'})


@pytest.fixture
def query():
    """A fresh builder with no aliases."""
    return UpdateQuery()


@pytest.fixture
def aliased_query(resolver):
    return UpdateQuery(resolver)


@pytest.fixture
def factory(resolver):
    return QueryFactory(resolver)

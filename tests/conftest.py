"""Shared fixtures for schema diagram tests."""

import pytest

from schema_diagram.core import LayoutConfig
from schema_diagram.schema import parse_schema


SAMPLE_SCHEMA = '''
"""Custom date"""
scalar DateTime

directive @auth(role: Role = ADMIN, since: DateTime) on FIELD_DEFINITION | OBJECT

enum Role {
  ADMIN
  USER
}

interface Entity {
  id: ID!
}

type User implements Entity {
  id: ID!
  name: String
  posts(filter: PostFilter): [Post!]!
  createdAt: DateTime
  role: Role
}

type Post {
  id: ID!
  title: String!
  author: User
  tags: [Tag]
}

input PostFilter {
  titleContains: String
  author: UserRef
}
'''


@pytest.fixture
def sample_source():
    return SAMPLE_SCHEMA


@pytest.fixture
def sample_document():
    return parse_schema(SAMPLE_SCHEMA)


@pytest.fixture
def seeded_config():
    return LayoutConfig(seed=42)

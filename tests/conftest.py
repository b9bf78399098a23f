"""
Shared pytest fixtures for fieldgraph tests.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from graphql import GraphQLSchema, build_schema
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fieldgraph.config import FieldgraphConfig
from fieldgraph.core.defs import CustomFieldDef
from fieldgraph.runtime.context import Principal, RequestContext
from fieldgraph.service.database import Base


SDL = '''
scalar DateTime

enum SupplierStatus {
  ACTIVE
  INACTIVE
}

interface Node {
  id: ID!
  owner: Author
}

type Author {
  name: String
  bio: String
  books: [Book]
}

type Book implements Node {
  id: ID!
  owner: Author
  title: String!
  tags: [String!]!
}

type Warehouse {
  id: ID!
  code: String
}

type Supplier {
  id: ID
  name: String
  warehouse: Warehouse
}

type SupplierDetail {
  id: ID!
  status: SupplierStatus!
  createdAt: DateTime
  warehouses: [Warehouse!]!
  ratings: [Int!]
}

union SearchResult = Book | Author

input SupplierInput {
  name: String
}

type Query {
  supplier(id: ID!): Supplier
  search(term: String!): [SearchResult!]!
}
'''


@pytest.fixture
def schema() -> GraphQLSchema:
    """Live schema used by introspection and projection tests."""
    return build_schema(SDL)


@pytest.fixture
def custom_fields() -> dict[str, list[CustomFieldDef]]:
    """Custom field config covering plain, relation and internal fields."""
    return {
        "Product": [
            CustomFieldDef(name="weight", type="int"),
            CustomFieldDef(name="supplier", type="relation", entity="Supplier"),
            CustomFieldDef(name="secretCode", type="string", internal=True),
        ],
        "Customer": [
            CustomFieldDef(name="legacyId", type="string", internal=True),
        ],
        "Order": [
            CustomFieldDef(name="giftNote", type="text", list=1),
        ],
    }


@pytest.fixture
def config(custom_fields) -> FieldgraphConfig:
    return FieldgraphConfig(custom_fields=custom_fields)


@pytest.fixture
async def session(tmp_path) -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh SQLite database."""
    from fieldgraph.service import models  # noqa: F401

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def ctx(session) -> RequestContext:
    return RequestContext(principal=Principal(id="1", permissions=["SuperAdmin"]), session=session)

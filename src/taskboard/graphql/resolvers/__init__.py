"""Resolver package for GraphQL schema.

Each module holds the query, mutation and field resolvers for one entity;
the root Query/Mutation types and the object types import them lazily.
"""

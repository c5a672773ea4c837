"""Core matching utilities.

Responsibilities:
  - Provide the resolver, the canonical walk and the static/dynamic matchers.
  - Must not mutate automata; consumes graphs produced by core.domain.
"""

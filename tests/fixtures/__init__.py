"""Test fixtures for mk.

- invocations: Invocation factories, stdin stand-ins, and scratch workspaces
"""

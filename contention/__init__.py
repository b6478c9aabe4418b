"""
# Contention based unit test harness.

# Test subjects are functions taking a single &core.Test parameter and making
# contentions with the division operators. &library.execute runs the subjects of
# a module; the `conftest` module at the project root adapts the same subjects
# for pytest collection.
"""

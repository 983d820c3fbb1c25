"""
Sauce Demo harness test suites.

`testsuites` stays importable so page objects and framework modules can be
reached from unit tests and from `run_tests.py`.

Layout:
  - ui_testing: browser framework, page objects, scenario data and e2e tests
  - unit: framework tests that run against an in-memory page
"""

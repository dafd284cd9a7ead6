import dideclare_tests_missing_module  # noqa: F401

pytest_plugins = [
    "tests.fixtures.aws_fixtures",
    "tests.fixtures.store_fixtures",
]
